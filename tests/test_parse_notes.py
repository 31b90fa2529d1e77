"""Tests for decoding notes text."""

import pytest

from reminder_notes.core.model import NoteComponents
from reminder_notes.format import parse_note_components, parse_notes


def test_parse_all_components():
    """Test parsing content, critical and related sections."""
    notes = "Main content here\n\nCritical:\nBlocking issue\n\nRelated:\nABC, DEF"
    result = parse_notes(notes)

    assert result.content == "Main content here"
    assert result.critical == "Blocking issue"
    assert result.links == ["ABC", "DEF"]


def test_parse_content_only():
    result = parse_notes("Just a simple note")

    assert result.content == "Just a simple note"
    assert result.critical is None
    assert result.links is None


def test_parse_multiline_content():
    assert parse_notes("Line 1\nLine 2\nLine 3").content == "Line 1\nLine 2\nLine 3"


@pytest.mark.parametrize("notes", [None, ""])
def test_parse_absent_input(notes):
    """Test that missing text gives an empty record."""
    assert parse_notes(notes) == NoteComponents()


def test_parse_trims_link_whitespace():
    assert parse_notes("Related:\nABC , DEF , GHI").links == ["ABC", "DEF", "GHI"]


def test_parse_drops_empty_and_duplicate_links():
    assert parse_notes("Related:\nA,, B, A ,").links == ["A", "B"]


def test_parse_related_line_of_commas():
    """Test that a Related: line with no ids leaves links absent."""
    result = parse_notes("Body\n\nRelated:\n , ,")
    assert result.links is None
    assert result.content == "Body"


def test_parse_critical_without_content():
    result = parse_notes("Critical:\nImportant deadline")

    assert result.content is None
    assert result.critical == "Important deadline"


def test_parse_content_after_critical():
    """Test that text after a captured section is folded into content."""
    result = parse_notes("Critical:\nUrgent\n\nSome content after")

    assert result.critical == "Urgent"
    assert result.content == "Some content after"


def test_parse_content_before_and_after_section():
    result = parse_notes("Before\n\nCritical:\nUrgent\nAfter")

    assert result.critical == "Urgent"
    assert result.content == "Before\nAfter"


def test_parse_captures_single_critical_line():
    """Test that only the first line after Critical: is captured."""
    result = parse_notes("Critical:\nLine one\nLine two")

    assert result.critical == "Line one"
    assert result.content == "Line two"


def test_parse_skips_blank_lines_after_header():
    assert parse_notes("Critical:\n\n\n  Late  ").critical == "Late"


@pytest.mark.parametrize("notes", ["Body\n\nCritical:", "Body\n\nRelated:\n\n  \n"])
def test_parse_header_without_payload(notes):
    """Test that a trailing header with nothing after it captures nothing."""
    result = parse_notes(notes)

    assert result.content == "Body"
    assert result.critical is None
    assert result.links is None


def test_parse_header_matches_after_trim():
    result = parse_notes("  Critical:  \nUrgent")
    assert result.critical == "Urgent"


def test_parse_header_lookalikes_are_content():
    """Test that lines merely containing a header word stay content."""
    notes = "Critical: fix it\nRelated: ABC\ncritical:"
    result = parse_notes(notes)

    assert result.content == notes
    assert result.critical is None
    assert result.links is None


def test_parse_last_section_wins():
    result = parse_notes("Critical:\nOld\n\nCritical:\nNew\n\nRelated:\nA\n\nRelated:\nB")

    assert result.critical == "New"
    assert result.links == ["B"]


def test_parse_trims_content_lines():
    assert parse_notes("  indented\ttext  \n").content == "indented\ttext"


def test_parse_handles_crlf():
    result = parse_notes("Body\r\n\r\nCritical:\r\nUrgent\r\n")

    assert result.content == "Body"
    assert result.critical == "Urgent"


def test_parse_legacy_name():
    assert parse_note_components is parse_notes
