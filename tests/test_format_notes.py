"""Tests for encoding note components."""

from reminder_notes.core.model import NoteComponents
from reminder_notes.format import format_notes, format_standardized_notes


def test_format_all_components():
    """Test that all fields become paragraphs in fixed order."""
    components = NoteComponents(
        content="Check security issues",
        critical="Blocking release",
        links=["ABC123", "DEF456"],
    )
    result = format_notes(components)
    assert result == (
        "Check security issues\n\nCritical:\nBlocking release\n\nRelated:\nABC123, DEF456"
    )


def test_format_content_only():
    assert format_notes(NoteComponents(content="Simple note")) == "Simple note"


def test_format_critical_only():
    assert format_notes(NoteComponents(critical="Urgent task")) == "Critical:\nUrgent task"


def test_format_links_only():
    assert format_notes(NoteComponents(links=["ID1", "ID2"])) == "Related:\nID1, ID2"


def test_format_empty_components():
    """Test that nothing set gives an empty string."""
    assert format_notes(NoteComponents()) == ""


def test_format_content_with_critical():
    components = NoteComponents(content="Review the PR", critical="Deadline today")
    assert format_notes(components) == "Review the PR\n\nCritical:\nDeadline today"


def test_format_content_with_links():
    components = NoteComponents(content="Main task", links=["REF1"])
    assert format_notes(components) == "Main task\n\nRelated:\nREF1"


def test_format_omits_empty_fields():
    """Test that empty strings and lists never produce bare headers."""
    components = NoteComponents(content="", critical="", links=[])
    assert format_notes(components) == ""
    assert "Related:" not in format_notes(NoteComponents(content="Body", links=[]))


def test_format_multiline_content_verbatim():
    components = NoteComponents(content="First line.\nSecond line.", critical="Now")
    assert format_notes(components) == "First line.\nSecond line.\n\nCritical:\nNow"


def test_format_strips_surrounding_whitespace():
    components = NoteComponents(content="\n  Padded  \n")
    assert format_notes(components) == "Padded"


def test_format_legacy_name():
    assert format_standardized_notes is format_notes
