"""Tests for merging note updates."""

from reminder_notes.core.model import NoteComponents
from reminder_notes.format import merge_note_components, merge_notes


def test_merge_overrides_critical():
    result = merge_notes(NoteComponents(critical="Old"), NoteComponents(critical="New"))
    assert result.critical == "New"


def test_merge_keeps_existing_critical():
    result = merge_notes(
        NoteComponents(critical="Existing"), NoteComponents(content="New content")
    )
    assert result.critical == "Existing"
    assert result.content == "New content"


def test_merge_appends_content_with_blank_line():
    result = merge_notes(
        NoteComponents(content="First part"), NoteComponents(content="Second part")
    )
    assert result.content == "First part\n\nSecond part"


def test_merge_keeps_existing_content():
    result = merge_notes(NoteComponents(content="Kept"), NoteComponents(links=["A"]))
    assert result.content == "Kept"


def test_merge_deduplicates_links():
    """Test ordered union: existing ids first, then new ones."""
    result = merge_notes(NoteComponents(links=["A", "B"]), NoteComponents(links=["B", "C"]))
    assert result.links == ["A", "B", "C"]


def test_merge_link_order_follows_updates():
    result = merge_notes(NoteComponents(links=["X"]), NoteComponents(links=["C", "A", "C", "X"]))
    assert result.links == ["X", "C", "A"]


def test_merge_empty_existing():
    updates = NoteComponents(content="Content", critical="Critical", links=["A"])
    assert merge_notes(NoteComponents(), updates) == updates


def test_merge_nothing():
    """Test that merging two empty records keeps every field absent."""
    assert merge_notes(NoteComponents(), NoteComponents()) == NoteComponents()


def test_merge_empty_links_stay_absent():
    result = merge_notes(NoteComponents(links=[]), NoteComponents(links=[]))
    assert result.links is None


def test_merge_does_not_mutate_inputs():
    existing = NoteComponents(content="A", critical="X", links=["1"])
    updates = NoteComponents(content="B", links=["2"])

    merge_notes(existing, updates)

    assert existing == NoteComponents(content="A", critical="X", links=["1"])
    assert updates == NoteComponents(content="B", links=["2"])


def test_merge_result_links_are_a_new_list():
    existing = NoteComponents(links=["1"])
    result = merge_notes(existing, NoteComponents())
    result.links.append("2")
    assert existing.links == ["1"]


def test_merge_legacy_name():
    assert merge_note_components is merge_notes
