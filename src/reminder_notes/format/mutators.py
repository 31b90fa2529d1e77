"""Single-field edits on encoded notes text."""

from dataclasses import replace

from ..core.model import NoteComponents
from ..core.utils import unique_ordered
from .notes import format_notes, merge_notes, parse_notes


def add_link(notes: str | None, link_id: str) -> str:
    """Add a related id; adding one that is already present changes nothing."""
    components = parse_notes(notes)
    components.links = unique_ordered([*(components.links or []), link_id])
    return format_notes(components)


def remove_link(notes: str | None, link_id: str) -> str:
    """Remove a related id, dropping the Related: block once it is empty."""
    components = parse_notes(notes)
    if components.links is not None:
        components.links = [i for i in components.links if i != link_id] or None
    return format_notes(components)


def set_critical(notes: str | None, critical: str) -> str:
    components = parse_notes(notes)
    components.critical = critical
    return format_notes(components)


def clear_critical(notes: str | None) -> str:
    """Remove the critical block entirely (merge_notes cannot do this)."""
    components = parse_notes(notes)
    return format_notes(replace(components, critical=None))


def apply_update(notes: str | None, updates: NoteComponents) -> str:
    """Parse, merge updates in, and re-encode."""
    return format_notes(merge_notes(parse_notes(notes), updates))
