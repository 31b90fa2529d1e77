"""Note encoding utilities for reminder notes."""

from .mutators import add_link, apply_update, clear_critical, remove_link, set_critical
from .notes import (
    CRITICAL_HEADER,
    RELATED_HEADER,
    NaturalNoteCodec,
    format_notes,
    merge_notes,
    parse_notes,
)

# Names used by notes written against earlier releases
format_standardized_notes = format_notes
parse_note_components = parse_notes
merge_note_components = merge_notes

__all__ = [
    "CRITICAL_HEADER",
    "RELATED_HEADER",
    "NaturalNoteCodec",
    "format_notes",
    "parse_notes",
    "merge_notes",
    "add_link",
    "remove_link",
    "set_critical",
    "clear_critical",
    "apply_update",
    "format_standardized_notes",
    "parse_note_components",
    "merge_note_components",
]
