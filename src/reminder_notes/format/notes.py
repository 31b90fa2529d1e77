"""Natural-text note codec for reminder notes.

Notes are stored as plain paragraphs in the reminder's single notes field:

    Main content here.

    Critical:
    reason here

    Related:
    ID1, ID2
"""

from ..core.model import NoteComponents
from ..core.utils import split_ids, unique_ordered

CRITICAL_HEADER = "Critical:"
RELATED_HEADER = "Related:"
BLOCK_SEPARATOR = "\n\n"
LINK_SEPARATOR = ", "

# Parser states
_CONTENT = "content"
_CRITICAL = "critical"
_RELATED = "related"


def format_notes(components: NoteComponents) -> str:
    """Encode note components as natural text paragraphs.

    Args:
        components: Fields to encode; absent or empty fields are skipped

    Returns:
        Encoded notes text, stripped of surrounding whitespace
    """
    parts = []

    if components.content:
        parts.append(components.content)

    if components.critical:
        parts.append(f"{CRITICAL_HEADER}\n{components.critical}")

    if components.links:
        parts.append(f"{RELATED_HEADER}\n{LINK_SEPARATOR.join(components.links)}")

    return BLOCK_SEPARATOR.join(parts).strip()


def parse_notes(notes: str | None) -> NoteComponents:
    """Decode notes text into components.

    Best effort: hand-written or legacy notes never raise, whatever they
    contain. A header captures only the next non-blank line; anything after
    that is content again, even when it follows a section.

    Args:
        notes: Raw notes text (may be None or empty)

    Returns:
        NoteComponents with only the fields that were found
    """
    components = NoteComponents()
    if not notes:
        return components

    content_lines = []
    section = _CONTENT

    for line in notes.split("\n"):
        trimmed = line.strip()

        if trimmed == CRITICAL_HEADER:
            section = _CRITICAL
            continue

        if trimmed == RELATED_HEADER:
            section = _RELATED
            continue

        if not trimmed:
            continue

        if section == _CRITICAL:
            components.critical = trimmed
            section = _CONTENT
        elif section == _RELATED:
            components.links = unique_ordered(split_ids(trimmed))
            section = _CONTENT
        else:
            content_lines.append(trimmed)

    # A Related: line holding only commas yields no ids
    if not components.links:
        components.links = None

    if content_lines:
        components.content = "\n".join(content_lines)

    return components


def merge_notes(existing: NoteComponents, updates: NoteComponents) -> NoteComponents:
    """Merge an update into existing components.

    - content: appended after a blank line when both are set
    - critical: the update wins; merging can never clear it
    - links: ordered union, existing ids first

    Neither argument is modified.
    """
    if updates.content and existing.content:
        content = f"{existing.content}{BLOCK_SEPARATOR}{updates.content}"
    else:
        content = updates.content if updates.content is not None else existing.content

    critical = updates.critical if updates.critical is not None else existing.critical

    links = unique_ordered([*(existing.links or []), *(updates.links or [])])

    return NoteComponents(
        content=content,
        critical=critical,
        links=links or None,
    )


class NaturalNoteCodec:
    """Stateless NoteCodec over the natural-text format."""

    def encode(self, components: NoteComponents) -> str:
        return format_notes(components)

    def decode(self, text: str | None) -> NoteComponents:
        return parse_notes(text)

    def merge(self, existing: NoteComponents, updates: NoteComponents) -> NoteComponents:
        return merge_notes(existing, updates)
