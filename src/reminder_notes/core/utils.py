"""Utility functions for reminder notes."""

from collections.abc import Iterable


def unique_ordered(items: Iterable[str]) -> list[str]:
    """
    Deduplicate items, keeping the position each was first seen at.

    Examples:
        >>> unique_ordered(["A", "B", "A", "C", "B"])
        ['A', 'B', 'C']
    """
    seen: set[str] = set()
    out: list[str] = []
    for item in items:
        if item in seen:
            continue
        seen.add(item)
        out.append(item)
    return out


def split_ids(text: str) -> list[str]:
    """
    Split a comma-separated id line.

    - Trim whitespace around each token
    - Drop empty tokens (stray or trailing commas)

    Examples:
        >>> split_ids("ABC , DEF ,, GHI,")
        ['ABC', 'DEF', 'GHI']
    """
    return [token.strip() for token in text.split(",") if token.strip()]
