from __future__ import annotations
from dataclasses import dataclass, field

ReminderId = str


@dataclass
class NoteComponents:
    content: str | None = None  # free text, may span several lines
    critical: str | None = None  # single line, at most one value
    links: list[str] | None = None  # related reminder ids, ordered and unique

    def is_empty(self) -> bool:
        return not self.content and not self.critical and not self.links

    def to_dict(self) -> dict:
        # Absent fields are omitted rather than emitted as null
        out: dict = {}
        if self.content is not None:
            out["content"] = self.content
        if self.critical is not None:
            out["critical"] = self.critical
        if self.links is not None:
            out["links"] = list(self.links)
        return out


@dataclass
class Reminder:
    id: ReminderId
    title: str
    notes: str | None = None  # raw text blob holding the encoded NoteComponents
    list_name: str | None = None
    completed: bool = False
    extra: dict = field(default_factory=dict)
