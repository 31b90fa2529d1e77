from collections.abc import Callable, Iterable

from ..errors import ValidationError
from .model import NoteComponents, Reminder, ReminderId
from .ports import NoteCodec, ReminderStore


class Notebook:
    """Read-modify-write of reminder notes through a store and a codec."""

    def __init__(self, store: ReminderStore, codec: NoteCodec, max_length: int | None = None):
        self.store = store
        self.codec = codec
        self.max_length = max_length

    def get(self, id: ReminderId) -> Reminder | None:
        return self.store.get(id)

    def components(self, id: ReminderId) -> NoteComponents | None:
        reminder = self.store.get(id)
        if reminder is None:
            return None
        return self.codec.decode(reminder.notes)

    def edit(self, id: ReminderId, edit: Callable[[str | None], str]) -> Reminder | None:
        """Rewrite a reminder's notes text; returns None if the reminder is unknown."""
        reminder = self.store.get(id)
        if reminder is None:
            return None
        notes = edit(reminder.notes)
        if self.max_length is not None and len(notes) > self.max_length:
            raise ValidationError(
                f"Input validation failed: Notes must be at most {self.max_length} characters"
            )
        reminder.notes = notes
        self.store.put(reminder)
        return reminder

    def update(self, id: ReminderId, updates: NoteComponents) -> Reminder | None:
        codec = self.codec
        return self.edit(id, lambda text: codec.encode(codec.merge(codec.decode(text), updates)))

    def list_ids(self) -> Iterable[ReminderId]:
        return self.store.list_ids()
