from typing import Protocol, Iterable
from .model import NoteComponents, Reminder, ReminderId


class ReminderStore(Protocol):
    """
    Holds reminders and their raw notes text. The store owns the text blob;
    nothing here coordinates concurrent writers (last writer wins).
    """

    def get(self, id: ReminderId) -> Reminder | None:
        pass

    def put(self, reminder: Reminder) -> None:
        pass

    def list_ids(self) -> Iterable[ReminderId]:
        pass


class NoteCodec(Protocol):
    """
    Pack structured note fields into the single notes text field and back.
    MUST NOT raise on any input text.
    """

    def encode(self, components: NoteComponents) -> str:
        pass

    def decode(self, text: str | None) -> NoteComponents:
        pass

    def merge(
        self, existing: NoteComponents, updates: NoteComponents
    ) -> NoteComponents:
        pass
