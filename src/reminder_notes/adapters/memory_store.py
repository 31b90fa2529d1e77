from dataclasses import replace
from typing import Iterable

from ..core.model import Reminder
from ..core.ports import ReminderStore


class MemoryReminderStore(ReminderStore):
    def __init__(self, reminders: Iterable[Reminder] = ()):
        self._d = {r.id: r for r in reminders}

    def get(self, id: str) -> Reminder | None:
        r = self._d.get(id)
        # hand out copies so callers cannot change stored state without put()
        return replace(r, extra=dict(r.extra)) if r is not None else None

    def put(self, reminder: Reminder) -> None:
        self._d[reminder.id] = replace(reminder, extra=dict(reminder.extra))

    def list_ids(self) -> Iterable[str]:
        return list(self._d)
