import io
import logging
from pathlib import Path
from typing import Any, Iterable

import yaml

from ..core.model import Reminder
from ..core.ports import ReminderStore

logger = logging.getLogger(__name__)


class YamlReminderStore(ReminderStore):
    """
    All reminders in one YAML document, keyed by reminder id:

        abc123:
          title: Ship release
          notes: "Check security issues\\n\\nRelated:\\nDEF456"
          list: Work
          completed: false
    """

    def __init__(self, path: Path):
        self.path = path

    def _load(self) -> dict[str, Any]:
        if not self.path.exists():
            return {}
        text = self.path.read_text(encoding="utf-8")
        data = yaml.safe_load(io.StringIO(text)) or {}
        if not isinstance(data, dict):
            raise ValueError(f"{self.path} must hold a mapping of reminder ids")
        return data

    def _dump(self, data: dict[str, Any]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        buf = io.StringIO()
        yaml.safe_dump(data, buf, sort_keys=False, allow_unicode=True)
        # Atomic write using temp file
        tmp_path = self.path.with_suffix(self.path.suffix + ".tmp")
        try:
            tmp_path.write_text(buf.getvalue(), encoding="utf-8")
            tmp_path.replace(self.path)
        except Exception:
            if tmp_path.exists():
                tmp_path.unlink()
            raise

    def get(self, id: str) -> Reminder | None:
        entry = self._load().get(id)
        if entry is None:
            return None
        if not isinstance(entry, dict):
            raise ValueError(f"{self.path} must hold a mapping for reminder {id}")
        entry = dict(entry)
        # hand-edited files may hold numbers, booleans or lists here
        notes = entry.pop("notes", None)
        list_name = entry.pop("list", None)
        return Reminder(
            id=id,
            title=str(entry.pop("title", "")),
            notes=None if notes is None else str(notes),
            list_name=None if list_name is None else str(list_name),
            completed=bool(entry.pop("completed", False)),
            extra=entry,
        )

    def put(self, reminder: Reminder) -> None:
        data = self._load()
        entry: dict[str, Any] = {"title": reminder.title}
        if reminder.notes:
            entry["notes"] = reminder.notes
        if reminder.list_name:
            entry["list"] = reminder.list_name
        entry["completed"] = reminder.completed
        entry.update(reminder.extra)
        data[reminder.id] = entry
        self._dump(data)
        logger.debug("Wrote reminder %s to %s", reminder.id, self.path)

    def list_ids(self) -> Iterable[str]:
        return list(self._load().keys())
