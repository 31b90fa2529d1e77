"""Runtime wiring helper for CLI and API applications."""

from dataclasses import dataclass
from pathlib import Path

from .adapters.memory_store import MemoryReminderStore
from .adapters.yaml_store import YamlReminderStore
from .config import NotesAppConfig, load_config
from .core.notebook import Notebook
from .core.ports import ReminderStore
from .format import NaturalNoteCodec


@dataclass
class Runtime:
    """Container for all wired components."""
    notebook: Notebook
    store: ReminderStore
    config: NotesAppConfig

    @property
    def debug(self) -> bool:
        return self.config.debug


def build_runtime(
    store_path: Path | None = None,
    config_path: Path | None = None,
) -> Runtime:
    """Build and wire all components."""
    config = load_config(config_path=config_path)

    # CLI args take precedence over config values
    if store_path is not None:
        config.store.path = store_path
        config.store.backend = "yaml"

    store: ReminderStore
    if config.store.backend == "memory":
        store = MemoryReminderStore()
    else:
        store = YamlReminderStore(config.store.path)

    notebook = Notebook(store, NaturalNoteCodec(), max_length=config.notes.max_length)

    return Runtime(notebook=notebook, store=store, config=config)
