"""Configuration loader for rnotes.toml."""

import os
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

CONFIG_FILENAME = "rnotes.toml"
DEFAULT_MAX_NOTE_LENGTH = 4000


@dataclass
class StoreConfig:
    """Reminder store configuration."""
    path: Path
    backend: str = "yaml"  # "yaml" | "memory"


@dataclass
class NotesConfig:
    """Note encoding limits."""
    max_length: int = DEFAULT_MAX_NOTE_LENGTH


@dataclass
class ServerConfig:
    """Local HTTP API configuration."""
    host: str = "127.0.0.1"
    port: int = 8765


@dataclass
class NotesAppConfig:
    """Complete reminder-notes configuration."""
    store: StoreConfig
    notes: NotesConfig
    server: ServerConfig
    debug: bool = False
    log_level: str = "INFO"


def _env_flag(name: str) -> bool:
    return os.environ.get(name, "").lower() in ("1", "true", "yes", "on")


def load_config(config_path: Path | None = None) -> NotesAppConfig:
    """
    Load configuration from rnotes.toml.

    Search order:
    1. config_path (if provided)
    2. cwd/rnotes.toml

    Setting RNOTES_DEBUG in the environment turns on debug regardless of file.

    Args:
        config_path: Explicit path to config file

    Returns:
        NotesAppConfig with resolved settings
    """
    toml_data: dict[str, Any] = {}

    search_paths = []
    if config_path:
        search_paths.append(config_path)
    search_paths.append(Path.cwd() / CONFIG_FILENAME)

    for path in search_paths:
        if path.exists():
            with open(path, "rb") as f:
                toml_data = tomllib.load(f)
            break

    store_data = toml_data.get("store", {})
    store_config = StoreConfig(
        path=Path(store_data.get("path", "reminders.yaml")),
        backend=store_data.get("backend", "yaml"),
    )
    if store_config.backend not in ("yaml", "memory"):
        raise ValueError(f"Unknown store backend: {store_config.backend}")

    notes_data = toml_data.get("notes", {})
    notes_config = NotesConfig(
        max_length=int(notes_data.get("max_length", DEFAULT_MAX_NOTE_LENGTH))
    )

    server_data = toml_data.get("server", {})
    server_config = ServerConfig(
        host=server_data.get("host", "127.0.0.1"),
        port=int(server_data.get("port", 8765)),
    )

    return NotesAppConfig(
        store=store_config,
        notes=notes_config,
        server=server_config,
        debug=bool(toml_data.get("debug", False)) or _env_flag("RNOTES_DEBUG"),
        log_level=str(toml_data.get("log_level", "INFO")).upper(),
    )
