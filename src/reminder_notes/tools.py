"""Tool definitions and call routing for reminder notes.

Routes a named tool call with an ``action`` argument to its handler and wraps
the outcome as a text result, e.g.:

    handle_tool_call("reminders_notes", {"action": "add_link", "id": "A1", "link": "B2"}, rt)
"""

import logging
from collections.abc import Callable
from functools import partial
from typing import Any

from .core.model import NoteComponents
from .core.utils import split_ids
from .errors import ToolResult, ValidationError, handle_operation, unknown_action, unknown_tool
from .format import add_link, clear_critical, remove_link, set_critical

logger = logging.getLogger(__name__)

REMINDERS_NOTES = "reminders_notes"

TOOL_ALIASES = {
    "reminders.notes": REMINDERS_NOTES,
}

ACTIONS = ["read", "update", "add_link", "remove_link", "set_critical", "clear_critical"]

TOOLS: list[dict[str, Any]] = [
    {
        "name": REMINDERS_NOTES,
        "description": (
            "Read and edit the structured notes of a reminder: free text content, "
            "one critical line and related reminder ids."
        ),
        "inputSchema": {
            "type": "object",
            "properties": {
                "action": {"type": "string", "enum": ACTIONS},
                "id": {"type": "string", "description": "Reminder id"},
                "content": {"type": "string", "description": "Text to append (update)"},
                "critical": {"type": "string", "description": "Critical line (update, set_critical)"},
                "links": {
                    "type": "array",
                    "items": {"type": "string"},
                    "description": "Related ids to add (update)",
                },
                "link": {"type": "string", "description": "Related id (add_link, remove_link)"},
            },
            "required": ["action", "id"],
        },
    },
]


def normalize_tool_name(name: str) -> str:
    return TOOL_ALIASES.get(name, name)


def _require_str(args: dict[str, Any], key: str) -> str:
    value = args.get(key)
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"Input validation failed: '{key}' is required")
    return value.strip()


def _optional_str(args: dict[str, Any], key: str) -> str | None:
    value = args.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValidationError(f"Input validation failed: '{key}' must be a string")
    # blank means not given; an empty update must not wipe stored text
    return value if value.strip() else None


def _links_arg(args: dict[str, Any]) -> list[str] | None:
    value = args.get("links")
    if value is None:
        return None
    if isinstance(value, str):
        return split_ids(value) or None
    if isinstance(value, list) and all(isinstance(v, str) for v in value):
        return [v.strip() for v in value if v.strip()] or None
    raise ValidationError("Input validation failed: 'links' must be a list of strings")


def _edit_notes(rt: Any, args: dict[str, Any], edit: Callable[[str | None], str]) -> str:
    reminder_id = _require_str(args, "id")
    reminder = rt.notebook.edit(reminder_id, edit)
    if reminder is None:
        raise ValidationError(f"Reminder not found: {reminder_id}")
    logger.info("Updated notes for reminder %s", reminder_id)
    notes = reminder.notes or "(empty)"
    return f"Updated notes for {reminder.title or reminder_id}:\n{notes}"


def _read(rt: Any, args: dict[str, Any]) -> str:
    reminder_id = _require_str(args, "id")
    reminder = rt.notebook.get(reminder_id)
    if reminder is None:
        raise ValidationError(f"Reminder not found: {reminder_id}")

    components = rt.notebook.codec.decode(reminder.notes)
    lines = [f"Notes for {reminder.title or reminder_id}:"]
    if components.is_empty():
        lines.append("(empty)")
    if components.content:
        lines.append(f"Content: {components.content}")
    if components.critical:
        lines.append(f"Critical: {components.critical}")
    if components.links:
        lines.append(f"Related: {', '.join(components.links)}")
    return "\n".join(lines)


def _update(rt: Any, args: dict[str, Any]) -> str:
    updates = NoteComponents(
        content=_optional_str(args, "content"),
        critical=_optional_str(args, "critical"),
        links=_links_arg(args),
    )
    reminder_id = _require_str(args, "id")
    reminder = rt.notebook.update(reminder_id, updates)
    if reminder is None:
        raise ValidationError(f"Reminder not found: {reminder_id}")
    logger.info("Merged notes update into reminder %s", reminder_id)
    return f"Updated notes for {reminder.title or reminder_id}:\n{reminder.notes or '(empty)'}"


def _add_link(rt: Any, args: dict[str, Any]) -> str:
    link = _require_str(args, "link")
    return _edit_notes(rt, args, lambda text: add_link(text, link))


def _remove_link(rt: Any, args: dict[str, Any]) -> str:
    link = _require_str(args, "link")
    return _edit_notes(rt, args, lambda text: remove_link(text, link))


def _set_critical(rt: Any, args: dict[str, Any]) -> str:
    critical = _require_str(args, "critical")
    return _edit_notes(rt, args, lambda text: set_critical(text, critical))


def _clear_critical(rt: Any, args: dict[str, Any]) -> str:
    return _edit_notes(rt, args, clear_critical)


ACTION_HANDLERS: dict[str, Callable[[Any, dict[str, Any]], str]] = {
    "read": _read,
    "update": _update,
    "add_link": _add_link,
    "remove_link": _remove_link,
    "set_critical": _set_critical,
    "clear_critical": _clear_critical,
}


def handle_tool_call(name: str, args: dict[str, Any] | None, rt: Any) -> ToolResult:
    """Route a tool call to its action handler.

    Args:
        name: Tool name, canonical or dotted alias
        args: Tool arguments including ``action``
        rt: Runtime with a notebook and config

    Returns:
        ToolResult; failures come back with is_error set rather than raising
    """
    tool = normalize_tool_name(name)
    if tool != REMINDERS_NOTES:
        return ToolResult(text=unknown_tool(name), is_error=True)

    if not args:
        return ToolResult(text="No arguments provided", is_error=True)

    action = args.get("action")
    handler = ACTION_HANDLERS.get(action) if isinstance(action, str) else None
    if handler is None:
        return ToolResult(text=unknown_action(tool, str(action)), is_error=True)

    operation_name = f"{action.replace('_', ' ')} reminder notes"
    return handle_operation(partial(handler, rt, args), operation_name, debug=rt.debug)
