"""Error types and tool result wrapping."""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

logger = logging.getLogger(__name__)

SYSTEM_ERROR = "System error occurred"


class ValidationError(Exception):
    """Bad tool arguments; the message is always shown to the caller."""


def unknown_tool(name: str) -> str:
    return f"Unknown tool: {name}"


def unknown_action(tool: str, action: str) -> str:
    return f"Unknown {tool} action: {action}"


@dataclass
class ToolResult:
    text: str
    is_error: bool = False
    content_type: str = "text"

    def to_dict(self) -> dict[str, Any]:
        return {
            "content": [{"type": self.content_type, "text": self.text}],
            "isError": self.is_error,
        }


def error_message(operation: str, error: Exception, debug: bool = False) -> str:
    """Message for a failed operation.

    Validation errors are always shown as-is. Anything else is reported
    generically unless debug is on.
    """
    if isinstance(error, ValidationError):
        return str(error)
    detail = str(error) if debug and str(error) else SYSTEM_ERROR
    return f"Failed to {operation}: {detail}"


def handle_operation(
    operation: Callable[[], str], operation_name: str, debug: bool = False
) -> ToolResult:
    """Run an operation, turning any exception into an error result."""
    try:
        return ToolResult(text=operation())
    except ValidationError as e:
        logger.info("Rejected %s: %s", operation_name, e)
        return ToolResult(text=error_message(operation_name, e, debug), is_error=True)
    except Exception as e:
        logger.exception("Failed to %s", operation_name)
        return ToolResult(text=error_message(operation_name, e, debug), is_error=True)
