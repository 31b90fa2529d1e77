"""CLI for reminder-notes - structured notes packed into reminder text fields."""

import argparse
import json
import logging
import platform
import sys
from pathlib import Path
from typing import Any

from . import __version__
from .core.model import NoteComponents, Reminder
from .format import add_link, clear_critical, format_notes, parse_notes, remove_link, set_critical
from .runtime import build_runtime
from .tools import TOOLS, handle_tool_call


def _print_components(components: NoteComponents, as_json: bool) -> None:
    if as_json:
        print(json.dumps(components.to_dict()))
        return
    if components.content is not None:
        print(f"content={components.content}")
    if components.critical is not None:
        print(f"critical={components.critical}")
    if components.links is not None:
        print(f"links={','.join(components.links)}")


def cmd_format(args: argparse.Namespace, rt: Any) -> int:
    """Encode fields given on the command line."""
    components = NoteComponents(
        content=args.content,
        critical=args.critical,
        links=args.link or None,
    )
    print(format_notes(components))
    return 0


def cmd_parse(args: argparse.Namespace, rt: Any) -> int:
    """Decode notes text read from stdin."""
    _print_components(parse_notes(sys.stdin.read()), args.json)
    return 0


def cmd_add(args: argparse.Namespace, rt: Any) -> int:
    """Create a reminder in the local store."""
    if rt.store.get(args.id) is not None:
        print(f"Reminder {args.id} already exists", file=sys.stderr)
        return 1

    rt.store.put(
        Reminder(id=args.id, title=args.title, notes=args.notes, list_name=args.list)
    )
    if not args.quiet:
        print(args.id)
    return 0


def cmd_ls(args: argparse.Namespace, rt: Any) -> int:
    """List reminder ids."""
    ids = sorted(rt.notebook.list_ids())
    if args.json:
        result = []
        for rid in ids:
            reminder = rt.notebook.get(rid)
            result.append({"id": rid, "title": reminder.title if reminder else ""})
        print(json.dumps(result, indent=2))
    else:
        for rid in ids:
            print(rid)
    return 0


def cmd_show(args: argparse.Namespace, rt: Any) -> int:
    """Print the notes of a reminder."""
    reminder = rt.notebook.get(args.id)
    if reminder is None:
        print(f"Reminder {args.id} not found", file=sys.stderr)
        return 1

    if args.raw:
        print(reminder.notes or "")
    else:
        _print_components(rt.notebook.codec.decode(reminder.notes), args.json)
    return 0


def _edit(args: argparse.Namespace, rt: Any, edit: Any) -> int:
    reminder = rt.notebook.edit(args.id, edit)
    if reminder is None:
        print(f"Reminder {args.id} not found", file=sys.stderr)
        return 1
    if not args.quiet:
        print(reminder.notes or "")
    return 0


def cmd_update(args: argparse.Namespace, rt: Any) -> int:
    """Merge content, critical and links into a reminder's notes."""
    updates = NoteComponents(
        content=args.content,
        critical=args.critical,
        links=args.link or None,
    )
    reminder = rt.notebook.update(args.id, updates)
    if reminder is None:
        print(f"Reminder {args.id} not found", file=sys.stderr)
        return 1
    if not args.quiet:
        print(reminder.notes or "")
    return 0


def cmd_link_add(args: argparse.Namespace, rt: Any) -> int:
    return _edit(args, rt, lambda text: add_link(text, args.link))


def cmd_link_rm(args: argparse.Namespace, rt: Any) -> int:
    return _edit(args, rt, lambda text: remove_link(text, args.link))


def cmd_critical_set(args: argparse.Namespace, rt: Any) -> int:
    return _edit(args, rt, lambda text: set_critical(text, args.text))


def cmd_critical_clear(args: argparse.Namespace, rt: Any) -> int:
    return _edit(args, rt, clear_critical)


def cmd_tools(args: argparse.Namespace, rt: Any) -> int:
    """Print tool definitions."""
    if args.json:
        print(json.dumps(TOOLS, indent=2))
    else:
        for tool in TOOLS:
            print(f"{tool['name']}\t{tool['description']}")
    return 0


def cmd_call(args: argparse.Namespace, rt: Any) -> int:
    """Run a tool call and print the result."""
    try:
        tool_args = json.loads(args.args) if args.args else {}
    except json.JSONDecodeError as e:
        print(f"Invalid --args JSON: {e}", file=sys.stderr)
        return 1

    result = handle_tool_call(args.tool, tool_args, rt)
    if args.json:
        print(json.dumps(result.to_dict()))
    else:
        print(result.text)
    return 1 if result.is_error else 0


def cmd_serve(args: argparse.Namespace, rt: Any) -> int:
    """Start local JSON API server."""
    import uvicorn

    from .api.app import create_app, generate_token

    token_arg = getattr(args, 'token', 'auto')
    token = None

    if token_arg == 'auto':
        token = generate_token()
        print(f"Generated bearer token: {token}")
        print(f"Use in requests: Authorization: Bearer {token}")
    elif token_arg == 'none':
        print("Warning: Running without authentication. Only use in trusted environments.")
        token = None
    else:
        token = token_arg

    app = create_app(rt, token=token, enable_cors=getattr(args, 'cors', False))

    host = args.host or rt.config.server.host
    port = args.port or rt.config.server.port

    print(f"Starting server on http://{host}:{port}")
    uvicorn.run(app, host=host, port=port, log_level=rt.config.log_level.lower())

    return 0


def _version_text() -> str:
    return (
        f"reminder-notes {__version__}\n"
        f"python {platform.python_version()}\n"
        f"platform {platform.platform()}"
    )


def main() -> None:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="rnotes", description="Structured reminder notes CLI"
    )
    parser.add_argument(
        "--version", action="version", version=_version_text()
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to config file (default: search cwd/rnotes.toml)",
    )
    parser.add_argument(
        "--store",
        type=Path,
        default=None,
        help="Path to reminders YAML store (overrides config)",
    )
    parser.add_argument(
        "--log-level", dest="log_level", default=None,
        help="Logging level (overrides config)"
    )
    parser.add_argument(
        "-q", "--quiet", action="store_true", help="Minimize output"
    )
    parser.add_argument(
        "--json", action="store_true", help="Machine-readable output"
    )

    subparsers = parser.add_subparsers(dest="cmd", required=True)

    # format command
    parser_format = subparsers.add_parser("format", help="Encode fields as notes text")
    parser_format.add_argument("--content", help="Free text content")
    parser_format.add_argument("--critical", help="Critical line")
    parser_format.add_argument(
        "--link", action="append", default=[], help="Related id (repeatable)"
    )

    # parse command
    subparsers.add_parser("parse", help="Decode notes text from stdin")

    # add command
    parser_add = subparsers.add_parser("add", help="Create a reminder in the local store")
    parser_add.add_argument("id", help="Reminder ID")
    parser_add.add_argument("--title", required=True, help="Reminder title")
    parser_add.add_argument("--notes", help="Initial notes text")
    parser_add.add_argument("--list", help="Reminder list name")

    # ls command
    subparsers.add_parser("ls", help="List reminder ids")

    # show command
    parser_show = subparsers.add_parser("show", help="Show a reminder's notes")
    parser_show.add_argument("id", help="Reminder ID")
    parser_show.add_argument(
        "--raw", action="store_true", help="Print the stored text unparsed"
    )

    # update command
    parser_update = subparsers.add_parser("update", help="Merge fields into a reminder's notes")
    parser_update.add_argument("id", help="Reminder ID")
    parser_update.add_argument("--content", help="Content to append")
    parser_update.add_argument("--critical", help="Critical line (replaces existing)")
    parser_update.add_argument(
        "--link", action="append", default=[], help="Related id to add (repeatable)"
    )

    # link command
    parser_link = subparsers.add_parser("link", help="Manage related ids")
    link_sub = parser_link.add_subparsers(dest="link_cmd", required=True)
    parser_link_add = link_sub.add_parser("add", help="Add a related id")
    parser_link_add.add_argument("id", help="Reminder ID")
    parser_link_add.add_argument("link", help="Related id")
    parser_link_rm = link_sub.add_parser("rm", help="Remove a related id")
    parser_link_rm.add_argument("id", help="Reminder ID")
    parser_link_rm.add_argument("link", help="Related id")

    # critical command
    parser_critical = subparsers.add_parser("critical", help="Manage the critical line")
    critical_sub = parser_critical.add_subparsers(dest="critical_cmd", required=True)
    parser_critical_set = critical_sub.add_parser("set", help="Set the critical line")
    parser_critical_set.add_argument("id", help="Reminder ID")
    parser_critical_set.add_argument("text", help="Critical text")
    parser_critical_clear = critical_sub.add_parser("clear", help="Remove the critical line")
    parser_critical_clear.add_argument("id", help="Reminder ID")

    # tools command
    subparsers.add_parser("tools", help="List tool definitions")

    # call command
    parser_call = subparsers.add_parser("call", help="Run a tool call")
    parser_call.add_argument("tool", help="Tool name (e.g. reminders_notes)")
    parser_call.add_argument("--args", default=None, help="Tool arguments as JSON")

    # serve command
    parser_serve = subparsers.add_parser("serve", help="Start local JSON API server")
    parser_serve.add_argument(
        "--host", default=None,
        help="Host to bind to (default: from config, 127.0.0.1)"
    )
    parser_serve.add_argument(
        "--port", type=int, default=None,
        help="Port to bind to (default: from config, 8765)"
    )
    parser_serve.add_argument(
        "--token", default="auto",
        help="Bearer token (auto|<string>|none, default: auto)"
    )
    parser_serve.add_argument(
        "--cors", action="store_true",
        help="Enable CORS (default: false)"
    )

    args = parser.parse_args()

    # Build runtime
    rt = build_runtime(store_path=args.store, config_path=args.config)

    level = (args.log_level or rt.config.log_level).upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
        stream=sys.stderr,
    )

    handlers = {
        "format": cmd_format,
        "parse": cmd_parse,
        "add": cmd_add,
        "ls": cmd_ls,
        "show": cmd_show,
        "update": cmd_update,
        "tools": cmd_tools,
        "call": cmd_call,
        "serve": cmd_serve,
    }

    if args.cmd == "link":
        handler = {"add": cmd_link_add, "rm": cmd_link_rm}.get(args.link_cmd)
    elif args.cmd == "critical":
        handler = {"set": cmd_critical_set, "clear": cmd_critical_clear}.get(args.critical_cmd)
    else:
        handler = handlers.get(args.cmd)

    if handler:
        try:
            exit_code = handler(args, rt)
            sys.exit(exit_code)
        except Exception as e:
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(1)
    else:
        print(f"Unknown command: {args.cmd}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
