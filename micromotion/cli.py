#!/usr/bin/env python3
"""micromotion - Micro-style word motions in a terminal editor."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Any

from .stores.settings import DEFAULT_LOG_LEVEL, SettingsStore, load_settings

logger = logging.getLogger(__name__)

SUBCOMMANDS = {"motion", "keymap"}
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _extract_file_arg(argv: list[str]) -> tuple[str | None, list[str]]:
    """Extract the file to edit from argv if present.

    The file is the first non-flag argument before any subcommand.
    Returns (path, remaining_argv) where path is None if not found.
    """
    value_flags = {"--settings", "--log-file"}
    result_argv: list[str] = []
    path = None

    i = 0
    while i < len(argv):
        arg = argv[i]
        if i == 0:
            result_argv.append(arg)
            i += 1
            continue

        if arg.startswith("-"):
            result_argv.append(arg)
            if arg in value_flags and i + 1 < len(argv):
                i += 1
                result_argv.append(argv[i])
            i += 1
            continue

        if arg in SUBCOMMANDS:
            result_argv.extend(argv[i:])
            break

        if path is None:
            path = arg
        else:
            result_argv.append(arg)
        i += 1

    return path, result_argv


def _resolve_log_level(value: Any) -> int | None:
    """Numeric level for a level name such as "info", or None if unknown."""
    level = logging.getLevelName(str(value).upper())
    return level if isinstance(level, int) else None


def _configure_logging(args: argparse.Namespace, settings: dict[str, Any], *, to_stderr: bool) -> None:
    """Configure logging once for the whole process.

    The editor owns the terminal, so it only logs when --log-file is given.
    An unknown "log_level" setting falls back to the default with a warning.
    """
    bad_level = None
    if args.debug:
        level = logging.DEBUG
    else:
        configured = settings.get("log_level", DEFAULT_LOG_LEVEL)
        resolved = _resolve_log_level(configured)
        if resolved is None:
            bad_level = configured
            resolved = _resolve_log_level(DEFAULT_LOG_LEVEL)
        level = resolved

    if args.log_file:
        logging.basicConfig(filename=args.log_file, level=level, format=LOG_FORMAT)
    elif to_stderr:
        logging.basicConfig(stream=sys.stderr, level=level, format=LOG_FORMAT)
    else:
        return

    if bad_level is not None:
        logger.warning("Unknown log_level %r in settings, using %s", bad_level, DEFAULT_LOG_LEVEL)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="micromotion",
        description="Terminal editor with Micro-style word motions (ctrl+left / ctrl+right)",
        epilog="Open a file: micromotion notes.txt",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--settings",
        metavar="PATH",
        help="Path to settings JSON file (overrides ~/.micromotion/settings.json)",
    )
    parser.add_argument("--log-file", metavar="PATH", help="Write log records to PATH")
    parser.add_argument("--debug", action="store_true", help="Log at DEBUG level")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    motion_parser = subparsers.add_parser(
        "motion",
        help="Apply a word motion to a position in a file and print the result",
    )
    motion_parser.add_argument("direction", choices=["right", "left"], help="Motion direction")
    motion_parser.add_argument("file", help="Text file to read lines from")
    motion_parser.add_argument("--line", "-l", type=int, default=0, help="Zero-based line (default: 0)")
    motion_parser.add_argument("--col", "-c", type=int, default=0, help="Zero-based column (default: 0)")
    motion_parser.add_argument(
        "--repeat",
        "-r",
        type=int,
        default=1,
        metavar="COUNT",
        help="Apply the motion COUNT times (default: 1)",
    )

    keymap_parser = subparsers.add_parser("keymap", help="Show or change key bindings in settings")
    keymap_subparsers = keymap_parser.add_subparsers(dest="keymap_command", help="Keymap commands")
    keymap_subparsers.add_parser("list", help="Show the active key bindings")
    set_parser = keymap_subparsers.add_parser("set", help="Bind an action to one or more keys")
    set_parser.add_argument("action", help="Action name (word_right, word_left)")
    set_parser.add_argument("keys", nargs="+", metavar="KEY", help="Key names, primary first")
    reset_parser = keymap_subparsers.add_parser("reset", help="Restore default keys")
    reset_parser.add_argument("action", nargs="?", help="Action to reset (default: all actions)")
    return parser


def cmd_motion(args: argparse.Namespace) -> int:
    """Print row:col after applying a word motion headlessly."""
    from .editing import TextBuffer, apply_motion

    try:
        text = Path(args.file).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    buffer = TextBuffer(text)
    if not 0 <= args.line < buffer.get_line_count():
        print(
            f"Error: line {args.line} out of range (file has {buffer.get_line_count()} lines)",
            file=sys.stderr,
        )
        return 1
    if args.repeat < 0:
        print("Error: --repeat must not be negative", file=sys.stderr)
        return 1

    buffer.set_cursor(args.line, args.col)
    for _ in range(args.repeat):
        result = apply_motion(buffer, f"word_{args.direction}")
        if not result.moved:
            break
    row, col = buffer.get_cursor()
    print(f"{row}:{col}")
    return 0


def _keymap_overrides(store: SettingsStore) -> dict[str, Any]:
    """The saved "keymap" setting, validated."""
    from .core.keymap import SettingsKeymapProvider

    overrides = store.get("keymap") or {}
    SettingsKeymapProvider(overrides)
    return dict(overrides)


def cmd_keymap_list(args: argparse.Namespace) -> int:
    """Print the bindings the editor would use."""
    from .core.keymap import MOTION_ACTIONS, KeymapError, format_key, keymap_from_settings

    try:
        keymap = keymap_from_settings(load_settings())
    except KeymapError as exc:
        print(f"Error: invalid keymap in settings: {exc}", file=sys.stderr)
        return 1

    print(f"{'Action':<12} {'Keys':<24} {'Description'}")
    print("-" * 60)
    for action_name, label in MOTION_ACTIONS.items():
        keys = ", ".join(format_key(key) for key in keymap.keys_for_action(action_name))
        print(f"{action_name:<12} {keys:<24} {label}")
    return 0


def cmd_keymap_set(args: argparse.Namespace) -> int:
    """Save keys for an action, replacing its defaults in every mode."""
    from .core.keymap import KeymapError, SettingsKeymapProvider

    store = SettingsStore.get_instance()
    try:
        overrides = _keymap_overrides(store)
        overrides[args.action] = list(args.keys)
        SettingsKeymapProvider(overrides)
    except KeymapError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    store.set("keymap", overrides)
    logger.info("Saved keymap for %s to %s", args.action, store.file_path)
    print(f"Bound {args.action} to {', '.join(args.keys)}")
    return 0


def cmd_keymap_reset(args: argparse.Namespace) -> int:
    """Drop saved keys for one action, or for all of them."""
    from .core.keymap import MOTION_ACTIONS, KeymapError

    store = SettingsStore.get_instance()
    if args.action is None:
        store.delete("keymap")
        print("Restored default keys for all actions")
        return 0

    if args.action not in MOTION_ACTIONS:
        print(f"Error: unknown action {args.action!r}", file=sys.stderr)
        return 1
    try:
        overrides = _keymap_overrides(store)
    except KeymapError as exc:
        print(f"Error: invalid keymap in settings: {exc}", file=sys.stderr)
        return 1

    overrides.pop(args.action, None)
    if overrides:
        store.set("keymap", overrides)
    else:
        store.delete("keymap")
    print(f"Restored default keys for {args.action}")
    return 0


def main() -> int:
    """Entry point for the CLI."""
    file_arg, filtered_argv = _extract_file_arg(sys.argv)
    parser = _build_parser()
    args = parser.parse_args(filtered_argv[1:])
    if args.settings:
        os.environ["MICROMOTION_SETTINGS_PATH"] = str(args.settings)

    settings = load_settings()
    _configure_logging(args, settings, to_stderr=args.command is not None)

    if args.command == "motion":
        return cmd_motion(args)

    if args.command == "keymap":
        if args.keymap_command == "list":
            return cmd_keymap_list(args)
        elif args.keymap_command == "set":
            return cmd_keymap_set(args)
        elif args.keymap_command == "reset":
            return cmd_keymap_reset(args)
        else:
            print("Error: choose a keymap command: list, set, reset", file=sys.stderr)
            return 1

    from .app import MicroMotionApp
    from .core.keymap import KeymapError, keymap_from_settings, set_keymap

    try:
        set_keymap(keymap_from_settings(settings))
    except KeymapError as exc:
        print(f"Error: invalid keymap in settings: {exc}", file=sys.stderr)
        return 1

    path = Path(file_arg).expanduser() if file_arg else None
    if path is not None and path.is_dir():
        print(f"Error: {path} is a directory", file=sys.stderr)
        return 1

    text = None
    if path is not None and path.exists():
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            print(f"Error: cannot open {path}: {exc}", file=sys.stderr)
            return 1

    logger.info("Starting editor on %s", path or "<scratch buffer>")
    app = MicroMotionApp(path=path, text=text)
    app.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
