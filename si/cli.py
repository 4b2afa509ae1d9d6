"""Command-line front door for si.

Parses CLI options, resolves the target path, and dispatches to the file or
directory view. Output is piped through a pager when stdout is a terminal.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .config import Settings, load_settings, save_settings
from .directory import output_directory
from .errors import InspectError, PathNotFoundError, UnsupportedEntryTypeError
from .fs import display_path, read_link
from .source import output_file
from .terminal import Context, detect_terminal_width, open_pager


def _positive_int(value: str) -> int:
    """argparse type for positive integer values."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError("value must be >= 1")
    return parsed


def inspect_path(context: Context, path: Path) -> None:
    """Write the view matching the type of ``path``.

    A symlink is announced with its target and then shown as whatever it
    points to; a dangling link stops after the announcement.
    """
    if path.is_symlink():
        context.write(f"symlink: {display_path(path)} -> {display_path(read_link(path))}\n")
        context.write_separator()
        if not path.exists():
            return
    elif not path.exists():
        raise PathNotFoundError(path)

    if path.is_file():
        output_file(context, path)
    elif path.is_dir():
        output_directory(context, path)
    else:
        raise UnsupportedEntryTypeError(path)


def main(default_path: Path | None = None) -> None:
    """Parse CLI arguments and print the summary for a file or directory.

    ``default_path`` is primarily for tests; when omitted the current working
    directory is used. Failures exit with status 1 and a message on stderr.
    """
    settings = load_settings()
    parser = argparse.ArgumentParser(
        description="Show information about a path: file contents or a directory tree."
    )
    parser.add_argument("path", nargs="?", default=None, help="Path to inspect. Defaults to current directory.")
    parser.add_argument("--nopager", action="store_true", help="Print output directly without paging.")
    parser.add_argument("--no-color", action="store_true", help="Disable color output.")
    parser.add_argument(
        "--width",
        type=_positive_int,
        default=None,
        help="Separator width (default: terminal width).",
    )
    parser.add_argument(
        "--save-config",
        action="store_true",
        help="Remember --nopager, --no-color and --width as defaults.",
    )
    args = parser.parse_args()

    if args.save_config:
        settings = Settings(
            pager="" if args.nopager else settings.pager,
            default_width=args.width or settings.default_width,
            color=settings.color and not args.no_color,
        )
        save_settings(settings)

    if default_path is None:
        default_path = Path.cwd()
    path = Path(args.path) if args.path is not None else default_path
    pager = None if args.nopager else settings.pager
    terminal_width = args.width or detect_terminal_width(sys.stdout)

    try:
        with open_pager(pager) as stdout:
            context = Context(
                stdout=stdout,
                terminal_width=terminal_width,
                color=settings.color and not args.no_color,
                default_width=settings.default_width,
            )
            inspect_path(context, path)
    except (InspectError, OSError) as exc:
        raise SystemExit(str(exc)) from exc


if __name__ == "__main__":
    main()
