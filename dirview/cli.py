"""Command-line front door for dirview.

Parses CLI options, resolves the target directory, and configures logging.
Then either prints the listing once or dispatches into the interactive browser.
"""

from __future__ import annotations

import argparse
import logging
import shutil
import sys
from pathlib import Path

from .errors import DirviewError
from .logs import configure_logging
from .render import render_listing, theme_for
from .runtime import run_browser
from .settings import DEFAULT_HISTORY_SIZE, BrowserSettings
from .sizes import list_entries

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def _positive_int(value: str) -> int:
    """argparse type for positive integer values."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError("value must be >= 1")
    return parsed


def print_listing(settings: BrowserSettings, max_cols: int | None, max_rows: int | None) -> str:
    """Render the listing without entering raw mode.

    Missing dimensions fall back to the current terminal size.
    """
    term = shutil.get_terminal_size((80, 24))
    cols = max_cols if max_cols is not None else max(1, term.columns)
    rows = max_rows if max_rows is not None else max(1, term.lines)
    entries = list_entries(settings.path)
    lines = render_listing(entries, cols, rows, settings.title, theme_for(settings.no_color))
    return "".join(f"{line}\n" for line in lines)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dirview",
        description="Browse a directory with recursively computed sizes.",
    )
    parser.add_argument("path", nargs="?", default=None, help="Directory to list. Defaults to current directory.")
    parser.add_argument(
        "--history-size",
        type=_positive_int,
        default=DEFAULT_HISTORY_SIZE,
        help=f"Number of submitted commands to keep (default: {DEFAULT_HISTORY_SIZE}).",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable color output even on TTY.")
    parser.add_argument("--print", dest="print_only", action="store_true", help="Print the listing and exit.")
    parser.add_argument(
        "--max-cols",
        type=_positive_int,
        default=None,
        help="Column width for --print output (default: terminal width).",
    )
    parser.add_argument(
        "--max-rows",
        type=_positive_int,
        default=None,
        help="Row budget for --print output (default: terminal height).",
    )
    parser.add_argument("--log-file", type=Path, default=None, help="Append log records to this file.")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=None,
        help="Enable logging at this level (default: off).",
    )
    return parser


def main(default_path: Path | None = None) -> None:
    """Parse CLI arguments and launch dirview on a directory.

    ``default_path`` is primarily for tests; when omitted the current working
    directory is used.
    """
    args = build_parser().parse_args()

    if default_path is None:
        default_path = Path.cwd()
    path = Path(args.path or default_path)
    if not path.exists():
        raise SystemExit(f"Path not found: {path}")
    if not path.is_dir():
        raise SystemExit(f"Not a directory: {path}")

    configure_logging(args.log_level, args.log_file)
    no_color = args.no_color or (args.print_only and not sys.stdout.isatty())
    settings = BrowserSettings(path=path, history_size=args.history_size, no_color=no_color)

    try:
        if args.print_only:
            sys.stdout.write(print_listing(settings, args.max_cols, args.max_rows))
            return
        run_browser(settings)
    except DirviewError as exc:
        logger.exception("dirview aborted")
        raise SystemExit(f"dirview: {exc}") from exc


if __name__ == "__main__":
    main()
