"""Browser session wiring.

Startup is strictly ordered: terminal probe, full size aggregation, raw mode,
listing draw, then the command loop owns the screen until it terminates.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Sequence

from ..render import Theme, render_listing, theme_for
from ..settings import BrowserSettings
from ..sizes import FileEntry, list_entries
from .command_loop import InputState, ScreenRows, run_command_loop
from .keys import read_key
from .terminal import TerminalController

logger = logging.getLogger(__name__)


def draw_listing(
    terminal: TerminalController,
    entries: Sequence[FileEntry],
    cols: int,
    rows: int,
    title: str,
    theme: Theme,
) -> None:
    """Paint the title and entry rows from the top of a cleared screen."""
    terminal.clear_screen()
    for row, line in enumerate(render_listing(entries, cols, rows, title, theme)):
        terminal.move_cursor(0, row)
        terminal.write(line)
    terminal.flush()


def run_browser(settings: BrowserSettings, terminal: TerminalController | None = None) -> InputState:
    """Run one interactive session and return the final input state."""
    if terminal is None:
        terminal = TerminalController(sys.stdin.fileno(), sys.stdout.fileno())
    cols, rows = terminal.size()
    theme = theme_for(settings.no_color)
    logger.info("terminal size %dx%d, theme %s, browsing %s", cols, rows, theme.name, settings.path)

    entries = list_entries(settings.path)
    state = InputState(capacity=settings.history_size)
    screen_rows = ScreenRows.for_height(rows)

    with terminal.raw_mode():
        draw_listing(terminal, entries, cols, rows, settings.title, theme)
        run_command_loop(terminal, state, screen_rows, lambda: read_key(terminal.stdin_fd))
    return state
