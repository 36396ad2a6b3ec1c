"""Terminal control helpers for the browser session.

Owns raw-mode lifecycle, alternate-screen switching, and the small set of
cursor and clearing primitives the listing and command loop draw with.
Output is buffered and written to the stdout descriptor on ``flush``.
"""

from __future__ import annotations

import contextlib
import logging
import os
import termios
import tty

from ..errors import TerminalError

logger = logging.getLogger(__name__)


class TerminalController:
    """Manage terminal mode transitions and screen writes."""

    def __init__(self, stdin_fd: int, stdout_fd: int) -> None:
        """Capture tty state and bind stdin/stdout file descriptors."""
        self.stdin_fd = stdin_fd
        self.stdout_fd = stdout_fd
        try:
            self._saved_tty_state = termios.tcgetattr(stdin_fd)
        except termios.error as exc:
            raise TerminalError(f"stdin is not a terminal: {exc}") from exc
        self._pending: list[str] = []

    def size(self) -> tuple[int, int]:
        """Return ``(columns, rows)`` of the attached terminal."""
        try:
            term = os.get_terminal_size(self.stdout_fd)
        except OSError as exc:
            raise TerminalError(f"cannot query terminal size: {exc}") from exc
        return term.columns, term.lines

    def enable_tui_mode(self) -> None:
        """Enter raw mode on the alternate screen."""
        try:
            tty.setraw(self.stdin_fd, termios.TCSAFLUSH)
        except termios.error as exc:
            raise TerminalError(f"cannot enter raw mode: {exc}") from exc
        os.write(self.stdout_fd, b"\x1b[?1049h")
        logger.debug("raw mode enabled")

    def disable_tui_mode(self) -> None:
        """Restore the main screen buffer and the saved tty attributes."""
        self._pending.clear()
        os.write(self.stdout_fd, b"\x1b[0m\x1b[?25h\x1b[?1049l")
        termios.tcsetattr(self.stdin_fd, termios.TCSAFLUSH, self._saved_tty_state)
        logger.debug("raw mode disabled")

    @contextlib.contextmanager
    def raw_mode(self):
        """Context manager that brackets code with TUI enter/exit calls."""
        try:
            self.enable_tui_mode()
            yield
        finally:
            self.disable_tui_mode()

    def clear_screen(self) -> None:
        self._pending.append("\x1b[2J\x1b[H")

    def clear_line(self, row: int) -> None:
        """Erase the whole of 0-based ``row`` and leave the cursor at its start."""
        self.move_cursor(0, row)
        self._pending.append("\x1b[2K")

    def move_cursor(self, col: int, row: int) -> None:
        """Move to 0-based ``(col, row)``."""
        self._pending.append(f"\x1b[{max(0, row) + 1};{max(0, col) + 1}H")

    def write(self, text: str) -> None:
        self._pending.append(text)

    def flush(self) -> None:
        if not self._pending:
            return
        payload = "".join(self._pending).encode("utf-8", errors="replace")
        self._pending.clear()
        os.write(self.stdout_fd, payload)
