"""Line-oriented command input below the listing.

``apply_key`` is the pure state machine over one key token; the loop around it
only redraws the input row, echoes submissions and blocks for the next key.
"""

from __future__ import annotations

import enum
import logging
from collections import deque
from collections.abc import Callable
from dataclasses import dataclass, field

from .terminal import TerminalController

logger = logging.getLogger(__name__)

PROMPT = ":"
ECHO_PREFIX = "Command: "
QUIT_COMMAND = "quit"
ENTER_KEYS = frozenset({"ENTER_CR", "ENTER_LF"})


class LoopAction(enum.Enum):
    CONTINUE = "continue"
    SUBMITTED = "submitted"
    TERMINATE = "terminate"


@dataclass(frozen=True)
class ScreenRows:
    """Fixed 0-based rows for the command echo and the input prompt."""

    input_row: int
    output_row: int

    @classmethod
    def for_height(cls, terminal_rows: int) -> ScreenRows:
        input_row = max(0, terminal_rows - 1)
        return cls(input_row=input_row, output_row=max(0, input_row - 1))


@dataclass
class InputState:
    """Input buffer plus bounded history; the deque evicts oldest entries."""

    capacity: int
    buffer: list[str] = field(default_factory=list)
    history: deque[str] = field(init=False)

    def __post_init__(self) -> None:
        if self.capacity < 1:
            raise ValueError("history capacity must be >= 1")
        self.history = deque(maxlen=self.capacity)

    @property
    def text(self) -> str:
        return "".join(self.buffer)

    @property
    def last_command(self) -> str | None:
        return self.history[-1] if self.history else None


def is_exit_command(line: str) -> bool:
    """Return whether a submitted line ends the session."""
    return line == QUIT_COMMAND or line.split() == ["cd", ".."]


def apply_key(state: InputState, key: str) -> LoopAction:
    """Advance ``state`` by one key token.

    ``ESC``, end of input and ``q`` on an empty buffer terminate. Enter either
    recognizes an exit command or pushes the line onto history. Any token that
    is not a single printable character is ignored.
    """
    if key in {"ESC", ""}:
        return LoopAction.TERMINATE
    if key == "BACKSPACE":
        if state.buffer:
            state.buffer.pop()
        return LoopAction.CONTINUE
    if key in ENTER_KEYS:
        line = state.text
        if is_exit_command(line):
            return LoopAction.TERMINATE
        state.history.append(line)
        state.buffer.clear()
        return LoopAction.SUBMITTED
    if key == "q" and not state.buffer:
        return LoopAction.TERMINATE
    if len(key) == 1 and key.isprintable():
        state.buffer.append(key)
    return LoopAction.CONTINUE


def draw_input_row(terminal: TerminalController, rows: ScreenRows, state: InputState) -> None:
    terminal.clear_line(rows.input_row)
    terminal.write(PROMPT + state.text)
    terminal.flush()


def draw_command_echo(terminal: TerminalController, rows: ScreenRows, state: InputState) -> None:
    terminal.clear_line(rows.output_row)
    terminal.write(ECHO_PREFIX + (state.last_command or ""))
    terminal.flush()


def run_command_loop(
    terminal: TerminalController,
    state: InputState,
    rows: ScreenRows,
    read: Callable[[], str],
) -> None:
    """Redraw, read and dispatch keys until a terminating key or command."""
    while True:
        draw_input_row(terminal, rows, state)
        action = apply_key(state, read())
        if action is LoopAction.TERMINATE:
            logger.info("command loop terminated with %d history entries", len(state.history))
            return
        if action is LoopAction.SUBMITTED:
            logger.debug("submitted command %r", state.last_command)
            draw_command_echo(terminal, rows, state)
