"""Interactive session runtime: terminal control, key decoding, command loop."""

from __future__ import annotations

from .app import draw_listing, run_browser
from .command_loop import InputState, LoopAction, ScreenRows, apply_key, run_command_loop
from .keys import read_key
from .terminal import TerminalController

__all__ = [
    "InputState",
    "LoopAction",
    "ScreenRows",
    "TerminalController",
    "apply_key",
    "draw_listing",
    "read_key",
    "run_browser",
    "run_command_loop",
]
