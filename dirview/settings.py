"""Runtime settings for one browser session.

Nothing here is persisted; every value comes from command-line options.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from . import __version__

DEFAULT_HISTORY_SIZE = 2
DEFAULT_TITLE = f"64MB File Explorer v{__version__}"


@dataclass(frozen=True)
class BrowserSettings:
    """Options that shape the listing and the command loop."""

    path: Path = field(default_factory=Path.cwd)
    history_size: int = DEFAULT_HISTORY_SIZE
    no_color: bool = False
    title: str = DEFAULT_TITLE

    def __post_init__(self) -> None:
        if self.history_size < 1:
            raise ValueError("history_size must be >= 1")
