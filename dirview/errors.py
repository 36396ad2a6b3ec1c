"""Error taxonomy for listing and terminal failures.

Core code never catches these; ``dirview.cli`` is the single place that turns
them into a process exit message.
"""

from __future__ import annotations

from pathlib import Path


class DirviewError(Exception):
    """Base class for all dirview failures."""


class FilesystemError(DirviewError):
    """An entry could not be read while building the listing."""

    def __init__(self, path: Path | str, message: str) -> None:
        super().__init__(f"{path}: {message}")
        self.path = Path(path)


class NotAFileError(FilesystemError):
    """Metadata describes neither a regular file nor a directory."""

    def __init__(self, path: Path | str) -> None:
        super().__init__(path, "not a regular file or directory")


class CycleDetectedError(FilesystemError):
    """A directory was reached twice on the same walk."""

    def __init__(self, path: Path | str) -> None:
        super().__init__(path, "directory cycle detected")


class TerminalError(DirviewError):
    """The terminal could not be queried or switched into raw mode."""
