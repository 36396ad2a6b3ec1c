"""Filesystem walking for the directory listing.

Builds one ``FileEntry`` per direct child with its fully resolved byte total.
Any read failure aborts the whole listing; partial totals are never reported.
"""

from __future__ import annotations

import logging
import os
import stat
from dataclasses import dataclass
from pathlib import Path

from ..errors import CycleDetectedError, FilesystemError, NotAFileError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FileEntry:
    """One direct child of the browsed directory."""

    name: str
    size: int
    is_dir: bool


def compute_size(path: Path | str) -> int:
    """Return the total byte size of ``path``.

    Regular files report their own length. Directories report the sum over
    every descendant, where nested directories are recursed into and every
    other child contributes its ``lstat`` length. Symlinks below the top level
    are never followed.
    """
    target = Path(path)
    try:
        st = os.stat(target)
    except OSError as exc:
        raise FilesystemError(target, exc.strerror or str(exc)) from exc

    if stat.S_ISREG(st.st_mode):
        return int(st.st_size)
    if stat.S_ISDIR(st.st_mode):
        return _directory_size(target, (st.st_dev, st.st_ino), set())
    raise NotAFileError(target)


def _directory_size(directory: Path, key: tuple[int, int], active: set[tuple[int, int]]) -> int:
    if key in active:
        raise CycleDetectedError(directory)
    active.add(key)

    total = 0
    try:
        with os.scandir(directory) as children:
            for child in children:
                child_path = Path(child.path)
                try:
                    child_stat = child.stat(follow_symlinks=False)
                except OSError as exc:
                    raise FilesystemError(child_path, exc.strerror or str(exc)) from exc
                if stat.S_ISDIR(child_stat.st_mode):
                    total += _directory_size(child_path, (child_stat.st_dev, child_stat.st_ino), active)
                else:
                    total += int(child_stat.st_size)
    except OSError as exc:
        raise FilesystemError(directory, exc.strerror or str(exc)) from exc
    finally:
        active.discard(key)
    return total


def list_entries(directory: Path | str) -> tuple[FileEntry, ...]:
    """Return every direct child of ``directory`` in directory-read order."""
    root = Path(directory)
    entries: list[FileEntry] = []
    try:
        with os.scandir(root) as children:
            for child in children:
                try:
                    is_dir = child.is_dir()
                except OSError as exc:
                    raise FilesystemError(child.path, exc.strerror or str(exc)) from exc
                size = compute_size(child.path)
                logger.debug("sized %s: %d bytes", child.path, size)
                entries.append(FileEntry(name=child.name, size=size, is_dir=is_dir))
    except OSError as exc:
        raise FilesystemError(root, exc.strerror or str(exc)) from exc

    logger.info("listed %d entries under %s", len(entries), root)
    return tuple(entries)
