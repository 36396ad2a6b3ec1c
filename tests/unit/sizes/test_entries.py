"""Tests for recursive size aggregation and directory listing."""

from __future__ import annotations

import os
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from dirview.errors import CycleDetectedError, FilesystemError, NotAFileError
from dirview.sizes import FileEntry, compute_size, list_entries


def _write_bytes(path: Path, size: int) -> None:
    path.write_bytes(b"x" * size)


class ComputeSizeTests(unittest.TestCase):
    def test_directory_total_sums_files_and_nested_directories(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            _write_bytes(root / "a.bin", 100)
            _write_bytes(root / "b.bin", 4000)
            sub = root / "sub"
            sub.mkdir()
            _write_bytes(sub / "c.bin", 900)

            self.assertEqual(compute_size(root), 5000)

    def test_regular_file_reports_own_length(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            target = Path(tmp) / "file.txt"
            _write_bytes(target, 42)
            self.assertEqual(compute_size(target), 42)

    def test_empty_directory_is_zero(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            self.assertEqual(compute_size(tmp), 0)

    def test_missing_path_raises_filesystem_error(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            missing = Path(tmp) / "gone"
            with self.assertRaises(FilesystemError) as ctx:
                compute_size(missing)
            self.assertEqual(ctx.exception.path, missing)

    @unittest.skipUnless(hasattr(os, "mkfifo"), "requires mkfifo")
    def test_special_node_raises_not_a_file(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            fifo = Path(tmp) / "pipe"
            os.mkfifo(fifo)
            with self.assertRaises(NotAFileError):
                compute_size(fifo)

    def test_nested_symlinks_are_not_followed(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            inner = root / "inner"
            inner.mkdir()
            _write_bytes(inner / "data.bin", 10)
            loop = inner / "loop"
            loop.symlink_to(root, target_is_directory=True)

            expected = 10 + os.lstat(loop).st_size
            self.assertEqual(compute_size(inner), expected)

    def test_unreadable_nested_directory_aborts_with_its_path(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            _write_bytes(root / "top.bin", 10)
            locked = root / "locked"
            locked.mkdir()
            real_scandir = os.scandir

            def _scandir(path):
                if Path(path) == locked:
                    raise PermissionError(13, "Permission denied", str(path))
                return real_scandir(path)

            with mock.patch("dirview.sizes.entries.os.scandir", side_effect=_scandir):
                with self.assertRaises(FilesystemError) as ctx:
                    compute_size(root)

            self.assertEqual(ctx.exception.path, locked)
            self.assertIn("Permission denied", str(ctx.exception))

    def test_child_stat_failure_aborts_with_child_path(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            _write_bytes(root / "vanishing.bin", 10)
            real_scandir = os.scandir

            class _VanishingEntry:
                def __init__(self, entry: os.DirEntry) -> None:
                    self.path = entry.path
                    self.name = entry.name

                def stat(self, follow_symlinks: bool = True) -> os.stat_result:
                    raise FileNotFoundError(2, "No such file or directory", self.path)

            class _VanishingScandir:
                def __init__(self, path) -> None:
                    self._inner = real_scandir(path)

                def __enter__(self):
                    return (_VanishingEntry(entry) for entry in self._inner)

                def __exit__(self, *exc_info) -> None:
                    self._inner.close()

            with mock.patch("dirview.sizes.entries.os.scandir", _VanishingScandir):
                with self.assertRaises(FilesystemError) as ctx:
                    compute_size(root)

            self.assertEqual(ctx.exception.path, root / "vanishing.bin")

    def test_revisited_directory_raises_cycle_detected(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            (root / "child").mkdir()
            root_stat = os.stat(root)
            real_scandir = os.scandir

            class _LoopingEntry:
                def __init__(self, entry: os.DirEntry) -> None:
                    self.path = entry.path
                    self.name = entry.name

                def stat(self, follow_symlinks: bool = True) -> os.stat_result:
                    return root_stat

            class _LoopingScandir:
                def __init__(self, path) -> None:
                    self._inner = real_scandir(path)

                def __enter__(self):
                    return (_LoopingEntry(entry) for entry in self._inner)

                def __exit__(self, *exc_info) -> None:
                    self._inner.close()

            with mock.patch("dirview.sizes.entries.os.scandir", _LoopingScandir):
                with self.assertRaises(CycleDetectedError):
                    compute_size(root)


class ListEntriesTests(unittest.TestCase):
    def test_lists_direct_children_with_resolved_sizes(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            _write_bytes(root / "notes.txt", 12)
            docs = root / "docs"
            docs.mkdir()
            _write_bytes(docs / "one.md", 30)
            (docs / "deeper").mkdir()
            _write_bytes(docs / "deeper" / "two.md", 70)

            entries = list_entries(root)

            self.assertEqual(
                sorted(entries, key=lambda entry: entry.name),
                [
                    FileEntry(name="docs", size=100, is_dir=True),
                    FileEntry(name="notes.txt", size=12, is_dir=False),
                ],
            )

    def test_preserves_directory_read_order(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            for name in ("zeta", "alpha", "mid"):
                _write_bytes(root / name, 1)

            with os.scandir(root) as it:
                scandir_order = [entry.name for entry in it]

            self.assertEqual([entry.name for entry in list_entries(root)], scandir_order)

    def test_empty_directory_lists_nothing(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            self.assertEqual(list_entries(tmp), ())

    def test_unreadable_child_aborts_listing(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            _write_bytes(root / "ok.txt", 5)
            with mock.patch(
                "dirview.sizes.entries.compute_size",
                side_effect=FilesystemError(root / "ok.txt", "Permission denied"),
            ):
                with self.assertRaises(FilesystemError):
                    list_entries(root)

    def test_missing_directory_raises_filesystem_error(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            with self.assertRaises(FilesystemError):
                list_entries(Path(tmp) / "absent")


if __name__ == "__main__":
    unittest.main()
