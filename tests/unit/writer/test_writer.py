"""Tests for persisting index files and shared assets."""

from __future__ import annotations

import os
import tempfile
import unittest
from pathlib import Path

from dirindex.errors import WriteError
from dirindex.writer import write_assets, write_index_files


class WriteIndexFilesTests(unittest.TestCase):
    def test_writes_both_files_with_fixed_names(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            directory = Path(tmp)

            write_index_files(directory, b"<html></html>", b'{"entries":[]}')

            self.assertEqual((directory / "index.html").read_bytes(), b"<html></html>")
            self.assertEqual((directory / "index.json").read_bytes(), b'{"entries":[]}')

    def test_overwrites_in_place_without_touching_directory_mtime(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            directory = Path(tmp)
            write_index_files(directory, b"first html, longer", b"first json, longer")
            inode_before = (directory / "index.html").stat().st_ino
            os.utime(directory, ns=(1_600_000_000_000_000_000, 1_600_000_000_000_000_000))

            write_index_files(directory, b"second", b"second")

            self.assertEqual((directory / "index.html").read_bytes(), b"second")
            self.assertEqual((directory / "index.json").read_bytes(), b"second")
            self.assertEqual((directory / "index.html").stat().st_ino, inode_before)
            self.assertEqual(directory.stat().st_mtime_ns, 1_600_000_000_000_000_000)

    def test_unwritable_target_raises_write_error(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            directory = Path(tmp)
            (directory / "index.html").mkdir()

            with self.assertRaises(WriteError) as exc_info:
                write_index_files(directory, b"html", b"json")

            self.assertEqual(exc_info.exception.path, directory / "index.html")
            self.assertIsInstance(exc_info.exception.__cause__, OSError)

    def test_missing_directory_raises_write_error(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            with self.assertRaises(WriteError):
                write_index_files(Path(tmp) / "gone", b"html", b"json")

    @unittest.skipUnless(hasattr(os, "symlink"), "symlinks unavailable")
    def test_refuses_to_write_through_symlink(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            directory = Path(tmp)
            outside = directory / "outside.txt"
            outside.write_text("user content", encoding="utf-8")
            (directory / "index.json").symlink_to(outside)

            with self.assertRaises(WriteError):
                write_index_files(directory, b"html", b"json")

            self.assertEqual(outside.read_text(encoding="utf-8"), "user content")


class WriteAssetsTests(unittest.TestCase):
    def test_writes_stylesheet_into_assets_directory(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)

            stylesheet = write_assets(root)
            write_assets(root)

            self.assertEqual(stylesheet, root / "_dirindex" / "index.css")
            css = stylesheet.read_text(encoding="utf-8")
            self.assertIn("table.listing", css)
            self.assertIn(".icon-directory::before", css)
            self.assertIn(".icon-parent::before", css)

    def test_assets_directory_blocked_by_file_raises_write_error(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            (root / "_dirindex").write_text("not a directory", encoding="utf-8")

            with self.assertRaises(WriteError):
                write_assets(root)


if __name__ == "__main__":
    unittest.main()
