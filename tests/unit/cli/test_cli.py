"""CLI argument, config-merge and exit-status tests.

Verifies how ``dirindex.cli.main`` picks the root, merges flags over the
config file, and maps run outcomes to exit codes.
"""

from __future__ import annotations

import io
import json
import os
import sys
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from dirindex import cli
from dirindex.config import IndexOptions
from dirindex.errors import AccessError
from dirindex.generate import GenerationReport


class CliTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp_config = tempfile.TemporaryDirectory()
        config_patch = mock.patch("dirindex.config.CONFIG_PATH", Path(self._tmp_config.name) / "config.json")
        config_patch.start()
        self.addCleanup(config_patch.stop)
        self.addCleanup(self._tmp_config.cleanup)

    def test_main_defaults_to_current_working_directory(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            previous_cwd = Path.cwd()
            try:
                os.chdir(root)
                with mock.patch.object(sys, "argv", ["dirindex", "-q"]):
                    cli.main()
            finally:
                os.chdir(previous_cwd)

            self.assertEqual((root / "index.json").read_bytes(), b'{"entries":[]}')
            self.assertTrue((root / "index.html").is_file())
            self.assertTrue((root / "_dirindex" / "index.css").is_file())

    def test_explicit_path_argument_wins_over_default(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            target = root / "site"
            target.mkdir()

            with mock.patch.object(sys, "argv", ["dirindex", "-q", str(target)]):
                cli.main(default_path=root)

            self.assertTrue((target / "index.json").is_file())
            self.assertFalse((root / "index.json").exists())

    def test_missing_root_exits_with_message(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            missing = Path(tmp) / "missing"
            with mock.patch.object(sys, "argv", ["dirindex", str(missing)]):
                with self.assertRaises(SystemExit) as exc_info:
                    cli.main()

            self.assertEqual(str(exc_info.exception), f"Path not found: {missing}")

    def test_flags_override_config_and_extend_excludes(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            config_path = root / "custom.json"
            config_path.write_text(
                json.dumps({"exclude": ["*.tmp"], "show_hidden": True, "title": "Mirror", "max_depth": 9}),
                encoding="utf-8",
            )
            report = GenerationReport(root=root)

            argv = [
                "dirindex",
                str(root),
                "--config",
                str(config_path),
                "--exclude",
                "*.bak",
                "--no-show-hidden",
                "--follow-symlinks",
                "--max-depth",
                "2",
            ]
            with mock.patch.object(sys, "argv", argv), mock.patch(
                "dirindex.cli.generate_indexes", return_value=report
            ) as generate:
                cli.main()

            generate.assert_called_once()
            called_root, options = generate.call_args.args
            self.assertEqual(called_root, root)
            self.assertEqual(
                options,
                IndexOptions(
                    exclude=("*.tmp", "*.bak"),
                    show_hidden=False,
                    follow_symlinks=True,
                    skip_gitignored=False,
                    max_depth=2,
                    title="Mirror",
                ),
            )

    def test_partial_failure_exits_with_status_one(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            report = GenerationReport(root=root, warnings=[AccessError(root / "locked", "cannot list directory")])

            with mock.patch.object(sys, "argv", ["dirindex", "-q", str(root)]), mock.patch(
                "dirindex.cli.generate_indexes", return_value=report
            ):
                with self.assertRaises(SystemExit) as exc_info:
                    cli.main()

            self.assertEqual(exc_info.exception.code, 1)

    def test_negative_max_depth_is_rejected(self) -> None:
        with mock.patch.object(sys, "argv", ["dirindex", "--max-depth", "-1"]), mock.patch("sys.stderr", io.StringIO()):
            with self.assertRaises(SystemExit) as exc_info:
                cli.main()

        self.assertEqual(exc_info.exception.code, 2)


if __name__ == "__main__":
    unittest.main()
