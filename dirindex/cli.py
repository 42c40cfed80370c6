"""Command-line front door for dirindex.

Parses CLI options, merges them over the persisted config, and runs the
index pipeline on the target directory. Exits non-zero when anything was
skipped or could not be written.
"""

from __future__ import annotations

import argparse
import dataclasses
import logging
import sys
from pathlib import Path

from .config import load_options
from .errors import NotFoundError
from .generate import GenerationReport, generate_indexes

LOG_FORMAT = "%(levelname)s: %(message)s"


def _nonnegative_int(value: str) -> int:
    """argparse type for non-negative integer values."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed < 0:
        raise argparse.ArgumentTypeError("value must be >= 0")
    return parsed


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dirindex",
        description="Write index.html and index.json listings into every directory of a tree.",
    )
    parser.add_argument("path", nargs="?", default=None, help="Root directory. Defaults to current directory.")
    parser.add_argument(
        "--exclude",
        action="append",
        default=[],
        metavar="PATTERN",
        help="Glob matched against entry names and root-relative paths. Repeatable.",
    )
    parser.add_argument(
        "--show-hidden",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="List entries whose name starts with a dot.",
    )
    parser.add_argument(
        "--follow-symlinks",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Follow symbolic links (skipped by default).",
    )
    parser.add_argument(
        "--skip-gitignored",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Leave out paths ignored by git.",
    )
    parser.add_argument("--max-depth", type=_nonnegative_int, default=None, help="Deepest directory level to index.")
    parser.add_argument("--title", default=None, help='Heading prefix, as in "<TITLE> of /path/".')
    parser.add_argument("--config", type=Path, default=None, metavar="PATH", help="Config file to load defaults from.")
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("-v", "--verbose", action="store_true", help="Log every directory written.")
    verbosity.add_argument("-q", "--quiet", action="store_true", help="Only log errors.")
    return parser


def _configure_logging(verbose: bool, quiet: bool) -> None:
    level = logging.WARNING
    if verbose:
        level = logging.INFO
    elif quiet:
        level = logging.ERROR
    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr)


def _print_summary(report: GenerationReport) -> None:
    print(
        f"Indexed {len(report.directories_indexed)} directories under {report.root}"
        f" ({len(report.warnings)} warnings, {len(report.write_failures)} write failures)",
        file=sys.stderr,
    )
    for failure in report.write_failures:
        print(f"  failed: {failure}", file=sys.stderr)


def main(default_path: Path | None = None) -> None:
    """Parse CLI arguments and generate indexes for the chosen root.

    ``default_path`` is primarily for tests; when omitted the current working
    directory is used. Raises ``SystemExit`` with status 1 when the root is
    missing or the run recorded warnings or write failures.
    """
    args = build_parser().parse_args()
    _configure_logging(args.verbose, args.quiet)

    options = load_options(args.config)
    overrides: dict[str, object] = {}
    if args.exclude:
        overrides["exclude"] = options.exclude + tuple(args.exclude)
    for name in ("show_hidden", "follow_symlinks", "skip_gitignored", "max_depth", "title"):
        value = getattr(args, name)
        if value is not None:
            overrides[name] = value
    options = dataclasses.replace(options, **overrides)

    if default_path is None:
        default_path = Path.cwd()
    root = Path(args.path or default_path)

    try:
        report = generate_indexes(root, options)
    except NotFoundError as exc:
        raise SystemExit(f"Path not found: {exc.path}") from exc

    if not args.quiet:
        _print_summary(report)
    if report.exit_code:
        raise SystemExit(report.exit_code)


if __name__ == "__main__":
    main()
