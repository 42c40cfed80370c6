"""End-to-end pipeline: walk, render and write every directory index."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from .config import IndexOptions
from .errors import IndexerError, WriteError
from .render import render_html_index, render_json_index
from .tree_model import walk_directory_indexes
from .writer import write_assets, write_index_files

logger = logging.getLogger(__name__)


@dataclass
class GenerationReport:
    """Outcome of one run: indexed directories plus everything that went wrong."""

    root: Path
    directories_indexed: list[Path] = field(default_factory=list)
    warnings: list[IndexerError] = field(default_factory=list)
    write_failures: list[WriteError] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.warnings and not self.write_failures

    @property
    def exit_code(self) -> int:
        return 0 if self.ok else 1


def generate_indexes(root: Path, options: IndexOptions | None = None) -> GenerationReport:
    """Write ``index.html``/``index.json`` into ``root`` and every directory below it.

    ``NotFoundError`` for a missing root propagates. Unreadable directories and
    entries are recorded as warnings, failed writes as write failures; neither
    stops the remaining directories from being processed.
    """
    options = options or IndexOptions()
    report = GenerationReport(root=Path(root))

    def record_warning(exc: IndexerError) -> None:
        logger.warning("%s", exc)
        report.warnings.append(exc)

    indexes = walk_directory_indexes(report.root, options, on_warning=record_warning)
    report.root = report.root.resolve()

    try:
        write_assets(report.root)
    except WriteError as exc:
        logger.error("%s", exc)
        report.write_failures.append(exc)

    for index in indexes:
        html_bytes = render_html_index(index, title=options.title)
        json_bytes = render_json_index(index)
        try:
            write_index_files(index.path, html_bytes, json_bytes)
        except WriteError as exc:
            logger.error("%s", exc)
            report.write_failures.append(exc)
            continue
        logger.info("indexed %s (%d entries)", index.path, len(index.entries))
        report.directories_indexed.append(index.path)

    logger.debug(
        "finished %s: %d directories, %d warnings, %d write failures",
        report.root,
        len(report.directories_indexed),
        len(report.warnings),
        len(report.write_failures),
    )
    return report


__all__ = ["GenerationReport", "generate_indexes"]
