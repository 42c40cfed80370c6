"""Error taxonomy for index generation.

``NotFoundError`` is fatal. ``AccessError``, ``StatError``, ``DepthLimitError``
and ``OutsideRootError`` are recoverable scan problems reported as warnings.
``WriteError`` fails one directory's index and is aggregated by the pipeline.
"""

from __future__ import annotations

from pathlib import Path


class IndexerError(Exception):
    """Base class for all index-generation failures tied to one path."""

    def __init__(self, path: Path, message: str) -> None:
        super().__init__(f"{message}: {path}")
        self.path = path
        self.message = message


class NotFoundError(IndexerError):
    """Scan root is missing or is not a directory."""


class AccessError(IndexerError):
    """Directory exists but its contents cannot be listed."""


class StatError(IndexerError):
    """Metadata for one entry cannot be retrieved."""


class DepthLimitError(IndexerError):
    """Directory lies deeper than the configured depth limit and is not indexed."""


class OutsideRootError(IndexerError):
    """Followed symlink points outside the scan root; its target is not indexed."""


class WriteError(IndexerError):
    """Generated output cannot be written."""


__all__ = [
    "IndexerError",
    "NotFoundError",
    "AccessError",
    "StatError",
    "DepthLimitError",
    "OutsideRootError",
    "WriteError",
]
