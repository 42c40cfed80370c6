"""Static directory index generator.

Writes an ``index.html`` and ``index.json`` listing into every directory of a
tree so it can be browsed after upload to a static file host.
"""

from __future__ import annotations

from .config import IndexOptions
from .errors import (
    AccessError,
    DepthLimitError,
    IndexerError,
    NotFoundError,
    OutsideRootError,
    StatError,
    WriteError,
)
from .generate import GenerationReport, generate_indexes

__version__ = "0.1.0"

__all__ = [
    "IndexOptions",
    "GenerationReport",
    "generate_indexes",
    "IndexerError",
    "NotFoundError",
    "AccessError",
    "StatError",
    "DepthLimitError",
    "OutsideRootError",
    "WriteError",
]
