"""Domain model for scanned directory trees.

This package contains the non-rendering primitives:
- entry/index datatypes with deterministic ordering
- per-entry metadata collection
- the walker yielding one index per directory
"""

from __future__ import annotations

from .types import DirectoryEntry, DirectoryIndex, EntryKind, entry_sort_key
from .metadata import collect_entry, entry_from_stat
from .walk import WarningHandler, walk_directory_indexes

__all__ = [
    "EntryKind",
    "DirectoryEntry",
    "DirectoryIndex",
    "entry_sort_key",
    "entry_from_stat",
    "collect_entry",
    "WarningHandler",
    "walk_directory_indexes",
]
