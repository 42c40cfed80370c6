"""Domain datatypes for scanned directory listings."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from pathlib import Path


class EntryKind(str, enum.Enum):
    """Entry type as serialized into ``index.json``."""

    FILE = "file"
    DIRECTORY = "directory"


@dataclass(frozen=True)
class DirectoryEntry:
    """One file or subdirectory observed during a scan.

    ``size_bytes`` is only set for files. ``children`` is only meaningful for
    directories and stays empty when the entry is produced by the walker, since
    each directory is rendered from its own ``DirectoryIndex``. ``has_index`` is
    false for a directory the walker listed but did not index.
    """

    name: str
    kind: EntryKind
    mtime_ns: int
    size_bytes: int | None = None
    children: tuple["DirectoryEntry", ...] = ()
    has_index: bool = True

    @property
    def is_dir(self) -> bool:
        return self.kind is EntryKind.DIRECTORY


@dataclass(frozen=True)
class DirectoryIndex:
    """Rendering unit for one directory: its location plus sorted children."""

    path: Path
    relative_parts: tuple[str, ...]
    entries: tuple[DirectoryEntry, ...] = ()

    @property
    def is_root(self) -> bool:
        return not self.relative_parts

    @property
    def depth(self) -> int:
        return len(self.relative_parts)


def entry_sort_key(entry: DirectoryEntry) -> tuple[bool, str, str]:
    """Directories first, then case-folded name, then exact name for ties."""
    return (not entry.is_dir, entry.name.casefold(), entry.name)


__all__ = [
    "EntryKind",
    "DirectoryEntry",
    "DirectoryIndex",
    "entry_sort_key",
]
