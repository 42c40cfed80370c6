"""Entry metadata collection: one ``stat`` per entry, no side effects."""

from __future__ import annotations

import os
import stat as stat_module
from pathlib import Path

from ..errors import StatError
from .types import DirectoryEntry, EntryKind


def entry_from_stat(name: str, st: os.stat_result) -> DirectoryEntry:
    """Build a ``DirectoryEntry`` from an already obtained stat result."""
    if stat_module.S_ISDIR(st.st_mode):
        return DirectoryEntry(name=name, kind=EntryKind.DIRECTORY, mtime_ns=int(st.st_mtime_ns))
    return DirectoryEntry(
        name=name,
        kind=EntryKind.FILE,
        mtime_ns=int(st.st_mtime_ns),
        size_bytes=int(st.st_size),
    )


def collect_entry(path: Path, follow_symlinks: bool = False) -> DirectoryEntry:
    """Return the ``DirectoryEntry`` for ``path``.

    Without ``follow_symlinks`` a symlink is described by its own ``lstat``
    (and therefore reported as a file). Raises ``StatError`` when metadata
    cannot be read, including dangling links being followed.
    """
    try:
        st = os.stat(path, follow_symlinks=follow_symlinks)
    except OSError as exc:
        raise StatError(path, f"cannot read metadata ({exc.strerror or exc})") from exc
    return entry_from_stat(path.name, st)


__all__ = [
    "entry_from_stat",
    "collect_entry",
]
