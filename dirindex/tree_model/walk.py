"""Directory traversal producing one ``DirectoryIndex`` per directory.

Traversal is depth-first post-order: every subdirectory is yielded before its
parent, and a directory's own entries are stat'ed only after its
subdirectories were yielded. A consumer that writes index files between
iterations therefore sees subdirectory mtimes that already include those
writes, which keeps repeated runs byte-identical.

The walk keeps its own stack of open directories, so tree depth is bounded
only by ``max_depth`` and not by the interpreter's recursion limit.
"""

from __future__ import annotations

import dataclasses
import logging
import os
from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from pathlib import Path

from ..config import IndexOptions
from ..errors import AccessError, DepthLimitError, IndexerError, NotFoundError, OutsideRootError, StatError
from ..ignore import IgnoreRules
from .metadata import collect_entry
from .types import DirectoryEntry, DirectoryIndex, entry_sort_key

logger = logging.getLogger(__name__)

WarningHandler = Callable[[IndexerError], None]


def _log_warning(exc: IndexerError) -> None:
    logger.warning("%s", exc)


def _name_sort_key(name: str) -> tuple[str, str]:
    return (name.casefold(), name)


def _scan_children(directory: Path) -> list[os.DirEntry[str]]:
    """List raw children of ``directory``; raises ``AccessError`` when unreadable."""
    try:
        with os.scandir(directory) as entries:
            return list(entries)
    except OSError as exc:
        raise AccessError(directory, f"cannot list directory ({exc.strerror or exc})") from exc


def _child_is_dir(child: os.DirEntry[str], follow_symlinks: bool) -> bool:
    try:
        return child.is_dir(follow_symlinks=follow_symlinks)
    except OSError:
        return False


@dataclass
class _OpenDirectory:
    """A directory whose subdirectories are still being walked."""

    path: Path
    parts: tuple[str, ...]
    listed: list[str]
    # Reverse-sorted, so ``pop()`` yields the next name in listing order.
    pending: list[str]
    linked_dirs: frozenset[str]
    unindexed: set[str] = field(default_factory=set)


def walk_directory_indexes(
    root: Path,
    options: IndexOptions | None = None,
    on_warning: WarningHandler | None = None,
) -> Iterator[DirectoryIndex]:
    """Validate ``root`` and return a lazy iterator of directory indexes.

    Raises ``NotFoundError`` immediately when ``root`` is missing or not a
    directory. Recoverable problems (``AccessError``, ``StatError``,
    ``DepthLimitError``, ``OutsideRootError``) are passed to ``on_warning``,
    which logs them when omitted.

    Symlinks are skipped unless ``options.follow_symlinks`` is set. When
    followed, a linked directory is only descended if it resolves inside the
    root and cannot be reached without links; each directory is descended at
    most once. Subdirectories that end up without an index of their own are
    listed with ``has_index=False``.
    """
    options = options or IndexOptions()
    warn = on_warning or _log_warning
    root = Path(root)
    if not root.exists():
        raise NotFoundError(root, "directory not found")
    if not root.is_dir():
        raise NotFoundError(root, "not a directory")
    root = root.resolve()
    rules = IgnoreRules.for_root(root, options)
    return _DirectoryWalk(root, options, rules, warn).run()


class _DirectoryWalk:
    def __init__(self, root: Path, options: IndexOptions, rules: IgnoreRules, warn: WarningHandler) -> None:
        self.root = root
        self.options = options
        self.rules = rules
        self.warn = warn
        self.visited: set[Path] = {root}

    def run(self) -> Iterator[DirectoryIndex]:
        top = self._open(self.root, ())
        if top is None:
            return
        stack = [top]
        while stack:
            current = stack[-1]
            if current.pending:
                name = current.pending.pop()
                child = self._descend(current, name)
                if child is not None:
                    stack.append(child)
                continue
            stack.pop()
            yield self._finish(current)

    def _open(self, directory: Path, parts: tuple[str, ...]) -> _OpenDirectory | None:
        try:
            raw_children = _scan_children(directory)
        except AccessError as exc:
            self.warn(exc)
            return None

        listed: list[str] = []
        subdirectories: list[str] = []
        linked: set[str] = set()
        for child in raw_children:
            name = child.name
            if self.rules.is_excluded(parts + (name,)):
                continue
            is_link = child.is_symlink()
            if is_link and not self.options.follow_symlinks:
                logger.debug("skipping symlink %s", child.path)
                continue
            listed.append(name)
            if _child_is_dir(child, self.options.follow_symlinks):
                subdirectories.append(name)
                if is_link:
                    linked.add(name)

        subdirectories.sort(key=_name_sort_key, reverse=True)
        return _OpenDirectory(
            path=directory,
            parts=parts,
            listed=listed,
            pending=subdirectories,
            linked_dirs=frozenset(linked),
        )

    def _descend(self, parent: _OpenDirectory, name: str) -> _OpenDirectory | None:
        """Open the subdirectory ``name`` of ``parent``.

        Returns ``None`` when it is not walked from here. Names that are left
        without any index file go into ``parent.unindexed``.
        """
        child_path = parent.path / name
        child_parts = parent.parts + (name,)
        if len(child_parts) > self.options.max_depth:
            self.warn(DepthLimitError(child_path, f"deeper than max depth {self.options.max_depth}, not indexed"))
            parent.unindexed.add(name)
            return None
        if name in parent.linked_dirs:
            try:
                resolved = self._link_target(child_path)
            except IndexerError as exc:
                self.warn(exc)
                parent.unindexed.add(name)
                return None
            if self._reachable_without_links(resolved.relative_to(self.root).parts):
                logger.debug("not descending into %s, it is indexed as %s", child_path, resolved)
                return None
        elif self.options.follow_symlinks:
            resolved = child_path.resolve()
        else:
            resolved = None

        if resolved is not None:
            if resolved in self.visited:
                logger.debug("not descending into %s again via %s", resolved, child_path)
                return None
            self.visited.add(resolved)
        opened = self._open(child_path, child_parts)
        if opened is None:
            parent.unindexed.add(name)
        return opened

    def _link_target(self, link: Path) -> Path:
        """Resolve a directory link, which must point inside the root."""
        try:
            resolved = link.resolve(strict=True)
        except (OSError, RuntimeError) as exc:
            raise StatError(link, f"cannot resolve link ({exc})") from exc
        if not resolved.is_relative_to(self.root):
            raise OutsideRootError(link, f"link target {resolved} is outside the root, not indexed")
        return resolved

    def _reachable_without_links(self, target_parts: tuple[str, ...]) -> bool:
        """Return whether the plain walk reaches the root-relative ``target_parts``.

        Components of a resolved path are never links, so only the ignore rules
        and the depth limit can keep the walk away from it.
        """
        if len(target_parts) > self.options.max_depth:
            return False
        return all(
            not self.rules.is_excluded(target_parts[: depth + 1]) for depth in range(len(target_parts))
        )

    def _finish(self, directory: _OpenDirectory) -> DirectoryIndex:
        entries: list[DirectoryEntry] = []
        for name in directory.listed:
            try:
                entry = collect_entry(directory.path / name, follow_symlinks=self.options.follow_symlinks)
            except StatError as exc:
                self.warn(exc)
                continue
            if name in directory.unindexed and entry.is_dir:
                entry = dataclasses.replace(entry, has_index=False)
            entries.append(entry)
        entries.sort(key=entry_sort_key)
        return DirectoryIndex(path=directory.path, relative_parts=directory.parts, entries=tuple(entries))


__all__ = [
    "WarningHandler",
    "walk_directory_indexes",
]
