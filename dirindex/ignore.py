"""Rules deciding which directory children are left out of listings."""

from __future__ import annotations

from dataclasses import dataclass
from fnmatch import fnmatchcase
from pathlib import Path

from .config import IndexOptions
from .gitignore import GitIgnoreMatcher, load_gitignore_matcher
from .layout import ASSETS_DIRNAME, OUTPUT_FILENAMES


@dataclass(frozen=True)
class IgnoreRules:
    """Visibility rules for one scan root.

    Generated files and the root assets directory are always hidden. Exclude
    patterns match either the entry name or its ``/``-joined path relative to
    the scan root.
    """

    exclude: tuple[str, ...] = ()
    show_hidden: bool = False
    gitignore: GitIgnoreMatcher | None = None

    @classmethod
    def for_root(cls, root: Path, options: IndexOptions) -> IgnoreRules:
        matcher = load_gitignore_matcher(root) if options.skip_gitignored else None
        return cls(exclude=options.exclude, show_hidden=options.show_hidden, gitignore=matcher)

    def is_excluded(self, relative_parts: tuple[str, ...]) -> bool:
        """Return whether the entry at ``relative_parts`` below the root must not be listed."""
        name = relative_parts[-1]
        if name in OUTPUT_FILENAMES:
            return True
        if len(relative_parts) == 1 and name == ASSETS_DIRNAME:
            return True
        if not self.show_hidden and name.startswith("."):
            return True
        if self.exclude:
            relative = "/".join(relative_parts)
            for pattern in self.exclude:
                if fnmatchcase(name, pattern) or fnmatchcase(relative, pattern):
                    return True
        if self.gitignore is not None and self.gitignore.is_ignored(relative_parts):
            return True
        return False


__all__ = ["IgnoreRules"]
