"""Paths git reports as ignored below a scan root.

Git is asked once per run, from the root itself, so every reported path is
already ``/``-joined and relative to the root. The walker matches children by
their relative components and never touches the filesystem to do so.
"""

from __future__ import annotations

import logging
import shutil
import subprocess
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

GIT_IGNORED_QUERY = ("ls-files", "-z", "--others", "--ignored", "--exclude-standard", "--directory")


@dataclass(frozen=True)
class GitIgnoreMatcher:
    """Root-relative ignored paths.

    A directory in ``ignored`` hides everything below it as well.
    """

    ignored: frozenset[str]

    def is_ignored(self, relative_parts: tuple[str, ...]) -> bool:
        prefix = ""
        for part in relative_parts:
            prefix = f"{prefix}/{part}" if prefix else part
            if prefix in self.ignored:
                return True
        return False


def parse_ignored_paths(output: bytes) -> frozenset[str]:
    """Decode NUL-separated ``git ls-files`` output into relative paths.

    Directory entries come back with a trailing ``/``, which is dropped.
    Undecodable bytes map to the same surrogate escapes ``os.scandir`` uses.
    """
    paths = set()
    for raw in output.split(b"\x00"):
        rel = raw.decode("utf-8", errors="surrogateescape").rstrip("/")
        if rel:
            paths.add(rel)
    return frozenset(paths)


def load_gitignore_matcher(root: Path) -> GitIgnoreMatcher | None:
    """Ask git which paths under ``root`` are ignored.

    Returns ``None`` and logs a warning when git is missing or ``root`` is not
    inside a work tree.
    """
    if shutil.which("git") is None:
        logger.warning("git not found; gitignore rules are not applied")
        return None
    try:
        proc = subprocess.run(
            ["git", "-C", str(root), *GIT_IGNORED_QUERY],
            stdout=subprocess.PIPE,
            stderr=subprocess.DEVNULL,
            check=True,
        )
    except (OSError, subprocess.CalledProcessError) as exc:
        logger.warning("cannot read gitignore rules for %s (%s); they are not applied", root, exc)
        return None

    matcher = GitIgnoreMatcher(ignored=parse_ignored_paths(proc.stdout))
    logger.debug("gitignore matcher for %s: %d ignored paths", root, len(matcher.ignored))
    return matcher


__all__ = ["GIT_IGNORED_QUERY", "GitIgnoreMatcher", "parse_ignored_paths", "load_gitignore_matcher"]
