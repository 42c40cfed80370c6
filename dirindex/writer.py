"""Persist rendered indexes and shared assets next to the scanned content.

Files are overwritten in place rather than replaced, so re-running over an
unchanged tree leaves directory mtimes untouched.
"""

from __future__ import annotations

from pathlib import Path

from .errors import WriteError
from .layout import ASSETS_DIRNAME, INDEX_HTML_FILENAME, INDEX_JSON_FILENAME, STYLESHEET_FILENAME
from .render.assets import build_stylesheet


def _write_bytes(target: Path, payload: bytes) -> None:
    """Overwrite ``target`` with ``payload``; raises ``WriteError`` on failure."""
    if target.is_symlink():
        raise WriteError(target, "refusing to write through a symbolic link")
    try:
        with target.open("wb") as handle:
            handle.write(payload)
    except OSError as exc:
        raise WriteError(target, f"cannot write ({exc.strerror or exc})") from exc


def write_index_files(directory: Path, html_bytes: bytes, json_bytes: bytes) -> None:
    """Write ``index.json`` then ``index.html`` into ``directory``."""
    _write_bytes(directory / INDEX_JSON_FILENAME, json_bytes)
    _write_bytes(directory / INDEX_HTML_FILENAME, html_bytes)


def write_assets(root: Path) -> Path:
    """Write the shared stylesheet under ``root`` and return its path."""
    assets_dir = root / ASSETS_DIRNAME
    try:
        assets_dir.mkdir(exist_ok=True)
    except OSError as exc:
        raise WriteError(assets_dir, f"cannot create assets directory ({exc.strerror or exc})") from exc
    stylesheet = assets_dir / STYLESHEET_FILENAME
    _write_bytes(stylesheet, build_stylesheet().encode("utf-8"))
    return stylesheet


__all__ = ["write_index_files", "write_assets"]
