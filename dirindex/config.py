"""Persistent JSON config and resolved run options.

The config file supplies defaults for exclude patterns, hidden-file and
symlink handling, gitignore filtering, depth limit and page title. Loading is
defensive: a missing or malformed file, or values of the wrong type, fall back
to the built-in defaults.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path

from platformdirs import user_config_dir

logger = logging.getLogger(__name__)

APP_NAME = "dirindex"
CONFIG_FILENAME = "config.json"
DEFAULT_CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
CONFIG_PATH = DEFAULT_CONFIG_PATH

DEFAULT_MAX_DEPTH = 64
DEFAULT_TITLE = "Index"


@dataclass(frozen=True)
class IndexOptions:
    """Immutable settings for one generation run."""

    exclude: tuple[str, ...] = ()
    show_hidden: bool = False
    follow_symlinks: bool = False
    skip_gitignored: bool = False
    max_depth: int = DEFAULT_MAX_DEPTH
    title: str = DEFAULT_TITLE


def load_config(path: Path | None = None) -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    config_path = CONFIG_PATH if path is None else path
    try:
        data = json.loads(config_path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return {}
    except (OSError, ValueError) as exc:
        logger.warning("ignoring unreadable config %s: %s", config_path, exc)
        return {}
    if not isinstance(data, dict):
        logger.warning("ignoring config %s: top-level value is not an object", config_path)
        return {}
    return data


def _load_bool(data: dict[str, object], key: str, default: bool) -> bool:
    """Only explicit booleans are accepted."""
    value = data.get(key)
    return value if isinstance(value, bool) else default


def _load_patterns(data: dict[str, object]) -> tuple[str, ...]:
    """Read ``exclude`` as a list of non-empty glob strings; other items are dropped."""
    value = data.get("exclude")
    if not isinstance(value, list):
        return ()
    return tuple(item.strip() for item in value if isinstance(item, str) and item.strip())


def _load_max_depth(data: dict[str, object]) -> int:
    value = data.get("max_depth")
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        return DEFAULT_MAX_DEPTH
    return value


def _load_title(data: dict[str, object]) -> str:
    value = data.get("title")
    if not isinstance(value, str):
        return DEFAULT_TITLE
    stripped = value.strip()
    return stripped if stripped else DEFAULT_TITLE


def options_from_config(data: dict[str, object]) -> IndexOptions:
    """Normalize a raw config mapping into ``IndexOptions``."""
    return IndexOptions(
        exclude=_load_patterns(data),
        show_hidden=_load_bool(data, "show_hidden", False),
        follow_symlinks=_load_bool(data, "follow_symlinks", False),
        skip_gitignored=_load_bool(data, "skip_gitignored", False),
        max_depth=_load_max_depth(data),
        title=_load_title(data),
    )


def load_options(path: Path | None = None) -> IndexOptions:
    """Load config from ``path`` (default location when omitted) as options."""
    return options_from_config(load_config(path))


__all__ = [
    "APP_NAME",
    "CONFIG_PATH",
    "DEFAULT_CONFIG_PATH",
    "DEFAULT_MAX_DEPTH",
    "DEFAULT_TITLE",
    "IndexOptions",
    "load_config",
    "options_from_config",
    "load_options",
]
