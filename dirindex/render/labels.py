"""Text helpers shared by the renderers: names, sizes, timestamps, breadcrumbs."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from urllib.parse import quote

from ..layout import INDEX_HTML_FILENAME

_SIZE_UNITS = ("KiB", "MiB", "GiB", "TiB", "PiB")


def text_name(name: str) -> str:
    """Return ``name`` as valid Unicode text.

    Undecodable filename bytes (surrogate escapes) become U+FFFD.
    """
    return name.encode("utf-8", errors="surrogateescape").decode("utf-8", errors="replace")


def href_component(name: str) -> str:
    """Percent-encode one path component, preserving the original filename bytes."""
    return quote(name.encode("utf-8", errors="surrogateescape"), safe="")


def format_size(size_bytes: int | None) -> str:
    """Human-readable binary size; ``-`` when there is no size (directories)."""
    if size_bytes is None:
        return "-"
    if size_bytes < 1024:
        return f"{size_bytes} B"
    value = size_bytes / 1024.0
    unit_idx = 0
    while value >= 1024.0 and unit_idx < len(_SIZE_UNITS) - 1:
        value /= 1024.0
        unit_idx += 1
    return f"{value:.1f} {_SIZE_UNITS[unit_idx]}"


def _utc_datetime(mtime_ns: int) -> datetime:
    seconds, remainder_ns = divmod(mtime_ns, 1_000_000_000)
    return datetime.fromtimestamp(seconds, tz=timezone.utc).replace(microsecond=remainder_ns // 1_000)


def format_timestamp(mtime_ns: int) -> str:
    """ISO-8601 UTC timestamp with microseconds, e.g. ``2024-05-01T12:00:00.000000Z``."""
    return _utc_datetime(mtime_ns).strftime("%Y-%m-%dT%H:%M:%S.%fZ")


def format_display_time(mtime_ns: int) -> str:
    return _utc_datetime(mtime_ns).strftime("%Y-%m-%d %H:%M")


def display_path(relative_parts: tuple[str, ...]) -> str:
    """Site-absolute directory path shown in titles, e.g. ``/docs/guides/``."""
    return "/" + "".join(f"{text_name(part)}/" for part in relative_parts)


def relative_root_prefix(depth: int) -> str:
    """Relative URL prefix from a directory ``depth`` levels down back to the root."""
    return "../" * depth


@dataclass(frozen=True)
class Breadcrumb:
    """One segment of the page heading; ``href`` is ``None`` for the current directory."""

    label: str
    href: str | None


def build_breadcrumbs(relative_parts: tuple[str, ...]) -> list[Breadcrumb]:
    """Return root-to-current breadcrumbs with links relative to the current directory."""
    depth = len(relative_parts)
    crumbs = [Breadcrumb(label="/", href=None if depth == 0 else relative_root_prefix(depth) + INDEX_HTML_FILENAME)]
    for idx, part in enumerate(relative_parts):
        levels_up = depth - idx - 1
        href = None if levels_up == 0 else relative_root_prefix(levels_up) + INDEX_HTML_FILENAME
        crumbs.append(Breadcrumb(label=f"{text_name(part)}/", href=href))
    return crumbs


__all__ = [
    "Breadcrumb",
    "build_breadcrumbs",
    "display_path",
    "format_display_time",
    "format_size",
    "format_timestamp",
    "href_component",
    "relative_root_prefix",
    "text_name",
]
