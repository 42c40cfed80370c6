"""HTML rendering of one directory listing.

Pages are fixed-format HTML5 built from escaped fragments. Directory rows link
to the subdirectory's own ``index.html``, file rows link to the file itself.
A directory the walker did not index is listed without a link.
Pages carry no generation timestamp, so unchanged trees render identically.
"""

from __future__ import annotations

from html import escape

from ..config import DEFAULT_TITLE
from ..layout import ASSETS_DIRNAME, INDEX_HTML_FILENAME, STYLESHEET_FILENAME
from ..tree_model.types import DirectoryEntry, DirectoryIndex
from .icons import ICON_PARENT, icon_for_entry
from .labels import (
    build_breadcrumbs,
    display_path,
    format_display_time,
    format_size,
    format_timestamp,
    href_component,
    relative_root_prefix,
    text_name,
)


def entry_href(entry: DirectoryEntry) -> str | None:
    """Relative link target for one listing row, ``None`` for an unindexed directory."""
    component = href_component(entry.name)
    if entry.is_dir:
        if not entry.has_index:
            return None
        return f"{component}/{INDEX_HTML_FILENAME}"
    return component


def _row(css_class: str, icon: str, href: str | None, label: str, size: str, modified: str, timestamp: str) -> str:
    time_cell = f'<time datetime="{timestamp}">{modified}</time>' if timestamp else ""
    if href is None:
        name_cell = f'<span class="icon icon-{icon}">{escape(label)}</span>'
    else:
        name_cell = f'<a class="icon icon-{icon}" href="{escape(href)}">{escape(label)}</a>'
    return (
        f'<tr class="{css_class}">'
        f'<td class="name">{name_cell}</td>'
        f'<td class="size">{escape(size)}</td>'
        f'<td class="modified">{time_cell}</td>'
        "</tr>"
    )


def _entry_row(entry: DirectoryEntry) -> str:
    label = text_name(entry.name) + ("/" if entry.is_dir else "")
    css_class = entry.kind.value
    if entry.is_dir and not entry.has_index:
        css_class += " unindexed"
    return _row(
        css_class,
        icon_for_entry(entry),
        entry_href(entry),
        label,
        format_size(entry.size_bytes),
        format_display_time(entry.mtime_ns),
        format_timestamp(entry.mtime_ns),
    )


def _breadcrumb_nav(index: DirectoryIndex) -> str:
    parts: list[str] = []
    for crumb in build_breadcrumbs(index.relative_parts):
        if crumb.href is None:
            parts.append(f'<span aria-current="page">{escape(crumb.label)}</span>')
        else:
            parts.append(f'<a href="{escape(crumb.href)}">{escape(crumb.label)}</a>')
    return f'<nav class="breadcrumbs">{"".join(parts)}</nav>'


def render_html_index(index: DirectoryIndex, title: str = DEFAULT_TITLE) -> bytes:
    """Render a browsable UTF-8 HTML page for ``index``.

    ``title`` prefixes the page title and heading, as in ``Index of /docs/``.
    """
    heading = f"{title} of {display_path(index.relative_parts)}"
    stylesheet_href = f"{relative_root_prefix(index.depth)}{ASSETS_DIRNAME}/{STYLESHEET_FILENAME}"

    rows: list[str] = []
    if not index.is_root:
        rows.append(_row("parent", ICON_PARENT, f"../{INDEX_HTML_FILENAME}", "../", "-", "", ""))
    rows.extend(_entry_row(entry) for entry in index.entries)

    lines = [
        "<!DOCTYPE html>",
        '<html lang="en">',
        "<head>",
        '<meta charset="utf-8">',
        '<meta name="viewport" content="width=device-width, initial-scale=1">',
        f"<title>{escape(heading)}</title>",
        f'<link rel="stylesheet" href="{escape(stylesheet_href)}">',
        "</head>",
        "<body>",
        _breadcrumb_nav(index),
        f"<h1>{escape(heading)}</h1>",
        '<table class="listing">',
        '<thead><tr><th class="name">Name</th><th class="size">Size</th><th class="modified">Last modified</th></tr></thead>',
        "<tbody>",
        *rows,
        "</tbody>",
        "</table>",
        "</body>",
        "</html>",
        "",
    ]
    return "\n".join(lines).encode("utf-8")


__all__ = ["entry_href", "render_html_index"]
