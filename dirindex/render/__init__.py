"""Renderers turning a ``DirectoryIndex`` into ``index.json`` / ``index.html`` bytes."""

from __future__ import annotations

from .assets import build_stylesheet
from .html_index import entry_href, render_html_index
from .json_index import JsonIndexRecord, decode_json_index, render_json_index

__all__ = [
    "build_stylesheet",
    "entry_href",
    "render_html_index",
    "JsonIndexRecord",
    "decode_json_index",
    "render_json_index",
]
