"""Fixed names of everything the generator writes."""

from __future__ import annotations

INDEX_HTML_FILENAME = "index.html"
INDEX_JSON_FILENAME = "index.json"
OUTPUT_FILENAMES = frozenset({INDEX_HTML_FILENAME, INDEX_JSON_FILENAME})

# Shared assets live once at the scan root.
ASSETS_DIRNAME = "_dirindex"
STYLESHEET_FILENAME = "index.css"
