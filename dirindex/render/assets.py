"""Stylesheet shared by every generated page, written once into the assets directory."""

from __future__ import annotations

from .icons import ICON_BLANK, ICON_DEFAULT, ICON_DIRECTORY, ICON_PARENT

_ICON_GLYPHS = (
    (ICON_PARENT, "⤴"),
    (ICON_DIRECTORY, "\U0001f4c1"),
    (ICON_BLANK, "\U0001f4c4"),
    (ICON_DEFAULT, "\U0001f4c4"),
    ("archive", "\U0001f4e6"),
    ("document", "\U0001f4dd"),
    ("spreadsheet", "\U0001f4ca"),
    ("presentation", "\U0001f4fd"),
    ("pdf", "\U0001f4d1"),
    ("image", "\U0001f5bc"),
    ("audio", "\U0001f3b5"),
    ("video", "\U0001f3ac"),
    ("code", "\U0001f4bb"),
)

_BASE_STYLESHEET = """\
body {
  margin: 2rem auto;
  max-width: 60rem;
  padding: 0 1rem;
  font-family: system-ui, -apple-system, "Segoe UI", sans-serif;
  color: #222;
  background: #fff;
}
nav.breadcrumbs a, nav.breadcrumbs span {
  margin-right: 0.15rem;
}
h1 {
  font-size: 1.4rem;
  word-break: break-all;
}
table.listing {
  width: 100%;
  border-collapse: collapse;
}
table.listing th, table.listing td {
  padding: 0.3rem 0.6rem;
  text-align: left;
  border-bottom: 1px solid #eee;
}
table.listing td.size, table.listing th.size {
  text-align: right;
  white-space: nowrap;
}
table.listing td.modified {
  white-space: nowrap;
  color: #666;
}
a {
  color: #0b5cad;
  text-decoration: none;
}
a:hover {
  text-decoration: underline;
}
tr.unindexed td.name {
  color: #888;
}
.icon::before {
  display: inline-block;
  width: 1.6em;
}
"""


def build_stylesheet() -> str:
    """Return the CSS text, one ``::before`` glyph rule per icon class."""
    rules = [_BASE_STYLESHEET]
    for icon, glyph in _ICON_GLYPHS:
        rules.append(f'.icon-{icon}::before {{\n  content: "{glyph}";\n}}\n')
    return "".join(rules)


__all__ = ["build_stylesheet"]
