"""JSON rendering of one directory listing, plus the matching decoder.

Documents look like ``{"entries":[{"name":..,"kind":..,"size":..,"modified":..}]}``
with that key order, compact separators and no trailing newline. ``size`` is
``null`` for directories.
"""

from __future__ import annotations

import json
from dataclasses import dataclass

from ..tree_model.types import DirectoryEntry, DirectoryIndex, EntryKind
from .labels import format_timestamp, text_name


@dataclass(frozen=True)
class JsonIndexRecord:
    """One decoded ``index.json`` entry."""

    name: str
    kind: EntryKind
    size: int | None
    modified: str


def entry_to_json(entry: DirectoryEntry) -> dict[str, object]:
    return {
        "name": text_name(entry.name),
        "kind": entry.kind.value,
        "size": None if entry.is_dir else entry.size_bytes,
        "modified": format_timestamp(entry.mtime_ns),
    }


def render_json_index(index: DirectoryIndex) -> bytes:
    """Serialize ``index.entries`` in listing order as UTF-8 JSON."""
    payload = {"entries": [entry_to_json(entry) for entry in index.entries]}
    return json.dumps(payload, ensure_ascii=False, separators=(",", ":")).encode("utf-8")


def decode_json_index(data: bytes | str) -> list[JsonIndexRecord]:
    """Parse an ``index.json`` document back into records.

    Raises ``ValueError`` when the document does not have the expected shape.
    """
    payload = json.loads(data)
    if not isinstance(payload, dict) or not isinstance(payload.get("entries"), list):
        raise ValueError("index document must be an object with an 'entries' list")

    records: list[JsonIndexRecord] = []
    for raw in payload["entries"]:
        if not isinstance(raw, dict):
            raise ValueError(f"malformed index entry: {raw!r}")
        name = raw.get("name")
        size = raw.get("size")
        modified = raw.get("modified")
        if not isinstance(name, str) or not isinstance(modified, str):
            raise ValueError(f"malformed index entry: {raw!r}")
        if size is not None and (isinstance(size, bool) or not isinstance(size, int)):
            raise ValueError(f"malformed index entry size: {raw!r}")
        records.append(
            JsonIndexRecord(
                name=name,
                kind=EntryKind(raw.get("kind")),
                size=size,
                modified=modified,
            )
        )
    return records


__all__ = [
    "JsonIndexRecord",
    "entry_to_json",
    "render_json_index",
    "decode_json_index",
]
