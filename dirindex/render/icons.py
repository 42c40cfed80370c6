"""Icon classes for listing rows, chosen by entry kind and file extension."""

from __future__ import annotations

from ..tree_model.types import DirectoryEntry

ICON_DIRECTORY = "directory"
ICON_PARENT = "parent"
ICON_BLANK = "blank"
ICON_DEFAULT = "text"

_EXTENSION_ICONS: dict[str, str] = {}


def _register(icon: str, *extensions: str) -> None:
    for extension in extensions:
        _EXTENSION_ICONS[extension] = icon


_register("archive", "zip", "tar", "tgz", "rar", "gz", "bz2", "xz", "7z", "zst")
_register("document", "doc", "docx", "odt", "rtf")
_register("spreadsheet", "xls", "xlsx", "ods", "csv")
_register("presentation", "ppt", "pptx", "odp")
_register("text", "txt", "text", "html", "htm", "md", "mdown", "markdown")
_register("pdf", "pdf", "ps")
_register("image", "jpg", "jpeg", "png", "gif", "tif", "tiff", "webp", "svg", "bmp", "ico")
_register("audio", "mp3", "wav", "m4a", "ogg", "flac")
_register("video", "wmv", "avi", "mp4", "webm", "mov", "qt", "mkv")
_register("code", "java", "js", "ts", "php", "py", "rs", "go", "c", "h", "cpp", "sh", "json", "xml", "yaml", "yml")


def icon_for_name(name: str) -> str:
    """Icon for a file name; files without an extension get the blank icon."""
    stem, dot, extension = name.rpartition(".")
    if not dot or not stem:
        return ICON_BLANK
    return _EXTENSION_ICONS.get(extension.lower(), ICON_DEFAULT)


def icon_for_entry(entry: DirectoryEntry) -> str:
    if entry.is_dir:
        return ICON_DIRECTORY
    return icon_for_name(entry.name)


__all__ = [
    "ICON_BLANK",
    "ICON_DEFAULT",
    "ICON_DIRECTORY",
    "ICON_PARENT",
    "icon_for_entry",
    "icon_for_name",
]
