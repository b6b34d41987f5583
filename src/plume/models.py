"""Web asset models.

A ``WebFile`` is one physical script or stylesheet that may be packed
into a composite URL. Paths are opaque: by the time they reach the URL
layer they are usually already hashed or otherwise shortened.
"""

from dataclasses import dataclass
from enum import Enum


class WebFileType(Enum):
    """Kind of web asset, classified from its file extension."""

    JS = "js"
    CSS = "css"

    @property
    def extension(self) -> str:
        """Canonical extension including the leading dot (``.js``)."""
        return f".{self.value}"

    @classmethod
    def from_extension(cls, ext: str) -> "WebFileType | None":
        """Classify *ext* (``js``, ``.JS``, ``css`` …); ``None`` if unknown."""
        normalized = ext.lstrip(".").lower()
        for member in cls:
            if member.value == normalized:
                return member
        return None


@dataclass(frozen=True, slots=True)
class WebFile:
    """A single web asset."""

    file_path: str
    web_type: WebFileType

    def name_token(self, ext: str | None = None) -> str:
        """Return the path with its extension trimmed.

        ``ext`` defaults to the canonical extension of ``web_type``.
        Matching is case-insensitive; a path without the extension is
        returned unchanged.
        """
        suffix = ext if ext is not None else self.web_type.extension
        if suffix and self.file_path.lower().endswith(suffix.lower()):
            return self.file_path[: -len(suffix)]
        return self.file_path


def JavaScriptFile(file_path: str) -> WebFile:  # noqa: N802
    """Create a script ``WebFile``."""
    return WebFile(file_path, WebFileType.JS)


def CssFile(file_path: str) -> WebFile:  # noqa: N802
    """Create a stylesheet ``WebFile``."""
    return WebFile(file_path, WebFileType.CSS)
