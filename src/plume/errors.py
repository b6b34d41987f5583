"""Plume exception hierarchy.

Shared across the pattern engine, splitter, URL manager, and CLI so every
module raises and catches the same types.
"""

from typing import Any


class PlumeError(Exception):
    """Base for all plume-specific errors."""


class ConfigurationError(PlumeError):
    """Raised when ``UrlOptions`` or a hasher is configured with invalid values."""


class FormatError(PlumeError, ValueError):
    """A URL template or request path does not have the expected shape.

    Raised when a template is missing a placeholder, repeats one, names an
    unknown one, or places two placeholders with no literal between them.
    Also raised when a path does not match its compiled template.
    """


class InvalidOperationError(PlumeError):
    """The requested operation cannot produce a valid result.

    Raised by ``UrlManager.get_urls`` when a single asset's composite URL
    already exceeds the configured maximum length.
    """


class GroupOverflowError(InvalidOperationError):
    """An item does not fit even in an otherwise empty group."""

    def __init__(self, item: Any, detail: str = "") -> None:
        self.item = item
        super().__init__(detail or f"{item!r} does not fit in an empty group")
