"""PatternSegment, FileSetUrl, and ParsedUrlPath frozen dataclasses."""

from dataclasses import dataclass

from plume.models import WebFileType


@dataclass(frozen=True, slots=True)
class PatternSegment:
    """A parsed segment of a URL template.

    Literal:     ``~/``      (is_placeholder=False)
    Placeholder: ``{Name}``  (is_placeholder=True, placeholder="Name")
    """

    value: str
    is_placeholder: bool = False
    placeholder: str | None = None


@dataclass(frozen=True, slots=True)
class FileSetUrl:
    """One composite URL and the key its asset group is cached under."""

    url: str
    key: str


@dataclass(frozen=True, slots=True)
class ParsedUrlPath:
    """Result of parsing a composite file path."""

    version: str
    web_type: WebFileType
    names: tuple[str, ...]
