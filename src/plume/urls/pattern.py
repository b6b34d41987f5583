"""Compiled URL templates.

A template such as ``~/{Path}/{Name}.{Ext}.v{Version}`` is parsed once
into literal and placeholder segments. The same segments drive both
rendering and the inverse parse, so the adjacency rule lives in one place.
"""

import re

from plume.errors import FormatError
from plume.urls.placeholders import PLACEHOLDERS, ROOT_MARKER, TOKEN_RE, placeholder_regex
from plume.urls.segments import PatternSegment


def parse_pattern(template: str) -> list[PatternSegment]:
    """Parse and validate a URL template into segments.

    Examples::

        "~/{Path}/{Name}.{Ext}.v{Version}" -> [
            PatternSegment("~/"),
            PatternSegment("{Path}", is_placeholder=True, placeholder="Path"),
            PatternSegment("/"),
            ...
        ]

    Raises ``FormatError`` if the template does not start with ``~/``,
    names an unknown token, repeats or omits one of the four placeholders,
    or puts two placeholders next to each other.
    """
    stripped = template.strip()
    if not stripped.startswith(ROOT_MARKER):
        msg = f"URL template {stripped!r} must start with {ROOT_MARKER!r}"
        raise FormatError(msg)

    segments: list[PatternSegment] = []
    seen: set[str] = set()
    position = 0

    for match in TOKEN_RE.finditer(stripped):
        literal = stripped[position : match.start()]
        name = match.group(1)

        if literal:
            _check_literal(stripped, literal)
            segments.append(PatternSegment(value=literal))
        elif segments and segments[-1].is_placeholder:
            msg = (
                f"URL template {stripped!r} has no separator between "
                f"{{{segments[-1].placeholder}}} and {{{name}}}"
            )
            raise FormatError(msg)

        if name not in PLACEHOLDERS:
            msg = f"URL template {stripped!r} contains unknown token {{{name}}}"
            raise FormatError(msg)
        if name in seen:
            msg = f"URL template {stripped!r} contains {{{name}}} more than once"
            raise FormatError(msg)

        seen.add(name)
        segments.append(PatternSegment(value=match.group(0), is_placeholder=True, placeholder=name))
        position = match.end()

    tail = stripped[position:]
    if tail:
        _check_literal(stripped, tail)
        segments.append(PatternSegment(value=tail))

    missing = [name for name in PLACEHOLDERS if name not in seen]
    if missing:
        tokens = ", ".join(f"{{{name}}}" for name in missing)
        msg = f"URL template {stripped!r} is missing {tokens}"
        raise FormatError(msg)

    return segments


def _check_literal(template: str, literal: str) -> None:
    if "{" in literal or "}" in literal:
        msg = f"URL template {template!r} has an unbalanced brace in {literal!r}"
        raise FormatError(msg)


def _compile_regex(segments: tuple[PatternSegment, ...]) -> re.Pattern[str]:
    parts = [
        placeholder_regex(seg.placeholder or "") if seg.is_placeholder else re.escape(seg.value)
        for seg in segments
    ]
    return re.compile("".join(parts))


def _file_name_segments(segments: tuple[PatternSegment, ...]) -> tuple[PatternSegment, ...]:
    """Segments after the last ``/`` literal: the template's file-name part."""
    for index in range(len(segments) - 1, -1, -1):
        seg = segments[index]
        if not seg.is_placeholder and "/" in seg.value:
            remainder = seg.value.rsplit("/", 1)[1]
            head = (PatternSegment(value=remainder),) if remainder else ()
            return head + segments[index + 1 :]
    return segments


class UrlPattern:
    """A validated, compiled URL template.

    Usage::

        pattern = UrlPattern("~/{Path}/{Name}.{Ext}.v{Version}")
        pattern.render(path="sg", name="app", ext=".js", version="3")
        # "~/sg/app.js.v3"
        pattern.parse("~/sg/app.js.v3")
        # {"Path": "sg", "Name": "app", "Ext": "js", "Version": "3"}
    """

    __slots__ = ("_file_regex", "_regex", "segments", "template")

    def __init__(self, template: str) -> None:
        self.segments = tuple(parse_pattern(template))
        self.template = template.strip()
        self._regex = _compile_regex(self.segments)
        self._file_regex = _compile_regex(_file_name_segments(self.segments))

    def __repr__(self) -> str:
        return f"UrlPattern({self.template!r})"

    def render(self, *, path: str, name: str, ext: str, version: str) -> str:
        """Substitute the four values into the template.

        Values are inserted verbatim. One leading ``.`` is dropped from
        *ext* since the template supplies its own separators.
        """
        values = {
            "Path": path,
            "Name": name,
            "Ext": ext[1:] if ext.startswith(".") else ext,
            "Version": version,
        }
        return "".join(
            values[seg.placeholder or ""] if seg.is_placeholder else seg.value
            for seg in self.segments
        )

    def parse(self, candidate: str) -> dict[str, str]:
        """Extract placeholder values from a rendered URL.

        Raises ``FormatError`` if *candidate* does not match the template.
        """
        match = self._regex.fullmatch(candidate.strip())
        if match is None:
            msg = f"{candidate!r} does not match URL template {self.template!r}"
            raise FormatError(msg)
        return match.groupdict()

    def parse_file_name(self, candidate: str) -> dict[str, str]:
        """Extract placeholder values from the final path segment only.

        Only the placeholders that appear after the template's last ``/``
        are returned.

        Raises ``FormatError`` if *candidate* does not match.
        """
        match = self._file_regex.fullmatch(candidate.strip())
        if match is None:
            msg = f"{candidate!r} does not match the file name of URL template {self.template!r}"
            raise FormatError(msg)
        return match.groupdict()


def build_url(template: str, path: str, name: str, ext: str, version: str) -> str:
    """Validate *template* and render it in one step."""
    return UrlPattern(template).render(path=path, name=name, ext=ext, version=version)
