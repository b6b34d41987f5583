"""Bundle and composite URL generation.

``UrlManager`` turns a bundle name, or an ordered list of web files, into
the URLs the host serves them under, and parses composite URLs back into
their asset names. Both templates are compiled when the manager is
created, so a malformed template fails at startup rather than per request.
"""

import logging
from collections.abc import Callable, Iterable, Sequence
from typing import TypeAlias
from urllib.parse import quote, unquote

from plume.config import UrlOptions
from plume.errors import FormatError, GroupOverflowError, InvalidOperationError
from plume.hashing import Hasher
from plume.models import WebFile, WebFileType
from plume.urls.content import app_relative_path, content_path
from plume.urls.pattern import UrlPattern
from plume.urls.placeholders import ROOT_MARKER
from plume.urls.segments import FileSetUrl, ParsedUrlPath
from plume.urls.splitter import split_groups

logger = logging.getLogger("plume.urls")

# Asset names inside a composite Name slot are joined with this
NAME_SEPARATOR = "."

VersionSource: TypeAlias = str | Callable[[], str]


def encode_name(name: str) -> str:
    """Percent-encode *name* for the Name slot, including any separator dots.

    ``jquery.min`` becomes ``jquery%2Emin`` so a composite Name can always be
    split back into the tokens that were joined. ``unquote`` reverses it.
    """
    return quote(name, safe="").replace(NAME_SEPARATOR, "%2E")


def _joined_name(tokens: Sequence[str]) -> str:
    return NAME_SEPARATOR.join(encode_name(token) for token in tokens)


class UrlManager:
    """Builds and parses asset URLs.

    Holds only immutable state, so one instance can serve concurrent
    requests without locking.

    Usage::

        manager = UrlManager(
            HashlibHasher(length=8),
            version="42",
            options=UrlOptions(composite_file_path="sg", max_url_length=2048),
        )
        manager.get_url("site", ".css")
        # "/sb/site.css.v42"
        manager.get_urls([JavaScriptFile("a.js"), JavaScriptFile("b.js")], ".js")
        # [FileSetUrl(url="/sg/a.b.js.v42", key="…")]
    """

    __slots__ = ("_bundle_pattern", "_composite_pattern", "_hasher", "_version", "options")

    def __init__(
        self,
        hasher: Hasher,
        version: VersionSource,
        options: UrlOptions | None = None,
    ) -> None:
        self.options = options or UrlOptions()
        self._hasher = hasher
        self._version = version
        self._bundle_pattern = UrlPattern(self.options.bundle_url_template)
        self._composite_pattern = UrlPattern(self.options.composite_url_template)

    @property
    def version(self) -> str:
        """Current content version, read from the version source on each access."""
        if callable(self._version):
            return self._version()
        return self._version

    # ------------------------------------------------------------------
    # Building
    # ------------------------------------------------------------------

    def get_url(self, bundle_name: str, ext: str) -> str:
        """Return the URL of a named bundle."""
        url = self._bundle_pattern.render(
            path=self.options.bundle_file_path.strip("/"),
            name=encode_name(bundle_name),
            ext=ext,
            version=self.version,
        )
        return content_path(url, self.options.path_base)

    def get_urls(self, files: Iterable[WebFile], ext: str) -> list[FileSetUrl]:
        """Pack *files* into as few composite URLs as the length limit allows.

        Input order is preserved across and within groups. Each group's
        key is the hasher's output over the encoded Name slot, so tokens that
        contain dots never collide with the tokens they would split into.

        Raises ``InvalidOperationError`` if a single file's URL is
        already longer than ``max_url_length``.
        """
        version = self.version
        tokens = [f.name_token(ext) for f in files]

        try:
            groups = list(split_groups(tokens, lambda group: self._fits(group, ext, version)))
        except GroupOverflowError as exc:
            max_length = self.options.max_url_length
            logger.warning("Asset %r alone exceeds max_url_length=%s", exc.item, max_length)
            msg = (
                f"The URL for the single asset {exc.item!r} exceeds the maximum URL "
                f"length ({max_length}); shorten the asset path or raise max_url_length"
            )
            raise InvalidOperationError(msg) from exc

        results: list[FileSetUrl] = []
        for group in groups:
            key = self._hasher.hash(_joined_name(group))
            url = self._composite_url(group, ext, version)
            logger.debug("Composite group of %d asset(s): %s (key=%s)", len(group), url, key)
            results.append(FileSetUrl(url=url, key=key))
        return results

    def _composite_url(self, tokens: Sequence[str], ext: str, version: str) -> str:
        url = self._composite_pattern.render(
            path=self.options.composite_file_path.strip("/"),
            name=_joined_name(tokens),
            ext=ext,
            version=version,
        )
        return content_path(url, self.options.path_base)

    def _fits(self, tokens: Sequence[str], ext: str, version: str) -> bool:
        max_length = self.options.max_url_length
        if max_length is None:
            return True
        length = len(self._composite_url(tokens, ext, version))
        return length + self.options.url_length_padding <= max_length

    # ------------------------------------------------------------------
    # Parsing
    # ------------------------------------------------------------------

    def parse_path(self, path: str) -> ParsedUrlPath:
        """Recover version, asset type and name tokens from a composite path.

        Accepts the bare file name a route captures (``a.b.js.v1``), a
        root-relative path (``/sc/a.b.js.v1``) or an application-relative
        one (``~/sc/a.b.js.v1``).

        Raises ``FormatError`` if the path does not match the composite
        template or its extension is not a known asset type.
        """
        candidate = path.strip()
        if candidate.startswith(("/", ROOT_MARKER)):
            relative = app_relative_path(candidate, self.options.path_base)
            if relative is None:
                msg = f"{path!r} is outside the application path base {self.options.path_base!r}"
                raise FormatError(msg)
            values = self._composite_pattern.parse(relative)
            expected = self.options.composite_file_path.strip("/")
            if values["Path"] != expected:
                msg = f"{path!r} is not under the composite path {expected!r}"
                raise FormatError(msg)
        else:
            values = self._composite_pattern.parse_file_name(candidate)

        missing = [name for name in ("Name", "Ext", "Version") if name not in values]
        if missing:
            msg = (
                f"Composite template {self._composite_pattern.template!r} does not "
                f"carry {', '.join(missing)} in its file name"
            )
            raise FormatError(msg)

        web_type = WebFileType.from_extension(values["Ext"])
        if web_type is None:
            msg = f"{path!r} has unknown asset extension {values['Ext']!r}"
            raise FormatError(msg)

        names = tuple(unquote(token) for token in values["Name"].split(NAME_SEPARATOR) if token)
        if not names:
            msg = f"{path!r} does not name any assets"
            raise FormatError(msg)

        logger.debug(
            "Parsed %r: version=%s type=%s names=%d",
            path,
            values["Version"],
            web_type.value,
            len(names),
        )
        return ParsedUrlPath(version=values["Version"], web_type=web_type, names=names)
