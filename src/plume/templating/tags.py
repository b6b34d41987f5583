"""Asset tag helpers for kida templates.

Exposed as template globals by ``register_asset_globals``. Each helper
goes through the bound ``UrlManager``, so templates never hand-build
bundle or composite URLs.
"""

import html
from collections.abc import Callable, Sequence
from typing import Any

from kida.template import Markup

from plume.models import CssFile, JavaScriptFile, WebFile, WebFileType
from plume.urls.manager import UrlManager


def script_tag(src: str) -> Markup:
    """Build a ``<script>`` tag for *src* with the attribute escaped.

    Example:
        {{ script_tag("/sc/app.js.v3") }}
        → <script src="/sc/app.js.v3"></script>
    """
    return Markup(f'<script src="{html.escape(src, quote=True)}"></script>')


def style_tag(href: str) -> Markup:
    """Build a stylesheet ``<link>`` tag for *href* with the attribute escaped."""
    return Markup(f'<link href="{html.escape(href, quote=True)}" rel="stylesheet">')


def _as_files(paths: str | Sequence[str], factory: Callable[[str], WebFile]) -> list[WebFile]:
    if isinstance(paths, str):
        paths = [paths]
    return [factory(path) for path in paths]


class AssetHelpers:
    """Template globals bound to one ``UrlManager``.

    Usage in a template::

        {{ script_tags(["jquery.js", "app.js"]) }}
        {{ style_tags("site.css") }}
        <link rel="preload" href="{{ bundle_url('vendor', '.js') }}" as="script">
    """

    __slots__ = ("_manager",)

    def __init__(self, manager: UrlManager) -> None:
        self._manager = manager

    def bundle_url(self, name: str, ext: str) -> str:
        """URL of a named bundle."""
        return self._manager.get_url(name, ext)

    def composite_urls(self, paths: str | Sequence[str], ext: str = ".js") -> list[str]:
        """Composite URLs for *paths*, one per group, in load order."""
        web_type = WebFileType.from_extension(ext) or WebFileType.JS
        factory = CssFile if web_type is WebFileType.CSS else JavaScriptFile
        return [entry.url for entry in self._manager.get_urls(_as_files(paths, factory), ext)]

    def script_tags(self, paths: str | Sequence[str]) -> Markup:
        """One ``<script>`` tag per composite group of *paths*."""
        urls = self.composite_urls(paths, WebFileType.JS.extension)
        return Markup("\n".join(script_tag(url) for url in urls))

    def style_tags(self, paths: str | Sequence[str]) -> Markup:
        """One stylesheet ``<link>`` tag per composite group of *paths*."""
        urls = self.composite_urls(paths, WebFileType.CSS.extension)
        return Markup("\n".join(style_tag(url) for url in urls))

    def as_globals(self) -> dict[str, Any]:
        """Name → callable mapping for registration on an environment."""
        return {
            "bundle_url": self.bundle_url,
            "composite_urls": self.composite_urls,
            "script_tags": self.script_tags,
            "style_tags": self.style_tags,
            "script_tag": script_tag,
            "style_tag": style_tag,
        }
