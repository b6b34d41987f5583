"""Plume — URLs for bundled and composite web assets.

Builds the URLs that scripts and stylesheets are served under, packs
several assets behind one URL without exceeding a maximum length, and
parses those URLs back into asset names.

Basic usage::

    from plume import HashlibHasher, JavaScriptFile, UrlManager, UrlOptions

    manager = UrlManager(
        HashlibHasher(length=8),
        version="3",
        options=UrlOptions(max_url_length=2048),
    )
    manager.get_url("vendor", ".js")           # "/sb/vendor.js.v3"
    manager.get_urls([JavaScriptFile("a.js"), JavaScriptFile("b.js")], ".js")
    manager.parse_path("a.b.js.v3").names      # ("a", "b")

Template helpers (kida)::

    from plume.templating.integration import register_asset_globals
    register_asset_globals(env, manager)
"""

__version__ = "0.1.0-dev"
__all__ = [
    "ConfigurationError",
    "CssFile",
    "FileSetUrl",
    "FormatError",
    "HashlibHasher",
    "Hasher",
    "InvalidOperationError",
    "JavaScriptFile",
    "ParsedUrlPath",
    "PlumeError",
    "UrlManager",
    "UrlOptions",
    "UrlPattern",
    "WebFile",
    "WebFileType",
    "build_url",
    "split_groups",
]

# Public name -> defining module
_LAZY_IMPORTS: dict[str, str] = {
    "ConfigurationError": "plume.errors",
    "CssFile": "plume.models",
    "FileSetUrl": "plume.urls.segments",
    "FormatError": "plume.errors",
    "HashlibHasher": "plume.hashing",
    "Hasher": "plume.hashing",
    "InvalidOperationError": "plume.errors",
    "JavaScriptFile": "plume.models",
    "ParsedUrlPath": "plume.urls.segments",
    "PlumeError": "plume.errors",
    "UrlManager": "plume.urls.manager",
    "UrlOptions": "plume.config",
    "UrlPattern": "plume.urls.pattern",
    "WebFile": "plume.models",
    "WebFileType": "plume.models",
    "build_url": "plume.urls.pattern",
    "split_groups": "plume.urls.splitter",
}


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import plume`` fast while providing a clean top-level API.
    """
    module_name = _LAZY_IMPORTS.get(name)
    if module_name is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)

    import importlib

    return getattr(importlib.import_module(module_name), name)
