"""Application-relative path resolution.

Templates render ``~/``-rooted paths. The host mounts the application at
a path base (``""`` for the site root, ``"/app"`` under a prefix), and
``~/`` resolves against it.
"""

from plume.urls.placeholders import ROOT_MARKER


def normalize_path_base(path_base: str) -> str:
    """Ensure a leading slash and strip trailing ones. Root normalizes to ``""``."""
    stripped = "/" + path_base.strip("/")
    return stripped if stripped != "/" else ""


def content_path(url: str, path_base: str = "") -> str:
    """Resolve an application-relative URL to a root-relative one.

    Examples::

        >>> content_path("~/sg/app.js.v1")
        '/sg/app.js.v1'
        >>> content_path("~/sg/app.js.v1", "/blog/")
        '/blog/sg/app.js.v1'
        >>> content_path("/already/rooted.js")
        '/already/rooted.js'
    """
    if not url.startswith(ROOT_MARKER):
        return url
    return f"{normalize_path_base(path_base)}/{url[len(ROOT_MARKER) :]}"


def app_relative_path(path: str, path_base: str = "") -> str | None:
    """Inverse of ``content_path``: ``/blog/sg/x`` -> ``~/sg/x``.

    Returns ``None`` when *path* is not under *path_base*.
    """
    if path.startswith(ROOT_MARKER):
        return path
    prefix = normalize_path_base(path_base) + "/"
    if not path.startswith(prefix):
        return None
    return ROOT_MARKER + path[len(prefix) :]
