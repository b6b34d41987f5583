"""URL template placeholders.

The four tokens every asset URL template must contain, with the regex
each one captures when a URL is parsed back against its template.
"""

import re

ROOT_MARKER = "~/"

# Matches any ``{Token}`` in a template, known or not
TOKEN_RE = re.compile(r"\{([^{}/]*)\}")

# (regex_pattern, description) for each placeholder, in canonical order
PLACEHOLDERS: dict[str, tuple[str, str]] = {
    "Path": (r".+?", "route prefix, may span several segments"),
    "Name": (r"[^/]+", "asset name or dot-joined name tokens"),
    "Ext": (r"[^./]+", "file extension without its leading dot"),
    "Version": (r"[^/]*?", "content version, may be empty"),
}


def placeholder_regex(name: str) -> str:
    """Return the capturing regex for placeholder *name*.

    Raises ``KeyError`` if *name* is not a registered placeholder.
    """
    pattern, _ = PLACEHOLDERS[name]
    return f"(?P<{name}>{pattern})"
