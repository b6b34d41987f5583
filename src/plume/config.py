"""URL configuration.

UrlOptions is a frozen dataclass: immutable after creation, IDE-autocompletable,
no string-key dict lookups.
"""

from dataclasses import dataclass

from plume.errors import ConfigurationError

DEFAULT_URL_TEMPLATE = "~/{Path}/{Name}.{Ext}.v{Version}"


@dataclass(frozen=True, slots=True)
class UrlOptions:
    """URL generation options. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        options = UrlOptions(composite_file_path="sg", max_url_length=2048)
    """

    # Route prefixes substituted into {Path}
    bundle_file_path: str = "sb"
    composite_file_path: str = "sc"

    # Templates (validated when a UrlManager is created)
    bundle_url_template: str = DEFAULT_URL_TEMPLATE
    composite_url_template: str = DEFAULT_URL_TEMPLATE

    # Limits
    max_url_length: int | None = None  # None = unbounded
    url_length_padding: int = 8  # Reserved for whatever the host prefixes to the URL

    # Application mount point that "~/" resolves against (e.g. "/app")
    path_base: str = ""

    def __post_init__(self) -> None:
        if self.max_url_length is not None and self.max_url_length <= 0:
            msg = f"max_url_length must be positive or None, got {self.max_url_length!r}"
            raise ConfigurationError(msg)
        if self.url_length_padding < 0:
            msg = f"url_length_padding must not be negative, got {self.url_length_padding!r}"
            raise ConfigurationError(msg)
        for name in ("bundle_file_path", "composite_file_path"):
            value = getattr(self, name)
            if not value.strip("/"):
                msg = f"{name} must name a path segment, got {value!r}"
                raise ConfigurationError(msg)
