"""``plume urls`` — pack asset files into composite URLs.

Prints one ``URL  KEY`` line per composite group, in load order. Keys
are SHA-1 digests of the group's dot-joined asset names.
"""

import argparse
import sys

from plume.config import UrlOptions
from plume.errors import PlumeError
from plume.hashing import HashlibHasher
from plume.models import CssFile, JavaScriptFile, WebFileType
from plume.urls.manager import UrlManager


def run_urls(args: argparse.Namespace) -> None:
    """Split ``args.files`` into composite URLs and print them."""
    try:
        options = UrlOptions(
            composite_file_path=args.path,
            composite_url_template=args.template,
            max_url_length=args.max_url_length,
        )
        manager = UrlManager(HashlibHasher(), version=args.version, options=options)
        factory = CssFile if WebFileType.from_extension(args.ext) is WebFileType.CSS else JavaScriptFile
        entries = manager.get_urls([factory(path) for path in args.files], args.ext)
    except PlumeError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    for entry in entries:
        print(f"{entry.url}  {entry.key}")
