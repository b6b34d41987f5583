"""``plume parse`` — show what a composite URL path refers to."""

import argparse
import sys

from plume.config import UrlOptions
from plume.errors import PlumeError
from plume.hashing import HashlibHasher
from plume.urls.manager import UrlManager


def run_parse(args: argparse.Namespace) -> None:
    """Parse ``args.path`` against the composite template and print its parts."""
    try:
        options = UrlOptions(
            composite_file_path=args.path_prefix,
            composite_url_template=args.template,
        )
        # Parsing never hashes or reads the version
        manager = UrlManager(HashlibHasher(), version="", options=options)
        parsed = manager.parse_path(args.path)
    except PlumeError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    print(f"version: {parsed.version}")
    print(f"type:    {parsed.web_type.value}")
    print("names:")
    for name in parsed.names:
        print(f"  {name}")
