"""``plume render`` — render a URL template with literal values."""

import argparse
import sys

from plume.errors import FormatError
from plume.urls.pattern import build_url


def run_render(args: argparse.Namespace) -> None:
    """Validate ``args.template`` and print it rendered with the given values."""
    try:
        url = build_url(args.template, args.path, args.name, args.ext, args.version)
    except FormatError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc
    print(url)
