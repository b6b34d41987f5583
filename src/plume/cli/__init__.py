"""Plume CLI — render templates, pack composite URLs, and parse paths.

Entry point registered as ``plume`` in ``pyproject.toml``::

    [project.scripts]
    plume = "plume.cli:main"
"""

import argparse
import sys

from plume.config import DEFAULT_URL_TEMPLATE


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``plume`` command."""
    parser = argparse.ArgumentParser(
        prog="plume",
        description="Plume — composite asset URLs for bundled scripts and stylesheets.",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- plume render -----------------------------------------------------
    render_parser = subparsers.add_parser("render", help="Render a URL template")
    render_parser.add_argument("template", help="Template, e.g. '~/{Path}/{Name}.{Ext}.v{Version}'")
    render_parser.add_argument("--path", required=True, help="Value for {Path}")
    render_parser.add_argument("--name", required=True, help="Value for {Name}")
    render_parser.add_argument("--ext", required=True, help="Value for {Ext}, e.g. .js")
    render_parser.add_argument("--version", required=True, help="Value for {Version}")

    # -- plume urls -------------------------------------------------------
    urls_parser = subparsers.add_parser("urls", help="Pack asset files into composite URLs")
    urls_parser.add_argument("files", nargs="+", help="Asset file paths in load order")
    urls_parser.add_argument("--ext", default=".js", help="Composite extension (default: .js)")
    urls_parser.add_argument("--version", default="1", help="Content version (default: 1)")
    urls_parser.add_argument(
        "--max-url-length",
        type=int,
        default=None,
        help="Maximum URL length (default: unbounded)",
    )
    urls_parser.add_argument("--path", default="sc", help="Composite route prefix (default: sc)")
    urls_parser.add_argument(
        "--template",
        default=DEFAULT_URL_TEMPLATE,
        help="Composite URL template",
    )

    # -- plume parse ------------------------------------------------------
    parse_parser = subparsers.add_parser("parse", help="Parse a composite URL path")
    parse_parser.add_argument("path", help="Composite file name or root-relative path")
    parse_parser.add_argument("--path-prefix", default="sc", help="Composite route prefix (default: sc)")
    parse_parser.add_argument(
        "--template",
        default=DEFAULT_URL_TEMPLATE,
        help="Composite URL template",
    )

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "render":
        from plume.cli._render import run_render

        run_render(args)
    elif args.command == "urls":
        from plume.cli._urls import run_urls

        run_urls(args)
    elif args.command == "parse":
        from plume.cli._parse import run_parse

        run_parse(args)
