"""Wren CLI — inspect a router's table, resolve paths, generate URLs.

Entry point registered as ``wren`` in ``pyproject.toml``::

    [project.scripts]
    wren = "wren.cli:main"
"""

import argparse
import sys


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``wren`` command."""
    parser = argparse.ArgumentParser(
        prog="wren",
        description="Wren — a client-side URL router.",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- wren routes ------------------------------------------------------
    routes_parser = subparsers.add_parser("routes", help="List registered routes")
    routes_parser.add_argument("router", help="Import string (e.g. myapp:router)")

    # -- wren match -------------------------------------------------------
    match_parser = subparsers.add_parser(
        "match", help="Resolve a path without invoking callbacks"
    )
    match_parser.add_argument("router", help="Import string (e.g. myapp:router)")
    match_parser.add_argument("path", help="Path to resolve, optionally with ?query")

    # -- wren url ---------------------------------------------------------
    url_parser = subparsers.add_parser("url", help="Generate the URL for a named route")
    url_parser.add_argument("router", help="Import string (e.g. myapp:router)")
    url_parser.add_argument("name", help="Route name")
    url_parser.add_argument(
        "params",
        nargs="*",
        metavar="key=value",
        help="Params for the route; leftovers become the query string",
    )

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "routes":
        from wren.cli._routes import run_routes

        run_routes(args)
    elif args.command == "match":
        from wren.cli._match import run_match

        run_match(args)
    elif args.command == "url":
        from wren.cli._url import run_url

        run_url(args)
