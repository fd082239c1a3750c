"""Routebook CLI — inspect route files, match paths, build URIs.

Entry point registered as ``routebook`` in ``pyproject.toml``::

    [project.scripts]
    routebook = "routebook.cli:main"
"""

import argparse
import logging
import sys


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``routebook`` command."""
    parser = argparse.ArgumentParser(
        prog="routebook",
        description="Routebook — compile YAML route tables, match paths, build URIs.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- routebook routes -------------------------------------------------
    routes_parser = subparsers.add_parser("routes", help="List routes in declaration order")
    routes_parser.add_argument("source", help="Route file or directory of route files")

    # -- routebook match --------------------------------------------------
    match_parser = subparsers.add_parser("match", help="Resolve a request path to a route")
    match_parser.add_argument("source", help="Route file or directory of route files")
    match_parser.add_argument("path", help="Request path (e.g. /user/101)")
    match_parser.add_argument(
        "-m",
        "--method",
        default="get",
        help="HTTP method (default: get)",
    )

    # -- routebook uri ----------------------------------------------------
    uri_parser = subparsers.add_parser("uri", help="Build the URI of a named route")
    uri_parser.add_argument("source", help="Route file or directory of route files")
    uri_parser.add_argument("name", help="Route name")
    uri_parser.add_argument(
        "params",
        nargs="*",
        metavar="key=value",
        help="Placeholder values",
    )

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "routes":
        from routebook.cli._routes import run_routes

        run_routes(args)
    elif args.command == "match":
        from routebook.cli._match import run_match

        run_match(args)
    elif args.command == "uri":
        from routebook.cli._uri import run_uri

        run_uri(args)
