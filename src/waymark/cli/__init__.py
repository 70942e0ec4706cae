"""Waymark CLI — inspect a route registry and build URLs from the shell.

Entry point registered as ``waymark`` in ``pyproject.toml``::

    [project.scripts]
    waymark = "waymark.cli:main"
"""

import argparse
import sys


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``waymark`` command."""
    parser = argparse.ArgumentParser(
        prog="waymark",
        description="Waymark — declare each route once, build its URLs everywhere.",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- waymark routes ---------------------------------------------------
    routes_parser = subparsers.add_parser("routes", help="List declared routes")
    routes_parser.add_argument(
        "registry",
        help="Import string (e.g. myapp.urls:registry)",
    )

    # -- waymark url ------------------------------------------------------
    url_parser = subparsers.add_parser("url", help="Build a URL for a named route")
    url_parser.add_argument(
        "registry",
        help="Import string (e.g. myapp.urls:registry)",
    )
    url_parser.add_argument("name", help="Route name (e.g. User)")
    url_parser.add_argument(
        "args",
        nargs="*",
        metavar="ARG",
        help="Path parameter values, positional or as name=value",
    )
    url_parser.add_argument(
        "-q",
        "--query",
        action="append",
        default=[],
        metavar="KEY=VALUE",
        help="Query parameter (repeatable)",
    )

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "routes":
        from waymark.cli._routes import run_routes

        run_routes(args)
    elif args.command == "url":
        from waymark.cli._url import run_url

        run_url(args)
