"""Trellis CLI — inspect installed rules and dry-run requests.

Entry point registered as ``trellis`` in ``pyproject.toml``::

    [project.scripts]
    trellis = "trellis.cli:main"
"""

import argparse
import sys


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``trellis`` command."""
    parser = argparse.ArgumentParser(
        prog="trellis",
        description="Trellis — method and path rules for async middleware stacks.",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Root log level (debug, info, warning, error); defaults to the stack config",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- trellis routes ---------------------------------------------------
    routes_parser = subparsers.add_parser("routes", help="List installed rules")
    routes_parser.add_argument("stack", help="Import string (e.g. myapp:stack)")

    # -- trellis request --------------------------------------------------
    request_parser = subparsers.add_parser("request", help="Dispatch one request through a stack")
    request_parser.add_argument("stack", help="Import string (e.g. myapp:stack)")
    request_parser.add_argument("method", help="HTTP method (e.g. GET)")
    request_parser.add_argument("url", help="Request target, query string allowed")
    request_parser.add_argument(
        "-H",
        "--header",
        action="append",
        default=[],
        metavar="NAME:VALUE",
        help="Request header, may be repeated",
    )

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "routes":
        from trellis.cli._routes import run_routes

        run_routes(args)
    elif args.command == "request":
        from trellis.cli._request import run_request

        run_request(args)
