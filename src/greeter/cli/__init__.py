"""Greeter CLI — serve the app, list its routes, or answer one request.

Entry point registered as ``greeter`` in ``pyproject.toml``::

    [project.scripts]
    greeter = "greeter.cli:main"
"""

import argparse
import sys

DEFAULT_APP = "greeter.main:app"


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``greeter`` command."""
    parser = argparse.ArgumentParser(
        prog="greeter",
        description="Greeter — a hello-world web application.",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- greeter run ------------------------------------------------------
    run_parser = subparsers.add_parser("run", help="Start the HTTP server")
    run_parser.add_argument(
        "app",
        nargs="?",
        default=DEFAULT_APP,
        help=f"Import string (default: {DEFAULT_APP})",
    )
    run_parser.add_argument("--host", default=None, help="Bind host address")
    run_parser.add_argument("--port", type=int, default=None, help="Bind port number")
    run_parser.add_argument(
        "--reload",
        action="store_true",
        help="Restart the server when source files change",
    )

    # -- greeter routes ---------------------------------------------------
    routes_parser = subparsers.add_parser("routes", help="List the route table")
    routes_parser.add_argument(
        "app",
        nargs="?",
        default=DEFAULT_APP,
        help=f"Import string (default: {DEFAULT_APP})",
    )

    # -- greeter call -----------------------------------------------------
    call_parser = subparsers.add_parser(
        "call",
        help="Dispatch one GET request in-process and print the response body",
    )
    call_parser.add_argument("path", help="Request path (e.g. /Alice)")
    call_parser.add_argument(
        "app",
        nargs="?",
        default=DEFAULT_APP,
        help=f"Import string (default: {DEFAULT_APP})",
    )

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "run":
        from greeter.cli._run import run_server

        run_server(args)
    elif args.command == "routes":
        from greeter.cli._routes import run_routes

        run_routes(args)
    elif args.command == "call":
        from greeter.cli._call import run_call

        run_call(args)
