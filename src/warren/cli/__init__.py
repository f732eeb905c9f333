"""Warren CLI — route listing, validation, and dev server.

Entry point registered as ``warren`` in ``pyproject.toml``::

    [project.scripts]
    warren = "warren.cli:main"

Every command takes an import string (``myapp:app``) or the path of an
app directory, which is served with the default configuration.
"""

import argparse
import sys


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``warren`` command."""
    parser = argparse.ArgumentParser(
        prog="warren",
        description="Warren — filesystem routing and nested layouts for HTML apps.",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- warren routes ----------------------------------------------------
    routes_parser = subparsers.add_parser("routes", help="List discovered routes")
    routes_parser.add_argument("app", help="Import string (e.g. myapp:app) or app directory")

    # -- warren check -----------------------------------------------------
    check_parser = subparsers.add_parser(
        "check", help="Report duplicate routes and broken layouts"
    )
    check_parser.add_argument("app", help="Import string (e.g. myapp:app) or app directory")

    # -- warren run -------------------------------------------------------
    run_parser = subparsers.add_parser("run", help="Start the development server")
    run_parser.add_argument("app", help="Import string (e.g. myapp:app) or app directory")
    run_parser.add_argument("--host", default=None, help="Bind host address")
    run_parser.add_argument("--port", type=int, default=None, help="Bind port number")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "routes":
        from warren.cli._routes import run_routes

        run_routes(args)
    elif args.command == "check":
        from warren.cli._check import run_check

        run_check(args)
    elif args.command == "run":
        from warren.cli._run import run_server

        run_server(args)
