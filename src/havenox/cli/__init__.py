"""HavenOx CLI — server, route listing, and data directory setup.

Entry point registered as ``havenox`` in ``pyproject.toml``::

    [project.scripts]
    havenox = "havenox.cli:main"
"""

import argparse
import sys

from havenox.cli._resolve import DEFAULT_APP


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``havenox`` command."""
    parser = argparse.ArgumentParser(
        prog="havenox",
        description="HavenOx — JSON REST backend over flat-file collections.",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- havenox run ------------------------------------------------------
    run_parser = subparsers.add_parser("run", help="Start the HTTP server")
    run_parser.add_argument(
        "app",
        nargs="?",
        default=DEFAULT_APP,
        help=f"Import string for the app or factory (default: {DEFAULT_APP})",
    )
    run_parser.add_argument("--host", default=None, help="Bind host address")
    run_parser.add_argument("--port", type=int, default=None, help="Bind port number")
    run_parser.add_argument("--data-dir", default=None, help="Collection files directory")
    run_parser.add_argument(
        "--log-level",
        default=None,
        choices=["debug", "info", "warning", "error", "critical"],
        help="Log level (default: LOG_LEVEL or info)",
    )

    # -- havenox routes ---------------------------------------------------
    routes_parser = subparsers.add_parser("routes", help="List registered routes")
    routes_parser.add_argument("app", nargs="?", default=DEFAULT_APP, help="Import string")

    # -- havenox init-data ------------------------------------------------
    init_parser = subparsers.add_parser("init-data", help="Create and seed collection files")
    init_parser.add_argument("--data-dir", default=None, help="Collection files directory")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "run":
        from havenox.cli._run import run_server

        run_server(args)
    elif args.command == "routes":
        from havenox.cli._routes import run_routes

        run_routes(args)
    elif args.command == "init-data":
        from havenox.cli._init_data import run_init_data

        run_init_data(args)
