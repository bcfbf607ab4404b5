"""``havenox routes`` — list registered routes in dispatch order."""

import argparse
import sys

from havenox.cli._resolve import resolve_app
from havenox.config import AppConfig


def run_routes(args: argparse.Namespace) -> None:
    """Print a METHOD / PATH / HANDLER table for the resolved app.

    Rows are in registration order, which is the order dispatch tries
    them in.
    """
    try:
        app = resolve_app(args.app, AppConfig.from_env())
    except (ModuleNotFoundError, AttributeError, TypeError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    routes = app.router.routes
    if not routes:
        print("No routes registered.")
        return

    rows: list[tuple[str, str, str]] = []
    for route in routes:
        handler_name = getattr(route.handler, "__name__", str(route.handler))
        if route.name:
            handler_name = f"{handler_name} ({route.name})"
        rows.append((route.method, route.pattern, handler_name))

    max_method = max(6, *(len(r[0]) for r in rows))  # "METHOD" header
    max_path = max(4, *(len(r[1]) for r in rows))  # "PATH" header

    fmt = f"{{:<{max_method}}}  {{:<{max_path}}}  {{}}"
    print(fmt.format("METHOD", "PATH", "HANDLER"))
    sep_len = max_method + max_path + 4 + max(len(r[2]) for r in rows)
    print("-" * min(sep_len, 80))
    for row in rows:
        print(fmt.format(*row))
