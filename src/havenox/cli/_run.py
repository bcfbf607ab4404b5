"""``havenox run`` — start the HTTP server.

Builds the config from the environment plus CLI flags, resolves the app,
configures logging, and hands the app to uvicorn.
"""

import argparse
import logging
import sys

from havenox.cli._resolve import resolve_app
from havenox.config import AppConfig
from havenox.server.logs import setup_logging

logger = logging.getLogger("havenox.cli")


def config_from_args(args: argparse.Namespace) -> AppConfig:
    """Environment config with CLI flags layered on top."""
    return AppConfig.from_env(
        host=args.host,
        port=args.port,
        data_dir=getattr(args, "data_dir", None),
        log_level=getattr(args, "log_level", None),
    )


def run_server(args: argparse.Namespace) -> None:
    """Resolve ``args.app`` and serve it until interrupted."""
    config = config_from_args(args)
    setup_logging(config.log_level, config.log_format)

    try:
        app = resolve_app(args.app, config)
    except (ModuleNotFoundError, AttributeError, TypeError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    logger.info("Data directory: %s", app.store.data_dir)
    logger.info("Public URL: %s", app.config.service_url)
    app.run(host=app.config.host, port=app.config.port)
