"""Server startup with uvicorn.

Serves the live App object on a single event loop. Handlers run
cooperatively and suspend at I/O boundaries; there is one worker
process because collection files have no cross-process locking.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import uvicorn

if TYPE_CHECKING:
    from havenox.app import App

logger = logging.getLogger("havenox.server")


def run_server(
    app: App,
    host: str = "0.0.0.0",
    port: int = 4000,
    *,
    log_level: str = "info",
) -> None:
    """Start uvicorn with the given havenox App.

    Args:
        app: ASGI callable (havenox App instance).
        host: Bind host address (default: all interfaces).
        port: Bind port number.
        log_level: uvicorn log level (debug, info, warning, error, critical).
    """
    config = uvicorn.Config(
        app,
        host=host,
        port=port,
        log_level=log_level,
        lifespan="on",
    )
    server = uvicorn.Server(config)
    logger.info("%s listening on http://%s:%d", app.config.service_name, host, port)
    server.run()
