"""Error handling pipeline for havenox requests.

Maps HTTPError exceptions and unexpected failures to the uniform JSON
error envelope ``{"status": "error", "message": ...}``.
"""

import logging

from havenox.errors import HTTPError
from havenox.http.request import Request
from havenox.http.response import Response, error_response

logger = logging.getLogger("havenox.server")

DEFAULT_ERROR_MESSAGE = "Internal server error"


def handle_http_error(exc: HTTPError, request: Request) -> Response:
    """Render an HTTPError with its own status and detail."""
    logger.debug("%d %s %s — %s", exc.status, request.method, request.path, exc.detail)
    response = error_response(exc.status, exc.detail or f"Error {exc.status}")
    for name, value in exc.headers:
        response = response.with_header(name, value)
    return response


def handle_internal_error(exc: Exception, request: Request) -> Response:
    """Render any other failure as a 500 carrying the exception message."""
    logger.exception("500 %s %s", request.method, request.path)
    return error_response(500, str(exc) or DEFAULT_ERROR_MESSAGE)
