"""Content negotiation — maps handler return values to Response objects.

isinstance-based dispatch, no magic, fully predictable.
"""

from typing import Any

from havenox.errors import ConfigurationError
from havenox.http.response import Response, json_response


def negotiate(value: Any) -> Response:
    """Convert a route handler's return value to a Response.

    Dispatch order:

    1. ``Response``                  -> pass through
    2. ``None``                      -> 204, empty body
    3. ``(value, int)``              -> negotiate value, override status
    4. ``(value, int, dict)``        -> negotiate value, override status + headers
    5. ``dict`` / ``list`` / scalar  -> 200, application/json
    """
    match value:
        case Response():
            return value
        case None:
            return Response(body="", status=204)
        case (inner, int() as status) if isinstance(value, tuple):
            return negotiate(inner).with_status(status)
        case (inner, int() as status, dict() as headers) if isinstance(value, tuple):
            return negotiate(inner).with_status(status).with_headers(headers)
        case dict() | list() | str() | int() | float() | bool():
            return json_response(value)
        case _:
            msg = (
                f"Route handler returned {type(value).__name__}, which cannot be "
                "sent as JSON. Return a dict, list, scalar, Response, or (value, status)."
            )
            raise ConfigurationError(msg)
