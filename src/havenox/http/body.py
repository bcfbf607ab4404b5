"""Request body decoding.

Accumulates the ASGI ``http.request`` messages of a request with a size
cap and parses the result as JSON. Only mutating methods carry a body;
every other method gets ``None`` without touching the stream.
"""

import json
from typing import Any

from havenox.errors import MalformedBody, PayloadTooLarge, TransportError
from havenox.http.request import Request

MAX_BODY_SIZE = 1_000_000

BODY_METHODS = frozenset({"POST", "PUT", "PATCH"})


async def read_body(request: Request, *, limit: int = MAX_BODY_SIZE) -> bytes:
    """Read the full request body, enforcing *limit* bytes.

    Raises:
        PayloadTooLarge: more than *limit* bytes arrived. Reading stops at
            the chunk that crossed the limit.
        TransportError: the client disconnected before the body ended, or
            the transport's receive failed.
    """
    chunks: list[bytes] = []
    size = 0
    while True:
        try:
            message = await request._receive()
        except (OSError, RuntimeError) as exc:
            raise TransportError(f"Failed to read request body: {exc}") from exc

        if message.get("type") == "http.disconnect":
            raise TransportError("Client disconnected while sending the request body")

        chunk = message.get("body", b"")
        if chunk:
            size += len(chunk)
            if size > limit:
                raise PayloadTooLarge()
            chunks.append(chunk)

        if not message.get("more_body", False):
            break
    return b"".join(chunks)


async def read_json_body(request: Request, *, limit: int = MAX_BODY_SIZE) -> Any:
    """Decode the request body as JSON.

    Returns ``None`` for methods outside ``POST``/``PUT``/``PATCH`` and for
    an empty body.

    Raises:
        PayloadTooLarge: body exceeded *limit* bytes.
        MalformedBody: body is not valid UTF-8 JSON (``NaN`` and
            ``Infinity`` included).
        TransportError: the stream failed mid-read.
    """
    if request.method not in BODY_METHODS:
        return None

    raw = await read_body(request, limit=limit)
    if not raw:
        return None
    try:
        return json.loads(raw, parse_constant=_reject_constant)
    except ValueError as exc:
        raise MalformedBody() from exc


def _reject_constant(token: str) -> Any:
    # NaN, Infinity and -Infinity are accepted by the json module but are not JSON
    raise ValueError(f"{token} is not valid JSON")
