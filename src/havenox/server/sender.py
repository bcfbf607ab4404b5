"""ASGI response sending — translates a Response into ASGI messages."""

from collections.abc import MutableMapping
from typing import Any

from havenox._internal.asgi import Send
from havenox.http.response import Response


def _body_allowed(status: int) -> bool:
    """Whether an HTTP status code permits a response body."""
    # RFC: 1xx, 204, and 304 responses do not include a message body.
    return not (100 <= status < 200 or status in {204, 304})


class TrackingSend:
    """Wraps ASGI ``send`` and records whether the response has started.

    Once ``http.response.start`` has gone out, status and headers cannot
    be replaced, so later failures can only be logged.
    """

    __slots__ = ("_send", "started")

    def __init__(self, send: Send) -> None:
        self._send = send
        self.started = False

    async def __call__(self, message: MutableMapping[str, Any]) -> None:
        await self._send(message)
        if message["type"] == "http.response.start":
            self.started = True


async def send_response(response: Response, send: Send) -> None:
    """Translate a havenox Response into ASGI send() calls."""
    raw_headers: list[tuple[bytes, bytes]] = []
    body = response.body_bytes if _body_allowed(response.status) else b""

    if body:
        raw_headers.append((b"content-type", response.content_type.encode("latin-1")))
    for name, value in response.headers:
        raw_headers.append((name.lower().encode("latin-1"), value.encode("latin-1")))
    raw_headers.append((b"content-length", str(len(body)).encode("latin-1")))

    await send(
        {
            "type": "http.response.start",
            "status": response.status,
            "headers": raw_headers,
        }
    )
    await send(
        {
            "type": "http.response.body",
            "body": body,
        }
    )
