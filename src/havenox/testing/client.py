"""Async test client for havenox applications.

Uses the same Request and Response types as production.
No wrapper translation layer.
"""

from __future__ import annotations

import json as json_module
from collections.abc import Sequence
from typing import Any

from havenox.app import App
from havenox.http.response import Response


class TestClient:
    __test__ = False  # Tell pytest this is not a test class
    """Async test client for havenox applications.

    Returns the same ``Response`` type used in production. Sends requests
    through the ASGI interface directly — no HTTP involved.

    Usage::

        async with TestClient(app) as client:
            response = await client.get("/health")
            assert response.status == 200
    """

    __slots__ = ("app",)

    def __init__(self, app: App) -> None:
        self.app = app

    async def __aenter__(self) -> TestClient:
        # Mirror lifespan startup: seed collection files, run hooks
        await self.app.startup()
        return self

    async def __aexit__(self, *args: object) -> None:
        await self.app.shutdown()

    async def get(
        self,
        path: str,
        *,
        headers: dict[str, str] | None = None,
    ) -> Response:
        """Send a GET request."""
        return await self.request("GET", path, headers=headers)

    async def post(
        self,
        path: str,
        *,
        headers: dict[str, str] | None = None,
        body: bytes | None = None,
        json: Any = None,
        chunks: Sequence[bytes] | None = None,
    ) -> Response:
        """Send a POST request.

        ``json`` is serialized and sent with a JSON content type.
        """
        return await self.request(
            "POST", path, headers=headers, body=body, json=json, chunks=chunks
        )

    async def put(
        self,
        path: str,
        *,
        headers: dict[str, str] | None = None,
        body: bytes | None = None,
        json: Any = None,
    ) -> Response:
        """Send a PUT request."""
        return await self.request("PUT", path, headers=headers, body=body, json=json)

    async def patch(
        self,
        path: str,
        *,
        headers: dict[str, str] | None = None,
        body: bytes | None = None,
        json: Any = None,
    ) -> Response:
        """Send a PATCH request."""
        return await self.request("PATCH", path, headers=headers, body=body, json=json)

    async def delete(
        self,
        path: str,
        *,
        headers: dict[str, str] | None = None,
    ) -> Response:
        """Send a DELETE request."""
        return await self.request("DELETE", path, headers=headers)

    async def options(
        self,
        path: str,
        *,
        headers: dict[str, str] | None = None,
    ) -> Response:
        """Send an OPTIONS (preflight) request."""
        return await self.request("OPTIONS", path, headers=headers)

    async def request(
        self,
        method: str,
        path: str,
        *,
        headers: dict[str, str] | None = None,
        body: bytes | None = None,
        json: Any = None,
        chunks: Sequence[bytes] | None = None,
        disconnect: bool = False,
    ) -> Response:
        """Send an arbitrary request through the ASGI app.

        Args:
            body: Raw request body, delivered in one ``http.request`` message.
            json: Payload to serialize as the body (overrides *body*).
            chunks: Body split across several ``http.request`` messages,
                ``more_body`` set on all but the last. An empty sequence
                sends an empty body.
            disconnect: Deliver ``http.disconnect`` after the chunks instead
                of ending the body, as a client hanging up mid-upload would.
        """
        # Split path and query string
        if "?" in path:
            path_part, query_string = path.split("?", 1)
        else:
            path_part = path
            query_string = ""

        merged: dict[str, str] = {}
        if json is not None:
            body = json_module.dumps(json).encode("utf-8")
            merged["content-type"] = "application/json"
        merged.update(headers or {})

        # Build raw ASGI headers
        raw_headers: list[tuple[bytes, bytes]] = []
        for name, value in merged.items():
            raw_headers.append((name.lower().encode("latin-1"), value.encode("latin-1")))

        # Build ASGI scope
        scope: dict[str, Any] = {
            "type": "http",
            "asgi": {"version": "3.0"},
            "http_version": "1.1",
            "method": method.upper(),
            "path": path_part,
            "raw_path": path_part.encode("latin-1"),
            "query_string": query_string.encode("latin-1"),
            "root_path": "",
            "headers": raw_headers,
            "server": ("testserver", 80),
            "client": ("127.0.0.1", 0),
        }

        # Build receive callable from the queued body messages
        parts = list(chunks or ()) or [body or b""]
        messages: list[dict[str, Any]] = [
            {"type": "http.request", "body": part, "more_body": True} for part in parts
        ]
        if disconnect:
            messages.append({"type": "http.disconnect"})
        else:
            messages[-1]["more_body"] = False

        async def receive() -> dict[str, Any]:
            if messages:
                return messages.pop(0)
            return {"type": "http.disconnect"}

        # Capture response via send
        response_status = 200
        response_headers: list[tuple[bytes, bytes]] = []
        response_body_parts: list[bytes] = []

        async def send(message: dict[str, Any]) -> None:
            nonlocal response_status, response_headers
            if message["type"] == "http.response.start":
                response_status = message["status"]
                response_headers = list(message.get("headers", []))
            elif message["type"] == "http.response.body":
                response_body_parts.append(message.get("body", b""))

        # Call the ASGI app
        await self.app(scope, receive, send)

        # Build havenox Response from captured data
        content_type = ""
        extra_headers: list[tuple[str, str]] = []
        for name_b, value_b in response_headers:
            name_str = name_b.decode("latin-1")
            value_str = value_b.decode("latin-1")
            if name_str == "content-type":
                content_type = value_str
            else:
                extra_headers.append((name_str, value_str))

        return Response(
            body=b"".join(response_body_parts),
            status=response_status,
            content_type=content_type,
            headers=tuple(extra_headers),
        )
