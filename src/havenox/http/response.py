"""HTTP response with chainable .with_*() transformation API.

Each transformation returns a new Response. Bodies are JSON by default;
``json_response`` and ``error_response`` build the two shapes the
service sends.
"""

from __future__ import annotations

import json as json_module
from collections.abc import Mapping
from dataclasses import dataclass, replace
from typing import Any

JSON_CONTENT_TYPE = "application/json; charset=utf-8"


@dataclass(frozen=True, slots=True)
class Response:
    """An HTTP response built through immutable transformations."""

    body: str | bytes = ""
    status: int = 200
    content_type: str = JSON_CONTENT_TYPE
    headers: tuple[tuple[str, str], ...] = ()

    # -- Chainable transformations --

    def with_status(self, status: int) -> Response:
        """Return a new Response with a different status code."""
        return replace(self, status=status)

    def with_header(self, name: str, value: str) -> Response:
        """Return a new Response with an additional header."""
        return replace(self, headers=(*self.headers, (name, value)))

    def with_headers(self, headers: Mapping[str, str]) -> Response:
        """Return a new Response with additional headers."""
        return replace(self, headers=(*self.headers, *headers.items()))

    # -- Body helpers --

    @property
    def body_bytes(self) -> bytes:
        """Body as bytes."""
        if isinstance(self.body, str):
            return self.body.encode("utf-8")
        return self.body

    @property
    def text(self) -> str:
        """Body as string."""
        if isinstance(self.body, bytes):
            return self.body.decode("utf-8")
        return self.body

    def header(self, name: str) -> str | None:
        """First value of header *name* (case-insensitive), or None."""
        wanted = name.lower()
        for key, value in self.headers:
            if key.lower() == wanted:
                return value
        return None

    def json(self) -> Any:
        """Parse the body as JSON."""
        return json_module.loads(self.body_bytes)


def json_response(payload: Any, status: int = 200) -> Response:
    """Serialize *payload* as a JSON response.

    Raises ``ValueError`` for NaN or infinite floats, which have no JSON form.
    """
    return Response(body=json_module.dumps(payload, allow_nan=False), status=status)


def error_response(status: int, message: str) -> Response:
    """The uniform error envelope: ``{"status": "error", "message": ...}``."""
    return json_response({"status": "error", "message": message}, status=status)
