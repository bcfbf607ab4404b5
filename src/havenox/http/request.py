"""Immutable HTTP request.

Frozen metadata plus the ASGI receive callable. The body is read once,
by the body decoder, and only for mutating methods.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from havenox._internal.asgi import Receive
from havenox.http.headers import Headers
from havenox.http.query import QueryParams


def normalize_path(raw_path: str | None) -> str:
    """Strip trailing slashes; an empty result becomes ``/``.

    Routes and request paths are normalized the same way, so
    ``/health/`` and ``/health`` match the same route.
    """
    trimmed = (raw_path or "/").rstrip("/")
    return trimmed or "/"


@dataclass(frozen=True, slots=True)
class Request:
    """An immutable HTTP request.

    ``method`` is upper-cased and ``path`` normalized at creation. ``path``
    keeps percent-encoding; the router decodes parameter values.
    """

    method: str
    path: str
    headers: Headers
    query: QueryParams

    # Private: ASGI receive callable for body streaming
    _receive: Receive

    @classmethod
    def from_asgi(cls, scope: dict[str, Any], receive: Receive) -> Request:
        """Create a Request from an ASGI scope and receive callable."""
        return cls(
            method=(scope.get("method") or "GET").upper(),
            path=normalize_path(_raw_path(scope)),
            headers=Headers(tuple(scope.get("headers", ()))),
            query=QueryParams(scope.get("query_string", b"")),
            _receive=receive,
        )


def _raw_path(scope: dict[str, Any]) -> str | None:
    """The still-percent-encoded path, so ``%2F`` stays inside one segment.

    Falls back to the decoded ``path`` when the server omits ``raw_path``.
    """
    raw = scope.get("raw_path")
    if raw:
        return raw.decode("latin-1")
    return scope.get("path")
