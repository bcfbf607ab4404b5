"""HavenOx exception hierarchy.

Shared across the router, body decoder, collection store, and request
handler so every module raises and catches the same types.
"""

from dataclasses import dataclass


class HavenoxError(Exception):
    """Base for all havenox-specific errors."""


class ConfigurationError(HavenoxError):
    """Raised when app configuration or a route pattern is invalid."""


@dataclass(frozen=True, slots=True)
class HTTPError(HavenoxError):
    """An error that maps directly to an HTTP status code.

    Raised by the router, the body decoder, or handlers. The request
    handler catches these and renders the JSON error envelope with
    ``status``.
    """

    status: int
    detail: str = ""
    headers: tuple[tuple[str, str], ...] = ()

    def __str__(self) -> str:
        if self.detail:
            return f"{self.status}: {self.detail}"
        return str(self.status)


class NotFound(HTTPError):  # noqa: N818
    """404 — no route matched the request method and path."""

    def __init__(self, detail: str = "Not Found") -> None:
        super().__init__(status=404, detail=detail)


class PayloadTooLarge(HTTPError):  # noqa: N818
    """400 — the request body exceeded the configured size cap."""

    def __init__(self, detail: str = "Request body too large") -> None:
        super().__init__(status=400, detail=detail)


class MalformedBody(HTTPError):  # noqa: N818
    """400 — the request body is not valid JSON."""

    def __init__(self, detail: str = "Failed to decode JSON object") -> None:
        super().__init__(status=400, detail=detail)


class TransportError(HavenoxError):
    """The underlying request stream failed or the client disconnected."""
