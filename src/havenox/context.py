"""Per-request handler context.

Provides:
- ``RequestContext``: what every route handler receives.
- ``request_var``: the current ``Request`` for this task.

``request_var`` is set by the request handler before dispatch and reset
afterwards; outside a request, ``get_request()`` raises ``LookupError``.
"""

from contextvars import ContextVar
from dataclasses import dataclass, field
from typing import Any

from havenox.http.request import Request


@dataclass(frozen=True, slots=True)
class RequestContext:
    """Arguments for one handler call.

    ``params`` holds the URL-decoded path parameters, ``query`` the parsed
    query string (repeated keys as lists), and ``body`` the decoded JSON
    payload or ``None``. ``body`` is untrusted: narrow it before use::

        async def create_listing(ctx: RequestContext):
            if not isinstance(ctx.body, dict) or "price" not in ctx.body:
                raise HTTPError(400, "price is required")
    """

    request: Request
    params: dict[str, str] = field(default_factory=dict)
    query: dict[str, str | list[str]] = field(default_factory=dict)
    body: Any = None

    @property
    def method(self) -> str:
        return self.request.method

    @property
    def path(self) -> str:
        return self.request.path


request_var: ContextVar[Request] = ContextVar("havenox_request")
"""The current request. Set by the request handler before dispatch."""


def get_request() -> Request:
    """Return the current request.

    Raises ``LookupError`` if called outside a request context.
    """
    return request_var.get()
