"""CORS middleware.

Answers every ``OPTIONS`` request with an empty 204 and attaches the
cross-origin headers to every other response, success or error. The
app installs it outermost, so error envelopes carry the headers too.
"""

from dataclasses import dataclass

from havenox.http.request import Request
from havenox.http.response import Response
from havenox.middleware.protocol import Next


@dataclass(frozen=True, slots=True)
class CORSConfig:
    """CORS configuration.

    Defaults are permissive: any origin, ``GET,POST,OPTIONS``, and the
    ``Content-Type`` and ``Authorization`` request headers. Narrow what
    you need::

        CORSConfig(allow_origins=("https://havenox.app",))
    """

    allow_origins: tuple[str, ...] = ("*",)
    allow_methods: tuple[str, ...] = ("GET", "POST", "OPTIONS")
    allow_headers: tuple[str, ...] = ("Content-Type", "Authorization")
    max_age: int | None = None


class CORSMiddleware:
    """Cross-origin headers on every response, 204 for every preflight.

    Usage::

        app.add_middleware(CORSMiddleware(CORSConfig()))

    ``App`` installs one automatically from ``AppConfig.cors``.
    """

    __slots__ = ("_headers", "config")

    def __init__(self, config: CORSConfig | None = None) -> None:
        self.config = config or CORSConfig()
        cfg = self.config
        # Shared by preflight and actual responses
        self._headers: tuple[tuple[str, str], ...] = (
            ("Access-Control-Allow-Methods", ",".join(cfg.allow_methods)),
            ("Access-Control-Allow-Headers", ",".join(cfg.allow_headers)),
        )

    def _origin_headers(self, origin: str | None) -> tuple[tuple[str, str], ...]:
        """Allow-Origin for this request, or nothing for a disallowed origin."""
        if "*" in self.config.allow_origins:
            return (("Access-Control-Allow-Origin", "*"),)
        if origin is not None and origin in self.config.allow_origins:
            return (("Access-Control-Allow-Origin", origin), ("Vary", "Origin"))
        return ()

    def _apply(self, response: Response, origin: str | None) -> Response:
        for name, value in (*self._origin_headers(origin), *self._headers):
            response = response.with_header(name, value)
        return response

    def preflight_response(self, origin: str | None = None) -> Response:
        """Empty 204 with the CORS headers."""
        response = self._apply(Response(body="", status=204), origin)
        if self.config.max_age is not None:
            response = response.with_header("Access-Control-Max-Age", str(self.config.max_age))
        return response

    async def __call__(self, request: Request, next: Next) -> Response:
        """Short-circuit preflight, decorate everything else."""
        origin = request.headers.get("origin")

        if request.method == "OPTIONS":
            return self.preflight_response(origin)

        response = await next(request)
        return self._apply(response, origin)
