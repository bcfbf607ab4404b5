"""ASGI request handler — the per-request front door.

The only component that touches raw ASGI directly. For each HTTP scope:

1. Build a typed ``Request`` (method upper-cased, path normalized).
2. CORS middleware answers ``OPTIONS`` with 204, or passes through.
3. Error boundary wraps user middleware and dispatch.
4. Dispatch: route match, body decode for POST/PUT/PATCH, handler call,
   return-value negotiation.
5. CORS headers are added and the Response goes out through ``send()``.

Failures before the response starts become the JSON error envelope.
Failures after ``http.response.start`` went out are only logged.
"""

import logging
from collections.abc import Callable
from contextvars import Token
from typing import Any

from havenox._internal.asgi import Receive, Scope, Send
from havenox._internal.invoke import invoke
from havenox.context import RequestContext, request_var
from havenox.errors import HTTPError, TransportError
from havenox.http.body import MAX_BODY_SIZE, read_json_body
from havenox.http.request import Request
from havenox.http.response import Response, error_response
from havenox.middleware.cors import CORSMiddleware
from havenox.middleware.protocol import Next
from havenox.routing.router import Router
from havenox.server.errors import handle_http_error, handle_internal_error
from havenox.server.negotiation import negotiate
from havenox.server.sender import TrackingSend, send_response

logger = logging.getLogger("havenox.server")


async def handle_request(
    scope: Scope,
    receive: Receive,
    send: Send,
    *,
    router: Router,
    middleware: tuple[Callable[..., Any], ...] = (),
    cors: CORSMiddleware | None = None,
    max_body_size: int = MAX_BODY_SIZE,
) -> None:
    """Process a single HTTP request through the full pipeline."""
    if scope["type"] != "http":
        return

    request = Request.from_asgi(scope, receive)
    token: Token[Request] = request_var.set(request)

    try:
        async def dispatch(req: Request) -> Response:
            match = router.match(req.method, req.path)
            body = await read_json_body(req, limit=max_body_size)
            ctx = RequestContext(
                request=req,
                params=match.path_params,
                query=req.query.to_dict(),
                body=body,
            )
            result = await invoke(match.route.handler, ctx)
            return negotiate(result)

        # Wrap user middleware around the dispatch
        handler: Next = dispatch
        for mw in reversed(middleware):
            outer = handler

            async def make_next(req: Request, _mw: Any = mw, _next: Next = outer) -> Response:
                return await _mw(req, _next)

            handler = make_next

        pipeline = _error_boundary(handler)
        if cors is not None:
            inner = pipeline

            async def with_cors(req: Request) -> Response:
                return await cors(req, inner)

            pipeline = with_cors

        try:
            response = await pipeline(request)
        except Exception as exc:
            response = handle_internal_error(exc, request)
    finally:
        request_var.reset(token)

    tracking = TrackingSend(send)
    try:
        await send_response(response, tracking)
    except Exception:
        if tracking.started:
            logger.exception(
                "Response for %s %s failed after headers were sent", request.method, request.path
            )
        else:
            logger.exception("Could not send response for %s %s", request.method, request.path)


def _error_boundary(handler: Next) -> Next:
    """Convert anything raised by *handler* into an error-envelope Response."""

    async def guarded(req: Request) -> Response:
        try:
            return await handler(req)
        except HTTPError as exc:
            return handle_http_error(exc, req)
        except TransportError as exc:
            logger.warning("%s %s aborted: %s", req.method, req.path, exc)
            return error_response(500, str(exc))
        except Exception as exc:
            return handle_internal_error(exc, req)

    return guarded
