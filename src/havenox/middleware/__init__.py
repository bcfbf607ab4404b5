"""Middleware — Protocol-based, no inheritance required.

A middleware is any callable matching:
    async def mw(request: Request, next: Next) -> Response

Built-in middleware:
    CORSMiddleware -- Cross-Origin Resource Sharing (installed by App)
"""

from havenox.middleware.cors import CORSConfig, CORSMiddleware
from havenox.middleware.protocol import Middleware, Next

__all__ = [
    "CORSConfig",
    "CORSMiddleware",
    "Middleware",
    "Next",
]
