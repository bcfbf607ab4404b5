"""HavenOx — JSON REST backend for the HavenOx marketplace.

Serves a small JSON API over flat-file collections: listings, mints,
trade history, escrows, and tents. Every response carries permissive
CORS headers so browser front-ends on any origin can call it.

Basic usage::

    from havenox import create_app

    app = create_app()

    @app.route("/listings")
    async def listings(ctx):
        return await app.store.read_collection("listings")

    app.run()

Command line::

    havenox run --port 4000 --data-dir ./data
"""

__version__ = "1.0.0"
__all__ = [
    "App",
    "AppConfig",
    "CollectionStore",
    "ConfigurationError",
    "HTTPError",
    "HavenoxError",
    "Middleware",
    "Next",
    "NotFound",
    "Request",
    "RequestContext",
    "Response",
    "create_app",
    "get_request",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import havenox`` fast while providing a clean top-level API.
    """
    if name == "App":
        from havenox.app import App

        return App

    if name == "AppConfig":
        from havenox.config import AppConfig

        return AppConfig

    if name == "create_app":
        from havenox.service import create_app

        return create_app

    if name == "CollectionStore":
        from havenox.data.store import CollectionStore

        return CollectionStore

    if name == "Request":
        from havenox.http.request import Request

        return Request

    if name == "Response":
        from havenox.http.response import Response

        return Response

    if name in ("Middleware", "Next"):
        from havenox.middleware import protocol as _mw

        return getattr(_mw, name)

    if name in ("RequestContext", "get_request"):
        from havenox import context as _ctx

        return getattr(_ctx, name)

    if name in ("HavenoxError", "ConfigurationError", "HTTPError", "NotFound"):
        from havenox import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
