"""HavenOx application class.

Mutable during setup (route registration, middleware, lifecycle hooks).
Frozen at runtime when app.run() or __call__() is first invoked.
"""

import logging
import threading
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from havenox._internal.asgi import Receive, Scope, Send
from havenox._internal.invoke import invoke
from havenox._internal.types import Handler, Hook
from havenox.config import AppConfig
from havenox.data.store import CollectionStore
from havenox.middleware.cors import CORSMiddleware
from havenox.middleware.protocol import Middleware
from havenox.routing.router import Router, compile_pattern
from havenox.server.handler import handle_request

logger = logging.getLogger("havenox.server")

HTTP_METHODS = frozenset({"GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"})


@dataclass(slots=True)
class _PendingRoute:
    """A route waiting to be compiled."""

    method: str
    pattern: str
    handler: Handler
    name: str | None


class App:
    """The havenox application.

    Mutable during setup (routes, middleware, hooks). Frozen at runtime
    when ``app.run()`` or ``__call__()`` is first invoked; the route
    table is then an immutable tuple tried in registration order.

    Usage::

        app = App(AppConfig.from_env())

        @app.route("/listings/:id")
        async def get_listing(ctx: RequestContext):
            listings = await app.store.read_collection("listings")
            ...

    Thread safety:
        The setup phase is single-threaded (decorators at import time).
        The freeze transition uses a Lock + double-check so exactly one
        caller compiles the route table.
    """

    __slots__ = (
        "_cors",
        "_freeze_lock",
        "_frozen",
        "_middleware",
        "_middleware_list",
        "_pending_routes",
        "_router",
        "_shutdown_hooks",
        "_startup_hooks",
        "_store",
        "config",
    )

    def __init__(
        self,
        config: AppConfig | None = None,
        *,
        store: CollectionStore | None = None,
    ) -> None:
        self.config: AppConfig = config or AppConfig()
        self._pending_routes: list[_PendingRoute] = []
        self._middleware_list: list[Middleware] = []
        self._startup_hooks: list[Hook] = []
        self._shutdown_hooks: list[Hook] = []
        self._frozen: bool = False
        self._freeze_lock: threading.Lock = threading.Lock()

        # Collection files are seeded at startup (lifespan or TestClient)
        self._store: CollectionStore = (
            store if store is not None else CollectionStore(self.config.data_dir)
        )

        # Compiled state, set during _freeze()
        self._router: Router | None = None
        self._middleware: tuple[Callable[..., Any], ...] = ()
        self._cors: CORSMiddleware | None = None

    @property
    def store(self) -> CollectionStore:
        """The collection store handlers read and write."""
        return self._store

    # -- Route registration --

    def register_route(
        self,
        method: str,
        pattern: str,
        handler: Handler,
        *,
        name: str | None = None,
    ) -> None:
        """Register *handler* for *method* and *pattern* (``:name`` params).

        Routes are tried in registration order; the first match wins.
        """
        self._check_not_frozen()
        method = method.upper()
        if method not in HTTP_METHODS:
            msg = f"Unsupported HTTP method {method!r} for route {pattern!r}."
            raise ValueError(msg)
        self._pending_routes.append(_PendingRoute(method, pattern, handler, name))

    def route(
        self,
        pattern: str,
        *,
        methods: list[str] | None = None,
        name: str | None = None,
    ) -> Callable[[Handler], Handler]:
        """Register a route handler via decorator.

        Args:
            pattern: URL path pattern. Use ``:param`` for path parameters.
            methods: HTTP methods. Defaults to ``["GET"]``.
            name: Optional route name, shown by ``havenox routes``.
        """

        def decorator(func: Handler) -> Handler:
            for method in methods or ["GET"]:
                self.register_route(method, pattern, func, name=name)
            return func

        return decorator

    # -- Middleware --

    def add_middleware(self, middleware: Middleware) -> None:
        """Add a middleware to the pipeline (inside CORS and error handling)."""
        self._check_not_frozen()
        self._middleware_list.append(middleware)

    # -- Lifecycle hooks --

    def on_startup(self, func: Hook) -> Hook:
        """Register an async or sync startup hook via decorator.

        Hooks run in registration order during ASGI lifespan startup,
        after the collection files are seeded and before the server
        accepts HTTP requests.
        """
        self._check_not_frozen()
        self._startup_hooks.append(func)
        return func

    def on_shutdown(self, func: Hook) -> Hook:
        """Register an async or sync shutdown hook via decorator."""
        self._check_not_frozen()
        self._shutdown_hooks.append(func)
        return func

    # -- Introspection --

    @property
    def router(self) -> Router:
        """The compiled router (freezes the app if needed)."""
        self._ensure_frozen()
        assert self._router is not None
        return self._router

    # -- Server --

    def run(self, host: str | None = None, port: int | None = None) -> None:
        """Freeze the app and serve it with uvicorn until interrupted."""
        from havenox.server.runner import run_server

        self._ensure_frozen()
        run_server(
            self,
            host=host or self.config.host,
            port=port or self.config.port,
            log_level=self.config.log_level,
        )

    # -- ASGI interface --

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        """ASGI 3.0 entry point.

        Handles lifespan scopes directly, then delegates HTTP scopes to
        the request handler pipeline.
        """
        if scope["type"] == "lifespan":
            await self._handle_lifespan(scope, receive, send)
            return

        self._ensure_frozen()

        assert self._router is not None

        await handle_request(
            scope,
            receive,
            send,
            router=self._router,
            middleware=self._middleware,
            cors=self._cors,
            max_body_size=self.config.max_body_size,
        )

    async def startup(self) -> None:
        """Seed collection files, then run startup hooks in order."""
        self._ensure_frozen()
        await self._store.ensure_files()
        for hook in self._startup_hooks:
            await invoke(hook)

    async def shutdown(self) -> None:
        """Run shutdown hooks in order."""
        for hook in self._shutdown_hooks:
            await invoke(hook)

    async def _handle_lifespan(
        self,
        scope: Scope,
        receive: Receive,
        send: Send,
    ) -> None:
        """Run the ASGI lifespan protocol.

        Freezes the app at startup (before the first HTTP request), then
        runs startup/shutdown and signals completion back to the server.
        """
        while True:
            message = await receive()
            msg_type = message["type"]

            if msg_type == "lifespan.startup":
                try:
                    await self.startup()
                except Exception as exc:
                    logger.exception("Startup failed")
                    await send(
                        {
                            "type": "lifespan.startup.failed",
                            "message": str(exc),
                        }
                    )
                    return
                await send({"type": "lifespan.startup.complete"})

            elif msg_type == "lifespan.shutdown":
                await self.shutdown()
                await send({"type": "lifespan.shutdown.complete"})
                return

    # -- Internal --

    def _ensure_frozen(self) -> None:
        """Thread-safe freeze with double-check locking."""
        if self._frozen:
            return
        with self._freeze_lock:
            if self._frozen:
                return
            self._freeze()

    def _freeze(self) -> None:
        """Compile the app into its frozen runtime state.

        MUST only be called while holding _freeze_lock.
        """
        # 1. Compile route table, preserving registration order
        router = Router()
        for pending in self._pending_routes:
            router.add(
                compile_pattern(pending.method, pending.pattern, pending.handler, pending.name)
            )
        router.compile()
        self._router = router

        # 2. Capture middleware as immutable tuple; CORS wraps everything
        self._middleware = tuple(self._middleware_list)
        self._cors = CORSMiddleware(self.config.cors)

        self._frozen = True

    def _check_not_frozen(self) -> None:
        if self._frozen:
            msg = (
                "Cannot modify the app after it has started serving requests. "
                "Register routes, middleware, and hooks before calling app.run()."
            )
            raise RuntimeError(msg)
