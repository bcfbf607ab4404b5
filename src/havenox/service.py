"""The HavenOx service — built-in routes on top of the core App.

``create_app()`` returns an App with the service identity, health, and
treasury routes registered. Marketplace routes (listings, mints, escrows,
tents) register on the returned app the same way and use ``app.store``.

Run:
    havenox run
"""

from datetime import UTC, datetime

from havenox.app import App
from havenox.config import AppConfig
from havenox.context import RequestContext
from havenox.data.store import CollectionStore


def utc_timestamp() -> str:
    """Current UTC time as ISO-8601 with millisecond precision and ``Z``."""
    return datetime.now(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def create_app(
    config: AppConfig | None = None,
    *,
    store: CollectionStore | None = None,
) -> App:
    """Build the service app from *config* (default: the environment)."""
    config = config or AppConfig.from_env()
    app = App(config, store=store)

    @app.route("/", name="service-info")
    def index(ctx: RequestContext):
        return {
            "status": "ok",
            "service": config.service_name,
            "version": config.service_version,
        }

    @app.route("/health", name="health")
    def health(ctx: RequestContext):
        return {"status": "healthy", "timestamp": utc_timestamp()}

    @app.route("/config/treasury", name="treasury")
    def treasury(ctx: RequestContext):
        return {"address": config.treasury_address}

    return app
