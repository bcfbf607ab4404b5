"""Application configuration.

AppConfig is a frozen dataclass — immutable after creation, IDE-autocompletable,
no string-key dict lookups. ``AppConfig.from_env()`` reads the process
environment for the values operators override at deploy time.
"""

import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from havenox.middleware.cors import CORSConfig

DEFAULT_TREASURY_ADDRESS = "kaspa:qpz39pyz2ra8g0jtq7f0x9nrdzrllsenx282k5dqv8kgdmw7hsm9zcguzxr5y"
DEFAULT_SERVICE_URL = "https://havenox.app"
DEFAULT_PORT = 4000


@dataclass(frozen=True, slots=True)
class AppConfig:
    """Application configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = AppConfig(port=5000, data_dir="/var/lib/havenox")
    """

    # Server: all interfaces, so localhost and 127.0.0.1 both reach it
    host: str = "0.0.0.0"
    port: int = DEFAULT_PORT
    log_level: str = "info"
    log_format: str = "text"  # "text" or "json"

    # Service
    service_name: str = "HavenOx Backend"
    service_version: str = "1.0.0"
    service_url: str = DEFAULT_SERVICE_URL
    treasury_address: str = DEFAULT_TREASURY_ADDRESS

    # Storage
    data_dir: str | Path = "data"

    # Limits
    max_body_size: int = 1_000_000

    # Cross-origin policy applied to every response
    cors: CORSConfig = field(default_factory=CORSConfig)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None, **overrides: object) -> "AppConfig":
        """Build a config from environment variables.

        Reads ``HOST``, ``PORT``, ``TREASURY_ADDRESS``, ``SERVICE_URL``,
        ``HAVENOX_DATA_DIR``, ``LOG_LEVEL``, and ``LOG_FORMAT``. Unset or empty variables
        keep the default; a ``PORT`` that is not a positive integer falls
        back to 4000. Keyword *overrides* win over the environment.
        """
        env = os.environ if environ is None else environ
        values: dict[str, object] = {}

        if host := env.get("HOST"):
            values["host"] = host
        if treasury := env.get("TREASURY_ADDRESS"):
            values["treasury_address"] = treasury
        if service_url := env.get("SERVICE_URL"):
            values["service_url"] = service_url
        if data_dir := env.get("HAVENOX_DATA_DIR"):
            values["data_dir"] = data_dir
        if log_level := env.get("LOG_LEVEL"):
            values["log_level"] = log_level.lower()
        if log_format := env.get("LOG_FORMAT"):
            values["log_format"] = log_format.lower()
        values["port"] = _parse_port(env.get("PORT"))

        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)  # type: ignore[arg-type]


def _parse_port(raw: str | None) -> int:
    if not raw:
        return DEFAULT_PORT
    try:
        port = int(raw)
    except ValueError:
        return DEFAULT_PORT
    return port if port > 0 else DEFAULT_PORT
