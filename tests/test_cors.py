"""Tests for CORS middleware."""

import pytest

from havenox.app import App
from havenox.config import AppConfig
from havenox.middleware.cors import CORSConfig, CORSMiddleware
from havenox.testing import TestClient

ALLOW_ORIGIN = ("access-control-allow-origin", "*")
ALLOW_METHODS = ("access-control-allow-methods", "GET,POST,OPTIONS")
ALLOW_HEADERS = ("access-control-allow-headers", "Content-Type,Authorization")


@pytest.fixture
def cors_app(config: AppConfig) -> App:
    app = App(config)

    @app.route("/api/data")
    def data():
        return {"message": "hello"}

    @app.route("/api/boom")
    def boom():
        raise RuntimeError("boom")

    return app


def _restricted_app(config: AppConfig, cors: CORSConfig) -> App:
    app = App(AppConfig(data_dir=config.data_dir, cors=cors))

    @app.route("/api/data")
    def data():
        return {"message": "hello"}

    return app


class TestCORSDefaults:
    async def test_success_carries_headers_without_origin(self, cors_app: App) -> None:
        async with TestClient(cors_app) as client:
            response = await client.get("/api/data")
        assert response.status == 200
        assert ALLOW_ORIGIN in response.headers
        assert ALLOW_METHODS in response.headers
        assert ALLOW_HEADERS in response.headers

    async def test_not_found_carries_headers(self, cors_app: App) -> None:
        async with TestClient(cors_app) as client:
            response = await client.get("/missing")
        assert response.status == 404
        assert ALLOW_ORIGIN in response.headers

    async def test_handler_error_carries_headers(self, cors_app: App) -> None:
        async with TestClient(cors_app) as client:
            response = await client.get("/api/boom")
        assert response.status == 500
        assert ALLOW_ORIGIN in response.headers
        assert ALLOW_METHODS in response.headers


class TestCORSPreflight:
    async def test_preflight_is_empty_204(self, cors_app: App) -> None:
        async with TestClient(cors_app) as client:
            response = await client.options(
                "/api/data",
                headers={
                    "Origin": "https://front.example",
                    "Access-Control-Request-Method": "POST",
                },
            )
        assert response.status == 204
        assert response.body == b""
        assert ALLOW_ORIGIN in response.headers
        assert ALLOW_METHODS in response.headers
        assert ALLOW_HEADERS in response.headers

    async def test_preflight_for_unregistered_path(self, cors_app: App) -> None:
        async with TestClient(cors_app) as client:
            response = await client.options("/no/such/route")
        assert response.status == 204
        assert response.body == b""

    def test_max_age(self) -> None:
        response = CORSMiddleware(CORSConfig(max_age=600)).preflight_response()
        assert response.header("Access-Control-Max-Age") == "600"

    def test_no_max_age_by_default(self) -> None:
        response = CORSMiddleware().preflight_response()
        assert response.status == 204
        assert response.header("Access-Control-Max-Age") is None


class TestCORSRestrictedOrigins:
    async def test_listed_origin_echoed(self, config: AppConfig) -> None:
        app = _restricted_app(config, CORSConfig(allow_origins=("https://havenox.app",)))
        async with TestClient(app) as client:
            response = await client.get("/api/data", headers={"Origin": "https://havenox.app"})
        assert ("access-control-allow-origin", "https://havenox.app") in response.headers
        assert ("vary", "Origin") in response.headers

    async def test_other_origin_gets_no_allow_origin(self, config: AppConfig) -> None:
        app = _restricted_app(config, CORSConfig(allow_origins=("https://havenox.app",)))
        async with TestClient(app) as client:
            response = await client.get("/api/data", headers={"Origin": "https://evil.example"})
        assert response.status == 200
        assert response.header("access-control-allow-origin") is None

    async def test_custom_methods_joined_without_spaces(self, config: AppConfig) -> None:
        app = _restricted_app(config, CORSConfig(allow_methods=("GET", "PUT", "DELETE")))
        async with TestClient(app) as client:
            response = await client.get("/api/data")
        assert response.header("access-control-allow-methods") == "GET,PUT,DELETE"
