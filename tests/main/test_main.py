# tests/main/test_main.py
"""Tests for the application-level endpoints and middleware."""

from collections.abc import AsyncGenerator

import pytest
from httpx import ASGITransport, AsyncClient
from starlette.status import HTTP_200_OK, HTTP_503_SERVICE_UNAVAILABLE

from nexusblog import main as main_module
from nexusblog.configs import settings
from nexusblog.main import app


@pytest.fixture
async def client() -> AsyncGenerator[AsyncClient]:
    async with AsyncClient(base_url="http://test", transport=ASGITransport(app=app)) as ac:
        yield ac


class TestRoot:
    async def test_root(self, client: AsyncClient) -> None:
        response = await client.get("/")

        assert response.status_code == HTTP_200_OK
        assert response.json() == {"message": f"Welcome to {settings.APP_NAME}"}

    async def test_security_headers(self, client: AsyncClient) -> None:
        response = await client.get("/")

        assert response.headers["X-Content-Type-Options"] == "nosniff"
        assert response.headers["X-Frame-Options"] == "DENY"


class TestHealth:
    async def test_health_ok(self, client: AsyncClient) -> None:
        response = await client.get("/health")

        assert response.status_code == HTTP_200_OK
        body = response.json()
        assert body["status"] == "ok"
        assert body["database"] == "ok"
        assert body["version"] == settings.VERSION
        assert body["timestamp"]

    async def test_health_database_down(
        self,
        client: AsyncClient,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        async def ping_db() -> bool:
            return False

        monkeypatch.setattr(main_module, "ping_db", ping_db)

        response = await client.get("/health")

        assert response.status_code == HTTP_503_SERVICE_UNAVAILABLE
        assert response.json()["status"] == "degraded"
        assert response.json()["database"] == "unavailable"


class TestCors:
    async def test_frontend_origin_allowed(self, client: AsyncClient) -> None:
        """Test that the SPA origin passes preflight and sees `Authorization`."""
        response = await client.options(
            "/api/v1/blog/bulk",
            headers={
                "Origin": "http://localhost:5173",
                "Access-Control-Request-Method": "GET",
                "Access-Control-Request-Headers": "Authorization",
            },
        )

        assert response.status_code == HTTP_200_OK
        assert response.headers["access-control-allow-origin"] == "http://localhost:5173"

    async def test_other_origin_rejected(self, client: AsyncClient) -> None:
        response = await client.get("/", headers={"Origin": "http://evil.example"})

        assert "access-control-allow-origin" not in response.headers

    async def test_exposes_authorization(self, client: AsyncClient) -> None:
        response = await client.get("/", headers={"Origin": "http://localhost:5173"})

        assert response.headers["access-control-expose-headers"] == "Authorization"
