"""
API tests for the health, logs and fallback error handling.
"""

import httpx
import pytest
from httpx import ASGITransport

from mail_relay.core.config import Settings
from mail_relay.main import create_app


async def _get(app, path: str) -> httpx.Response:
    async with httpx.AsyncClient(
        transport=ASGITransport(app=app, raise_app_exceptions=False),
        base_url="http://testserver",
    ) as client:
        return await client.get(path)


class TestHealth:
    @pytest.mark.asyncio
    async def test_reports_environment(self, client: httpx.AsyncClient):
        response = await client.get("/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "Backend is running"
        assert data["environment"] == "test"
        assert data["timestamp"].endswith("Z")

    @pytest.mark.asyncio
    async def test_environment_defaults_to_development(self):
        response = await _get(create_app(Settings()), "/health")

        assert response.status_code == 200
        assert response.json()["environment"] == "development"


class TestLogs:
    @pytest.mark.asyncio
    async def test_configured_provider(self, client: httpx.AsyncClient):
        response = await client.get("/logs")

        assert response.status_code == 200
        data = response.json()
        assert data["message"] == "Backend is operational"
        assert data["sendgridConfigured"] is True
        assert "timestamp" in data

    @pytest.mark.asyncio
    async def test_unconfigured_provider_still_responds(self):
        response = await _get(create_app(Settings(SENDGRID_API_KEY=None)), "/logs")

        assert response.status_code == 200
        assert response.json()["sendgridConfigured"] is False


class TestErrorHandlers:
    @pytest.mark.asyncio
    async def test_unhandled_exception_returns_generic_500(self, app):
        async def explode():
            raise KeyError("missing piece")

        app.add_api_route("/explode", explode, methods=["GET"])
        response = await _get(app, "/explode")

        assert response.status_code == 500
        data = response.json()
        assert data["error"] == "Internal server error"
        assert "missing piece" in data["message"]

    @pytest.mark.asyncio
    async def test_generic_500_keeps_cors_headers(self, app):
        async def explode():
            raise RuntimeError("disk on fire")

        app.add_api_route("/explode", explode, methods=["GET"])
        async with httpx.AsyncClient(
            transport=ASGITransport(app=app, raise_app_exceptions=False),
            base_url="http://testserver",
        ) as client:
            response = await client.get(
                "/explode", headers={"Origin": "https://reports.example.com"}
            )

        assert response.status_code == 500
        assert response.json() == {"error": "Internal server error", "message": "disk on fire"}
        assert response.headers["access-control-allow-origin"] == "*"

    @pytest.mark.asyncio
    async def test_unknown_route_uses_error_shape(self, client: httpx.AsyncClient):
        response = await client.get("/does-not-exist")

        assert response.status_code == 404
        assert response.json() == {"error": "Not Found"}
