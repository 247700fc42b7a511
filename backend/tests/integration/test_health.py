"""Tests for the health check endpoint."""

import pytest
from httpx import ASGITransport, AsyncClient

from crud_backend.main import app


@pytest.mark.asyncio
async def test_health_check_returns_200():
    """Health endpoint should return the envelope with status, version, and environment."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        response = await client.get("/api/v1/health")

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["message"] == "healthy"
    data = body["data"]
    assert data["status"] == "healthy"
    assert "version" in data
    assert "environment" in data
    assert "role_permissions" in data["entities"]


@pytest.mark.asyncio
async def test_health_check_needs_no_token():
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        response = await client.get("/api/v1/health", headers={"Authorization": "junk"})

    assert response.status_code == 200


@pytest.mark.asyncio
async def test_responses_carry_security_headers():
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        response = await client.get("/api/v1/health")

    assert response.headers["X-Frame-Options"] == "DENY"
    assert response.headers["X-Content-Type-Options"] == "nosniff"
    assert response.headers["X-XSS-Protection"] == "1; mode=block"
    assert response.headers["Strict-Transport-Security"] == "max-age=31536000; includeSubDomains"
    assert response.headers["Content-Security-Policy"] == "default-src 'self'"
    assert response.headers["Referrer-Policy"] == "strict-origin-when-cross-origin"
    assert response.headers["Permissions-Policy"] == "geolocation=(), microphone=(), camera=()"


@pytest.mark.asyncio
async def test_error_responses_carry_security_headers():
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        response = await client.get("/api/v1/roles")

    assert response.status_code == 401
    assert response.headers["X-Frame-Options"] == "DENY"


@pytest.mark.asyncio
async def test_docs_get_relaxed_content_security_policy():
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        response = await client.get("/docs")

    assert response.status_code == 200
    assert "https://cdn.jsdelivr.net" in response.headers["Content-Security-Policy"]
    assert response.headers["X-Frame-Options"] == "DENY"
