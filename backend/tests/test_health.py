"""Health check and general endpoint tests."""

import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
async def test_health_check(client: AsyncClient):
    """Test health check endpoint."""
    response = await client.get("/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert data["app"] == "FinTrack"
    assert data["database"] == "ok"


@pytest.mark.asyncio
async def test_nonexistent_endpoint(client: AsyncClient):
    """Test 404 for nonexistent endpoint."""
    response = await client.get("/api/v1/nonexistent")
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_missing_user_header_is_rejected(client: AsyncClient):
    response = await client.get("/api/v1/goals/")
    assert response.status_code == 401


@pytest.mark.asyncio
async def test_malformed_user_header_is_rejected(client: AsyncClient):
    response = await client.get("/api/v1/goals/", headers={"X-User-Id": "not-a-uuid"})
    assert response.status_code == 401
