"""
Test suite for health check and runtime config endpoints.

System role: Verification of operational endpoints
"""

import logging

import pytest
from httpx import AsyncClient


@pytest.fixture
def restore_root_level():
    """Put the root log level back after the test."""
    root = logging.getLogger()
    original = root.level
    yield
    root.setLevel(original)


@pytest.mark.asyncio
async def test_health_check(client: AsyncClient) -> None:
    response = await client.get("/api/v1/health-check")

    assert response.status_code == 200
    assert response.json() == {"status": "healthy", "message": "OK"}


@pytest.mark.asyncio
async def test_health_check_db(client: AsyncClient) -> None:
    response = await client.get("/api/v1/health-check/db")

    assert response.status_code == 200
    assert response.json()["message"] == "Database connection OK"


@pytest.mark.asyncio
async def test_correlation_id_is_echoed(client: AsyncClient) -> None:
    response = await client.get(
        "/api/v1/health-check", headers={"X-Correlation-ID": "trace-abc"}
    )

    assert response.headers["X-Correlation-ID"] == "trace-abc"


@pytest.mark.asyncio
async def test_correlation_id_is_generated(client: AsyncClient) -> None:
    response = await client.get("/api/v1/health-check")

    assert response.headers["X-Correlation-ID"]


@pytest.mark.asyncio
async def test_set_trace_level(client: AsyncClient, restore_root_level) -> None:
    response = await client.put("/api/v1/config/trace-level", json={"level": "debug"})

    assert response.status_code == 200
    assert response.json() == {"message": "Log level set successfully"}
    assert logging.getLogger().level == logging.DEBUG


@pytest.mark.asyncio
async def test_set_trace_level_rejects_unknown_level(
    client: AsyncClient, restore_root_level
) -> None:
    response = await client.put("/api/v1/config/trace-level", json={"level": "verbose"})

    assert response.status_code == 400
    assert response.json()["detail"] == "Invalid log level: verbose"


@pytest.mark.asyncio
async def test_set_trace_level_requires_level(client: AsyncClient) -> None:
    response = await client.put("/api/v1/config/trace-level", json={})

    assert response.status_code == 422
