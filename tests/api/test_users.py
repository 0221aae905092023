"""
Test suite for portal user and DFSP endpoints.

System role: Verification of authentication HTTP API
"""

import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
async def test_login_returns_token(client: AsyncClient, maker, user_password) -> None:
    response = await client.post(
        "/api/v1/users/login",
        json={"email": "maker@example.com", "password": user_password},
    )

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["token"]


@pytest.mark.asyncio
async def test_login_token_authenticates(client: AsyncClient, maker, user_password) -> None:
    login = await client.post(
        "/api/v1/users/login",
        json={"email": "maker@example.com", "password": user_password},
    )
    token = login.json()["token"]

    response = await client.get(
        "/api/v1/users/profile", headers={"Authorization": f"Bearer {token}"}
    )

    assert response.status_code == 200
    assert response.json()["data"]["email"] == "maker@example.com"


@pytest.mark.asyncio
async def test_login_with_wrong_password(client: AsyncClient, maker) -> None:
    response = await client.post(
        "/api/v1/users/login",
        json={"email": "maker@example.com", "password": "not-the-password"},
    )

    assert response.status_code == 400
    assert response.json() == {"success": False, "message": "Invalid credentials"}


@pytest.mark.asyncio
async def test_login_validates_body(client: AsyncClient) -> None:
    response = await client.post(
        "/api/v1/users/login", json={"email": "not-an-email", "password": "short"}
    )

    assert response.status_code == 422


@pytest.mark.asyncio
async def test_profile_hides_password(client: AsyncClient, maker, auth_headers) -> None:
    response = await client.get("/api/v1/users/profile", headers=auth_headers(maker))

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["id"] == maker.id
    assert data["name"] == "Maker"
    assert data["user_type"] == "Hub"
    assert "password" not in data


@pytest.mark.asyncio
async def test_profile_requires_token(client: AsyncClient) -> None:
    response = await client.get("/api/v1/users/profile")

    assert response.status_code == 401
    assert response.json()["detail"] == "Unauthorized"


@pytest.mark.asyncio
async def test_profile_rejects_bad_token(client: AsyncClient) -> None:
    response = await client.get(
        "/api/v1/users/profile", headers={"Authorization": "Bearer garbage"}
    )

    assert response.status_code == 401


@pytest.mark.asyncio
async def test_list_dfsps(client: AsyncClient, maker, dfsp, auth_headers) -> None:
    response = await client.get("/api/v1/dfsps", headers=auth_headers(maker))

    assert response.status_code == 200
    body = response.json()
    assert body["message"] == "OK"
    assert [d["fsp_id"] for d in body["data"]] == ["dfsp-a"]


@pytest.mark.asyncio
async def test_list_dfsps_requires_token(client: AsyncClient) -> None:
    response = await client.get("/api/v1/dfsps")

    assert response.status_code == 401
