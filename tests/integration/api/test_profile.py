from datetime import timedelta
from uuid import uuid4

import pytest
from httpx import AsyncClient

from src.api.utils.jwt import generate_jwt


@pytest.mark.asyncio
async def test_profile_of_authenticated_user(client: AsyncClient, user_headers):
    response = await client.get("/api/auth/profile", headers=user_headers)

    assert response.status_code == 200
    profile = response.json()["data"]
    assert profile["username"] == "player"
    assert profile["isActive"] is True
    assert "createdAt" in profile
    assert "passwordHash" not in profile


@pytest.mark.asyncio
async def test_missing_token(client: AsyncClient):
    response = await client.get("/api/auth/profile")

    assert response.status_code == 401
    assert response.json()["code"] == "MISSING_TOKEN"


@pytest.mark.asyncio
async def test_invalid_token(client: AsyncClient):
    response = await client.get(
        "/api/auth/profile", headers={"Authorization": "Bearer not.a.token"}
    )

    assert response.status_code == 401
    assert response.json()["code"] == "INVALID_TOKEN"


@pytest.mark.asyncio
async def test_expired_token(client: AsyncClient):
    token = generate_jwt(uuid4(), "gamer@example.com", "user", expires_delta=timedelta(seconds=-5))

    response = await client.get("/api/auth/profile", headers={"Authorization": f"Bearer {token}"})

    assert response.status_code == 401
    assert response.json()["code"] == "INVALID_TOKEN"


@pytest.mark.asyncio
async def test_profile_of_deleted_account(client: AsyncClient):
    token = generate_jwt(uuid4(), "ghost@example.com", "user")

    response = await client.get("/api/auth/profile", headers={"Authorization": f"Bearer {token}"})

    assert response.status_code == 404
    assert response.json()["code"] == "USER_NOT_FOUND"
