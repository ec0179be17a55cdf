import pytest
from httpx import AsyncClient

from tests.utils.api_helpers import login, register


async def _user_id(client: AsyncClient, headers: dict) -> str:
    response = await client.get("/api/auth/profile", headers=headers)
    return response.json()["data"]["id"]


@pytest.mark.asyncio
async def test_admin_lists_users_with_count(client: AsyncClient, admin_headers, user_headers):
    response = await client.get("/api/auth/users", headers=admin_headers)

    assert response.status_code == 200
    body = response.json()
    assert body["count"] == 2
    assert {user["username"] for user in body["data"]} == {"admin", "player"}
    assert all("passwordHash" not in user for user in body["data"])


@pytest.mark.asyncio
async def test_standard_user_cannot_list_users(client: AsyncClient, user_headers):
    """A valid token with an insufficient role yields 403 with diagnostics"""
    response = await client.get("/api/auth/users", headers=user_headers)

    assert response.status_code == 403
    body = response.json()
    assert body["success"] is False
    assert body["code"] == "INSUFFICIENT_ROLE"
    assert body["requiredRoles"] == ["admin"]
    assert body["userRole"] == "user"


@pytest.mark.asyncio
async def test_list_users_requires_token(client: AsyncClient):
    response = await client.get("/api/auth/users")

    assert response.status_code == 401


@pytest.mark.asyncio
async def test_change_role(client: AsyncClient, admin_headers, user_headers):
    user_id = await _user_id(client, user_headers)

    response = await client.patch(
        f"/api/auth/users/{user_id}/role", json={"role": "moderator"}, headers=admin_headers
    )

    assert response.status_code == 200
    assert response.json()["data"]["role"] == "moderator"

    # New tokens carry the new role
    relogin = await login(client, "player@example.com", "PlayerPass123")
    assert relogin.json()["data"]["user"]["role"] == "moderator"


@pytest.mark.asyncio
async def test_change_role_rejects_unknown_role(client: AsyncClient, admin_headers, user_headers):
    user_id = await _user_id(client, user_headers)

    response = await client.patch(
        f"/api/auth/users/{user_id}/role", json={"role": "superuser"}, headers=admin_headers
    )

    assert response.status_code == 400
    body = response.json()
    assert body["code"] == "INVALID_ROLE"
    assert body["validRoles"] == ["user", "moderator", "admin"]


@pytest.mark.asyncio
async def test_change_role_unknown_user(client: AsyncClient, admin_headers):
    response = await client.patch(
        "/api/auth/users/00000000-0000-0000-0000-000000000000/role",
        json={"role": "admin"},
        headers=admin_headers,
    )

    assert response.status_code == 404


@pytest.mark.asyncio
async def test_change_role_malformed_id(client: AsyncClient, admin_headers):
    response = await client.patch(
        "/api/auth/users/not-a-uuid/role", json={"role": "admin"}, headers=admin_headers
    )

    assert response.status_code == 400
    assert response.json()["code"] == "INVALID_ID"


@pytest.mark.asyncio
async def test_deactivated_user_cannot_login(client: AsyncClient, admin_headers):
    await register(client, "leaving", "leaving@example.com", "secret123")
    users = (await client.get("/api/auth/users", headers=admin_headers)).json()["data"]
    user_id = next(user["id"] for user in users if user["username"] == "leaving")

    response = await client.patch(f"/api/auth/users/{user_id}/deactivate", headers=admin_headers)

    assert response.status_code == 200
    assert response.json()["data"]["isActive"] is False

    relogin = await login(client, "leaving@example.com", "secret123")
    assert relogin.status_code == 401
    assert relogin.json()["code"] == "INVALID_CREDENTIALS"
