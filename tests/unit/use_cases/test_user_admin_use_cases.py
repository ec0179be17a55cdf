from uuid import uuid4

import pytest

from src.app.use_cases.auth import GetProfileUseCase
from src.app.use_cases.users import (
    VALID_ROLES,
    ChangeRoleUseCase,
    DeactivateUserUseCase,
    ListUsersUseCase,
)
from src.domain.entities import User, UserRole


@pytest.fixture
def user():
    return User(
        username="gamer",
        email="gamer@example.com",
        password_hash="$2b$04$hash",
        role=UserRole.user,
    )


@pytest.mark.asyncio
async def test_change_role(mock_uow, user):
    mock_uow.users.get_by_id.return_value = user

    result = await ChangeRoleUseCase(mock_uow).execute(user.id, "moderator")

    assert result.is_ok()
    assert result.value.role == "moderator"
    assert user.role == UserRole.moderator
    mock_uow.commit.assert_awaited_once()


@pytest.mark.asyncio
async def test_change_role_rejects_unknown_role(mock_uow, user):
    mock_uow.users.get_by_id.return_value = user

    result = await ChangeRoleUseCase(mock_uow).execute(user.id, "superuser")

    assert result.error.code == "INVALID_ROLE"
    assert user.role == UserRole.user
    mock_uow.users.update.assert_not_awaited()
    assert VALID_ROLES == ["user", "moderator", "admin"]


@pytest.mark.asyncio
async def test_change_role_unknown_user(mock_uow):
    result = await ChangeRoleUseCase(mock_uow).execute(uuid4(), "admin")

    assert result.error.code == "USER_NOT_FOUND"
    mock_uow.commit.assert_not_awaited()


@pytest.mark.asyncio
async def test_deactivate_user(mock_uow, user):
    mock_uow.users.get_by_id.return_value = user

    result = await DeactivateUserUseCase(mock_uow).execute(user.id)

    assert result.value.is_active is False
    mock_uow.commit.assert_awaited_once()


@pytest.mark.asyncio
async def test_deactivate_unknown_user(mock_uow):
    result = await DeactivateUserUseCase(mock_uow).execute(uuid4())

    assert result.error.code == "USER_NOT_FOUND"


@pytest.mark.asyncio
async def test_list_users_never_exposes_password_hash(mock_uow, user):
    mock_uow.users.list_all.return_value = [user]

    result = await ListUsersUseCase(mock_uow).execute()

    body = result.value.model_dump(by_alias=True)
    assert body["users"][0]["username"] == "gamer"
    assert "passwordHash" not in body["users"][0]
    assert "password_hash" not in body["users"][0]


@pytest.mark.asyncio
async def test_profile_not_found(mock_uow):
    result = await GetProfileUseCase(mock_uow).execute(uuid4())

    assert result.error.code == "USER_NOT_FOUND"
