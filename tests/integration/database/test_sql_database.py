import pytest
from sqlmodel import select

from src.domain.entities import User, UserRole


def _user(username: str) -> User:
    return User(
        username=username,
        email=f"{username}@example.com",
        password_hash="$2b$04$hash",
        role=UserRole.user,
    )


@pytest.mark.asyncio
async def test_transaction_commits(sql, db_session):
    async def create(uow):
        return await uow.users.create(_user("committed"))

    created = await sql.transaction(create)

    result = await db_session.exec(select(User).where(User.id == created.id))
    assert result.one().username == "committed"


@pytest.mark.asyncio
async def test_transaction_rolls_back_on_failure(sql, db_session):
    async def create_then_fail(uow):
        await uow.users.create(_user("rolled_back"))
        raise RuntimeError("boom")

    with pytest.raises(RuntimeError):
        await sql.transaction(create_then_fail)

    result = await db_session.exec(select(User).where(User.username == "rolled_back"))
    assert result.one_or_none() is None


@pytest.mark.asyncio
async def test_duplicate_email_raises_domain_error(sql):
    from src.domain.errors import DuplicateKeyError

    async def create(uow):
        await uow.users.create(_user("first"))

    await sql.transaction(create)

    async def create_duplicate(uow):
        duplicate = _user("second")
        duplicate.email = "first@example.com"
        await uow.users.create(duplicate)

    with pytest.raises(DuplicateKeyError) as exc_info:
        await sql.transaction(create_duplicate)

    assert exc_info.value.field == "email"
    assert exc_info.value.value == "first@example.com"


@pytest.mark.asyncio
async def test_ping(sql):
    assert await sql.ping() is True
