from unittest.mock import AsyncMock
from uuid import uuid4

import pytest

from src.app.services.audit_log_service import AuditLogService
from src.domain.entities import AuditAction


@pytest.mark.asyncio
async def test_log_inserts_entry_in_transaction(mock_uow):
    async def transaction(callback):
        return await callback(mock_uow)

    service = AuditLogService(transaction)
    user_id = uuid4()

    await service.log(
        AuditAction.game_created,
        "game",
        user_id=str(user_id),
        resource_id="abc",
        details={"title": "Elden Ring"},
        ip_address="127.0.0.1",
    )

    mock_uow.audit_logs.create.assert_awaited_once()
    entry = mock_uow.audit_logs.create.call_args.args[0]
    assert entry.action == "GAME_CREATED"
    assert entry.resource == "game"
    assert entry.user_id == user_id
    assert entry.resource_id == "abc"
    assert entry.details == {"title": "Elden Ring"}
    assert entry.ip_address == "127.0.0.1"


@pytest.mark.asyncio
async def test_log_accepts_missing_user():
    captured = []

    async def transaction(callback):
        uow = AsyncMock()
        uow.audit_logs.create = AsyncMock(side_effect=captured.append)
        return await callback(uow)

    await AuditLogService(transaction).log(AuditAction.login_failed, "auth")

    assert captured[0].user_id is None


@pytest.mark.asyncio
async def test_log_swallows_store_failures(caplog):
    transaction = AsyncMock(side_effect=RuntimeError("database is locked"))

    await AuditLogService(transaction).log(AuditAction.register, "auth")

    transaction.assert_awaited_once()
    assert "Failed to record audit log" in caplog.text


@pytest.mark.asyncio
async def test_log_swallows_bad_input():
    transaction = AsyncMock()

    await AuditLogService(transaction).log(AuditAction.register, "auth", user_id="not-a-uuid")

    transaction.assert_not_awaited()
