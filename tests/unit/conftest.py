from unittest.mock import AsyncMock, MagicMock

import pytest


@pytest.fixture
def mock_uow():
    """Mock UnitOfWork with all repositories"""
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()

    uow.users = MagicMock()
    uow.users.get_by_email = AsyncMock(return_value=None)
    uow.users.get_by_username = AsyncMock(return_value=None)
    uow.users.get_by_id = AsyncMock(return_value=None)
    uow.users.list_all = AsyncMock(return_value=[])
    uow.users.create = AsyncMock(side_effect=lambda user: user)
    uow.users.update = AsyncMock(side_effect=lambda user: user)

    uow.audit_logs = MagicMock()
    uow.audit_logs.create = AsyncMock(side_effect=lambda log: log)
    uow.audit_logs.list_paginated = AsyncMock(return_value=([], 0))
    uow.audit_logs.list_by_user = AsyncMock(return_value=[])
    uow.audit_logs.action_stats = AsyncMock(return_value=[])
    uow.audit_logs.delete_older_than = AsyncMock(return_value=0)
    return uow


@pytest.fixture
def mock_games():
    """Mock game repository; ids are valid unless a test says otherwise"""
    games = MagicMock()
    games.is_valid_id = MagicMock(return_value=True)
    games.create = AsyncMock()
    games.get_by_id = AsyncMock(return_value=None)
    games.find = AsyncMock(return_value=[])
    games.count = AsyncMock(return_value=0)
    games.update = AsyncMock(return_value=None)
    games.delete = AsyncMock(return_value=None)
    games.distinct = AsyncMock(return_value=[])
    return games
