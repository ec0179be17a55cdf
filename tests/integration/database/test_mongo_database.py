from unittest.mock import AsyncMock, MagicMock

import pytest

from src.adapter.database.mongo import MongoDatabase


@pytest.mark.asyncio
async def test_ping(mongo):
    assert await mongo.ping() is True


@pytest.mark.asyncio
async def test_close_awaits_client_and_forgets_it():
    client = MagicMock()
    client.close = AsyncMock()
    database = MongoDatabase("mongodb://test", "gamedb_test", client=client)

    await database.close()
    await database.close()

    client.close.assert_awaited_once()
    assert database._client is None
