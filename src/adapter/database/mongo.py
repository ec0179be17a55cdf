"""
Document store client.

A single shared AsyncMongoClient multiplexes every catalog operation.
Tests inject an in-memory client through the ``client`` argument.
"""

import logging

from pymongo import ASCENDING, DESCENDING, TEXT, AsyncMongoClient

from src.adapter.repositories.game_repository import GAMES_COLLECTION

logger = logging.getLogger(__name__)


class MongoDatabase:
    def __init__(self, uri: str, db_name: str, client=None):
        self.uri = uri
        self.db_name = db_name
        self._client = client

    @property
    def client(self):
        if self._client is None:
            self._client = AsyncMongoClient(self.uri)
        return self._client

    @property
    def database(self):
        return self.client[self.db_name]

    async def ping(self) -> bool:
        try:
            await self.database.command("ping")
            return True
        except Exception as exc:
            logger.warning(f"Document store ping failed: {exc}")
            return False

    async def ensure_indexes(self):
        games = self.database[GAMES_COLLECTION]
        await games.create_index([("title", TEXT), ("description", TEXT)])
        await games.create_index([("genre", ASCENDING)])
        await games.create_index([("rating", DESCENDING)])
        await games.create_index([("releaseYear", DESCENDING)])

    async def close(self):
        if self._client is not None:
            await self._client.close()
            self._client = None
