from mongomock_motor import AsyncMongoMockClient


class InMemoryMongoClient(AsyncMongoMockClient):
    """In-memory client with the awaitable ``close`` of pymongo's AsyncMongoClient"""

    async def close(self):
        # Nothing is held open by the in-memory store
        return None
