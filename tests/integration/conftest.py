import pytest
import pytest_asyncio

from config import ApplicationConfig
from src.adapter.database.mongo import MongoDatabase
from src.adapter.database.sql import SqlDatabase
from tests.fixtures.json_loader import TestDataLoader
from tests.utils.api_helpers import IntegrationConfig, build_client, headers_for
from tests.utils.mongo_client import InMemoryMongoClient


@pytest.fixture(autouse=True)
def fast_bcrypt(monkeypatch):
    monkeypatch.setattr(ApplicationConfig, "BCRYPT_ROUNDS", 4)


@pytest.fixture
def test_data():
    return TestDataLoader()


@pytest_asyncio.fixture
async def sql(tmp_path):
    database = SqlDatabase(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")
    await database.create_tables()
    yield database
    await database.drop_tables()
    await database.dispose()


@pytest_asyncio.fixture
async def mongo():
    database = MongoDatabase("mongodb://test", "gamedb_test", client=InMemoryMongoClient())
    yield database
    await database.close()


@pytest_asyncio.fixture
async def db_session(sql):
    async with sql.session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def client(sql, mongo):
    async with build_client(IntegrationConfig, sql, mongo) as ac:
        yield ac


@pytest_asyncio.fixture
async def admin_headers(client, sql):
    return await headers_for(client, sql, "admin")


@pytest_asyncio.fixture
async def moderator_headers(client, sql):
    return await headers_for(client, sql, "moderator")


@pytest_asyncio.fixture
async def user_headers(client, sql):
    return await headers_for(client, sql, "user")


@pytest_asyncio.fixture
async def seeded_games(client, admin_headers):
    """Create every fixture game through the API; returns the created records"""
    created = []
    for game in TestDataLoader.games():
        response = await client.post("/api/games", json=game, headers=admin_headers)
        assert response.status_code == 201
        created.append(response.json()["data"])
    return created
