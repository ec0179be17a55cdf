from datetime import datetime

import pytest

from src.app.services.pagination import PaginationParams
from src.app.services.query_builder import GameSearchFilters
from src.app.use_cases.games import (
    CountGamesUseCase,
    CreateGameCommand,
    CreateGameUseCase,
    DeleteGameUseCase,
    GetGameUseCase,
    ListGamesUseCase,
    ListGenresUseCase,
    SearchGamesUseCase,
    UpdateGameCommand,
    UpdateGameUseCase,
)
from src.domain.entities import Game

GAME_ID = "65a1f0c2e4b0a1b2c3d4e5f6"


@pytest.fixture
def game():
    return Game(
        id=GAME_ID,
        title="Elden Ring",
        description="An epic open-world action RPG by FromSoftware",
        genre="RPG",
        platform=["PC"],
        release_year=2022,
        publisher="Bandai Namco",
        rating=9.5,
        price=59.99,
        in_stock=True,
        created_at=datetime(2024, 1, 1),
        updated_at=datetime(2024, 1, 1),
    )


@pytest.mark.asyncio
async def test_create_passes_store_fields(mock_games, game):
    mock_games.create.return_value = game
    command = CreateGameCommand.model_validate(
        {
            "title": "Elden Ring",
            "description": "An epic open-world action RPG by FromSoftware",
            "genre": "RPG",
            "platform": ["PC"],
            "releaseYear": 2022,
            "publisher": "Bandai Namco",
        }
    )

    result = await CreateGameUseCase(mock_games).execute(command)

    assert result.value is game
    fields = mock_games.create.call_args.args[0]
    assert fields["releaseYear"] == 2022
    assert "release_year" not in fields


@pytest.mark.asyncio
async def test_get_malformed_id(mock_games):
    mock_games.is_valid_id.return_value = False

    result = await GetGameUseCase(mock_games).execute("not-an-id")

    assert result.error.code == "INVALID_ID"
    mock_games.get_by_id.assert_not_awaited()


@pytest.mark.asyncio
async def test_get_missing_game(mock_games):
    result = await GetGameUseCase(mock_games).execute(GAME_ID)

    assert result.error.code == "GAME_NOT_FOUND"


@pytest.mark.asyncio
async def test_update_sends_only_present_fields(mock_games, game):
    mock_games.update.return_value = game

    result = await UpdateGameUseCase(mock_games).execute(
        GAME_ID, UpdateGameCommand.model_validate({"inStock": False})
    )

    assert result.is_ok()
    mock_games.update.assert_awaited_once_with(GAME_ID, {"inStock": False})


@pytest.mark.asyncio
async def test_update_missing_game(mock_games):
    result = await UpdateGameUseCase(mock_games).execute(
        GAME_ID, UpdateGameCommand.model_validate({"price": 10})
    )

    assert result.error.code == "GAME_NOT_FOUND"


@pytest.mark.asyncio
async def test_delete_returns_deleted_game(mock_games, game):
    mock_games.delete.return_value = game

    result = await DeleteGameUseCase(mock_games).execute(GAME_ID)

    assert result.value.title == "Elden Ring"


@pytest.mark.asyncio
async def test_list_uses_empty_query(mock_games, game):
    mock_games.find.return_value = [game]
    mock_games.count.return_value = 1

    result = await ListGamesUseCase(mock_games).execute(PaginationParams())

    mock_games.find.assert_awaited_once_with({}, [("createdAt", -1), ("_id", -1)], 0, 10)
    assert result.value.pagination.total_items == 1


@pytest.mark.asyncio
async def test_search_echoes_applied_filters(mock_games):
    filters = GameSearchFilters(genre="RPG", min_rating=9)

    result = await SearchGamesUseCase(mock_games).execute(
        filters, PaginationParams(sort_by="rating")
    )

    query = mock_games.find.call_args.args[0]
    assert query["rating"] == {"$gte": 9}
    assert result.value.filters == {"genre": "RPG", "minRating": 9}
    assert result.value.data == []
    assert result.value.pagination.total_pages == 0


@pytest.mark.asyncio
async def test_stats(mock_games):
    mock_games.count.return_value = 4
    mock_games.distinct.return_value = ["Adventure", "RPG"]

    count = await CountGamesUseCase(mock_games).execute()
    genres = await ListGenresUseCase(mock_games).execute()

    assert count.value.model_dump(by_alias=True) == {"totalGames": 4}
    assert genres.value.genres == ["Adventure", "RPG"]
    mock_games.distinct.assert_awaited_once_with("genre")
