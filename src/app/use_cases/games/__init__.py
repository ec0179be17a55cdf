"""
Game Catalog Use Cases

All catalog-related business logic.
"""

from .create_game_use_case import CreateGameUseCase
from .get_game_use_case import GetGameUseCase
from .list_games_use_case import ListGamesUseCase
from .search_games_use_case import SearchGamesUseCase
from .update_game_use_case import UpdateGameUseCase
from .delete_game_use_case import DeleteGameUseCase
from .catalog_stats_use_case import (
    CountGamesUseCase,
    ListGenresUseCase,
    ListPlatformsUseCase,
)
from .dtos import (
    CreateGameCommand,
    UpdateGameCommand,
    GamePage,
    GameSearchResult,
    GameCountResponse,
    GenresResponse,
    PlatformsResponse,
)

__all__ = [
    # Use Cases
    "CreateGameUseCase",
    "GetGameUseCase",
    "ListGamesUseCase",
    "SearchGamesUseCase",
    "UpdateGameUseCase",
    "DeleteGameUseCase",
    "CountGamesUseCase",
    "ListGenresUseCase",
    "ListPlatformsUseCase",
    # DTOs - Commands
    "CreateGameCommand",
    "UpdateGameCommand",
    # DTOs - Responses
    "GamePage",
    "GameSearchResult",
    "GameCountResponse",
    "GenresResponse",
    "PlatformsResponse",
]
