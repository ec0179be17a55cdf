"""
Search Games Use Case

Filters the catalog with any combination of optional criteria and
returns one page of matches.
"""

from libs.result import Result, Return
from src.app.repositories.game_repository import IGameRepository
from src.app.services.pagination import PaginationParams, paginate
from src.app.services.query_builder import GameSearchFilters, build_game_query
from .dtos import GameSearchResult


class SearchGamesUseCase:
    """
    Use case for filtered catalog search.

    Business Rules:
    - Filters combine with AND; absent filters impose no constraint
    - An empty result is a normal outcome, not an error
    - The applied filters are echoed back for the client
    """

    def __init__(self, games: IGameRepository):
        self.games = games

    async def execute(
        self, filters: GameSearchFilters, params: PaginationParams
    ) -> Result[GameSearchResult]:
        query = build_game_query(filters)
        data, pagination = await paginate(self.games, query, params)
        return Return.ok(
            GameSearchResult(
                data=data,
                pagination=pagination,
                filters=filters.model_dump(by_alias=True, exclude_none=True),
            )
        )
