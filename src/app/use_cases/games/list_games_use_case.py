from libs.result import Result, Return
from src.app.repositories.game_repository import IGameRepository
from src.app.services.pagination import PaginationParams, paginate
from .dtos import GamePage


class ListGamesUseCase:
    """One page of the whole catalog, sorted by the requested field"""

    def __init__(self, games: IGameRepository):
        self.games = games

    async def execute(self, params: PaginationParams) -> Result[GamePage]:
        data, pagination = await paginate(self.games, {}, params)
        return Return.ok(GamePage(data=data, pagination=pagination))
