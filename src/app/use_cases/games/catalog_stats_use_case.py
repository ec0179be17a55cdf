"""
Catalog Stats Use Cases

Aggregate views over the whole catalog; none require authentication.
"""

from libs.result import Result, Return
from src.app.repositories.game_repository import IGameRepository
from .dtos import GameCountResponse, GenresResponse, PlatformsResponse


class CountGamesUseCase:
    def __init__(self, games: IGameRepository):
        self.games = games

    async def execute(self) -> Result[GameCountResponse]:
        return Return.ok(GameCountResponse(total_games=await self.games.count()))


class ListGenresUseCase:
    def __init__(self, games: IGameRepository):
        self.games = games

    async def execute(self) -> Result[GenresResponse]:
        return Return.ok(GenresResponse(genres=await self.games.distinct("genre")))


class ListPlatformsUseCase:
    def __init__(self, games: IGameRepository):
        self.games = games

    async def execute(self) -> Result[PlatformsResponse]:
        return Return.ok(PlatformsResponse(platforms=await self.games.distinct("platform")))
