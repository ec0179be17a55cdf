from libs.result import Error, Result, Return
from src.app.repositories.game_repository import IGameRepository
from src.domain.entities import Game

INVALID_ID = Error("INVALID_ID", "Invalid game id")
GAME_NOT_FOUND = Error("GAME_NOT_FOUND", "Game not found")


class GetGameUseCase:
    def __init__(self, games: IGameRepository):
        self.games = games

    async def execute(self, game_id: str) -> Result[Game]:
        if not self.games.is_valid_id(game_id):
            return Return.err(INVALID_ID)

        game = await self.games.get_by_id(game_id)
        if game is None:
            return Return.err(GAME_NOT_FOUND)
        return Return.ok(game)
