from libs.result import Result, Return
from src.app.repositories.game_repository import IGameRepository
from src.domain.entities import Game
from .get_game_use_case import GAME_NOT_FOUND, INVALID_ID


class DeleteGameUseCase:
    def __init__(self, games: IGameRepository):
        self.games = games

    async def execute(self, game_id: str) -> Result[Game]:
        if not self.games.is_valid_id(game_id):
            return Return.err(INVALID_ID)

        game = await self.games.delete(game_id)
        if game is None:
            return Return.err(GAME_NOT_FOUND)
        return Return.ok(game)
