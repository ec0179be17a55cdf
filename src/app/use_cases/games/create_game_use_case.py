from libs.result import Result, Return
from src.app.repositories.game_repository import IGameRepository
from src.domain.entities import Game
from .dtos import CreateGameCommand


class CreateGameUseCase:
    """Persist a new catalog record from an already validated command"""

    def __init__(self, games: IGameRepository):
        self.games = games

    async def execute(self, command: CreateGameCommand) -> Result[Game]:
        game = await self.games.create(command.to_fields())
        return Return.ok(game)
