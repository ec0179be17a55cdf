from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, Tuple

from src.domain.entities import Game

# Store query predicate, e.g. {"rating": {"$gte": 9}}
GameQuery = Dict[str, Any]
# Ordered (field, direction) pairs; direction 1 ascending, -1 descending
SortSpec = List[Tuple[str, int]]


class IGameRepository(ABC):
    """Game repository interface - application layer"""

    @abstractmethod
    def is_valid_id(self, game_id: str) -> bool:
        """Whether game_id is a well-formed store identifier"""
        pass

    @abstractmethod
    async def create(self, fields: Dict[str, Any]) -> Game:
        """Insert a new game document"""
        pass

    @abstractmethod
    async def get_by_id(self, game_id: str) -> Optional[Game]:
        """Get game by ID"""
        pass

    @abstractmethod
    async def find(
        self, query: GameQuery, sort: SortSpec, skip: int, limit: int
    ) -> List[Game]:
        """Get one window of games matching query in sort order"""
        pass

    @abstractmethod
    async def count(self, query: Optional[GameQuery] = None) -> int:
        """Count games matching query (all games when query is None)"""
        pass

    @abstractmethod
    async def update(self, game_id: str, fields: Dict[str, Any]) -> Optional[Game]:
        """Set fields on a game, returning the updated game or None if absent"""
        pass

    @abstractmethod
    async def delete(self, game_id: str) -> Optional[Game]:
        """Delete a game, returning the removed game or None if absent"""
        pass

    @abstractmethod
    async def distinct(self, field: str) -> List[Any]:
        """Distinct values of a field across the catalog"""
        pass
