from typing import Any, Dict, List, Optional

from bson import ObjectId
from bson.errors import InvalidId
from pymongo import ReturnDocument
from pymongo.errors import DuplicateKeyError as MongoDuplicateKeyError

from src.app.repositories.game_repository import GameQuery, IGameRepository, SortSpec
from src.domain.base import utcnow
from src.domain.entities import Game
from src.domain.errors import DuplicateKeyError

GAMES_COLLECTION = "games"


def _now():
    # BSON dates keep millisecond precision
    now = utcnow()
    return now.replace(microsecond=now.microsecond // 1000 * 1000)


def _object_id(game_id: str) -> Optional[ObjectId]:
    try:
        return ObjectId(game_id)
    except (InvalidId, TypeError):
        return None


class GameRepository(IGameRepository):
    """Game repository implementation over an async Mongo database handle"""

    def __init__(self, database):
        self.collection = database[GAMES_COLLECTION]

    def is_valid_id(self, game_id: str) -> bool:
        return ObjectId.is_valid(game_id)

    async def create(self, fields: Dict[str, Any]) -> Game:
        now = _now()
        document = {**fields, "createdAt": now, "updatedAt": now}
        try:
            result = await self.collection.insert_one(document)
        except MongoDuplicateKeyError as exc:
            key_value = (exc.details or {}).get("keyValue") or {"_id": None}
            field, value = next(iter(key_value.items()))
            raise DuplicateKeyError(field, value) from exc
        document["_id"] = result.inserted_id
        return Game.from_document(document)

    async def get_by_id(self, game_id: str) -> Optional[Game]:
        oid = _object_id(game_id)
        if oid is None:
            return None
        document = await self.collection.find_one({"_id": oid})
        return Game.from_document(document) if document else None

    async def find(
        self, query: GameQuery, sort: SortSpec, skip: int, limit: int
    ) -> List[Game]:
        cursor = self.collection.find(query, sort=sort, skip=skip, limit=limit)
        documents = await cursor.to_list(length=None)
        return [Game.from_document(document) for document in documents]

    async def count(self, query: Optional[GameQuery] = None) -> int:
        return await self.collection.count_documents(query or {})

    async def update(self, game_id: str, fields: Dict[str, Any]) -> Optional[Game]:
        oid = _object_id(game_id)
        if oid is None:
            return None
        document = await self.collection.find_one_and_update(
            {"_id": oid},
            {"$set": {**fields, "updatedAt": _now()}},
            return_document=ReturnDocument.AFTER,
        )
        return Game.from_document(document) if document else None

    async def delete(self, game_id: str) -> Optional[Game]:
        oid = _object_id(game_id)
        if oid is None:
            return None
        document = await self.collection.find_one_and_delete({"_id": oid})
        return Game.from_document(document) if document else None

    async def distinct(self, field: str) -> List[Any]:
        return sorted(await self.collection.distinct(field))
