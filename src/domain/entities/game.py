"""
Game Entity

Catalog record persisted in the document store.
"""

from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class Game(BaseModel):
    """
    Game entity - a catalog record as stored in the games collection.

    Field names are camelCase in the store and on the wire (releaseYear,
    inStock, createdAt); ``id`` is the hex form of the document ObjectId.
    Write-time constraints live on the create/update commands.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str
    title: str
    description: str
    genre: str
    platform: List[str]
    release_year: int
    publisher: str
    rating: float = 0
    price: float = 0
    in_stock: bool = True
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_document(cls, document: Dict[str, Any]) -> "Game":
        fields = {k: v for k, v in document.items() if k != "_id"}
        return cls.model_validate({**fields, "id": str(document["_id"])})
