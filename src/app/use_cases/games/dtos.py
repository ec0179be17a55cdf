"""
Game Use Case DTOs (Data Transfer Objects)

Commands carry the write-time constraints of a catalog record; every
constraint is checked before anything reaches the store.
"""

from typing import Annotated, Any, Dict, List, Optional

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationInfo,
    field_validator,
    model_validator,
)
from pydantic.alias_generators import to_camel

from src.app.services.pagination import PaginationMeta
from src.domain.base import utcnow
from src.domain.entities import Game, Genre

MIN_RELEASE_YEAR = 1970

PlatformName = Annotated[str, Field(min_length=1)]


def _check_release_year(value: Optional[int]) -> Optional[int]:
    if value is not None and value > utcnow().year + 2:
        raise ValueError(f"releaseYear must be at most {utcnow().year + 2}")
    return value


class GameCommandBase(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, str_strip_whitespace=True
    )

    def to_fields(self) -> Dict[str, Any]:
        """Store representation: camelCase keys, enum values, no unset fields"""
        return self.model_dump(by_alias=True, exclude_none=True, mode="json")


class CreateGameCommand(GameCommandBase):
    title: str = Field(..., min_length=2, max_length=200)
    description: str = Field(..., min_length=10, max_length=2000)
    genre: Genre
    platform: List[PlatformName] = Field(..., min_length=1)
    release_year: int = Field(..., ge=MIN_RELEASE_YEAR)
    publisher: str = Field(..., min_length=1)
    rating: float = Field(0, ge=0, le=10)
    price: float = Field(0, ge=0)
    in_stock: bool = True

    @field_validator("release_year")
    @classmethod
    def check_release_year(cls, value):
        return _check_release_year(value)


class UpdateGameCommand(GameCommandBase):
    title: Optional[str] = Field(None, min_length=2, max_length=200)
    description: Optional[str] = Field(None, min_length=10, max_length=2000)
    genre: Optional[Genre] = None
    platform: Optional[List[PlatformName]] = Field(None, min_length=1)
    release_year: Optional[int] = Field(None, ge=MIN_RELEASE_YEAR)
    publisher: Optional[str] = Field(None, min_length=1)
    rating: Optional[float] = Field(None, ge=0, le=10)
    price: Optional[float] = Field(None, ge=0)
    in_stock: Optional[bool] = None

    @field_validator("*", mode="before")
    @classmethod
    def reject_explicit_null(cls, value, info: ValidationInfo):
        # Omitting a field keeps its stored value; null is never a value
        if value is None:
            raise ValueError(f"{to_camel(info.field_name)} cannot be null")
        return value

    @field_validator("release_year")
    @classmethod
    def check_release_year(cls, value):
        return _check_release_year(value)

    @model_validator(mode="after")
    def check_not_empty(self):
        if not self.to_fields():
            raise ValueError("At least one field must be provided")
        return self


class GamePage(BaseModel):
    data: List[Game]
    pagination: PaginationMeta


class GameSearchResult(GamePage):
    filters: Dict[str, Any]


class GenresResponse(BaseModel):
    genres: List[str]


class PlatformsResponse(BaseModel):
    platforms: List[str]


class GameCountResponse(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    total_games: int
