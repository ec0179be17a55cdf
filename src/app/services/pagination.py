"""
Pagination engine.

Query-string inputs go through explicit parse steps that yield either a
usable value or a named default. ``paginate`` fetches one page and the
matching total concurrently and derives the page metadata.
"""

import asyncio
import math
import re
from dataclasses import dataclass
from typing import List, Optional, Tuple

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from src.app.repositories.game_repository import GameQuery, IGameRepository, SortSpec
from src.domain.entities import Game

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10
DEFAULT_SORT_ORDER = "desc"

SORTABLE_FIELDS = frozenset(
    {
        "title",
        "genre",
        "publisher",
        "releaseYear",
        "rating",
        "price",
        "inStock",
        "createdAt",
        "updatedAt",
    }
)

# Largest integer a document-store query can carry (signed 64-bit)
MAX_QUERY_INT = 2**63 - 1

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")
_LEADING_FLOAT = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def parse_int(raw: Optional[str]) -> Optional[int]:
    """Leading-integer parse ("12abc" -> 12); None when nothing parses or out of range."""
    if raw is None:
        return None
    match = _LEADING_INT.match(str(raw))
    if not match:
        return None
    digits = match.group(1)
    # Longer than any 64-bit value; also keeps int() clear of its digit limit
    if len(digits.lstrip("+-")) > 19:
        return None
    value = int(digits)
    return value if -MAX_QUERY_INT - 1 <= value <= MAX_QUERY_INT else None


def parse_float(raw: Optional[str]) -> Optional[float]:
    """Leading-number parse ("9.5/10" -> 9.5); None when nothing parses or not finite."""
    if raw is None:
        return None
    match = _LEADING_FLOAT.match(str(raw))
    if not match:
        return None
    value = float(match.group(1))
    return value if math.isfinite(value) else None


def parse_bool(raw: Optional[str]) -> Optional[bool]:
    if raw is None:
        return None
    lowered = str(raw).strip().lower()
    if lowered in ("true", "1"):
        return True
    if lowered in ("false", "0"):
        return False
    return None


def parse_positive_int(raw: Optional[str], default: int) -> int:
    value = parse_int(raw)
    if value is None or value < 1:
        return default
    return value


@dataclass(frozen=True)
class PaginationParams:
    page: int = DEFAULT_PAGE
    limit: int = DEFAULT_LIMIT
    sort_by: str = "createdAt"
    sort_order: str = DEFAULT_SORT_ORDER

    @classmethod
    def from_query(
        cls,
        page: Optional[str] = None,
        limit: Optional[str] = None,
        sort_by: Optional[str] = None,
        sort_order: Optional[str] = None,
        default_sort_by: str = "createdAt",
        max_limit: Optional[int] = None,
    ) -> "PaginationParams":
        parsed_limit = parse_positive_int(limit, DEFAULT_LIMIT)
        if max_limit is not None:
            parsed_limit = min(parsed_limit, max_limit)
        parsed_page = parse_positive_int(page, DEFAULT_PAGE)
        if (parsed_page - 1) * parsed_limit > MAX_QUERY_INT:
            parsed_page = DEFAULT_PAGE
        return cls(
            page=parsed_page,
            limit=parsed_limit,
            sort_by=sort_by if sort_by in SORTABLE_FIELDS else default_sort_by,
            sort_order="asc" if sort_order == "asc" else DEFAULT_SORT_ORDER,
        )

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit

    def sort_spec(self) -> SortSpec:
        direction = 1 if self.sort_order == "asc" else -1
        # _id breaks ties so page windows never overlap or skip records
        return [(self.sort_by, direction), ("_id", direction)]


class PaginationMeta(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    current_page: int
    total_pages: int
    total_items: int
    items_per_page: int
    has_next_page: bool
    has_previous_page: bool

    @classmethod
    def build(cls, page: int, limit: int, total_items: int) -> "PaginationMeta":
        total_pages = math.ceil(total_items / limit)
        return cls(
            current_page=page,
            total_pages=total_pages,
            total_items=total_items,
            items_per_page=limit,
            has_next_page=page < total_pages,
            has_previous_page=page > 1,
        )


async def paginate(
    games: IGameRepository, query: GameQuery, params: PaginationParams
) -> Tuple[List[Game], PaginationMeta]:
    items, total = await asyncio.gather(
        games.find(query, params.sort_spec(), params.offset, params.limit),
        games.count(query),
    )
    return items, PaginationMeta.build(params.page, params.limit, total)
