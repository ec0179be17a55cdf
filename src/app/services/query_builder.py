"""
Game search query builder.

Translates an optional-field filter object into a single document-store
predicate. Each filter field maps to one predicate function; the builder
folds the ordered rules over an empty constraint mapping, skipping absent
fields, so the result is the conjunction of every present constraint.
"""

import re
from typing import Any, Callable, Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from src.app.repositories.game_repository import GameQuery


class GameSearchFilters(BaseModel):
    """Optional search criteria; None means no constraint"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    keyword: Optional[str] = None
    genre: Optional[str] = None
    platform: Optional[str] = None
    min_rating: Optional[float] = None
    max_price: Optional[float] = None
    in_stock: Optional[bool] = None
    min_year: Optional[int] = None
    max_year: Optional[int] = None


def _contains(text: str) -> Dict[str, str]:
    return {"$regex": re.escape(text), "$options": "i"}


def _equals_ignore_case(text: str) -> Dict[str, str]:
    return {"$regex": f"^{re.escape(text)}$", "$options": "i"}


FilterRule = Tuple[str, Callable[[Any], GameQuery]]

FILTER_RULES: List[FilterRule] = [
    (
        "keyword",
        lambda v: {"$or": [{"title": _contains(v)}, {"description": _contains(v)}]},
    ),
    ("genre", lambda v: {"genre": _equals_ignore_case(v)}),
    # Matches when any element of the platform array contains the text
    ("platform", lambda v: {"platform": _contains(v)}),
    ("min_rating", lambda v: {"rating": {"$gte": v}}),
    ("max_price", lambda v: {"price": {"$lte": v}}),
    ("in_stock", lambda v: {"inStock": v}),
    ("min_year", lambda v: {"releaseYear": {"$gte": v}}),
    ("max_year", lambda v: {"releaseYear": {"$lte": v}}),
]


def _is_absent(value: Any) -> bool:
    if value is None:
        return True
    return isinstance(value, str) and value.strip() == ""


def _merge(query: GameQuery, constraint: GameQuery) -> GameQuery:
    for key, value in constraint.items():
        existing = query.get(key)
        if isinstance(existing, dict) and isinstance(value, dict):
            query[key] = {**existing, **value}
        else:
            query[key] = value
    return query


def build_game_query(filters: GameSearchFilters) -> GameQuery:
    query: GameQuery = {}
    for field, rule in FILTER_RULES:
        value = getattr(filters, field)
        if _is_absent(value):
            continue
        if isinstance(value, str):
            value = value.strip()
        _merge(query, rule(value))
    return query
