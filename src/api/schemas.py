"""
Response envelope shared by every route.

Routes declare ``response_model=ApiResponse[...]`` with
``response_model_exclude_none=True`` so absent members are omitted.
"""

from typing import Any, Dict, Generic, List, Optional, TypeVar

from pydantic import BaseModel

from src.app.services.pagination import PaginationMeta

T = TypeVar("T")


class FieldError(BaseModel):
    field: str
    message: str


class ApiResponse(BaseModel, Generic[T]):
    success: bool = True
    message: Optional[str] = None
    code: Optional[str] = None
    data: Optional[T] = None
    errors: Optional[List[FieldError]] = None
    pagination: Optional[PaginationMeta] = None
    filters: Optional[Dict[str, Any]] = None
    count: Optional[int] = None


def error_body(
    message: str,
    code: Optional[str] = None,
    errors: Optional[List[Dict[str, str]]] = None,
    **extra: Any,
) -> Dict[str, Any]:
    """Plain-dict failure envelope for exception handlers and middleware"""
    body: Dict[str, Any] = {"success": False, "message": message}
    if code:
        body["code"] = code
    if errors:
        body["errors"] = errors
    body.update(extra)
    return body
