"""
Audit API Routes

Administrative read and retention endpoints over the audit log.
"""

from datetime import UTC, datetime
from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from libs.result import Error
from src.api.error import ClientError, ServerError
from src.api.schemas import ApiResponse
from src.app.repositories.audit_log_repository import AuditLogFilters
from src.app.services.pagination import MAX_QUERY_INT
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.audit import (
    ActionStatEntry,
    AuditLogEntry,
    GetActionStatsUseCase,
    GetAuditLogsUseCase,
    GetUserAuditLogsUseCase,
    PurgeAuditLogsUseCase,
    PurgeResponse,
)
from src.depends import get_unit_of_work, require_policy

router = APIRouter(prefix="/audit", tags=["Audit"])

MAX_PAGE_SIZE = 100
# Keeps the row offset inside a 64-bit integer
MAX_PAGE = MAX_QUERY_INT // MAX_PAGE_SIZE
MAX_RETENTION_DAYS = 36500


def _naive_utc(value: Optional[datetime]) -> Optional[datetime]:
    # Stored timestamps are naive UTC
    if value is None or value.tzinfo is None:
        return value
    return value.astimezone(UTC).replace(tzinfo=None)


def _parse_uuid(raw: Optional[str]) -> Optional[UUID]:
    if raw is None:
        return None
    try:
        return UUID(raw)
    except ValueError:
        raise ClientError(Error("INVALID_ID", "Invalid user id"))


@router.get(
    "/logs",
    status_code=status.HTTP_200_OK,
    response_model=ApiResponse[List[AuditLogEntry]],
    response_model_exclude_none=True,
)
async def get_audit_logs(
    user_id: Optional[str] = Query(None, alias="userId"),
    action: Optional[str] = Query(None),
    resource: Optional[str] = Query(None),
    start_date: Optional[datetime] = Query(None, alias="startDate"),
    end_date: Optional[datetime] = Query(None, alias="endDate"),
    page: int = Query(1, ge=1, le=MAX_PAGE),
    limit: int = Query(50, ge=1, le=MAX_PAGE_SIZE, description="Maximum number of entries per page"),
    current_user: dict = Depends(require_policy("audit:read")),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Get Audit Logs (admin only)

    Query Parameters:
        - userId, action, resource: exact-match filters
        - startDate, endDate: inclusive created-at range
        - page, limit: page window (limit 1-100, default 50)

    Returns entries newest first with page metadata.
    """
    filters = AuditLogFilters(
        user_id=_parse_uuid(user_id),
        action=action,
        resource=resource,
        start_date=_naive_utc(start_date),
        end_date=_naive_utc(end_date),
    )

    result = await GetAuditLogsUseCase(uow).execute(filters, page=page, limit=limit)
    if result.is_err():
        raise ServerError(result.error)

    return ApiResponse(data=result.value.data, pagination=result.value.pagination)


@router.get(
    "/users/{user_id}/logs",
    status_code=status.HTTP_200_OK,
    response_model=ApiResponse[List[AuditLogEntry]],
    response_model_exclude_none=True,
)
async def get_user_audit_logs(
    user_id: str,
    limit: int = Query(50, ge=1, le=MAX_PAGE_SIZE),
    current_user: dict = Depends(require_policy("audit:read")),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await GetUserAuditLogsUseCase(uow).execute(_parse_uuid(user_id), limit=limit)
    if result.is_err():
        raise ServerError(result.error)

    return ApiResponse(data=result.value, count=len(result.value))


@router.get(
    "/stats",
    status_code=status.HTTP_200_OK,
    response_model=ApiResponse[List[ActionStatEntry]],
    response_model_exclude_none=True,
)
async def get_action_stats(
    days: int = Query(7, ge=1, le=365),
    current_user: dict = Depends(require_policy("audit:read")),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Action counts per day over the last ``days`` days (admin only)"""
    result = await GetActionStatsUseCase(uow).execute(days)
    if result.is_err():
        raise ServerError(result.error)

    return ApiResponse(data=result.value)


@router.delete(
    "/logs",
    status_code=status.HTTP_200_OK,
    response_model=ApiResponse[PurgeResponse],
    response_model_exclude_none=True,
)
async def purge_audit_logs(
    older_than_days: int = Query(90, ge=1, le=MAX_RETENTION_DAYS, alias="olderThanDays"),
    current_user: dict = Depends(require_policy("audit:purge")),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Delete entries older than the retention window (admin only)"""
    result = await PurgeAuditLogsUseCase(uow).execute(older_than_days)
    if result.is_err():
        raise ServerError(result.error)

    return ApiResponse(
        message=f"{result.value.deleted_count} audit log(s) deleted", data=result.value
    )
