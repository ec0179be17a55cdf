"""
Get Audit Logs Use Case

Retrieves audit log entries with optional filters and page-based pagination.
"""

from libs.result import Result, Return
from src.app.repositories.audit_log_repository import AuditLogFilters
from src.app.services.pagination import PaginationMeta
from src.app.services.unit_of_work import UnitOfWork
from .dtos import AuditLogEntry, AuditLogPage


class GetAuditLogsUseCase:
    """
    Use case for browsing the audit log.

    Business Rules:
    - Filters (user, action, resource, date range) combine with AND
    - Results ordered by newest first
    - Role checks happen at the route policy, not here
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, filters: AuditLogFilters, page: int = 1, limit: int = 50
    ) -> Result[AuditLogPage]:
        async with self.uow:
            logs, total = await self.uow.audit_logs.list_paginated(
                filters, offset=(page - 1) * limit, limit=limit
            )
            return Return.ok(
                AuditLogPage(
                    data=[AuditLogEntry.from_entity(log) for log in logs],
                    pagination=PaginationMeta.build(page, limit, total),
                )
            )
