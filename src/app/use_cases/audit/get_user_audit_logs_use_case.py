from typing import List
from uuid import UUID

from libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from .dtos import AuditLogEntry


class GetUserAuditLogsUseCase:
    """Most recent audit entries attributed to one user"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: UUID, limit: int = 50) -> Result[List[AuditLogEntry]]:
        async with self.uow:
            logs = await self.uow.audit_logs.list_by_user(user_id, limit=limit)
            return Return.ok([AuditLogEntry.from_entity(log) for log in logs])
