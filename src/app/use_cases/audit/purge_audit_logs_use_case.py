from datetime import timedelta

from libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utcnow
from .dtos import PurgeResponse


class PurgeAuditLogsUseCase:
    """
    Retention purge.

    Deletes every entry older than ``older_than_days`` days in one statement.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, older_than_days: int = 90) -> Result[PurgeResponse]:
        async with self.uow:
            cutoff = utcnow() - timedelta(days=older_than_days)
            deleted = await self.uow.audit_logs.delete_older_than(cutoff)
            await self.uow.commit()
            return Return.ok(PurgeResponse(deleted_count=deleted, cutoff=cutoff))
