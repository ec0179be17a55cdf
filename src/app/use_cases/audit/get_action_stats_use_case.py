from datetime import timedelta
from typing import List

from libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utcnow
from .dtos import ActionStatEntry


class GetActionStatsUseCase:
    """Counts per action and day over the trailing window of ``days`` days"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, days: int = 7) -> Result[List[ActionStatEntry]]:
        async with self.uow:
            stats = await self.uow.audit_logs.action_stats(utcnow() - timedelta(days=days))
            return Return.ok(
                [
                    ActionStatEntry(action=stat.action, date=stat.date, count=stat.count)
                    for stat in stats
                ]
            )
