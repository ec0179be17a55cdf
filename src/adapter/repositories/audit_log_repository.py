from datetime import datetime
from typing import List, Tuple
from uuid import UUID

from sqlalchemy import delete, func
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.audit_log_repository import (
    ActionStat,
    AuditLogFilters,
    IAuditLogRepository,
)
from src.domain.entities import AuditLog


def _conditions(filters: AuditLogFilters) -> list:
    conditions = []
    if filters.user_id is not None:
        conditions.append(AuditLog.user_id == filters.user_id)
    if filters.action:
        conditions.append(AuditLog.action == filters.action)
    if filters.resource:
        conditions.append(AuditLog.resource == filters.resource)
    if filters.start_date is not None:
        conditions.append(AuditLog.created_at >= filters.start_date)
    if filters.end_date is not None:
        conditions.append(AuditLog.created_at <= filters.end_date)
    return conditions


class AuditLogRepository(IAuditLogRepository):
    """AuditLog repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, audit_log: AuditLog) -> AuditLog:
        """Append a new audit log entry"""
        self.session.add(audit_log)
        await self.session.flush()
        await self.session.refresh(audit_log)
        return audit_log

    async def list_paginated(
        self, filters: AuditLogFilters, offset: int, limit: int
    ) -> Tuple[List[AuditLog], int]:
        conditions = _conditions(filters)

        stmt = (
            select(AuditLog)
            .where(*conditions)
            .order_by(AuditLog.created_at.desc(), AuditLog.id.desc())
            .offset(offset)
            .limit(limit)
        )
        result = await self.session.exec(stmt)
        logs = list(result.all())

        count_stmt = select(func.count()).select_from(AuditLog).where(*conditions)
        total = (await self.session.exec(count_stmt)).one()

        return logs, total

    async def list_by_user(self, user_id: UUID, limit: int = 50) -> List[AuditLog]:
        stmt = (
            select(AuditLog)
            .where(AuditLog.user_id == user_id)
            .order_by(AuditLog.created_at.desc(), AuditLog.id.desc())
            .limit(limit)
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def action_stats(self, since: datetime) -> List[ActionStat]:
        day = func.date(AuditLog.created_at)
        count = func.count()
        stmt = (
            select(AuditLog.action, day.label("day"), count.label("count"))
            .where(AuditLog.created_at >= since)
            .group_by(AuditLog.action, day)
            .order_by(day.desc(), count.desc())
        )
        result = await self.session.exec(stmt)
        return [
            ActionStat(action=action, date=str(date), count=total)
            for action, date, total in result.all()
        ]

    async def delete_older_than(self, cutoff: datetime) -> int:
        stmt = delete(AuditLog).where(AuditLog.created_at < cutoff)
        result = await self.session.exec(stmt)
        return result.rowcount or 0
