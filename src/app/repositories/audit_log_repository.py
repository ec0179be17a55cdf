from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime
from typing import List, Optional, Tuple
from uuid import UUID

from src.domain.entities import AuditLog


@dataclass
class AuditLogFilters:
    user_id: Optional[UUID] = None
    action: Optional[str] = None
    resource: Optional[str] = None
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None


@dataclass
class ActionStat:
    action: str
    date: str
    count: int


class IAuditLogRepository(ABC):
    """AuditLog repository interface - application layer"""

    @abstractmethod
    async def create(self, audit_log: AuditLog) -> AuditLog:
        """Append a new audit log entry"""
        pass

    @abstractmethod
    async def list_paginated(
        self, filters: AuditLogFilters, offset: int, limit: int
    ) -> Tuple[List[AuditLog], int]:
        """
        Get audit logs matching filters, newest first.

        Returns:
            Tuple of (logs for the requested window, total matching count)
        """
        pass

    @abstractmethod
    async def list_by_user(self, user_id: UUID, limit: int = 50) -> List[AuditLog]:
        """Get the most recent audit logs of one user"""
        pass

    @abstractmethod
    async def action_stats(self, since: datetime) -> List[ActionStat]:
        """Count entries per action and day since the given timestamp"""
        pass

    @abstractmethod
    async def delete_older_than(self, cutoff: datetime) -> int:
        """Delete entries created before cutoff, returning the number removed"""
        pass
