"""
Audit Log Service

Best-effort recorder of security-relevant actions. Each entry is written
in its own transaction, separate from the request's unit of work, and a
failed write is logged and dropped.
"""

import logging
from typing import Any, Awaitable, Callable, Dict, Optional, Union
from uuid import UUID

from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import AuditAction, AuditLog

logger = logging.getLogger(__name__)

TransactionRunner = Callable[[Callable[[UnitOfWork], Awaitable[Any]]], Awaitable[Any]]


class AuditLogService:
    def __init__(self, transaction: TransactionRunner):
        self.transaction = transaction

    async def log(
        self,
        action: Union[AuditAction, str],
        resource: str,
        user_id: Optional[Union[UUID, str]] = None,
        resource_id: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        ip_address: Optional[str] = None,
    ) -> None:
        try:
            entry = AuditLog(
                user_id=UUID(str(user_id)) if user_id else None,
                action=action.value if isinstance(action, AuditAction) else action,
                resource=resource,
                resource_id=resource_id,
                details=details,
                ip_address=ip_address,
            )

            async def insert(uow: UnitOfWork):
                await uow.audit_logs.create(entry)

            await self.transaction(insert)
        except Exception:
            logger.exception(f"Failed to record audit log {action} on {resource}")
