"""
Audit Use Case DTOs (Data Transfer Objects)
"""

from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from src.app.services.pagination import PaginationMeta
from src.domain.entities import AuditLog


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class AuditLogEntry(CamelModel):
    """Single audit log entry in responses"""

    id: int
    user_id: Optional[str]
    action: str
    resource: str
    resource_id: Optional[str]
    details: Optional[Dict[str, Any]]
    ip_address: Optional[str]
    created_at: datetime

    @classmethod
    def from_entity(cls, log: AuditLog) -> "AuditLogEntry":
        return cls(
            id=log.id,
            user_id=str(log.user_id) if log.user_id else None,
            action=log.action,
            resource=log.resource,
            resource_id=log.resource_id,
            details=log.details,
            ip_address=log.ip_address,
            created_at=log.created_at,
        )


class AuditLogPage(BaseModel):
    data: List[AuditLogEntry]
    pagination: PaginationMeta


class ActionStatEntry(CamelModel):
    action: str
    date: str
    count: int


class PurgeResponse(CamelModel):
    deleted_count: int
    cutoff: datetime
