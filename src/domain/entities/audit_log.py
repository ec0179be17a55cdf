"""
AuditLog Entity

Append-only record of security-relevant actions.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID

from sqlmodel import Column, DateTime, Field, Index, JSON, SQLModel

from src.domain.base import utcnow


class AuditLog(SQLModel, table=True):
    """
    AuditLog entity - append-only log of security-relevant actions.

    Business Rules:
    - Never updated; rows are only removed by retention purge
    - user_id is nulled when the referenced user is deleted
    - Writes are best-effort and must not fail the triggering request
    """

    __tablename__ = "audit_logs"

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: Optional[UUID] = Field(
        default=None, foreign_key="users.id", ondelete="SET NULL", nullable=True
    )

    action: str = Field(max_length=50)  # e.g., "LOGIN_SUCCESS"
    resource: str = Field(max_length=50)  # e.g., "auth", "game"
    resource_id: Optional[str] = Field(default=None, max_length=100)
    details: Optional[dict] = Field(default=None, sa_column=Column(JSON))
    ip_address: Optional[str] = Field(default=None, max_length=45)

    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (
        Index("idx_audit_user", "user_id"),
        Index("idx_audit_action", "action"),
        Index("idx_audit_resource", "resource"),
        Index("idx_audit_created", "created_at"),
    )
