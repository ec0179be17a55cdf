"""
Audit Use Cases

All audit-related business logic.
"""

from .get_audit_logs_use_case import GetAuditLogsUseCase
from .get_user_audit_logs_use_case import GetUserAuditLogsUseCase
from .get_action_stats_use_case import GetActionStatsUseCase
from .purge_audit_logs_use_case import PurgeAuditLogsUseCase
from .dtos import ActionStatEntry, AuditLogEntry, AuditLogPage, PurgeResponse

__all__ = [
    "GetAuditLogsUseCase",
    "GetUserAuditLogsUseCase",
    "GetActionStatsUseCase",
    "PurgeAuditLogsUseCase",
    "ActionStatEntry",
    "AuditLogEntry",
    "AuditLogPage",
    "PurgeResponse",
]
