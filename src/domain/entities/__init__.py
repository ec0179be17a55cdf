"""
Game Catalog Domain Entities

All domain entities organized by model.
Each entity in its own file for better maintainability.
"""

# Export all enums
from .enums import (
    AuditAction,
    Genre,
    UserRole,
)

# Export all entities
from .user import User
from .audit_log import AuditLog
from .game import Game

__all__ = [
    # Enums
    "AuditAction",
    "Genre",
    "UserRole",
    # Entities
    "User",
    "AuditLog",
    "Game",
]
