"""
Game Catalog Domain Enums

All enumeration types used across domain entities.
"""

from enum import Enum


class UserRole(str, Enum):
    """Account role used for route authorization"""

    user = "user"
    moderator = "moderator"
    admin = "admin"


class Genre(str, Enum):
    """Fixed set of catalog genres"""

    action = "Action"
    adventure = "Adventure"
    rpg = "RPG"
    strategy = "Strategy"
    sports = "Sports"
    racing = "Racing"
    simulation = "Simulation"
    horror = "Horror"
    puzzle = "Puzzle"
    fighting = "Fighting"
    platformer = "Platformer"
    mmorpg = "MMORPG"


class AuditAction(str, Enum):
    """Security-relevant actions recorded in the audit log"""

    register = "REGISTER"
    login_success = "LOGIN_SUCCESS"
    login_failed = "LOGIN_FAILED"
    role_changed = "ROLE_CHANGED"
    user_deactivated = "USER_DEACTIVATED"
    game_created = "GAME_CREATED"
    game_updated = "GAME_UPDATED"
    game_deleted = "GAME_DELETED"
