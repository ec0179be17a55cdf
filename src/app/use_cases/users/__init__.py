"""
User Management Use Cases

Administrative operations on accounts.
"""

from .list_users_use_case import ListUsersUseCase
from .change_role_use_case import ChangeRoleUseCase, VALID_ROLES
from .deactivate_user_use_case import DeactivateUserUseCase

__all__ = [
    "ListUsersUseCase",
    "ChangeRoleUseCase",
    "DeactivateUserUseCase",
    "VALID_ROLES",
]
