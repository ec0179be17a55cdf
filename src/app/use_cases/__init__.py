"""
Use Cases

Organized into domain folders:
- auth/: Registration, login and profile
- users/: Account administration
- games/: Catalog reads and writes
- audit/: Audit log queries and retention

Import from subdirectories for better organization.
"""

from .auth import (
    RegisterUseCase,
    RegisterCommand,
    LoginUseCase,
    GetProfileUseCase,
)
from .users import (
    ListUsersUseCase,
    ChangeRoleUseCase,
    DeactivateUserUseCase,
)
from .games import (
    CreateGameUseCase,
    GetGameUseCase,
    ListGamesUseCase,
    SearchGamesUseCase,
    UpdateGameUseCase,
    DeleteGameUseCase,
)
from .audit import (
    GetAuditLogsUseCase,
    PurgeAuditLogsUseCase,
)

__all__ = [
    # Auth
    "RegisterUseCase",
    "RegisterCommand",
    "LoginUseCase",
    "GetProfileUseCase",
    # Users
    "ListUsersUseCase",
    "ChangeRoleUseCase",
    "DeactivateUserUseCase",
    # Games
    "CreateGameUseCase",
    "GetGameUseCase",
    "ListGamesUseCase",
    "SearchGamesUseCase",
    "UpdateGameUseCase",
    "DeleteGameUseCase",
    # Audit
    "GetAuditLogsUseCase",
    "PurgeAuditLogsUseCase",
]
