"""
Change User Role Use Case

Handles an administrator assigning a new role to an account.
"""

from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.auth.dtos import UserProfile
from src.domain.base import utcnow
from src.domain.entities import UserRole

VALID_ROLES = [role.value for role in UserRole]


class ChangeRoleUseCase:
    """
    Use case for changing an account's role.

    Business Rules:
    - Role must be one of user, moderator, admin
    - Target user must exist
    - Tokens already issued keep their old role until they expire
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, target_user_id: UUID, new_role: str) -> Result[UserProfile]:
        """
        Execute change role use case.

        Args:
            target_user_id: User ID whose role is being changed
            new_role: New role to assign (user/moderator/admin)

        Returns:
            Result with the updated profile, or Error
        """
        async with self.uow:
            try:
                role = UserRole(new_role)
            except ValueError:
                return Return.err(
                    Error(
                        "INVALID_ROLE",
                        f"Invalid role: {new_role}. Must be one of: {', '.join(VALID_ROLES)}",
                    )
                )

            user = await self.uow.users.get_by_id(target_user_id)
            if user is None:
                return Return.err(Error("USER_NOT_FOUND", "User not found"))

            user.role = role
            user.updated_at = utcnow()
            user = await self.uow.users.update(user)
            await self.uow.commit()

            return Return.ok(UserProfile.from_user(user))
