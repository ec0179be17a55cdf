from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.auth.dtos import UserProfile
from src.domain.base import utcnow


class DeactivateUserUseCase:
    """
    Use case for disabling an account.

    Deactivated users fail login with the generic invalid-credentials error.
    Tokens already issued stay valid until they expire.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, target_user_id: UUID) -> Result[UserProfile]:
        async with self.uow:
            user = await self.uow.users.get_by_id(target_user_id)
            if user is None:
                return Return.err(Error("USER_NOT_FOUND", "User not found"))

            user.is_active = False
            user.updated_at = utcnow()
            user = await self.uow.users.update(user)
            await self.uow.commit()

            return Return.ok(UserProfile.from_user(user))
