from libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.auth.dtos import UserListResponse, UserProfile


class ListUsersUseCase:
    """List every account (admin operation)"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self) -> Result[UserListResponse]:
        async with self.uow:
            users = await self.uow.users.list_all()
            return Return.ok(
                UserListResponse(users=[UserProfile.from_user(user) for user in users])
            )
