import bcrypt
from libs.result import Error, Result, Return

from config import ApplicationConfig
from src.api.utils.jwt import generate_jwt
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import User, UserRole
from .dtos import AuthResponse, UserInfo
from .register_dto import RegisterCommand


class RegisterUseCase:
    """
    Register Use Case

    Command/Response Pattern:
    - Input: RegisterCommand (validated business intent)
    - Output: Result[AuthResponse] (token + user info)

    Business Logic:
    1. Reject if the email is already registered
    2. Reject if the username is already taken (checked after email, first match wins)
    3. Hash password with bcrypt
    4. Create User with the default role
    5. Commit and issue a signed identity token
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, command: RegisterCommand) -> Result[AuthResponse]:
        async with self.uow:
            if await self.uow.users.get_by_email(command.email):
                return Return.err(
                    Error("EMAIL_ALREADY_EXISTS", "Email already registered")
                )

            if await self.uow.users.get_by_username(command.username):
                return Return.err(
                    Error("USERNAME_ALREADY_EXISTS", "Username already taken")
                )

            password_hash = bcrypt.hashpw(
                command.password.encode("utf-8"),
                bcrypt.gensalt(ApplicationConfig.BCRYPT_ROUNDS),
            )

            user = User(
                username=command.username,
                email=command.email,
                password_hash=password_hash.decode("utf-8"),
                role=UserRole.user,
            )
            # DuplicateKeyError propagates if a concurrent insert wins the race
            user = await self.uow.users.create(user)
            await self.uow.commit()

            token = generate_jwt(user.id, user.email, user.role.value)
            return Return.ok(AuthResponse(token=token, user=UserInfo.from_user(user)))
