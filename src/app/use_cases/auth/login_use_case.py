"""
Login Use Case

Verifies credentials and issues a signed identity token.
"""

import bcrypt

from libs.result import Error, Result, Return
from src.api.utils.jwt import generate_jwt
from src.app.services.unit_of_work import UnitOfWork
from .dtos import AuthResponse, UserInfo

# Checked when no usable hash exists so every failure costs one bcrypt round
_DUMMY_HASH = bcrypt.hashpw(b"dummy_password", bcrypt.gensalt(12))

INVALID_CREDENTIALS = Error("INVALID_CREDENTIALS", "Invalid email or password")


class LoginUseCase:
    """
    Use case for user login and JWT issuance.

    Business Rules:
    - Unknown email, deactivated account and wrong password all return the
      same INVALID_CREDENTIALS error so accounts cannot be enumerated
    - A bcrypt comparison runs on every path to keep timing uniform
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, email: str, password: str) -> Result[AuthResponse]:
        """
        Execute login use case.

        Args:
            email: User email
            password: Plain text password

        Returns:
            Result with AuthResponse containing the token and user info, or Error
        """
        async with self.uow:
            user = await self.uow.users.get_by_email(email)

            if user is None or not user.is_active:
                bcrypt.checkpw(password.encode(), _DUMMY_HASH)
                return Return.err(INVALID_CREDENTIALS)

            if not bcrypt.checkpw(password.encode(), user.password_hash.encode()):
                return Return.err(INVALID_CREDENTIALS)

            token = generate_jwt(user.id, user.email, user.role.value)
            return Return.ok(AuthResponse(token=token, user=UserInfo.from_user(user)))
