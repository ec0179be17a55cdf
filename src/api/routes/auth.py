from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, Request, status
from pydantic import BaseModel, EmailStr, Field

from libs.result import Error
from src.api.error import ClientError, ServerError
from src.api.schemas import ApiResponse
from src.app.services.audit_log_service import AuditLogService
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.auth import (
    AuthResponse,
    GetProfileUseCase,
    LoginUseCase,
    RegisterCommand,
    RegisterUseCase,
    UserProfile,
)
from src.app.use_cases.users import (
    VALID_ROLES,
    ChangeRoleUseCase,
    DeactivateUserUseCase,
    ListUsersUseCase,
)
from src.domain.entities import AuditAction
from src.depends import (
    client_ip,
    get_audit_log_service,
    get_current_user,
    get_unit_of_work,
    require_policy,
)

router = APIRouter(prefix="/auth", tags=["Authentication"])

INVALID_USER_ID = Error("INVALID_ID", "Invalid user id")


def _parse_user_id(raw: str) -> UUID:
    try:
        return UUID(raw)
    except ValueError:
        raise ClientError(INVALID_USER_ID)


class RegisterRequest(BaseModel):
    """
    Register HTTP request payload

    Validates incoming HTTP request before converting to RegisterCommand.
    """

    username: str = Field(..., min_length=3, max_length=50, description="Public username")
    email: EmailStr = Field(..., description="User email address")
    password: str = Field(..., min_length=6, max_length=72, description="User password (6 to 72 chars)")


@router.post(
    "/register",
    status_code=status.HTTP_201_CREATED,
    response_model=ApiResponse[AuthResponse],
    response_model_exclude_none=True,
)
async def register(
    request: RegisterRequest,
    http_request: Request,
    uow: UnitOfWork = Depends(get_unit_of_work),
    audit: AuditLogService = Depends(get_audit_log_service),
):
    """
    User Registration

    Creates a standard account and returns a signed token.

    Raises:
        - 400 Bad Request: Invalid input, email or username already taken
        - 409 Conflict: Concurrent registration won the unique constraint
    """
    command = RegisterCommand(
        username=request.username, email=request.email.lower(), password=request.password
    )

    use_case = RegisterUseCase(uow)
    result = await use_case.execute(command)

    if result.is_err():
        error = result.error
        if error.code in ("EMAIL_ALREADY_EXISTS", "USERNAME_ALREADY_EXISTS"):
            raise ClientError(error)
        raise ServerError(error)

    await audit.log(
        AuditAction.register,
        "auth",
        user_id=result.value.user.id,
        details={"username": command.username, "email": command.email},
        ip_address=client_ip(http_request),
    )
    return ApiResponse(message="User registered successfully", data=result.value)


class LoginRequest(BaseModel):
    email: EmailStr = Field(..., description="User email address")
    password: str = Field(..., min_length=1, description="User password")


@router.post(
    "/login",
    status_code=status.HTTP_200_OK,
    response_model=ApiResponse[AuthResponse],
    response_model_exclude_none=True,
)
async def login(
    request: LoginRequest,
    http_request: Request,
    uow: UnitOfWork = Depends(get_unit_of_work),
    audit: AuditLogService = Depends(get_audit_log_service),
):
    """
    User Login

    Every failure (unknown email, deactivated account, wrong password)
    returns the same 401 INVALID_CREDENTIALS. Attempts are audited either way.
    """
    email = request.email.lower()
    use_case = LoginUseCase(uow)
    result = await use_case.execute(email, request.password)

    await audit.log(
        AuditAction.login_failed if result.is_err() else AuditAction.login_success,
        "auth",
        user_id=None if result.is_err() else result.value.user.id,
        details={"email": email},
        ip_address=client_ip(http_request),
    )

    if result.is_err():
        error = result.error
        if error.code == "INVALID_CREDENTIALS":
            raise ClientError(error, status_code=status.HTTP_401_UNAUTHORIZED)
        raise ServerError(error)

    return ApiResponse(message="Login successful", data=result.value)


@router.get(
    "/profile",
    status_code=status.HTTP_200_OK,
    response_model=ApiResponse[UserProfile],
    response_model_exclude_none=True,
)
async def get_profile(
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    use_case = GetProfileUseCase(uow)
    result = await use_case.execute(_parse_user_id(current_user["user_id"]))

    if result.is_err():
        error = result.error
        if error.code == "USER_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        raise ServerError(error)

    return ApiResponse(data=result.value)


@router.get(
    "/users",
    status_code=status.HTTP_200_OK,
    response_model=ApiResponse[List[UserProfile]],
    response_model_exclude_none=True,
)
async def list_users(
    current_user: dict = Depends(require_policy("users:list")),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """List every account (admin only)"""
    use_case = ListUsersUseCase(uow)
    result = await use_case.execute()

    if result.is_err():
        raise ServerError(result.error)

    users = result.value.users
    return ApiResponse(data=users, count=len(users))


class ChangeRoleRequest(BaseModel):
    role: str = Field(..., description="New role (user, moderator, admin)")


@router.patch(
    "/users/{user_id}/role",
    status_code=status.HTTP_200_OK,
    response_model=ApiResponse[UserProfile],
    response_model_exclude_none=True,
)
async def change_user_role(
    user_id: str,
    request: ChangeRoleRequest,
    http_request: Request,
    current_user: dict = Depends(require_policy("users:change_role")),
    uow: UnitOfWork = Depends(get_unit_of_work),
    audit: AuditLogService = Depends(get_audit_log_service),
):
    """
    Change User Role (admin only)

    Raises:
        - 400 Bad Request: Unknown role (response lists validRoles) or malformed id
        - 404 Not Found: No such user
    """
    target_id = _parse_user_id(user_id)

    use_case = ChangeRoleUseCase(uow)
    result = await use_case.execute(target_id, request.role)

    if result.is_err():
        error = result.error
        if error.code == "INVALID_ROLE":
            raise ClientError(error, extra={"validRoles": VALID_ROLES})
        if error.code == "USER_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        raise ServerError(error)

    await audit.log(
        AuditAction.role_changed,
        "user",
        user_id=current_user["user_id"],
        resource_id=str(target_id),
        details={"newRole": request.role},
        ip_address=client_ip(http_request),
    )
    return ApiResponse(message="Role updated successfully", data=result.value)


@router.patch(
    "/users/{user_id}/deactivate",
    status_code=status.HTTP_200_OK,
    response_model=ApiResponse[UserProfile],
    response_model_exclude_none=True,
)
async def deactivate_user(
    user_id: str,
    http_request: Request,
    current_user: dict = Depends(require_policy("users:deactivate")),
    uow: UnitOfWork = Depends(get_unit_of_work),
    audit: AuditLogService = Depends(get_audit_log_service),
):
    """Deactivate an account (admin only); the user can no longer log in"""
    target_id = _parse_user_id(user_id)

    use_case = DeactivateUserUseCase(uow)
    result = await use_case.execute(target_id)

    if result.is_err():
        error = result.error
        if error.code == "USER_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        raise ServerError(error)

    await audit.log(
        AuditAction.user_deactivated,
        "user",
        user_id=current_user["user_id"],
        resource_id=str(target_id),
        ip_address=client_ip(http_request),
    )
    return ApiResponse(message="User deactivated successfully", data=result.value)
