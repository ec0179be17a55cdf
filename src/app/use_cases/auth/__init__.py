"""
Authentication Use Cases

All authentication-related business logic.
"""

from .register_use_case import RegisterUseCase
from .register_dto import RegisterCommand
from .login_use_case import LoginUseCase
from .get_profile_use_case import GetProfileUseCase
from .dtos import AuthResponse, UserInfo, UserListResponse, UserProfile

__all__ = [
    # Use Cases
    "RegisterUseCase",
    "LoginUseCase",
    "GetProfileUseCase",
    # DTOs - Commands
    "RegisterCommand",
    # DTOs - Responses
    "AuthResponse",
    "UserProfile",
    "UserListResponse",
    # DTOs - Nested Models
    "UserInfo",
]
