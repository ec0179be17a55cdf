"""
Authentication Use Case DTOs (Data Transfer Objects)

Response classes for the auth and user-management domain.
Serialized with camelCase keys to match the rest of the API.
"""

from datetime import datetime
from typing import List

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from src.domain.entities import User


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class UserInfo(CamelModel):
    """Public user information returned with a token"""

    id: str
    username: str
    email: str
    role: str

    @classmethod
    def from_user(cls, user: User) -> "UserInfo":
        return cls(
            id=str(user.id), username=user.username, email=user.email, role=user.role.value
        )


class UserProfile(CamelModel):
    """Full user profile, never including the password hash"""

    id: str
    username: str
    email: str
    role: str
    is_active: bool
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_user(cls, user: User) -> "UserProfile":
        return cls(
            id=str(user.id),
            username=user.username,
            email=user.email,
            role=user.role.value,
            is_active=user.is_active,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )


class AuthResponse(CamelModel):
    """Response for register and login use cases"""

    token: str
    user: UserInfo


class UserListResponse(CamelModel):
    users: List[UserProfile]
