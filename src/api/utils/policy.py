"""
Route Authorization Policies

Central table of which roles may call each protected operation.
Routes reference a policy by name; ``authorize`` is the single check.
"""

from typing import Dict, FrozenSet, List, Optional

from fastapi import status
from libs.result import Error
from src.api.error import ClientError
from src.domain.entities import UserRole

ADMIN_ONLY = frozenset({UserRole.admin})
STAFF = frozenset({UserRole.admin, UserRole.moderator})

ROUTE_POLICIES: Dict[str, FrozenSet[UserRole]] = {
    "games:create": STAFF,
    "games:update": STAFF,
    "games:delete": ADMIN_ONLY,
    "users:list": ADMIN_ONLY,
    "users:change_role": ADMIN_ONLY,
    "users:deactivate": ADMIN_ONLY,
    "audit:read": ADMIN_ONLY,
    "audit:purge": ADMIN_ONLY,
}


def required_roles(policy: str) -> List[str]:
    # Keep declaration order of the enum for stable responses
    allowed = ROUTE_POLICIES[policy]
    return [role.value for role in UserRole if role in allowed]


def authorize(identity: Optional[dict], policy: str) -> dict:
    """
    Check an authenticated identity against a route policy.

    Raises:
        ClientError: 401 if there is no identity, 403 if the role is not allowed
    """
    if identity is None:
        raise ClientError(
            Error("UNAUTHENTICATED", "Authentication is required to access this resource"),
            status_code=status.HTTP_401_UNAUTHORIZED,
        )

    roles = required_roles(policy)
    if identity.get("role") not in roles:
        raise ClientError(
            Error(
                "INSUFFICIENT_ROLE",
                "You do not have the permissions required to access this resource",
            ),
            status_code=status.HTTP_403_FORBIDDEN,
            extra={"requiredRoles": roles, "userRole": identity.get("role")},
        )

    return identity
