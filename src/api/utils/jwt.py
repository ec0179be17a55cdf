from datetime import UTC, datetime, timedelta
from typing import Optional
from uuid import UUID

from jose import JWTError, jwt

from config import ApplicationConfig


def generate_jwt(
    user_id: UUID, email: str, role: str, expires_delta: Optional[timedelta] = None
) -> str:
    """
    Generate JWT access token

    Args:
        user_id: User UUID
        email: User email
        role: User role (user, moderator, admin)
        expires_delta: Token lifetime, defaults to JWT_EXPIRES_MINUTES

    Returns:
        JWT token string (HS256)
    """
    if expires_delta is None:
        expires_delta = timedelta(minutes=ApplicationConfig.JWT_EXPIRES_MINUTES)
    now = datetime.now(UTC)
    payload = {
        "user_id": str(user_id),
        "email": email,
        "role": role,
        "exp": now + expires_delta,
        "iat": now,
    }
    return jwt.encode(payload, ApplicationConfig.JWT_SECRET, algorithm="HS256")


def verify_jwt(token: str) -> Optional[dict]:
    """
    Verify and decode JWT token

    Args:
        token: JWT token string

    Returns:
        Decoded payload dict or None if invalid or expired
    """
    try:
        payload = jwt.decode(
            token, ApplicationConfig.JWT_SECRET, algorithms=["HS256"]
        )
    except JWTError:
        return None

    if not all(key in payload for key in ("user_id", "email", "role")):
        return None
    return payload
