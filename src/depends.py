from typing import Optional

from fastapi import Depends, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from libs.result import Error
from src.adapter.database.mongo import MongoDatabase
from src.adapter.database.sql import SqlDatabase
from src.adapter.repositories.game_repository import GameRepository
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.api.error import ClientError
from src.api.utils.client_address import client_address
from src.api.utils.jwt import verify_jwt
from src.api.utils.policy import authorize
from src.app.services.audit_log_service import AuditLogService

# auto_error=False so a missing header reaches our own MISSING_TOKEN error
security = HTTPBearer(auto_error=False)


def get_config(request: Request):
    return request.app.state.config


def get_sql_database(request: Request) -> SqlDatabase:
    return request.app.state.sql


def get_mongo_database(request: Request) -> MongoDatabase:
    return request.app.state.mongo


async def get_unit_of_work(sql: SqlDatabase = Depends(get_sql_database)):
    async with sql.session_factory() as session:
        yield SqlAlchemyUnitOfWork(session)


def get_game_repository(mongo: MongoDatabase = Depends(get_mongo_database)) -> GameRepository:
    return GameRepository(mongo.database)


def get_audit_log_service(sql: SqlDatabase = Depends(get_sql_database)) -> AuditLogService:
    return AuditLogService(sql.transaction)


def client_ip(request: Request) -> Optional[str]:
    return client_address(request, request.app.state.config.TRUST_FORWARDED_FOR)


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> dict:
    """
    Dependency to extract and verify JWT token from Authorization header.

    Args:
        credentials: Bearer token from Authorization header

    Returns:
        Decoded JWT payload containing user_id, email, role

    Raises:
        ClientError: 401 MISSING_TOKEN if no bearer token was sent,
            401 INVALID_TOKEN if it is malformed or expired
    """
    if credentials is None or not credentials.credentials:
        raise ClientError(
            Error("MISSING_TOKEN", "Authentication token is required"),
            status_code=status.HTTP_401_UNAUTHORIZED,
        )

    payload = verify_jwt(credentials.credentials)
    if payload is None:
        raise ClientError(
            Error("INVALID_TOKEN", "Invalid or expired token"),
            status_code=status.HTTP_401_UNAUTHORIZED,
        )

    return payload


async def get_optional_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> Optional[dict]:
    """Identity if a valid token was sent, otherwise None; never rejects."""
    if credentials is None or not credentials.credentials:
        return None
    return verify_jwt(credentials.credentials)


def require_policy(policy: str):
    """Route dependency: authenticated identity allowed by the named policy."""

    async def dependency(current_user: dict = Depends(get_current_user)) -> dict:
        return authorize(current_user, policy)

    return dependency
