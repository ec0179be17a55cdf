import asyncio

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel

from src.adapter.database.mongo import MongoDatabase
from src.adapter.database.sql import SqlDatabase
from src.domain.base import utcnow
from src.depends import get_mongo_database, get_sql_database

router = APIRouter(tags=["Health"])


class StoreStatus(BaseModel):
    mongodb: str
    relational: str


class HealthResponse(BaseModel):
    success: bool
    message: str
    timestamp: str
    database: StoreStatus


def _status(connected: bool) -> str:
    return "connected" if connected else "disconnected"


@router.get("/health", status_code=status.HTTP_200_OK, response_model=HealthResponse)
async def health(
    sql: SqlDatabase = Depends(get_sql_database),
    mongo: MongoDatabase = Depends(get_mongo_database),
):
    """Liveness plus connectivity of both stores; always 200 while the process runs"""
    mongo_ok, sql_ok = await asyncio.gather(mongo.ping(), sql.ping())
    return HealthResponse(
        success=True,
        message="API is running",
        timestamp=utcnow().isoformat() + "Z",
        database=StoreStatus(mongodb=_status(mongo_ok), relational=_status(sql_ok)),
    )
