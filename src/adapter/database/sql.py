"""
Relational store client.

One instance per process, built by the composition root and handed to
request dependencies. The engine and its bounded connection pool are
created lazily on first use.
"""

import logging
from typing import Awaitable, Callable, Optional, TypeVar

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.domain import entities  # noqa: F401  registers tables on SQLModel.metadata

logger = logging.getLogger(__name__)

T = TypeVar("T")


class SqlDatabase:
    def __init__(self, uri: str, pool_size: int = 10, max_overflow: int = 0, echo: bool = False):
        self.uri = uri
        self.pool_size = pool_size
        self.max_overflow = max_overflow
        self.echo = echo
        self._engine: Optional[AsyncEngine] = None
        self._session_factory = None

    @property
    def engine(self) -> AsyncEngine:
        if self._engine is None:
            options = {"echo": self.echo, "future": True}
            # SQLite uses its own single-file pool; size options apply to server databases
            if not self.uri.startswith("sqlite"):
                options.update(
                    pool_size=self.pool_size,
                    max_overflow=self.max_overflow,
                    pool_pre_ping=True,
                )
            self._engine = create_async_engine(self.uri, **options)
        return self._engine

    @property
    def session_factory(self):
        if self._session_factory is None:
            self._session_factory = sessionmaker(
                self.engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
            )
        return self._session_factory

    async def create_tables(self):
        async with self.engine.begin() as conn:
            await conn.run_sync(SQLModel.metadata.create_all)

    async def drop_tables(self):
        async with self.engine.begin() as conn:
            await conn.run_sync(SQLModel.metadata.drop_all)

    async def ping(self) -> bool:
        try:
            async with self.engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
            return True
        except Exception as exc:
            logger.warning(f"Relational store ping failed: {exc}")
            return False

    async def transaction(self, callback: Callable[[SqlAlchemyUnitOfWork], Awaitable[T]]) -> T:
        """
        Run callback inside a single transaction.

        Commits when callback returns, rolls back and re-raises when it fails.
        The session is released in every case.
        """
        async with self.session_factory() as session:
            uow = SqlAlchemyUnitOfWork(session)
            async with uow:
                result = await callback(uow)
                await uow.commit()
                return result

    async def dispose(self):
        if self._engine is not None:
            await self._engine.dispose()
            self._engine = None
            self._session_factory = None
