import logging

from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.repositories.audit_log_repository import AuditLogRepository
from src.adapter.repositories.user_repository import UserRepository
from src.app.services.unit_of_work import UnitOfWork

logger = logging.getLogger(__name__)


class SqlAlchemyUnitOfWork(UnitOfWork):
    """
    Relational unit of work over one AsyncSession.

    Repositories share the session, so everything written between entering
    the block and ``commit`` lands atomically. Leaving the block without a
    commit discards pending writes.
    """

    def __init__(self, session: AsyncSession):
        self.session = session
        self.users = UserRepository(session)
        self.audit_logs = AuditLogRepository(session)

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb):
        if exc_type is not None:
            logger.debug(f"Rolling back unit of work after {exc_type.__name__}")
        await self.rollback()

    async def commit(self):
        await self.session.commit()

    async def rollback(self):
        await self.session.rollback()
