import logging

from sqlmodel.ext.asyncio.session import AsyncSession
from repair_shop.app.services.unit_of_work import UnitOfWork

logger = logging.getLogger(__name__)


class SqlAlchemyUnitOfWork(UnitOfWork):
    """
    Transaction boundary over the request session

    Orders, items and payments written by one use case share the session,
    so a single commit persists them together.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb):
        if exc_type is not None:
            logger.warning(f"Rolling back transaction after {exc_type.__name__}: {exc}")
        await self.rollback()

    async def commit(self):
        await self.session.commit()

    async def rollback(self):
        await self.session.rollback()
