"""SQLAlchemy implementation of the UnitOfWork port."""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from tenantry.application.ports import UnitOfWork

logger = logging.getLogger(__name__)


class UnitOfWorkSQLAlchemy(UnitOfWork):
    """Commits or rolls back the request's AsyncSession as one transaction.

    Repositories built on the same session only flush; nothing is durable
    until this unit of work commits.
    """

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    @property
    def session(self) -> AsyncSession:
        return self._session

    async def commit(self) -> None:
        await self._session.commit()

    async def rollback(self) -> None:
        await self._session.rollback()
        logger.debug("Rolled back pending changes")
