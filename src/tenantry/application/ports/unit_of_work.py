"""UnitOfWork - the commit boundary for one request's writes.

Repositories only flush. Whatever runs inside ``async with unit_of_work:``
becomes durable together on a clean exit, or is rolled back together when
an exception escapes the block.
"""

from abc import ABC, abstractmethod
from types import TracebackType
from typing import Optional


class UnitOfWork(ABC):
    """Port for transactional grouping of repository writes."""

    async def __aenter__(self) -> "UnitOfWork":
        return self

    async def __aexit__(
        self,
        exc_type: Optional[type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        if exc_type is not None:
            await self.rollback()
            return
        try:
            await self.commit()
        except BaseException:
            await self.rollback()
            raise

    @abstractmethod
    async def commit(self) -> None:
        """Make all pending writes durable."""

    @abstractmethod
    async def rollback(self) -> None:
        """Discard all pending writes."""
