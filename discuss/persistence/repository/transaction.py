"""SQLAlchemy session-backed transaction manager."""

from contextlib import asynccontextmanager
from typing import AsyncIterator

import logfire
from sqlalchemy.ext.asyncio import AsyncSession

from discuss.domain.repository import TransactionManager


class SqlAlchemyTransactionManager(TransactionManager):
    """Commits or rolls back the request's session around an atomic block.

    Blocks opened inside an open block join it; only the outermost block
    commits.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize transaction manager.

        Args:
            session: SQLAlchemy async session shared with the repositories
        """
        self.session = session
        self._depth = 0

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[None]:
        if self._depth:
            self._depth += 1
            try:
                yield
            finally:
                self._depth -= 1
            return

        # Reads issued before the block autobegin a transaction; start clean
        if self.session.in_transaction():
            await self.session.rollback()

        self._depth = 1
        try:
            yield
            await self.session.commit()
        except BaseException as e:
            await self.session.rollback()
            logfire.warn("Transaction rolled back", error=str(e))
            raise
        finally:
            self._depth = 0
