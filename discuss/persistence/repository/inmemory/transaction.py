"""In-memory transaction manager for testing."""

from contextlib import asynccontextmanager
from typing import AsyncIterator

from discuss.domain.repository.transaction import TransactionManager

from .store import InMemoryStore


class InMemoryTransactionManager(TransactionManager):
    """Snapshots the store on entry and restores it if the block raises."""

    def __init__(self, store: InMemoryStore) -> None:
        self.store = store
        self._depth = 0
        self.commits = 0
        self.rollbacks = 0

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[None]:
        if self._depth:
            self._depth += 1
            try:
                yield
            finally:
                self._depth -= 1
            return

        snapshot = self.store.snapshot()
        self._depth = 1
        try:
            yield
            self.commits += 1
        except BaseException:
            self.store.restore(snapshot)
            self.rollbacks += 1
            raise
        finally:
            self._depth = 0
