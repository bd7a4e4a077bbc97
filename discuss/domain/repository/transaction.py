"""Transaction boundary interface."""

from abc import ABC, abstractmethod
from contextlib import AbstractAsyncContextManager


class TransactionManager(ABC):
    """Unit-of-work boundary shared by the repositories of one request.

    Usage:
        async with transaction_manager.transaction():
            await comment_repository.update_many(...)
            await commenter_repository.upsert(...)

    Leaving the block normally commits every write made through the
    request's repositories; an exception rolls all of them back and is
    re-raised.
    """

    @abstractmethod
    def transaction(self) -> AbstractAsyncContextManager[None]:
        """Open an atomic block."""
        pass
