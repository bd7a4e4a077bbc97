"""Mock persistence providers for testing."""

from dishka import Scope, provide

from discuss.domain.repository import (
    CommenterRepository,
    CommentRepository,
    PageRepository,
    ProjectRepository,
    TransactionManager,
)
from discuss.persistence.repository.inmemory import (
    InMemoryCommenterRepository,
    InMemoryCommentRepository,
    InMemoryPageRepository,
    InMemoryProjectRepository,
    InMemoryStore,
    InMemoryTransactionManager,
)
from discuss.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    Uses REQUEST scope to ensure test isolation - each test gets a fresh
    store shared by its repositories and transaction manager.
    """

    __is_mock__ = True

    @provide(scope=Scope.REQUEST)
    def get_store(self) -> InMemoryStore:
        """Provide the shared in-memory tables."""
        return InMemoryStore()

    @provide(scope=Scope.REQUEST)
    def get_inmemory_transaction_manager(
        self, store: InMemoryStore
    ) -> InMemoryTransactionManager:
        """Provide in-memory transaction manager."""
        return InMemoryTransactionManager(store)

    @provide(scope=Scope.REQUEST)
    def get_transaction_manager(
        self, transaction_manager: InMemoryTransactionManager
    ) -> TransactionManager:
        """Expose the in-memory transaction manager through the domain interface."""
        return transaction_manager

    @provide(scope=Scope.REQUEST)
    def get_comment_repository(self, store: InMemoryStore) -> CommentRepository:
        """Provide in-memory comment repository."""
        return InMemoryCommentRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_commenter_repository(self, store: InMemoryStore) -> CommenterRepository:
        """Provide in-memory commenter repository."""
        return InMemoryCommenterRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_page_repository(self, store: InMemoryStore) -> PageRepository:
        """Provide in-memory page repository."""
        return InMemoryPageRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_project_repository(self, store: InMemoryStore) -> ProjectRepository:
        """Provide in-memory project repository."""
        return InMemoryProjectRepository(store)
