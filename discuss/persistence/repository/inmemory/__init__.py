"""In-memory repository implementations for testing."""

from .comment import InMemoryCommentRepository
from .commenter import InMemoryCommenterRepository
from .page import InMemoryPageRepository
from .project import InMemoryProjectRepository
from .store import InMemoryStore
from .transaction import InMemoryTransactionManager

__all__ = [
    "InMemoryCommentRepository",
    "InMemoryCommenterRepository",
    "InMemoryPageRepository",
    "InMemoryProjectRepository",
    "InMemoryStore",
    "InMemoryTransactionManager",
]
