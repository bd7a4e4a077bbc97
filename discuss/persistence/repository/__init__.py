"""PostgreSQL repository implementations."""

from discuss.persistence.repository.comment import PostgresCommentRepository
from discuss.persistence.repository.commenter import PostgresCommenterRepository
from discuss.persistence.repository.page import PostgresPageRepository
from discuss.persistence.repository.project import PostgresProjectRepository
from discuss.persistence.repository.transaction import SqlAlchemyTransactionManager

__all__ = [
    "PostgresCommentRepository",
    "PostgresCommenterRepository",
    "PostgresPageRepository",
    "PostgresProjectRepository",
    "SqlAlchemyTransactionManager",
]
