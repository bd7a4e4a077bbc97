"""Repository interfaces for the comment engine.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from discuss.domain.repository.comment import CommentRepository
from discuss.domain.repository.commenter import CommenterRepository
from discuss.domain.repository.page import PageRepository
from discuss.domain.repository.project import ProjectRepository
from discuss.domain.repository.transaction import TransactionManager

__all__ = [
    "CommentRepository",
    "CommenterRepository",
    "PageRepository",
    "ProjectRepository",
    "TransactionManager",
]
