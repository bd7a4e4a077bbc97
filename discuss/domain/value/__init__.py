"""Domain value objects."""

from discuss.domain.value.identifiers import CommentId, PageId, ProjectId, UserId
from discuss.domain.value.types import (
    CommentFilter,
    CommentOrder,
    CommentPatch,
    ModeratorIdentity,
    Pagination,
    ThreadOptions,
)

__all__ = [
    # Identifiers
    "CommentId",
    "PageId",
    "ProjectId",
    "UserId",
    # Types
    "CommentFilter",
    "CommentOrder",
    "CommentPatch",
    "ModeratorIdentity",
    "Pagination",
    "ThreadOptions",
]
