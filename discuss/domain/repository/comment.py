"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import Optional, Sequence

from discuss.domain.model.comment import Comment
from discuss.domain.value import (
    CommentFilter,
    CommentId,
    CommentOrder,
    CommentPatch,
    Pagination,
)


class CommentRepository(ABC):
    """Repository for Comment entity.

    Defines the contract for comment persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID, deleted or not.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_many(
        self,
        criteria: CommentFilter,
        pagination: Optional[Pagination] = None,
        order: CommentOrder = CommentOrder.NEWEST_FIRST,
    ) -> list[Comment]:
        """Find comments matching the criteria.

        Args:
            criteria: Selection criteria
            pagination: Optional offset/limit window
            order: Ordering by creation time

        Returns:
            Matching comments in the requested order
        """
        pass

    @abstractmethod
    async def count(self, criteria: CommentFilter) -> int:
        """Count comments matching the criteria."""
        pass

    @abstractmethod
    async def exists(self, criteria: CommentFilter) -> bool:
        """Check whether at least one comment matches the criteria."""
        pass

    @abstractmethod
    async def count_by_parent(self, criteria: CommentFilter) -> dict[CommentId, int]:
        """Count matching comments grouped by parent.

        Used to attach reply counts to a page of comments in one query.
        Parents with no matching replies are absent from the result.

        Args:
            criteria: Selection criteria (typically with ``parent_ids`` set)

        Returns:
            Mapping of parent comment ID to number of matching replies
        """
        pass

    @abstractmethod
    async def create(self, comment: Comment) -> Comment:
        """Insert a new comment.

        Args:
            comment: The comment to insert

        Returns:
            The stored comment
        """
        pass

    @abstractmethod
    async def update_many(
        self, comment_ids: Sequence[CommentId], patch: CommentPatch
    ) -> int:
        """Apply a partial update to every listed comment.

        Unknown IDs are ignored.

        Args:
            comment_ids: Comments to update
            patch: Fields to write

        Returns:
            Number of comments updated
        """
        pass

    @abstractmethod
    async def delete_many(self, comment_ids: Sequence[CommentId]) -> int:
        """Permanently remove comments.

        Unknown IDs are ignored.

        Args:
            comment_ids: Comments to remove

        Returns:
            Number of rows removed
        """
        pass
