"""Moderation hook interfaces.

Hooks are side effects owned by other parts of the system (owner e-mail,
reply notifications, webhooks, live dashboard updates). The moderation
engine only announces events; delivery happens after the triggering
transaction has committed and can never undo it.
"""

from abc import ABC, abstractmethod
from typing import Optional

from discuss.domain.model.comment import Comment
from discuss.domain.value import CommentId, ProjectId


class CommentHook(ABC):
    """Receiver of moderation events."""

    @abstractmethod
    async def on_comment_created(self, comment: Comment, project_id: ProjectId) -> None:
        """Handle a newly stored comment.

        Args:
            comment: The comment in its final state (possibly auto-approved)
            project_id: Project the comment belongs to
        """
        pass

    @abstractmethod
    async def on_comment_approved(
        self, comment_id: CommentId, parent_id: Optional[CommentId]
    ) -> None:
        """Handle a comment that became publicly visible.

        Fired for moderator approvals and moderator replies; consumers
        notify the ancestors of ``comment_id``. May fire more than once for
        the same comment, so handlers must be idempotent.

        Args:
            comment_id: Approved comment
            parent_id: Its parent, None for root comments
        """
        pass


class HookDispatcher(ABC):
    """Hands moderation events to every registered CommentHook.

    Implementations must never raise from a sink failure: errors are logged
    and dropped.
    """

    @abstractmethod
    async def comment_created(self, comment: Comment, project_id: ProjectId) -> None:
        pass

    @abstractmethod
    async def comment_approved(
        self, comment_id: CommentId, parent_id: Optional[CommentId]
    ) -> None:
        pass
