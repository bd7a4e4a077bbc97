"""Hook sink that records moderation events in the log."""

from typing import Optional

import logfire

from discuss.domain.model import Comment
from discuss.domain.service.hooks import CommentHook
from discuss.domain.value import CommentId, ProjectId


class LoggingCommentHook(CommentHook):
    """Emits one structured event per moderation event.

    Default production sink; delivery integrations (e-mail, webhooks,
    live updates) register alongside it.
    """

    async def on_comment_created(self, comment: Comment, project_id: ProjectId) -> None:
        logfire.info(
            "Hook: comment created",
            comment_id=str(comment.id),
            project_id=str(project_id),
            approved=comment.approved,
            is_reply=not comment.is_root,
        )

    async def on_comment_approved(
        self, comment_id: CommentId, parent_id: Optional[CommentId]
    ) -> None:
        logfire.info(
            "Hook: comment approved",
            comment_id=str(comment_id),
            parent_id=str(parent_id) if parent_id else None,
        )
