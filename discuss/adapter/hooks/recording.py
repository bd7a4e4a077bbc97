"""In-memory hook sink for testing."""

from typing import Optional

from discuss.domain.model import Comment
from discuss.domain.service.hooks import CommentHook
from discuss.domain.value import CommentId, ProjectId


class RecordingCommentHook(CommentHook):
    """Keeps every received event for assertions."""

    def __init__(self) -> None:
        self.created: list[tuple[Comment, ProjectId]] = []
        self.approved: list[tuple[CommentId, Optional[CommentId]]] = []

    async def on_comment_created(self, comment: Comment, project_id: ProjectId) -> None:
        self.created.append((comment, project_id))

    async def on_comment_approved(
        self, comment_id: CommentId, parent_id: Optional[CommentId]
    ) -> None:
        self.approved.append((comment_id, parent_id))

    def clear(self) -> None:
        self.created.clear()
        self.approved.clear()
