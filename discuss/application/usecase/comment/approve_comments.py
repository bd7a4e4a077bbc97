"""Approve comments use case."""

from discuss.domain.value import CommentId

from .batch import BatchCommentsUseCase


class ApproveCommentsUseCase(BatchCommentsUseCase):
    """Use case for approving comments from the dashboard."""

    async def apply(self, comment_ids: list[CommentId]) -> int:
        return await self.moderation_service.approve(comment_ids)
