"""Unapprove comments use case."""

from discuss.domain.value import CommentId

from .batch import BatchCommentsUseCase


class UnapproveCommentsUseCase(BatchCommentsUseCase):
    """Use case for sending comments back to the moderation queue."""

    async def apply(self, comment_ids: list[CommentId]) -> int:
        return await self.moderation_service.unapprove(comment_ids)
