"""Restore comments use case."""

from discuss.domain.value import CommentId

from .batch import BatchCommentsUseCase


class RestoreCommentsUseCase(BatchCommentsUseCase):
    """Use case for restoring soft-deleted comments."""

    async def apply(self, comment_ids: list[CommentId]) -> int:
        return await self.moderation_service.restore(comment_ids)
