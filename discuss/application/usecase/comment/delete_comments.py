"""Soft-delete comments use case."""

from discuss.domain.value import CommentId

from .batch import BatchCommentsUseCase


class DeleteCommentsUseCase(BatchCommentsUseCase):
    """Use case for soft-deleting comments (replies are left alone)."""

    async def apply(self, comment_ids: list[CommentId]) -> int:
        return await self.moderation_service.soft_delete(comment_ids)
