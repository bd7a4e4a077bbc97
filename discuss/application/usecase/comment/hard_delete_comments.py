"""Permanently delete comments use case."""

from discuss.domain.value import CommentId

from .batch import BatchCommentsUseCase


class HardDeleteCommentsUseCase(BatchCommentsUseCase):
    """Use case for purging comments together with all of their replies.

    ``affected`` counts every removed row, descendants included.
    """

    async def apply(self, comment_ids: list[CommentId]) -> int:
        return await self.moderation_service.cascade_hard_delete(comment_ids)
