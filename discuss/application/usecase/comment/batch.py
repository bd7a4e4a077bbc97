"""Shared shape of the batch moderation use cases."""

from abc import abstractmethod

from pydantic import BaseModel

from discuss.application.usecase.base import BaseUseCase, parse_uuids
from discuss.domain.service import ModerationService
from discuss.domain.value import CommentId


class BatchCommentsRequest(BaseModel):
    """Batch moderation request."""

    comment_ids: list[str]  # UUID strings


class BatchCommentsResponse(BaseModel):
    """Batch moderation response."""

    requested: int
    affected: int


class BatchCommentsUseCase(BaseUseCase):
    """Applies one moderation transition to a set of comments.

    Empty batches succeed with zero affected; unknown IDs are skipped.
    """

    def __init__(self, moderation_service: ModerationService) -> None:
        """Initialize batch use case.

        Args:
            moderation_service: Moderation domain service
        """
        self.moderation_service = moderation_service

    async def execute(self, request: BatchCommentsRequest) -> BatchCommentsResponse:
        comment_ids = [
            CommentId(comment_id)
            for comment_id in parse_uuids(request.comment_ids, "comment id")
        ]
        affected = await self.apply(comment_ids)
        return BatchCommentsResponse(
            requested=len(set(comment_ids)), affected=affected
        )

    @abstractmethod
    async def apply(self, comment_ids: list[CommentId]) -> int:
        pass
