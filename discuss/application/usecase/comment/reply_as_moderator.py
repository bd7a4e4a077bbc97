"""Reply as moderator use case."""

from typing import Optional

from pydantic import BaseModel, Field

from discuss.application.usecase.base import parse_uuid
from discuss.domain.model import DisplayComment
from discuss.domain.service import ModerationService
from discuss.domain.value import CommentId, ModeratorIdentity, UserId


class ReplyAsModeratorRequest(BaseModel):
    """Reply as moderator request."""

    parent_id: str  # UUID string
    content: str = Field(min_length=1)
    moderator_id: str  # Authenticated dashboard account
    moderator_email: Optional[str] = None
    moderator_name: Optional[str] = None


class ReplyAsModeratorResponse(BaseModel):
    """Reply as moderator response."""

    reply: DisplayComment


class ReplyAsModeratorUseCase:
    """Use case for replying to a comment from the dashboard.

    The parent is approved and its author verified along with the reply.
    """

    def __init__(self, moderation_service: ModerationService) -> None:
        """Initialize reply as moderator use case.

        Args:
            moderation_service: Moderation domain service
        """
        self.moderation_service = moderation_service

    async def execute(
        self, request: ReplyAsModeratorRequest
    ) -> ReplyAsModeratorResponse:
        """Execute moderator reply flow.

        Raises:
            NotFoundError: If the parent comment doesn't exist
            ValidationError: If an ID is malformed
        """
        moderator = ModeratorIdentity(
            user_id=UserId(parse_uuid(request.moderator_id, "moderator id")),
            email=request.moderator_email,
            name=request.moderator_name,
        )
        reply = await self.moderation_service.create_moderator_reply(
            parent_id=CommentId(parse_uuid(request.parent_id, "parent id")),
            content=request.content,
            moderator=moderator,
        )
        return ReplyAsModeratorResponse(reply=reply)
