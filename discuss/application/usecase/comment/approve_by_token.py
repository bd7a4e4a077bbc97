"""Approve comment by signed link use case."""

from typing import Optional

import logfire
from pydantic import BaseModel

from discuss.domain.model import DisplayComment
from discuss.domain.service import ModerationService, TokenService


class ApproveByTokenRequest(BaseModel):
    """Approve by token request (from the owner's notification email)."""

    token: str
    # Optional reply appended as the project owner
    reply_content: Optional[str] = None


class ApproveByTokenResponse(BaseModel):
    """Approve by token response."""

    comment_id: str
    approved: int
    reply: Optional[DisplayComment] = None


class ApproveByTokenUseCase:
    """Use case for approving a comment without signing in to the dashboard."""

    def __init__(
        self, moderation_service: ModerationService, token_service: TokenService
    ) -> None:
        """Initialize approve by token use case.

        Args:
            moderation_service: Moderation domain service
            token_service: Signed-link token service
        """
        self.moderation_service = moderation_service
        self.token_service = token_service

    async def execute(self, request: ApproveByTokenRequest) -> ApproveByTokenResponse:
        """Execute approve by token flow.

        Steps:
        1. Verify the approval token
        2. Approve the comment (verifies its author)
        3. Append the owner's reply, if one was written

        Raises:
            JWTError: If the token is invalid or expired
            NotFoundError: If a reply is given and the comment no longer exists
        """
        claims = self.token_service.verify_approve_token(request.token)

        approved = await self.moderation_service.approve([claims.comment_id])

        reply = None
        if request.reply_content:
            reply = await self.moderation_service.create_moderator_reply(
                parent_id=claims.comment_id,
                content=request.reply_content,
                moderator=claims.moderator(),
            )

        logfire.info(
            "Comment approved by link",
            comment_id=str(claims.comment_id),
            replied=reply is not None,
        )
        return ApproveByTokenResponse(
            comment_id=str(claims.comment_id), approved=approved, reply=reply
        )
