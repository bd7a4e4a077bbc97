"""Confirm reply notification use case."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from discuss.domain.service import ModerationService, TokenService


class ConfirmReplyNotificationRequest(BaseModel):
    """Confirm reply notification request (link in the commenter's email)."""

    token: str
    unsubscribe: bool = False


class ConfirmReplyNotificationResponse(BaseModel):
    """Confirm reply notification response."""

    comment_id: str
    subscribed: bool
    notify_confirmed_at: Optional[datetime] = None


class ConfirmReplyNotificationUseCase:
    """Use case for opting in to (or out of) reply notifications."""

    def __init__(
        self, moderation_service: ModerationService, token_service: TokenService
    ) -> None:
        """Initialize confirm reply notification use case.

        Args:
            moderation_service: Moderation domain service
            token_service: Signed-link token service
        """
        self.moderation_service = moderation_service
        self.token_service = token_service

    async def execute(
        self, request: ConfirmReplyNotificationRequest
    ) -> ConfirmReplyNotificationResponse:
        """Execute confirm reply notification flow.

        Raises:
            JWTError: If the token is invalid or expired
            NotFoundError: If the comment no longer exists
        """
        claims = self.token_service.verify_reply_notification_token(request.token)
        comment = await self.moderation_service.set_reply_notification(
            claims.comment_id, enabled=not request.unsubscribe
        )
        return ConfirmReplyNotificationResponse(
            comment_id=str(comment.id),
            subscribed=comment.notify_confirmed_at is not None,
            notify_confirmed_at=comment.notify_confirmed_at,
        )
