"""Signed-link token domain service."""

import logfire
from datetime import timedelta
from typing import Optional, TypeVar

from pydantic import BaseModel, ValidationError as PydanticValidationError

from discuss.config import AuthSettings
from discuss.domain.value import CommentId, ModeratorIdentity, ProjectId, UserId
from discuss.util.jwt import JWTError, TokenPurpose, create_token, decode_token

from .base import Service


class EmailVerifyClaims(BaseModel):
    """Claims of an email verification link."""

    email: str
    project_id: ProjectId
    # Comment to approve once the email is confirmed
    comment_id: Optional[CommentId] = None


class ReplyNotificationClaims(BaseModel):
    """Claims of a reply-notification confirmation link."""

    comment_id: CommentId


class ApproveCommentClaims(BaseModel):
    """Claims of a one-click approval link sent to the project owner."""

    comment_id: CommentId
    # Owner the link was issued to; replies through the link are signed as them
    owner_id: UserId
    owner_name: Optional[str] = None
    owner_email: Optional[str] = None

    def moderator(self) -> ModeratorIdentity:
        return ModeratorIdentity(
            user_id=self.owner_id, email=self.owner_email, name=self.owner_name
        )


ClaimsT = TypeVar("ClaimsT", bound=BaseModel)


class TokenService(Service):
    """Domain service for purpose-scoped signed links."""

    EMAIL_VERIFY_TTL = timedelta(days=3)
    ACCEPT_NOTIFY_TTL = timedelta(days=1)
    APPROVE_COMMENT_TTL = timedelta(days=3)

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize token service.

        Args:
            auth_settings: Authentication settings
        """
        self.auth_settings = auth_settings

    def create_email_verify_token(
        self,
        email: str,
        project_id: ProjectId,
        comment_id: Optional[CommentId] = None,
    ) -> str:
        """Create the link token that confirms a commenter's email."""
        claims = EmailVerifyClaims(
            email=email, project_id=project_id, comment_id=comment_id
        )
        return self._create(TokenPurpose.EMAIL_VERIFY, claims, self.EMAIL_VERIFY_TTL)

    def verify_email_verify_token(self, token: str) -> EmailVerifyClaims:
        """Verify an email verification token.

        Raises:
            JWTError: If token is invalid or expired
        """
        return self._verify(TokenPurpose.EMAIL_VERIFY, token, EmailVerifyClaims)

    def create_reply_notification_token(self, comment_id: CommentId) -> str:
        """Create the link token that opts a comment's author into reply emails."""
        claims = ReplyNotificationClaims(comment_id=comment_id)
        return self._create(TokenPurpose.ACCEPT_NOTIFY, claims, self.ACCEPT_NOTIFY_TTL)

    def verify_reply_notification_token(self, token: str) -> ReplyNotificationClaims:
        """Verify a reply-notification token.

        Raises:
            JWTError: If token is invalid or expired
        """
        return self._verify(TokenPurpose.ACCEPT_NOTIFY, token, ReplyNotificationClaims)

    def create_approve_token(
        self, comment_id: CommentId, owner: ModeratorIdentity
    ) -> str:
        """Create the link token that approves a comment without signing in."""
        claims = ApproveCommentClaims(
            comment_id=comment_id,
            owner_id=owner.user_id,
            owner_name=owner.name,
            owner_email=owner.email,
        )
        return self._create(
            TokenPurpose.APPROVE_COMMENT, claims, self.APPROVE_COMMENT_TTL
        )

    def verify_approve_token(self, token: str) -> ApproveCommentClaims:
        """Verify an approval token.

        Raises:
            JWTError: If token is invalid or expired
        """
        return self._verify(TokenPurpose.APPROVE_COMMENT, token, ApproveCommentClaims)

    def _create(
        self, purpose: TokenPurpose, claims: BaseModel, expires_in: timedelta
    ) -> str:
        with logfire.span("token_service.create_token", purpose=purpose.value):
            return create_token(
                purpose,
                claims.model_dump(mode="json", exclude_none=True),
                expires_in,
                self.auth_settings,
            )

    def _verify(
        self, purpose: TokenPurpose, token: str, claims_type: type[ClaimsT]
    ) -> ClaimsT:
        with logfire.span("token_service.verify_token", purpose=purpose.value):
            try:
                payload = decode_token(token, purpose, self.auth_settings)
                return claims_type.model_validate(payload)
            except PydanticValidationError as e:
                logfire.error(
                    "Token claims malformed", purpose=purpose.value, error=str(e)
                )
                raise JWTError("Invalid token") from e
            except JWTError as e:
                logfire.error(
                    "Token verification failed", purpose=purpose.value, error=str(e)
                )
                raise
