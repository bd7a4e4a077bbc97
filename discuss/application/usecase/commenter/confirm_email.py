"""Confirm email use case."""

from datetime import datetime
from typing import Optional

import logfire
from pydantic import BaseModel

from discuss.domain.service import (
    ModerationService,
    TokenService,
    VerificationService,
)


class ConfirmEmailRequest(BaseModel):
    """Confirm email request (verification link in the commenter's email)."""

    token: str


class ConfirmEmailResponse(BaseModel):
    """Confirm email response."""

    email: str
    verified_at: Optional[datetime]
    # Pending comment published as a result, if any
    approved_comment_id: Optional[str] = None


class ConfirmEmailUseCase:
    """Use case for confirming a commenter's email address.

    Verification alone never publishes anything: the comment referenced by
    the link is approved only when the commenter already has a
    moderator-approved comment on the same project.
    """

    def __init__(
        self,
        verification_service: VerificationService,
        moderation_service: ModerationService,
        token_service: TokenService,
    ) -> None:
        """Initialize confirm email use case.

        Args:
            verification_service: Commenter verification service
            moderation_service: Moderation domain service
            token_service: Signed-link token service
        """
        self.verification_service = verification_service
        self.moderation_service = moderation_service
        self.token_service = token_service

    async def execute(self, request: ConfirmEmailRequest) -> ConfirmEmailResponse:
        """Execute confirm email flow.

        Raises:
            JWTError: If the token is invalid or expired
        """
        claims = self.token_service.verify_email_verify_token(request.token)
        commenter = await self.verification_service.mark_verified(claims.email)

        response = ConfirmEmailResponse(
            email=commenter.email, verified_at=commenter.verified_at
        )
        if not claims.comment_id:
            return response

        trusted = await self.verification_service.has_prior_approval(
            claims.email, claims.project_id, exclude_comment_id=claims.comment_id
        )
        if not trusted:
            return response

        # Verification already succeeded; a failed approval is only logged
        try:
            approved = await self.moderation_service.approve([claims.comment_id])
        except Exception as e:
            logfire.warn(
                "Failed to approve comment after email confirmation",
                comment_id=str(claims.comment_id),
                error=str(e),
            )
            return response

        if approved:
            response.approved_comment_id = str(claims.comment_id)
        return response
