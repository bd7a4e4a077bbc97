"""Commenter verification domain service."""

import logfire
from typing import Iterable, Optional

from discuss.domain.model.commenter import Commenter
from discuss.domain.repository import (
    CommenterRepository,
    CommentRepository,
    TransactionManager,
)
from discuss.domain.value import CommentFilter, CommentId, ProjectId

from .base import Service
from .clock import Clock


def _unique_emails(emails: Iterable[Optional[str]]) -> list[str]:
    return list(dict.fromkeys(email for email in emails if email))


class VerificationService(Service):
    """Tracks verified commenter emails and the auto-approval trust gate.

    A commenter is trusted on a project when their email is verified and
    a moderator has approved at least one of their comments on that
    project before.
    """

    def __init__(
        self,
        comment_repository: CommentRepository,
        commenter_repository: CommenterRepository,
        transaction_manager: TransactionManager,
        clock: Clock,
    ) -> None:
        """Initialize verification service.

        Args:
            comment_repository: Comment repository
            commenter_repository: Commenter repository
            transaction_manager: Unit-of-work boundary
            clock: Time source
        """
        self.comment_repository = comment_repository
        self.commenter_repository = commenter_repository
        self.transaction_manager = transaction_manager
        self.clock = clock

    async def is_verified(self, email: str) -> bool:
        """Check whether an email has a verification record."""
        commenter = await self.commenter_repository.find_by_email(email)
        return commenter is not None and commenter.is_verified

    async def has_prior_approval(
        self,
        email: str,
        project_id: ProjectId,
        exclude_comment_id: Optional[CommentId] = None,
    ) -> bool:
        """Check whether a visitor already has an approved comment on a project.

        Moderator replies carry the moderator's email but never count as a
        visitor's history. Approved comments that were later soft-deleted
        still count.

        Args:
            email: Commenter email
            project_id: Project to look in
            exclude_comment_id: Comment to leave out of the check

        Returns:
            True if such a comment exists
        """
        return await self.comment_repository.exists(
            CommentFilter(
                project_id=project_id,
                by_emails=[email],
                approved=True,
                exclude_moderator=True,
                exclude_ids=[exclude_comment_id] if exclude_comment_id else None,
                deleted=None,
            )
        )

    async def should_auto_approve(
        self, email: Optional[str], project_id: ProjectId
    ) -> bool:
        """Decide whether a new comment skips the moderation queue.

        Never raises: a failed lookup is logged and the comment falls back
        to the moderation queue.

        Args:
            email: Commenter email, if given
            project_id: Project the comment is posted to

        Returns:
            True if the comment should be stored approved
        """
        if not email:
            return False

        with logfire.span(
            "verification_service.should_auto_approve",
            project_id=str(project_id),
        ):
            try:
                if not await self.is_verified(email):
                    return False
                return await self.has_prior_approval(email, project_id)
            except Exception as e:
                logfire.warn(
                    "Auto-approval check failed, leaving comment pending",
                    project_id=str(project_id),
                    error=str(e),
                )
                return False

    async def verify_emails(self, emails: Iterable[Optional[str]]) -> int:
        """Record every distinct email as verified now.

        Runs inside the caller's transaction: approving a comment and
        verifying its author are committed together.

        Args:
            emails: Emails to verify (blanks and duplicates are skipped)

        Returns:
            Number of distinct emails written
        """
        unique = _unique_emails(emails)
        if not unique:
            return 0

        now = self.clock.now()
        for email in unique:
            await self.commenter_repository.upsert(email, now)

        logfire.info("Commenter emails verified", count=len(unique))
        return len(unique)

    async def mark_verified(self, email: str) -> Commenter:
        """Verify a single email in its own transaction.

        Args:
            email: Email confirmed through a verification link

        Returns:
            The stored commenter record
        """
        with logfire.span("verification_service.mark_verified"):
            async with self.transaction_manager.transaction():
                commenter = await self.commenter_repository.upsert(
                    email, self.clock.now()
                )
            logfire.info("Commenter email confirmed")
            return commenter

    async def get_verification_map(
        self, emails: Iterable[Optional[str]]
    ) -> dict[str, bool]:
        """Look up verification status for several emails at once.

        Args:
            emails: Emails of the comments being rendered

        Returns:
            Mapping of every distinct given email to its verified flag
        """
        unique = _unique_emails(emails)
        if not unique:
            return {}

        records = await self.commenter_repository.find_by_emails(unique)
        verified = {record.email for record in records if record.is_verified}
        return {email: email in verified for email in unique}
