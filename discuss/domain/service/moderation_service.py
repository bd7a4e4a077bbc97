"""Comment moderation domain service."""

import logfire
from typing import Optional, Sequence
from uuid import uuid4

from discuss.config import ModerationSettings
from discuss.domain.error import NotFoundError, ThreadDepthExceededError, ValidationError
from discuss.domain.model import Comment, DisplayComment
from discuss.domain.repository import CommentRepository, TransactionManager
from discuss.domain.value import (
    CommentFilter,
    CommentId,
    CommentOrder,
    CommentPatch,
    ModeratorIdentity,
    PageId,
    ProjectId,
)

from .base import Service
from .clock import Clock
from .formatter import CommentFormatter
from .hooks import HookDispatcher
from .verification_service import VerificationService


def _unique(comment_ids: Sequence[CommentId]) -> list[CommentId]:
    return list(dict.fromkeys(comment_ids))


class ModerationService(Service):
    """Domain service for the comment lifecycle.

    Owns every state transition of a comment: creation (with the
    auto-approval gate), moderator replies, approval, unapproval, soft
    delete, restore and cascading hard delete. Multi-row transitions run in
    a single transaction; hooks fire only after it commits.
    """

    def __init__(
        self,
        comment_repository: CommentRepository,
        verification_service: VerificationService,
        formatter: CommentFormatter,
        hook_dispatcher: HookDispatcher,
        transaction_manager: TransactionManager,
        clock: Clock,
        settings: ModerationSettings,
    ) -> None:
        """Initialize moderation service.

        Args:
            comment_repository: Comment repository
            verification_service: Commenter verification service
            formatter: Comment formatter
            hook_dispatcher: Receiver of moderation events
            transaction_manager: Unit-of-work boundary
            clock: Time source
            settings: Moderation settings
        """
        self.comment_repository = comment_repository
        self.verification_service = verification_service
        self.formatter = formatter
        self.hook_dispatcher = hook_dispatcher
        self.transaction_manager = transaction_manager
        self.clock = clock
        self.settings = settings

    async def create_comment(
        self,
        project_id: ProjectId,
        page_id: PageId,
        content: str,
        email: Optional[str] = None,
        nickname: Optional[str] = None,
        parent_id: Optional[CommentId] = None,
    ) -> DisplayComment:
        """Store a visitor comment, auto-approving trusted commenters.

        A failing trust check leaves the comment pending; it never prevents
        the comment from being stored.

        Args:
            project_id: Project the page belongs to
            page_id: Page being commented on
            content: Markdown source
            email: Commenter email
            nickname: Commenter display name
            parent_id: Comment being replied to (None for a root comment)

        Returns:
            The stored comment formatted for display

        Raises:
            NotFoundError: If the parent comment doesn't exist
            ValidationError: If the parent comment is on another page
        """
        with logfire.span(
            "moderation_service.create_comment",
            project_id=str(project_id),
            page_id=str(page_id),
            parent_id=str(parent_id) if parent_id else None,
        ):
            if parent_id:
                parent = await self.comment_repository.find_by_id(parent_id)
                if not parent:
                    logfire.error(
                        "Parent comment not found",
                        parent_id=str(parent_id),
                        page_id=str(page_id),
                    )
                    raise NotFoundError("Comment", str(parent_id))
                if parent.page_id != page_id:
                    logfire.error(
                        "Parent comment does not belong to page",
                        parent_id=str(parent_id),
                        parent_page_id=str(parent.page_id),
                        target_page_id=str(page_id),
                    )
                    raise ValidationError("Parent comment does not belong to this page")

            approved = await self.verification_service.should_auto_approve(
                email, project_id
            )

            comment = Comment(
                id=CommentId(uuid4()),
                page_id=page_id,
                parent_id=parent_id,
                content=content,
                by_email=email,
                by_nickname=nickname,
                approved=approved,
                created_at=self.clock.now(),
            )

            async with self.transaction_manager.transaction():
                saved = await self.comment_repository.create(comment)

            logfire.info(
                "Comment created",
                comment_id=str(saved.id),
                project_id=str(project_id),
                auto_approved=approved,
            )

        await self.hook_dispatcher.comment_created(saved, project_id)
        verification_map = await self.verification_service.get_verification_map(
            [saved.by_email]
        )
        return self.formatter.format(saved, verification_map=verification_map)

    async def create_moderator_reply(
        self,
        parent_id: CommentId,
        content: str,
        moderator: ModeratorIdentity,
    ) -> DisplayComment:
        """Reply to a comment as a moderator.

        Replying approves the parent and verifies the parent's author; the
        reply itself is approved from the start. All three writes commit
        together.

        Args:
            parent_id: Comment being replied to
            content: Markdown source
            moderator: Moderator account

        Returns:
            The stored reply formatted for display

        Raises:
            NotFoundError: If the parent comment doesn't exist
        """
        with logfire.span(
            "moderation_service.create_moderator_reply",
            parent_id=str(parent_id),
            moderator_id=str(moderator.user_id),
        ):
            parent = await self.comment_repository.find_by_id(parent_id)
            if not parent:
                logfire.error("Parent comment not found", parent_id=str(parent_id))
                raise NotFoundError("Comment", str(parent_id))

            reply = Comment(
                id=CommentId(uuid4()),
                page_id=parent.page_id,
                parent_id=parent.id,
                content=content,
                by_email=moderator.email,
                by_nickname=moderator.name,
                moderator_id=moderator.user_id,
                approved=True,
                created_at=self.clock.now(),
            )

            async with self.transaction_manager.transaction():
                saved = await self.comment_repository.create(reply)
                await self.comment_repository.update_many(
                    [parent.id], CommentPatch(approved=True)
                )
                await self.verification_service.verify_emails([parent.by_email])

            logfire.info(
                "Moderator reply created",
                comment_id=str(saved.id),
                parent_id=str(parent.id),
            )

        await self.hook_dispatcher.comment_approved(saved.id, parent.id)
        return self.formatter.format(saved)

    async def approve(self, comment_ids: Sequence[CommentId]) -> int:
        """Approve comments and verify their authors.

        Already-approved comments are rewritten and announced again; hook
        consumers are expected to be idempotent.

        Args:
            comment_ids: Comments to approve (unknown IDs are ignored)

        Returns:
            Number of comments updated
        """
        ids = _unique(comment_ids)
        if not ids:
            return 0

        with logfire.span("moderation_service.approve", requested=len(ids)):
            async with self.transaction_manager.transaction():
                comments = await self.comment_repository.find_many(
                    CommentFilter(ids=ids, deleted=None),
                    order=CommentOrder.OLDEST_FIRST,
                )
                if not comments:
                    logfire.warn("No comments to approve", requested=len(ids))
                    return 0

                updated = await self.comment_repository.update_many(
                    [comment.id for comment in comments], CommentPatch(approved=True)
                )
                await self.verification_service.verify_emails(
                    comment.by_email for comment in comments
                )

            logfire.info("Comments approved", requested=len(ids), updated=updated)

        for comment in comments:
            await self.hook_dispatcher.comment_approved(comment.id, comment.parent_id)
        return updated

    async def unapprove(self, comment_ids: Sequence[CommentId]) -> int:
        """Return comments to the moderation queue.

        Commenter verification is left in place.

        Args:
            comment_ids: Comments to unapprove

        Returns:
            Number of comments updated
        """
        return await self._patch(
            "moderation_service.unapprove", comment_ids, CommentPatch(approved=False)
        )

    async def soft_delete(self, comment_ids: Sequence[CommentId]) -> int:
        """Hide comments while keeping them restorable.

        Comments that are already deleted keep their original deletion time.

        Args:
            comment_ids: Comments to delete

        Returns:
            Number of comments newly marked deleted
        """
        ids = _unique(comment_ids)
        if not ids:
            return 0

        with logfire.span("moderation_service.soft_delete", requested=len(ids)):
            async with self.transaction_manager.transaction():
                active = await self.comment_repository.find_many(
                    CommentFilter(ids=ids, deleted=False)
                )
                deleted = await self.comment_repository.update_many(
                    [comment.id for comment in active],
                    CommentPatch(deleted_at=self.clock.now()),
                )
            logfire.info("Comments deleted", requested=len(ids), deleted=deleted)
            return deleted

    async def restore(self, comment_ids: Sequence[CommentId]) -> int:
        """Clear the soft-delete marker of comments.

        Approval state is not touched.

        Args:
            comment_ids: Comments to restore

        Returns:
            Number of comments updated
        """
        return await self._patch(
            "moderation_service.restore", comment_ids, CommentPatch(deleted_at=None)
        )

    async def cascade_hard_delete(self, comment_ids: Sequence[CommentId]) -> int:
        """Permanently remove comments together with every descendant.

        Replies are collected level by level before anything is removed, so
        a tree deeper than ``max_thread_depth`` (or a parent cycle) aborts
        the operation with nothing deleted.

        Args:
            comment_ids: Root comments of the subtrees to remove

        Returns:
            Number of comments removed (roots plus descendants)

        Raises:
            ThreadDepthExceededError: If a subtree is too deep
        """
        ids = _unique(comment_ids)
        if not ids:
            return 0

        with logfire.span(
            "moderation_service.cascade_hard_delete", requested=len(ids)
        ):
            async with self.transaction_manager.transaction():
                targets = await self._collect_subtrees(ids)
                removed = await self.comment_repository.delete_many(targets)
            logfire.info(
                "Comments permanently deleted", requested=len(ids), removed=removed
            )
            return removed

    async def soft_delete_by_emails(
        self, project_id: ProjectId, emails: Sequence[str]
    ) -> int:
        """Soft-delete every active comment by the given authors on a project.

        Args:
            project_id: Project to clean up
            emails: Author emails

        Returns:
            Number of comments newly marked deleted
        """
        unique = list(dict.fromkeys(email for email in emails if email))
        if not unique:
            return 0

        with logfire.span(
            "moderation_service.soft_delete_by_emails",
            project_id=str(project_id),
            emails=len(unique),
        ):
            async with self.transaction_manager.transaction():
                targets = await self.comment_repository.find_many(
                    CommentFilter(project_id=project_id, by_emails=unique)
                )
                deleted = await self.comment_repository.update_many(
                    [comment.id for comment in targets],
                    CommentPatch(deleted_at=self.clock.now()),
                )
            logfire.info(
                "Commenter comments deleted",
                project_id=str(project_id),
                deleted=deleted,
            )
            return deleted

    async def set_reply_notification(
        self, comment_id: CommentId, enabled: bool
    ) -> Comment:
        """Opt a comment's author in or out of reply notifications.

        Args:
            comment_id: Comment whose author confirmed or unsubscribed
            enabled: True to confirm, False to unsubscribe

        Returns:
            The updated comment

        Raises:
            NotFoundError: If the comment doesn't exist
        """
        with logfire.span(
            "moderation_service.set_reply_notification",
            comment_id=str(comment_id),
            enabled=enabled,
        ):
            comment = await self.comment_repository.find_by_id(comment_id)
            if not comment:
                raise NotFoundError("Comment", str(comment_id))

            confirmed_at = self.clock.now() if enabled else None
            async with self.transaction_manager.transaction():
                await self.comment_repository.update_many(
                    [comment_id], CommentPatch(notify_confirmed_at=confirmed_at)
                )
            return comment.model_copy(update={"notify_confirmed_at": confirmed_at})

    async def _patch(
        self, span_name: str, comment_ids: Sequence[CommentId], patch: CommentPatch
    ) -> int:
        ids = _unique(comment_ids)
        if not ids:
            return 0

        with logfire.span(span_name, requested=len(ids)):
            async with self.transaction_manager.transaction():
                updated = await self.comment_repository.update_many(ids, patch)
            logfire.info(
                "Comments updated",
                operation=span_name,
                requested=len(ids),
                updated=updated,
            )
            return updated

    async def _collect_subtrees(self, root_ids: list[CommentId]) -> list[CommentId]:
        collected = dict.fromkeys(root_ids)
        frontier = list(root_ids)
        depth = 0

        while frontier:
            children = await self.comment_repository.find_many(
                CommentFilter(parent_ids=frontier, deleted=None),
                order=CommentOrder.OLDEST_FIRST,
            )
            frontier = [child.id for child in children if child.id not in collected]
            if not frontier:
                break

            depth += 1
            if depth > self.settings.max_thread_depth:
                logfire.error(
                    "Reply tree too deep, aborting hard delete",
                    max_depth=self.settings.max_thread_depth,
                    roots=len(root_ids),
                )
                raise ThreadDepthExceededError(self.settings.max_thread_depth)
            collected.update(dict.fromkeys(frontier))

        return list(collected)
