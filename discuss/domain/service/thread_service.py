"""Comment thread reading domain service."""

import logfire
from collections import defaultdict
from math import ceil
from typing import Mapping, Optional

from discuss.config import ModerationSettings
from discuss.domain.model import (
    Comment,
    CommenterListing,
    CommenterSummary,
    CommentWrapper,
    DisplayComment,
    Page,
)
from discuss.domain.repository import CommentRepository, PageRepository
from discuss.domain.value import (
    CommentFilter,
    CommentId,
    CommentOrder,
    PageId,
    Pagination,
    ProjectId,
    ThreadOptions,
)

from .base import Service
from .formatter import CommentFormatter
from .verification_service import VerificationService

ChildrenMap = Mapping[CommentId, list[Comment]]


class _RenderContext:
    """Lookups shared by every comment rendered in one listing."""

    def __init__(
        self,
        timezone_offset: int,
        verification_map: Mapping[str, bool],
        pages: Mapping[PageId, Page],
        is_admin: bool,
    ) -> None:
        self.timezone_offset = timezone_offset
        self.verification_map = verification_map
        self.pages = pages
        self.is_admin = is_admin


class ThreadService(Service):
    """Domain service for paginated, nested comment listings.

    Comments of deleted projects are never listed. A soft-deleted comment
    shows up inside a thread only while it still has an active descendant,
    so the conversation below it stays readable.
    """

    def __init__(
        self,
        comment_repository: CommentRepository,
        page_repository: PageRepository,
        verification_service: VerificationService,
        formatter: CommentFormatter,
        settings: ModerationSettings,
    ) -> None:
        """Initialize thread service.

        Args:
            comment_repository: Comment repository
            page_repository: Page repository
            verification_service: Commenter verification service
            formatter: Comment formatter
            settings: Moderation settings
        """
        self.comment_repository = comment_repository
        self.page_repository = page_repository
        self.verification_service = verification_service
        self.formatter = formatter
        self.settings = settings

    async def get_comments(
        self,
        project_id: ProjectId,
        timezone_offset: int = 0,
        options: Optional[ThreadOptions] = None,
    ) -> CommentWrapper:
        """Get one page of a project's comments.

        Args:
            project_id: Project to list
            timezone_offset: Viewer's offset from UTC in minutes
            options: Listing options (scope, filters, pagination, nesting)

        Returns:
            Formatted comments with pagination totals. ``comment_count``
            counts every comment matching the filters, including deleted
            parents that are hidden for lack of active replies.
        """
        options = options or ThreadOptions()
        page_size = options.page_size or self.settings.default_page_size

        with logfire.span(
            "thread_service.get_comments",
            project_id=str(project_id),
            page=options.page,
            page_size=page_size,
            include_replies=options.include_replies,
            include_deleted_parents=options.include_deleted_parents,
        ):
            criteria = CommentFilter(
                project_id=project_id,
                page_slug=options.page_slug,
                owner_id=options.owner_id,
                live_projects_only=True,
                parent_id=options.parent_id,
                roots_only=options.roots_only and options.parent_id is None,
                approved=options.approved,
                deleted=None if options.include_deleted_parents else False,
            )

            total = await self.comment_repository.count(criteria)
            comments = await self.comment_repository.find_many(
                criteria,
                Pagination.for_page(options.page, page_size),
                CommentOrder.NEWEST_FIRST,
            )

            children: ChildrenMap = {}
            if options.include_replies or options.include_deleted_parents:
                children = await self._load_descendants(
                    [comment.id for comment in comments], options.approved
                )

            active_below: dict[CommentId, bool] = {}
            if options.include_deleted_parents:
                comments = [
                    comment
                    for comment in comments
                    if not comment.is_deleted
                    or self._has_active_descendant(comment.id, children, active_below)
                ]

            loaded = comments + [
                reply for replies in children.values() for reply in replies
            ]
            context = await self._render_context(
                loaded, timezone_offset, options.admin_view
            )

            reply_counts: dict[CommentId, int] = {}
            if not options.include_replies and comments:
                reply_counts = await self.comment_repository.count_by_parent(
                    CommentFilter(parent_ids=[comment.id for comment in comments])
                )

            data = []
            for comment in comments:
                if options.include_replies:
                    replies = self._build_replies(
                        comment.id, children, active_below, context
                    )
                else:
                    replies = CommentWrapper(
                        comment_count=reply_counts.get(comment.id, 0)
                    )
                data.append(self._format(comment, context, replies))

            return CommentWrapper(
                data=data,
                comment_count=total,
                page_size=page_size,
                page_count=max(1, ceil(total / page_size)),
            )

    async def get_deleted_comments(
        self,
        project_id: ProjectId,
        timezone_offset: int = 0,
        page: int = 1,
        page_size: Optional[int] = None,
    ) -> CommentWrapper:
        """Get one page of a project's soft-deleted comments (moderator view).

        Deleted comments are rendered with their original content.

        Args:
            project_id: Project to list
            timezone_offset: Viewer's offset from UTC in minutes
            page: 1-based page number
            page_size: Comments per page (defaults to the configured size)

        Returns:
            Formatted deleted comments with pagination totals
        """
        page_size = page_size or self.settings.default_page_size

        with logfire.span(
            "thread_service.get_deleted_comments",
            project_id=str(project_id),
            page=page,
            page_size=page_size,
        ):
            criteria = CommentFilter(
                project_id=project_id, live_projects_only=True, deleted=True
            )
            total = await self.comment_repository.count(criteria)
            comments = await self.comment_repository.find_many(
                criteria,
                Pagination.for_page(page, page_size),
                CommentOrder.NEWEST_FIRST,
            )

            context = await self._render_context(
                comments, timezone_offset, is_admin=True
            )
            reply_counts: dict[CommentId, int] = {}
            if comments:
                reply_counts = await self.comment_repository.count_by_parent(
                    CommentFilter(
                        parent_ids=[comment.id for comment in comments], deleted=None
                    )
                )

            data = [
                self._format(
                    comment,
                    context,
                    CommentWrapper(comment_count=reply_counts.get(comment.id, 0)),
                )
                for comment in comments
            ]
            return CommentWrapper(
                data=data,
                comment_count=total,
                page_size=page_size,
                page_count=max(1, ceil(total / page_size)),
            )

    async def get_commenters(
        self,
        project_id: ProjectId,
        timezone_offset: int = 0,
        page: int = 1,
        page_size: Optional[int] = None,
    ) -> CommenterListing:
        """Get one page of a project's authors, most active first.

        Active comments are grouped by moderator account, or by email for
        visitors; comments with neither are skipped. Each group carries its
        comment count and its latest comments.

        Args:
            project_id: Project to list
            timezone_offset: Viewer's offset from UTC in minutes
            page: 1-based page number
            page_size: Commenters per page (defaults to the configured size)

        Returns:
            Commenters with their latest comments and pagination totals
        """
        page_size = page_size or self.settings.default_page_size

        with logfire.span(
            "thread_service.get_commenters",
            project_id=str(project_id),
            page=page,
            page_size=page_size,
        ):
            comments = await self.comment_repository.find_many(
                CommentFilter(project_id=project_id, live_projects_only=True),
                order=CommentOrder.NEWEST_FIRST,
            )

            groups: dict[str, list[Comment]] = {}
            for comment in comments:
                if comment.moderator_id:
                    key = f"admin-{comment.moderator_id}"
                elif comment.by_email:
                    key = comment.by_email
                else:
                    continue
                groups.setdefault(key, []).append(comment)

            # Stable sort: ties keep the most recently active author first
            ranked = sorted(groups.items(), key=lambda item: -len(item[1]))
            total = len(ranked)
            window = Pagination.for_page(page, page_size)
            selected = ranked[window.offset : window.offset + page_size]

            latest = [
                comment
                for _, authored in selected
                for comment in authored[: self.settings.commenter_latest_comments]
            ]
            context = await self._render_context(latest, timezone_offset, is_admin=True)

            data = [
                CommenterSummary(
                    email=key,
                    nickname=authored[0].by_nickname or "",
                    comment_count=len(authored),
                    is_admin=authored[0].moderator_id is not None,
                    comments=[
                        self._format(comment, context, CommentWrapper())
                        for comment in authored[
                            : self.settings.commenter_latest_comments
                        ]
                    ],
                )
                for key, authored in selected
            ]
            return CommenterListing(
                data=data,
                total=total,
                page=page,
                page_count=max(1, ceil(total / page_size)),
            )

    async def _load_descendants(
        self, root_ids: list[CommentId], approved: Optional[bool]
    ) -> dict[CommentId, list[Comment]]:
        """Load every reply below the given comments, deleted ones included."""
        children: dict[CommentId, list[Comment]] = defaultdict(list)
        seen = set(root_ids)
        frontier = list(root_ids)
        depth = 0

        while frontier and depth < self.settings.max_thread_depth:
            level = await self.comment_repository.find_many(
                CommentFilter(parent_ids=frontier, approved=approved, deleted=None),
                order=CommentOrder.OLDEST_FIRST,
            )
            frontier = []
            for reply in level:
                if reply.id in seen or reply.parent_id is None:
                    continue
                seen.add(reply.id)
                children[reply.parent_id].append(reply)
                frontier.append(reply.id)
            depth += 1

        if frontier:
            logfire.warn(
                "Reply tree truncated at maximum depth",
                max_depth=self.settings.max_thread_depth,
            )
        return children

    def _has_active_descendant(
        self,
        comment_id: CommentId,
        children: ChildrenMap,
        memo: dict[CommentId, bool],
    ) -> bool:
        if comment_id not in memo:
            memo[comment_id] = any(
                not reply.is_deleted
                or self._has_active_descendant(reply.id, children, memo)
                for reply in children.get(comment_id, [])
            )
        return memo[comment_id]

    def _build_replies(
        self,
        parent_id: CommentId,
        children: ChildrenMap,
        active_below: dict[CommentId, bool],
        context: _RenderContext,
    ) -> CommentWrapper:
        kept = [
            reply
            for reply in children.get(parent_id, [])
            if not reply.is_deleted
            or self._has_active_descendant(reply.id, children, active_below)
        ]
        data = [
            self._format(
                reply,
                context,
                self._build_replies(reply.id, children, active_below, context),
            )
            for reply in kept
        ]
        # Nested replies are not paginated
        return CommentWrapper(data=data, comment_count=len(data))

    async def _render_context(
        self, comments: list[Comment], timezone_offset: int, is_admin: bool
    ) -> _RenderContext:
        verification_map = await self.verification_service.get_verification_map(
            comment.by_email for comment in comments
        )
        page_ids = list(dict.fromkeys(comment.page_id for comment in comments))
        pages = await self.page_repository.find_by_ids(page_ids) if page_ids else []
        return _RenderContext(
            timezone_offset=timezone_offset,
            verification_map=verification_map,
            pages={page.id: page for page in pages},
            is_admin=is_admin,
        )

    def _format(
        self, comment: Comment, context: _RenderContext, replies: CommentWrapper
    ) -> DisplayComment:
        return self.formatter.format(
            comment,
            timezone_offset=context.timezone_offset,
            verification_map=context.verification_map,
            is_admin=context.is_admin,
            page=context.pages.get(comment.page_id),
            replies=replies,
        )
