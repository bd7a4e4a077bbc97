"""PostgreSQL implementation of Comment repository."""

from typing import Any, List, Optional, Sequence

from sqlalchemy import asc, delete, desc, func, select, update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql import FromClause, Select

from discuss.domain.model import Comment
from discuss.domain.repository import CommentRepository
from discuss.domain.value import (
    CommentFilter,
    CommentId,
    CommentOrder,
    CommentPatch,
    Pagination,
)
from discuss.persistence.mappers import row_to_comment, to_dict
from discuss.persistence.tables import comments_table, pages_table, projects_table


def _joins_project(criteria: CommentFilter) -> bool:
    return criteria.owner_id is not None or criteria.live_projects_only


def _joins_page(criteria: CommentFilter) -> bool:
    return (
        criteria.project_id is not None
        or criteria.page_slug is not None
        or _joins_project(criteria)
    )


def _source(criteria: CommentFilter) -> FromClause:
    """Build the FROM clause needed to evaluate the criteria."""
    source: FromClause = comments_table
    if _joins_page(criteria):
        source = source.join(
            pages_table, pages_table.c.id == comments_table.c.page_id
        )
    if _joins_project(criteria):
        source = source.join(
            projects_table, projects_table.c.id == pages_table.c.project_id
        )
    return source


def _conditions(criteria: CommentFilter) -> List[Any]:
    """Translate criteria into WHERE conditions."""
    c = comments_table.c
    conditions: List[Any] = []

    if criteria.ids is not None:
        conditions.append(c.id.in_(criteria.ids))
    if criteria.exclude_ids:
        conditions.append(c.id.not_in(criteria.exclude_ids))

    if criteria.project_id is not None:
        conditions.append(pages_table.c.project_id == criteria.project_id)
    if criteria.page_slug is not None:
        conditions.append(pages_table.c.slug == criteria.page_slug)
    if criteria.owner_id is not None:
        conditions.append(projects_table.c.owner_id == criteria.owner_id)
    if criteria.live_projects_only:
        conditions.append(projects_table.c.deleted_at.is_(None))

    if criteria.parent_id is not None:
        conditions.append(c.parent_id == criteria.parent_id)
    if criteria.parent_ids is not None:
        conditions.append(c.parent_id.in_(criteria.parent_ids))
    if criteria.roots_only:
        conditions.append(c.parent_id.is_(None))

    if criteria.approved is not None:
        conditions.append(c.approved == criteria.approved)
    if criteria.deleted is True:
        conditions.append(c.deleted_at.is_not(None))
    elif criteria.deleted is False:
        conditions.append(c.deleted_at.is_(None))

    if criteria.by_emails is not None:
        conditions.append(c.by_email.in_(criteria.by_emails))
    if criteria.exclude_moderator:
        conditions.append(c.moderator_id.is_(None))

    return conditions


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    def _select(self, criteria: CommentFilter) -> Select:
        return (
            select(comments_table)
            .select_from(_source(criteria))
            .where(*_conditions(criteria))
        )

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        stmt = select(comments_table).where(comments_table.c.id == comment_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_comment(row._asdict()) if row else None

    async def find_many(
        self,
        criteria: CommentFilter,
        pagination: Optional[Pagination] = None,
        order: CommentOrder = CommentOrder.NEWEST_FIRST,
    ) -> List[Comment]:
        """Find comments matching the criteria."""
        direction = desc if order == CommentOrder.NEWEST_FIRST else asc
        stmt = self._select(criteria).order_by(
            direction(comments_table.c.created_at), direction(comments_table.c.id)
        )

        if pagination:
            stmt = stmt.offset(pagination.offset)
            if pagination.limit is not None:
                stmt = stmt.limit(pagination.limit)

        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def count(self, criteria: CommentFilter) -> int:
        """Count comments matching the criteria."""
        stmt = (
            select(func.count())
            .select_from(_source(criteria))
            .where(*_conditions(criteria))
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def exists(self, criteria: CommentFilter) -> bool:
        """Check whether at least one comment matches the criteria."""
        stmt = (
            select(comments_table.c.id)
            .select_from(_source(criteria))
            .where(*_conditions(criteria))
            .limit(1)
        )
        result = await self.session.execute(stmt)
        return result.first() is not None

    async def count_by_parent(self, criteria: CommentFilter) -> dict[CommentId, int]:
        """Count matching comments grouped by parent."""
        stmt = (
            select(comments_table.c.parent_id, func.count())
            .select_from(_source(criteria))
            .where(*_conditions(criteria))
            .where(comments_table.c.parent_id.is_not(None))
            .group_by(comments_table.c.parent_id)
        )
        result = await self.session.execute(stmt)
        return {CommentId(parent_id): count for parent_id, count in result.all()}

    async def create(self, comment: Comment) -> Comment:
        """Insert a new comment."""
        stmt = comments_table.insert().values(**to_dict(comment))
        await self.session.execute(stmt)
        await self.session.flush()
        return comment

    async def update_many(
        self, comment_ids: Sequence[CommentId], patch: CommentPatch
    ) -> int:
        """Apply a partial update to every listed comment."""
        changes = patch.changes()
        if not comment_ids or not changes:
            return 0

        stmt = (
            update(comments_table)
            .where(comments_table.c.id.in_(list(comment_ids)))
            .values(**changes)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount or 0

    async def delete_many(self, comment_ids: Sequence[CommentId]) -> int:
        """Permanently remove comments."""
        if not comment_ids:
            return 0

        stmt = delete(comments_table).where(
            comments_table.c.id.in_(list(comment_ids))
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount or 0
