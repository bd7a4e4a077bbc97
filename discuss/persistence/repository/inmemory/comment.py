"""In-memory comment repository for testing."""

from typing import Optional, Sequence

from discuss.domain.model.comment import Comment
from discuss.domain.repository.comment import CommentRepository
from discuss.domain.value import (
    CommentFilter,
    CommentId,
    CommentOrder,
    CommentPatch,
    Pagination,
)

from .store import InMemoryStore


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing.

    Page and project criteria are resolved against the shared store the
    same way the SQL joins resolve them: a comment whose page is missing
    never matches a page or project scoped filter.
    """

    def __init__(self, store: InMemoryStore) -> None:
        self.store = store

    def _matches(self, comment: Comment, criteria: CommentFilter) -> bool:
        if criteria.ids is not None and comment.id not in criteria.ids:
            return False
        if criteria.exclude_ids and comment.id in criteria.exclude_ids:
            return False

        needs_project = criteria.owner_id is not None or criteria.live_projects_only
        if criteria.project_id or criteria.page_slug is not None or needs_project:
            page = self.store.pages.get(comment.page_id)
            if page is None:
                return False
            if criteria.project_id and page.project_id != criteria.project_id:
                return False
            if criteria.page_slug is not None and page.slug != criteria.page_slug:
                return False
            if needs_project:
                project = self.store.projects.get(page.project_id)
                if project is None:
                    return False
                if criteria.owner_id and project.owner_id != criteria.owner_id:
                    return False
                if criteria.live_projects_only and project.is_deleted:
                    return False

        if criteria.parent_id and comment.parent_id != criteria.parent_id:
            return False
        if criteria.parent_ids is not None and comment.parent_id not in criteria.parent_ids:
            return False
        if criteria.roots_only and not comment.is_root:
            return False

        if criteria.approved is not None and comment.approved != criteria.approved:
            return False
        if criteria.deleted is not None and comment.is_deleted != criteria.deleted:
            return False

        if criteria.by_emails is not None and comment.by_email not in criteria.by_emails:
            return False
        if criteria.exclude_moderator and comment.is_moderator_comment:
            return False

        return True

    def _select(self, criteria: CommentFilter) -> list[Comment]:
        return [c for c in self.store.comments.values() if self._matches(c, criteria)]

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        return self.store.comments.get(comment_id)

    async def find_many(
        self,
        criteria: CommentFilter,
        pagination: Optional[Pagination] = None,
        order: CommentOrder = CommentOrder.NEWEST_FIRST,
    ) -> list[Comment]:
        """Find comments matching the criteria."""
        comments = self._select(criteria)
        comments.sort(
            key=lambda c: (c.created_at, c.id),
            reverse=order == CommentOrder.NEWEST_FIRST,
        )

        if pagination:
            end = (
                pagination.offset + pagination.limit
                if pagination.limit is not None
                else None
            )
            comments = comments[pagination.offset : end]

        return comments

    async def count(self, criteria: CommentFilter) -> int:
        """Count comments matching the criteria."""
        return len(self._select(criteria))

    async def exists(self, criteria: CommentFilter) -> bool:
        """Check whether at least one comment matches the criteria."""
        return any(self._matches(c, criteria) for c in self.store.comments.values())

    async def count_by_parent(self, criteria: CommentFilter) -> dict[CommentId, int]:
        """Count matching comments grouped by parent."""
        counts: dict[CommentId, int] = {}
        for comment in self._select(criteria):
            if comment.parent_id is not None:
                counts[comment.parent_id] = counts.get(comment.parent_id, 0) + 1
        return counts

    async def create(self, comment: Comment) -> Comment:
        """Insert a new comment."""
        self.store.comments[comment.id] = comment
        return comment

    async def update_many(
        self, comment_ids: Sequence[CommentId], patch: CommentPatch
    ) -> int:
        """Apply a partial update to every listed comment."""
        changes = patch.changes()
        if not changes:
            return 0

        updated = 0
        for comment_id in dict.fromkeys(comment_ids):
            comment = self.store.comments.get(comment_id)
            if comment:
                # Create updated comment (since comments are immutable)
                self.store.comments[comment_id] = comment.model_copy(update=changes)
                updated += 1
        return updated

    async def delete_many(self, comment_ids: Sequence[CommentId]) -> int:
        """Permanently remove comments."""
        removed = 0
        for comment_id in dict.fromkeys(comment_ids):
            if self.store.comments.pop(comment_id, None) is not None:
                removed += 1
        return removed
