"""Domain value objects.

Value objects are immutable and defined by their values, not identity.
Query criteria passed to repositories live here so that every store
implementation interprets them the same way.
"""

from datetime import datetime
from enum import Enum

from pydantic import Field

from discuss.domain.value.common import ValueObject
from discuss.domain.value.identifiers import CommentId, ProjectId, UserId


class CommentOrder(str, Enum):
    """Ordering of comment listings by creation time."""

    NEWEST_FIRST = "newest_first"
    OLDEST_FIRST = "oldest_first"


class Pagination(ValueObject):
    """Offset/limit window over an ordered listing."""

    offset: int = Field(default=0, ge=0)
    limit: int | None = Field(default=None, ge=1)

    @classmethod
    def for_page(cls, page: int, page_size: int) -> "Pagination":
        """Build the window for a 1-based page number."""
        return cls(offset=(max(page, 1) - 1) * page_size, limit=page_size)


class CommentFilter(ValueObject):
    """Criteria for selecting comments.

    Criteria that are left unset match every comment. ``deleted`` is
    tri-state: False selects active comments (default), True selects only
    soft-deleted comments and None selects both.
    """

    ids: list[CommentId] | None = None
    exclude_ids: list[CommentId] | None = None

    # Page / project scope
    project_id: ProjectId | None = None
    page_slug: str | None = None
    owner_id: UserId | None = None
    live_projects_only: bool = False

    # Thread position
    parent_id: CommentId | None = None
    parent_ids: list[CommentId] | None = None
    roots_only: bool = False

    # Moderation state
    approved: bool | None = None
    deleted: bool | None = False

    # Authorship
    by_emails: list[str] | None = None
    exclude_moderator: bool = False


class CommentPatch(ValueObject):
    """Partial update applied to a set of comments.

    Only fields that were explicitly passed are written, so
    ``CommentPatch(deleted_at=None)`` clears the soft-delete marker while
    ``CommentPatch(approved=True)`` leaves it untouched.
    """

    approved: bool | None = None
    deleted_at: datetime | None = None
    notify_confirmed_at: datetime | None = None

    def changes(self) -> dict:
        """Return only the explicitly set fields."""
        return self.model_dump(exclude_unset=True)


class ThreadOptions(ValueObject):
    """Options for reading a paginated comment listing."""

    parent_id: CommentId | None = None
    # Without parent_id: True lists root comments only, False lists every depth
    roots_only: bool = True
    approved: bool | None = None
    page_slug: str | None = None
    # Restricts the listing to projects owned by this account
    owner_id: UserId | None = None
    page: int = Field(default=1, ge=1)
    page_size: int | None = Field(default=None, ge=1)
    include_replies: bool = False
    include_deleted_parents: bool = False
    admin_view: bool = False


class ModeratorIdentity(ValueObject):
    """Dashboard account replying on behalf of the site."""

    user_id: UserId
    email: str | None = None
    name: str | None = None
