"""Display-ready read models.

These are what readers of the comment engine receive: stored comment fields
plus rendered HTML, a localized timestamp, the verification badge and the
nested replies wrapper. Serialised with camelCase aliases
(``commentCount``, ``pageSize``, ``parsedContent`` ...).
"""

from datetime import datetime
from typing import Optional

from pydantic import ConfigDict, Field
from pydantic.alias_generators import to_camel

from discuss.domain.model.common import DomainModel
from discuss.domain.value import CommentId, PageId, UserId


class DisplayModel(DomainModel):
    """Base for read models exposed with camelCase field names."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


class CommentWrapper(DisplayModel):
    """One page of comments plus pagination totals."""

    data: list["DisplayComment"] = Field(default_factory=list)
    comment_count: int = 0
    page_size: int = 0
    page_count: int = 0


class DisplayComment(DisplayModel):
    """Comment formatted for display."""

    id: CommentId
    page_id: PageId
    parent_id: Optional[CommentId] = None
    content: str
    by_email: Optional[str] = None
    by_nickname: Optional[str] = None
    moderator_id: Optional[UserId] = None
    approved: bool
    created_at: datetime
    deleted_at: Optional[datetime] = None
    notify_confirmed_at: Optional[datetime] = None

    parsed_content: str
    parsed_created_at: str
    is_email_verified: bool
    replies: CommentWrapper = Field(default_factory=CommentWrapper)

    page_slug: Optional[str] = None
    page_url: Optional[str] = None


CommentWrapper.model_rebuild()
DisplayComment.model_rebuild()


class CommenterSummary(DisplayModel):
    """One author on a project with their most recent comments."""

    # Email for visitors, "admin-<moderator id>" for moderator accounts
    email: str
    nickname: str = ""
    comment_count: int = 0
    is_admin: bool = False
    comments: list[DisplayComment] = Field(default_factory=list)


class CommenterListing(DisplayModel):
    """One page of commenters plus pagination totals."""

    data: list[CommenterSummary] = Field(default_factory=list)
    total: int = 0
    page: int = 1
    page_count: int = 0
