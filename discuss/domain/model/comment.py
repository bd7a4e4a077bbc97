"""Comment entity.

Comments form reply trees stored flat: each row points at its parent through
``parent_id`` and trees are rebuilt in memory from adjacency maps when
needed.
"""

from datetime import datetime, timezone
from typing import Optional

from pydantic import Field

from discuss.domain.model.common import DomainModel
from discuss.domain.value import CommentId, PageId, UserId


class Comment(DomainModel):
    """Comment entity.

    Moderation state is the (approved, deleted_at) pair:
    - approved: gate for public visibility
    - deleted_at: soft-delete marker, only cleared by an explicit restore

    A comment with moderator_id set was written by a site moderator. Such
    comments are approved at creation and never count towards, or benefit
    from, a visitor's trust history.
    """

    id: CommentId
    page_id: PageId
    parent_id: Optional[CommentId] = None
    content: str
    by_email: Optional[str] = None
    by_nickname: Optional[str] = None
    moderator_id: Optional[UserId] = None
    approved: bool = False
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    deleted_at: Optional[datetime] = None
    notify_confirmed_at: Optional[datetime] = None

    @property
    def is_root(self) -> bool:
        return self.parent_id is None

    @property
    def is_deleted(self) -> bool:
        return self.deleted_at is not None

    @property
    def is_moderator_comment(self) -> bool:
        return self.moderator_id is not None
