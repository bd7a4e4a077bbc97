"""Commenter entity."""

from datetime import datetime, timezone
from typing import Optional

from pydantic import Field

from discuss.domain.model.common import DomainModel


class Commenter(DomainModel):
    """Verification record for a visitor email address.

    One record per email. ``verified_at`` is set when the address confirms a
    verification link or when a moderator approves one of its comments, and
    is never revoked by unapproving.
    """

    email: str
    verified_at: Optional[datetime] = None
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def is_verified(self) -> bool:
        return self.verified_at is not None
