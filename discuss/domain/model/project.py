"""Project entity."""

from datetime import datetime, timezone
from typing import Optional

from pydantic import Field

from discuss.domain.model.common import DomainModel
from discuss.domain.value import ProjectId, UserId


class Project(DomainModel):
    """Site registered by an owner; pages and comments hang off it."""

    id: ProjectId
    owner_id: UserId
    title: str
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    deleted_at: Optional[datetime] = None

    @property
    def is_deleted(self) -> bool:
        return self.deleted_at is not None
