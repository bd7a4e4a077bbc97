"""Page entity."""

from datetime import datetime, timezone
from typing import Optional

from pydantic import Field

from discuss.domain.model.common import DomainModel
from discuss.domain.value import PageId, ProjectId


class Page(DomainModel):
    """A (project, slug) pair that comments attach to.

    Created the first time a comment is submitted for the slug.
    """

    id: PageId
    project_id: ProjectId
    slug: str = Field(min_length=1, max_length=2048)
    title: Optional[str] = None
    url: Optional[str] = None
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
