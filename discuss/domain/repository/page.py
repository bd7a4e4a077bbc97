"""Page repository interface."""

from abc import ABC, abstractmethod
from typing import Optional, Sequence

from discuss.domain.model.page import Page
from discuss.domain.value import PageId, ProjectId


class PageRepository(ABC):
    """Repository for Page entity."""

    @abstractmethod
    async def find_by_id(self, page_id: PageId) -> Optional[Page]:
        """Find a page by ID."""
        pass

    @abstractmethod
    async def find_by_ids(self, page_ids: Sequence[PageId]) -> list[Page]:
        """Find several pages in one lookup."""
        pass

    @abstractmethod
    async def find_by_slug(self, project_id: ProjectId, slug: str) -> Optional[Page]:
        """Find a project's page by slug."""
        pass

    @abstractmethod
    async def save(self, page: Page) -> Page:
        """Save a page (create or update)."""
        pass
