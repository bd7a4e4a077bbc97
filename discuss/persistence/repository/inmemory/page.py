"""In-memory page repository for testing."""

from typing import Optional, Sequence

from discuss.domain.model.page import Page
from discuss.domain.repository.page import PageRepository
from discuss.domain.value import PageId, ProjectId

from .store import InMemoryStore


class InMemoryPageRepository(PageRepository):
    """In-memory implementation of PageRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self.store = store

    async def find_by_id(self, page_id: PageId) -> Optional[Page]:
        """Find a page by ID."""
        return self.store.pages.get(page_id)

    async def find_by_ids(self, page_ids: Sequence[PageId]) -> list[Page]:
        """Find several pages."""
        return [
            self.store.pages[page_id]
            for page_id in dict.fromkeys(page_ids)
            if page_id in self.store.pages
        ]

    async def find_by_slug(self, project_id: ProjectId, slug: str) -> Optional[Page]:
        """Find a project's page by slug."""
        for page in self.store.pages.values():
            if page.project_id == project_id and page.slug == slug:
                return page
        return None

    async def save(self, page: Page) -> Page:
        """Save or update a page."""
        self.store.pages[page.id] = page
        return page
