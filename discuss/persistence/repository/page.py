"""PostgreSQL implementation of Page repository."""

from typing import List, Optional, Sequence

from sqlalchemy import select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from discuss.domain.model import Page
from discuss.domain.repository import PageRepository
from discuss.domain.value import PageId, ProjectId
from discuss.persistence.mappers import row_to_page, to_dict
from discuss.persistence.tables import pages_table


class PostgresPageRepository(PageRepository):
    """PostgreSQL implementation of PageRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, page_id: PageId) -> Optional[Page]:
        """Find a page by ID."""
        stmt = select(pages_table).where(pages_table.c.id == page_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_page(dict(row)) if row else None

    async def find_by_ids(self, page_ids: Sequence[PageId]) -> List[Page]:
        """Find several pages in one lookup."""
        if not page_ids:
            return []

        stmt = select(pages_table).where(pages_table.c.id.in_(list(page_ids)))
        result = await self.session.execute(stmt)
        return [row_to_page(dict(row)) for row in result.mappings().all()]

    async def find_by_slug(self, project_id: ProjectId, slug: str) -> Optional[Page]:
        """Find a project's page by slug."""
        stmt = select(pages_table).where(
            pages_table.c.project_id == project_id, pages_table.c.slug == slug
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_page(dict(row)) if row else None

    async def save(self, page: Page) -> Page:
        """Save a page (create or update title/url)."""
        values = to_dict(page)
        stmt = (
            insert(pages_table)
            .values(**values)
            .on_conflict_do_update(
                index_elements=[pages_table.c.id],
                set_={"title": values["title"], "url": values["url"]},
            )
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return page
