"""PostgreSQL implementation of Project repository."""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from discuss.domain.model import Project
from discuss.domain.repository import ProjectRepository
from discuss.domain.value import ProjectId
from discuss.persistence.mappers import row_to_project, to_dict
from discuss.persistence.tables import projects_table


class PostgresProjectRepository(ProjectRepository):
    """PostgreSQL implementation of ProjectRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, project_id: ProjectId) -> Optional[Project]:
        """Find a project by ID, deleted or not."""
        stmt = select(projects_table).where(projects_table.c.id == project_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_project(dict(row)) if row else None

    async def save(self, project: Project) -> Project:
        """Save a project (create or update)."""
        values = to_dict(project)
        stmt = (
            insert(projects_table)
            .values(**values)
            .on_conflict_do_update(
                index_elements=[projects_table.c.id],
                set_={
                    "title": values["title"],
                    "owner_id": values["owner_id"],
                    "deleted_at": values["deleted_at"],
                },
            )
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return project
