"""In-memory project repository for testing."""

from typing import Optional

from discuss.domain.model.project import Project
from discuss.domain.repository.project import ProjectRepository
from discuss.domain.value import ProjectId

from .store import InMemoryStore


class InMemoryProjectRepository(ProjectRepository):
    """In-memory implementation of ProjectRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self.store = store

    async def find_by_id(self, project_id: ProjectId) -> Optional[Project]:
        """Find a project by ID."""
        return self.store.projects.get(project_id)

    async def save(self, project: Project) -> Project:
        """Save or update a project."""
        self.store.projects[project.id] = project
        return project
