"""Project repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from discuss.domain.model.project import Project
from discuss.domain.value import ProjectId


class ProjectRepository(ABC):
    """Repository for Project entity."""

    @abstractmethod
    async def find_by_id(self, project_id: ProjectId) -> Optional[Project]:
        """Find a project by ID, deleted or not."""
        pass

    @abstractmethod
    async def save(self, project: Project) -> Project:
        """Save a project (create or update)."""
        pass
