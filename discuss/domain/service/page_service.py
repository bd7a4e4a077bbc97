"""Page and project lookup domain service."""

import logfire
from typing import Optional
from uuid import uuid4

from discuss.domain.error import NotFoundError
from discuss.domain.model import Page, Project
from discuss.domain.repository import (
    PageRepository,
    ProjectRepository,
    TransactionManager,
)
from discuss.domain.value import PageId, ProjectId

from .base import Service
from .clock import Clock


class PageService(Service):
    """Domain service for the pages comments attach to."""

    def __init__(
        self,
        page_repository: PageRepository,
        project_repository: ProjectRepository,
        transaction_manager: TransactionManager,
        clock: Clock,
    ) -> None:
        """Initialize page service.

        Args:
            page_repository: Page repository
            project_repository: Project repository
            transaction_manager: Unit-of-work boundary
            clock: Time source
        """
        self.page_repository = page_repository
        self.project_repository = project_repository
        self.transaction_manager = transaction_manager
        self.clock = clock

    async def get_live_project(self, project_id: ProjectId) -> Project:
        """Get a project that accepts comments.

        Raises:
            NotFoundError: If the project doesn't exist or was deleted
        """
        project = await self.project_repository.find_by_id(project_id)
        if not project or project.is_deleted:
            logfire.warn("Project not found or deleted", project_id=str(project_id))
            raise NotFoundError("Project", str(project_id))
        return project

    async def touch_page(
        self,
        project_id: ProjectId,
        slug: str,
        title: Optional[str] = None,
        url: Optional[str] = None,
    ) -> Page:
        """Get a project's page by slug, creating it on first use.

        Title and URL are refreshed when given.

        Args:
            project_id: Owning project
            slug: Page identifier chosen by the embedding site
            title: Page title
            url: Page URL

        Returns:
            The stored page
        """
        with logfire.span(
            "page_service.touch_page", project_id=str(project_id), slug=slug
        ):
            page = await self.page_repository.find_by_slug(project_id, slug)

            if page is None:
                page = Page(
                    id=PageId(uuid4()),
                    project_id=project_id,
                    slug=slug,
                    title=title,
                    url=url,
                    created_at=self.clock.now(),
                )
                logfire.info("Page created", project_id=str(project_id), slug=slug)
            elif (title and title != page.title) or (url and url != page.url):
                page = page.model_copy(
                    update={"title": title or page.title, "url": url or page.url}
                )
            else:
                return page

            async with self.transaction_manager.transaction():
                return await self.page_repository.save(page)
