"""Unit tests for PageService."""

from uuid import uuid4

import pytest

from discuss.domain.error import NotFoundError
from discuss.domain.repository import PageRepository
from discuss.domain.service import PageService
from discuss.domain.value import ProjectId
from tests.conftest import seed_page, seed_project
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no database needed
unit_env = create_env_fixture()


class TestGetLiveProject:
    """Tests for get_live_project method."""

    @pytest.mark.asyncio
    async def test_missing_or_deleted_project_raises_not_found(self, unit_env):
        """Deleted projects accept no comments."""
        # Arrange
        service = await unit_env.get(PageService)
        deleted = await seed_project(unit_env, deleted=True)

        # Act & Assert
        with pytest.raises(NotFoundError):
            await service.get_live_project(ProjectId(uuid4()))
        with pytest.raises(NotFoundError):
            await service.get_live_project(deleted.id)


class TestTouchPage:
    """Tests for touch_page method."""

    @pytest.mark.asyncio
    async def test_creates_page_on_first_use(self, unit_env):
        """The first comment on a slug creates its page."""
        # Arrange
        service = await unit_env.get(PageService)
        page_repo = await unit_env.get(PageRepository)
        project = await seed_project(unit_env)

        # Act
        page = await service.touch_page(project.id, "/new", title="New post")

        # Assert
        stored = await page_repo.find_by_slug(project.id, "/new")
        assert stored is not None
        assert stored.id == page.id
        assert stored.title == "New post"

    @pytest.mark.asyncio
    async def test_refreshes_changed_title_and_keeps_id(self, unit_env):
        """Title changes are picked up without creating a second page."""
        # Arrange
        service = await unit_env.get(PageService)
        project = await seed_project(unit_env)
        existing = await seed_page(unit_env, project, slug="/post")

        # Act
        unchanged = await service.touch_page(project.id, "/post")
        renamed = await service.touch_page(project.id, "/post", title="Renamed")

        # Assert
        assert unchanged == existing
        assert renamed.id == existing.id
        assert renamed.title == "Renamed"
        assert renamed.url == existing.url
