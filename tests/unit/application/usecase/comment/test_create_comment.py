"""Unit tests for CreateCommentUseCase."""

from uuid import uuid4

import pytest

from discuss.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentUseCase,
)
from discuss.domain.error import NotFoundError, ValidationError
from discuss.domain.repository import CommenterRepository, PageRepository
from discuss.domain.service import TokenService
from tests.conftest import seed_comment, seed_page, seed_project
from tests.di import TickingClock
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestCreateCommentUseCase:
    """Tests for CreateCommentUseCase."""

    @pytest.mark.asyncio
    async def test_pending_comment_issues_all_links(self, unit_env):
        """A new commenter gets verify and notify links; the owner an approve link."""
        # Arrange
        use_case = await unit_env.get(CreateCommentUseCase)
        token_service = await unit_env.get(TokenService)
        page_repo = await unit_env.get(PageRepository)
        project = await seed_project(unit_env)

        request = CreateCommentRequest(
            project_id=str(project.id),
            page_slug="/posts/first",
            page_title="First post",
            content="Nice article",
            email="reader@example.com",
            nickname="Reader",
            accept_notify=True,
        )

        # Act
        response = await use_case.execute(request)

        # Assert
        assert response.comment.approved is False
        page = await page_repo.find_by_slug(project.id, "/posts/first")
        assert page is not None and page.title == "First post"
        assert response.comment.page_id == page.id

        approve = token_service.verify_approve_token(response.approve_token)
        assert approve.comment_id == response.comment.id
        assert approve.owner_id == project.owner_id

        verify = token_service.verify_email_verify_token(response.email_verify_token)
        assert verify.email == "reader@example.com"
        assert verify.project_id == project.id
        assert verify.comment_id == response.comment.id

        notify = token_service.verify_reply_notification_token(
            response.reply_notification_token
        )
        assert notify.comment_id == response.comment.id

    @pytest.mark.asyncio
    async def test_trusted_commenter_gets_no_moderation_links(self, unit_env):
        """Auto-approved comments by verified commenters need no links."""
        # Arrange
        use_case = await unit_env.get(CreateCommentUseCase)
        commenter_repo = await unit_env.get(CommenterRepository)
        clock = await unit_env.get(TickingClock)
        project = await seed_project(unit_env)
        page = await seed_page(unit_env, project)
        await seed_comment(unit_env, page, email="trusted@example.com", approved=True)
        await commenter_repo.upsert("trusted@example.com", clock.now())

        request = CreateCommentRequest(
            project_id=str(project.id),
            page_slug=page.slug,
            content="Again",
            email="trusted@example.com",
        )

        # Act
        response = await use_case.execute(request)

        # Assert
        assert response.comment.approved is True
        assert response.approve_token is None
        assert response.email_verify_token is None
        assert response.reply_notification_token is None

    @pytest.mark.asyncio
    async def test_deleted_project_rejects_comments(self, unit_env):
        """Deleted projects are treated as missing."""
        # Arrange
        use_case = await unit_env.get(CreateCommentUseCase)
        project = await seed_project(unit_env, deleted=True)

        # Act & Assert
        with pytest.raises(NotFoundError):
            await use_case.execute(
                CreateCommentRequest(
                    project_id=str(project.id), page_slug="/x", content="Hi"
                )
            )

    @pytest.mark.asyncio
    async def test_malformed_ids_raise_validation_error(self, unit_env):
        """String IDs are validated before any lookup."""
        # Arrange
        use_case = await unit_env.get(CreateCommentUseCase)
        project = await seed_project(unit_env)

        # Act & Assert
        with pytest.raises(ValidationError):
            await use_case.execute(
                CreateCommentRequest(
                    project_id="not-a-uuid", page_slug="/x", content="Hi"
                )
            )
        with pytest.raises(ValidationError):
            await use_case.execute(
                CreateCommentRequest(
                    project_id=str(project.id),
                    page_slug="/x",
                    content="Hi",
                    parent_id=str(uuid4())[:8],
                )
            )
