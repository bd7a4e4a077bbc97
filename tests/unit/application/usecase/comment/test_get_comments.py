"""Unit tests for the comment listing use cases."""

from uuid import uuid4

import pytest

from discuss.application.usecase.comment import (
    ConfirmReplyNotificationRequest,
    ConfirmReplyNotificationUseCase,
    GetCommentsRequest,
    GetCommentsUseCase,
    GetDeletedCommentsRequest,
    GetDeletedCommentsUseCase,
)
from discuss.domain.error import NotFoundError, ValidationError
from discuss.domain.repository import CommentRepository
from discuss.domain.service import TokenService
from discuss.domain.value import CommentId
from tests.conftest import seed_comment, seed_page, seed_project
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestGetCommentsUseCase:
    """Tests for GetCommentsUseCase."""

    @pytest.mark.asyncio
    async def test_only_own_requires_user(self, unit_env):
        """Owner-scoped listings need an authenticated account."""
        # Arrange
        use_case = await unit_env.get(GetCommentsUseCase)
        project = await seed_project(unit_env)

        # Act & Assert
        with pytest.raises(ValidationError):
            await use_case.execute(
                GetCommentsRequest(project_id=str(project.id), only_own=True)
            )

    @pytest.mark.asyncio
    async def test_only_own_filters_by_owner(self, unit_env):
        """Accounts see their own projects' comments only."""
        # Arrange
        use_case = await unit_env.get(GetCommentsUseCase)
        project = await seed_project(unit_env)
        page = await seed_page(unit_env, project)
        await seed_comment(unit_env, page)

        # Act
        own = await use_case.execute(
            GetCommentsRequest(
                project_id=str(project.id),
                only_own=True,
                user_id=str(project.owner_id),
            )
        )
        other = await use_case.execute(
            GetCommentsRequest(
                project_id=str(project.id), only_own=True, user_id=str(uuid4())
            )
        )

        # Assert
        assert own.comment_count == 1
        assert other.comment_count == 0

    @pytest.mark.asyncio
    async def test_admin_view_shows_deleted_content(self, unit_env):
        """Moderators see the original text of deleted parents."""
        # Arrange
        use_case = await unit_env.get(GetCommentsUseCase)
        project = await seed_project(unit_env)
        page = await seed_page(unit_env, project)
        root = await seed_comment(unit_env, page, content="original", deleted=True)
        await seed_comment(unit_env, page, parent=root)

        # Act
        result = await use_case.execute(
            GetCommentsRequest(
                project_id=str(project.id),
                include_replies=True,
                include_deleted_parents=True,
                is_admin=True,
                timezone_offset=60,
            )
        )

        # Assert
        assert result.data[0].content == "original"
        assert result.data[0].replies.comment_count == 1

    @pytest.mark.asyncio
    async def test_deleted_listing(self, unit_env):
        """The trash view lists deleted comments only."""
        # Arrange
        use_case = await unit_env.get(GetDeletedCommentsUseCase)
        project = await seed_project(unit_env)
        page = await seed_page(unit_env, project)
        deleted = await seed_comment(unit_env, page, deleted=True)
        await seed_comment(unit_env, page)

        # Act
        result = await use_case.execute(
            GetDeletedCommentsRequest(project_id=str(project.id))
        )

        # Assert
        assert [c.id for c in result.data] == [deleted.id]


class TestConfirmReplyNotificationUseCase:
    """Tests for ConfirmReplyNotificationUseCase."""

    @pytest.mark.asyncio
    async def test_subscribe_and_unsubscribe(self, unit_env):
        """The same link confirms and, with unsubscribe, opts out."""
        # Arrange
        use_case = await unit_env.get(ConfirmReplyNotificationUseCase)
        token_service = await unit_env.get(TokenService)
        comment_repo = await unit_env.get(CommentRepository)
        page = await seed_page(unit_env, await seed_project(unit_env))
        comment = await seed_comment(unit_env, page)
        token = token_service.create_reply_notification_token(comment.id)

        # Act
        subscribed = await use_case.execute(
            ConfirmReplyNotificationRequest(token=token)
        )
        stored = await comment_repo.find_by_id(comment.id)
        unsubscribed = await use_case.execute(
            ConfirmReplyNotificationRequest(token=token, unsubscribe=True)
        )

        # Assert
        assert subscribed.subscribed is True
        assert stored.notify_confirmed_at == subscribed.notify_confirmed_at
        assert unsubscribed.subscribed is False
        assert unsubscribed.notify_confirmed_at is None

    @pytest.mark.asyncio
    async def test_removed_comment_raises_not_found(self, unit_env):
        """Links outliving their comment fail cleanly."""
        # Arrange
        use_case = await unit_env.get(ConfirmReplyNotificationUseCase)
        token_service = await unit_env.get(TokenService)
        token = token_service.create_reply_notification_token(CommentId(uuid4()))

        # Act & Assert
        with pytest.raises(NotFoundError):
            await use_case.execute(ConfirmReplyNotificationRequest(token=token))
