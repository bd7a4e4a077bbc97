"""Unit tests for ApproveByTokenUseCase and ReplyAsModeratorUseCase."""

from uuid import uuid4

import pytest

from discuss.application.usecase.comment import (
    ApproveByTokenRequest,
    ApproveByTokenUseCase,
    ReplyAsModeratorRequest,
    ReplyAsModeratorUseCase,
)
from discuss.domain.repository import CommentRepository
from discuss.domain.service import TokenService
from discuss.domain.value import ModeratorIdentity, UserId
from discuss.util.jwt import JWTError
from tests.conftest import seed_comment, seed_page, seed_project
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestApproveByTokenUseCase:
    """Tests for ApproveByTokenUseCase."""

    @pytest.mark.asyncio
    async def test_approves_and_replies_as_owner(self, unit_env):
        """The link approves the comment and signs the reply as the owner."""
        # Arrange
        use_case = await unit_env.get(ApproveByTokenUseCase)
        token_service = await unit_env.get(TokenService)
        comment_repo = await unit_env.get(CommentRepository)
        project = await seed_project(unit_env)
        page = await seed_page(unit_env, project)
        comment = await seed_comment(unit_env, page)
        owner = ModeratorIdentity(user_id=project.owner_id, name="Owner")
        token = token_service.create_approve_token(comment.id, owner)

        # Act
        response = await use_case.execute(
            ApproveByTokenRequest(token=token, reply_content="Thanks for reading")
        )

        # Assert
        assert response.approved == 1
        assert response.comment_id == str(comment.id)
        assert (await comment_repo.find_by_id(comment.id)).approved is True
        assert response.reply is not None
        assert response.reply.moderator_id == project.owner_id
        assert response.reply.by_nickname == "Owner"
        assert response.reply.parent_id == comment.id

    @pytest.mark.asyncio
    async def test_link_for_other_purpose_is_rejected(self, unit_env):
        """Only approval links approve."""
        # Arrange
        use_case = await unit_env.get(ApproveByTokenUseCase)
        token_service = await unit_env.get(TokenService)
        page = await seed_page(unit_env, await seed_project(unit_env))
        comment = await seed_comment(unit_env, page)
        token = token_service.create_reply_notification_token(comment.id)

        # Act & Assert
        with pytest.raises(JWTError):
            await use_case.execute(ApproveByTokenRequest(token=token))


class TestReplyAsModeratorUseCase:
    """Tests for ReplyAsModeratorUseCase."""

    @pytest.mark.asyncio
    async def test_reply_is_formatted(self, unit_env):
        """The dashboard gets the rendered reply back."""
        # Arrange
        use_case = await unit_env.get(ReplyAsModeratorUseCase)
        page = await seed_page(unit_env, await seed_project(unit_env))
        parent = await seed_comment(unit_env, page)
        moderator_id = UserId(uuid4())

        # Act
        response = await use_case.execute(
            ReplyAsModeratorRequest(
                parent_id=str(parent.id),
                content="*Welcome*",
                moderator_id=str(moderator_id),
                moderator_email="mod@example.com",
            )
        )

        # Assert
        assert response.reply.moderator_id == moderator_id
        assert "<em>Welcome</em>" in response.reply.parsed_content
        assert response.reply.is_email_verified is True
