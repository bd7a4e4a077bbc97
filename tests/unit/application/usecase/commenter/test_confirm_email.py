"""Unit tests for the commenter use cases."""

import pytest

from discuss.application.usecase.commenter import (
    ConfirmEmailRequest,
    ConfirmEmailUseCase,
    DeleteCommenterCommentsRequest,
    DeleteCommenterCommentsUseCase,
    ListCommentersRequest,
    ListCommentersUseCase,
)
from discuss.domain.error import ValidationError
from discuss.domain.repository import CommenterRepository, CommentRepository
from discuss.domain.service import ModerationService, TokenService
from tests.conftest import seed_comment, seed_page, seed_project
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestConfirmEmailUseCase:
    """Tests for ConfirmEmailUseCase."""

    @pytest.mark.asyncio
    async def test_first_comment_stays_pending_after_confirmation(self, unit_env):
        """Confirming an email alone never publishes a comment."""
        # Arrange
        use_case = await unit_env.get(ConfirmEmailUseCase)
        token_service = await unit_env.get(TokenService)
        commenter_repo = await unit_env.get(CommenterRepository)
        comment_repo = await unit_env.get(CommentRepository)
        project = await seed_project(unit_env)
        page = await seed_page(unit_env, project)
        comment = await seed_comment(unit_env, page, email="new@example.com")
        token = token_service.create_email_verify_token(
            "new@example.com", project.id, comment.id
        )

        # Act
        response = await use_case.execute(ConfirmEmailRequest(token=token))

        # Assert
        assert response.email == "new@example.com"
        assert response.verified_at is not None
        assert response.approved_comment_id is None
        assert (await commenter_repo.find_by_email("new@example.com")).is_verified
        assert (await comment_repo.find_by_id(comment.id)).approved is False

    @pytest.mark.asyncio
    async def test_returning_commenter_comment_is_published(self, unit_env):
        """With an approved comment already on the project, the linked one goes live."""
        # Arrange
        use_case = await unit_env.get(ConfirmEmailUseCase)
        token_service = await unit_env.get(TokenService)
        comment_repo = await unit_env.get(CommentRepository)
        project = await seed_project(unit_env)
        page = await seed_page(unit_env, project)
        await seed_comment(unit_env, page, email="back@example.com", approved=True)
        pending = await seed_comment(unit_env, page, email="back@example.com")
        token = token_service.create_email_verify_token(
            "back@example.com", project.id, pending.id
        )

        # Act
        response = await use_case.execute(ConfirmEmailRequest(token=token))

        # Assert
        assert response.approved_comment_id == str(pending.id)
        assert (await comment_repo.find_by_id(pending.id)).approved is True

    @pytest.mark.asyncio
    async def test_approval_failure_keeps_verification(self, unit_env):
        """A failed approval is logged; the email stays confirmed."""
        # Arrange
        use_case = await unit_env.get(ConfirmEmailUseCase)
        token_service = await unit_env.get(TokenService)
        moderation_service = await unit_env.get(ModerationService)
        commenter_repo = await unit_env.get(CommenterRepository)
        project = await seed_project(unit_env)
        page = await seed_page(unit_env, project)
        await seed_comment(unit_env, page, email="g@example.com", approved=True)
        pending = await seed_comment(unit_env, page, email="g@example.com")
        token = token_service.create_email_verify_token(
            "g@example.com", project.id, pending.id
        )

        async def failing_approve(comment_ids):
            raise RuntimeError("database unavailable")

        moderation_service.approve = failing_approve

        # Act
        response = await use_case.execute(ConfirmEmailRequest(token=token))

        # Assert
        assert response.approved_comment_id is None
        assert (await commenter_repo.find_by_email("g@example.com")).is_verified


class TestDeleteCommenterCommentsUseCase:
    """Tests for DeleteCommenterCommentsUseCase."""

    @pytest.mark.asyncio
    async def test_deletes_authors_comments(self, unit_env):
        """Every active comment by the listed authors is soft-deleted."""
        # Arrange
        use_case = await unit_env.get(DeleteCommenterCommentsUseCase)
        comment_repo = await unit_env.get(CommentRepository)
        project = await seed_project(unit_env)
        page = await seed_page(unit_env, project)
        first = await seed_comment(unit_env, page, email="troll@example.com")
        second = await seed_comment(unit_env, page, email="troll@example.com")

        # Act
        response = await use_case.execute(
            DeleteCommenterCommentsRequest(
                project_id=str(project.id),
                emails=["troll@example.com", "troll@example.com"],
            )
        )

        # Assert
        assert (response.requested, response.affected) == (1, 2)
        assert (await comment_repo.find_by_id(first.id)).is_deleted
        assert (await comment_repo.find_by_id(second.id)).is_deleted


class TestListCommentersUseCase:
    """Tests for ListCommentersUseCase."""

    @pytest.mark.asyncio
    async def test_deleted_authors_drop_out_of_listing(self, unit_env):
        """The dashboard list shrinks once an author's comments are deleted."""
        # Arrange
        list_commenters = await unit_env.get(ListCommentersUseCase)
        delete_commenter = await unit_env.get(DeleteCommenterCommentsUseCase)
        project = await seed_project(unit_env)
        page = await seed_page(unit_env, project)
        await seed_comment(unit_env, page, email="troll@example.com")
        await seed_comment(unit_env, page, email="troll@example.com")
        await seed_comment(unit_env, page, email="fan@example.com")
        request = ListCommentersRequest(project_id=str(project.id))

        # Act
        before = await list_commenters.execute(request)
        await delete_commenter.execute(
            DeleteCommenterCommentsRequest(
                project_id=str(project.id), emails=["troll@example.com"]
            )
        )
        after = await list_commenters.execute(request)

        # Assert
        assert [(c.email, c.comment_count) for c in before.data] == [
            ("troll@example.com", 2),
            ("fan@example.com", 1),
        ]
        assert [c.email for c in after.data] == ["fan@example.com"]

    @pytest.mark.asyncio
    async def test_malformed_project_id_raises_validation_error(self, unit_env):
        """Identifiers are checked before any lookup."""
        # Arrange
        use_case = await unit_env.get(ListCommentersUseCase)

        # Act & Assert
        with pytest.raises(ValidationError):
            await use_case.execute(ListCommentersRequest(project_id="not-a-uuid"))
