"""Unit tests for VerificationService."""

from uuid import uuid4

import pytest

from discuss.domain.repository import CommenterRepository
from discuss.domain.service import VerificationService
from discuss.domain.value import UserId
from tests.conftest import seed_comment, seed_page, seed_project
from tests.di import TickingClock
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no database needed
unit_env = create_env_fixture()


class TestShouldAutoApprove:
    """Tests for should_auto_approve method."""

    @pytest.mark.asyncio
    async def test_requires_both_verification_and_prior_approval(self, unit_env):
        """Either condition alone keeps the comment in the queue."""
        # Arrange
        service = await unit_env.get(VerificationService)
        commenter_repo = await unit_env.get(CommenterRepository)
        clock = await unit_env.get(TickingClock)
        project = await seed_project(unit_env)
        page = await seed_page(unit_env, project)

        await commenter_repo.upsert("verified@example.com", clock.now())
        await seed_comment(unit_env, page, email="approved@example.com", approved=True)

        # Act
        verified_only = await service.should_auto_approve(
            "verified@example.com", project.id
        )
        approved_only = await service.should_auto_approve(
            "approved@example.com", project.id
        )

        # Assert
        assert verified_only is False
        assert approved_only is False

    @pytest.mark.asyncio
    async def test_soft_deleted_approved_comment_still_counts(self, unit_env):
        """History survives the moderator hiding an old comment."""
        # Arrange
        service = await unit_env.get(VerificationService)
        commenter_repo = await unit_env.get(CommenterRepository)
        clock = await unit_env.get(TickingClock)
        project = await seed_project(unit_env)
        page = await seed_page(unit_env, project)
        await seed_comment(
            unit_env, page, email="eve@example.com", approved=True, deleted=True
        )
        await commenter_repo.upsert("eve@example.com", clock.now())

        # Act
        result = await service.should_auto_approve("eve@example.com", project.id)

        # Assert
        assert result is True

    @pytest.mark.asyncio
    async def test_moderator_comments_are_not_visitor_history(self, unit_env):
        """A moderator reply with the same email earns nothing."""
        # Arrange
        service = await unit_env.get(VerificationService)
        commenter_repo = await unit_env.get(CommenterRepository)
        clock = await unit_env.get(TickingClock)
        project = await seed_project(unit_env)
        page = await seed_page(unit_env, project)
        await seed_comment(
            unit_env,
            page,
            email="owner@example.com",
            approved=True,
            moderator_id=UserId(uuid4()),
        )
        await commenter_repo.upsert("owner@example.com", clock.now())

        # Act
        result = await service.should_auto_approve("owner@example.com", project.id)

        # Assert
        assert result is False

    @pytest.mark.asyncio
    async def test_lookup_failure_fails_closed(self, unit_env):
        """Store errors leave the comment pending instead of raising."""
        # Arrange
        service = await unit_env.get(VerificationService)
        commenter_repo = await unit_env.get(CommenterRepository)
        project = await seed_project(unit_env)

        async def failing_find(email):
            raise RuntimeError("connection reset")

        commenter_repo.find_by_email = failing_find

        # Act
        result = await service.should_auto_approve("x@example.com", project.id)

        # Assert
        assert result is False


class TestVerificationMap:
    """Tests for verify_emails and get_verification_map methods."""

    @pytest.mark.asyncio
    async def test_verify_emails_skips_blanks_and_duplicates(self, unit_env):
        """Each distinct email is written once."""
        # Arrange
        service = await unit_env.get(VerificationService)

        # Act
        written = await service.verify_emails(
            ["a@example.com", None, "", "a@example.com", "b@example.com"]
        )

        # Assert
        assert written == 2

    @pytest.mark.asyncio
    async def test_map_covers_every_requested_email(self, unit_env):
        """Unknown emails map to False."""
        # Arrange
        service = await unit_env.get(VerificationService)
        await service.mark_verified("known@example.com")

        # Act
        result = await service.get_verification_map(
            ["known@example.com", "unknown@example.com", None]
        )

        # Assert
        assert result == {"known@example.com": True, "unknown@example.com": False}

    @pytest.mark.asyncio
    async def test_has_prior_approval_can_exclude_a_comment(self, unit_env):
        """The comment being confirmed doesn't vouch for itself."""
        # Arrange
        service = await unit_env.get(VerificationService)
        project = await seed_project(unit_env)
        page = await seed_page(unit_env, project)
        comment = await seed_comment(
            unit_env, page, email="f@example.com", approved=True
        )

        # Act
        with_self = await service.has_prior_approval("f@example.com", project.id)
        without_self = await service.has_prior_approval(
            "f@example.com", project.id, exclude_comment_id=comment.id
        )

        # Assert
        assert with_self is True
        assert without_self is False
