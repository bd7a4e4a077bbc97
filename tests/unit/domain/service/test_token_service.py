"""Unit tests for TokenService."""

from datetime import timedelta
from uuid import uuid4

import pytest

from discuss.config import AuthSettings
from discuss.domain.service import TokenService
from discuss.domain.value import CommentId, ModeratorIdentity, ProjectId, UserId
from discuss.util.jwt import JWTError, TokenPurpose, create_token


@pytest.fixture
def auth_settings() -> AuthSettings:
    return AuthSettings(jwt_secret="test-secret")


@pytest.fixture
def token_service(auth_settings) -> TokenService:
    return TokenService(auth_settings=auth_settings)


class TestTokenService:
    """Tests for purpose-scoped signed links."""

    def test_email_verify_token_round_trips_claims(self, token_service):
        """Claims survive signing, including the optional comment."""
        # Arrange
        project_id = ProjectId(uuid4())
        comment_id = CommentId(uuid4())

        # Act
        token = token_service.create_email_verify_token(
            "reader@example.com", project_id, comment_id
        )
        claims = token_service.verify_email_verify_token(token)

        # Assert
        assert claims.email == "reader@example.com"
        assert claims.project_id == project_id
        assert claims.comment_id == comment_id

    def test_approve_token_carries_owner_identity(self, token_service):
        """Replies sent through the link are signed as the owner."""
        # Arrange
        owner = ModeratorIdentity(
            user_id=UserId(uuid4()), email="owner@example.com", name="Owner"
        )
        comment_id = CommentId(uuid4())

        # Act
        token = token_service.create_approve_token(comment_id, owner)
        claims = token_service.verify_approve_token(token)

        # Assert
        assert claims.comment_id == comment_id
        assert claims.moderator() == owner

    def test_token_cannot_be_used_for_another_purpose(self, token_service):
        """A notification link can't approve comments."""
        # Arrange
        token = token_service.create_reply_notification_token(CommentId(uuid4()))

        # Act & Assert
        with pytest.raises(JWTError):
            token_service.verify_approve_token(token)

    def test_expired_token_is_rejected(self, token_service, auth_settings):
        """Expired links fail verification."""
        # Arrange
        token = create_token(
            TokenPurpose.ACCEPT_NOTIFY,
            {"comment_id": str(uuid4())},
            timedelta(seconds=-1),
            auth_settings,
        )

        # Act & Assert
        with pytest.raises(JWTError, match="expired"):
            token_service.verify_reply_notification_token(token)

    def test_token_signed_with_other_secret_is_rejected(self, token_service):
        """Tokens from another deployment don't verify."""
        # Arrange
        other = TokenService(auth_settings=AuthSettings(jwt_secret="other-secret"))
        token = other.create_reply_notification_token(CommentId(uuid4()))

        # Act & Assert
        with pytest.raises(JWTError):
            token_service.verify_reply_notification_token(token)

    def test_malformed_claims_are_rejected(self, token_service, auth_settings):
        """A correctly signed token with the wrong payload is invalid."""
        # Arrange
        token = create_token(
            TokenPurpose.APPROVE_COMMENT,
            {"comment_id": "not-a-uuid"},
            timedelta(minutes=5),
            auth_settings,
        )

        # Act & Assert
        with pytest.raises(JWTError, match="Invalid token"):
            token_service.verify_approve_token(token)
