"""Unit tests for JWT utilities."""

from datetime import timedelta

import pytest

from discuss.config import AuthSettings
from discuss.util.jwt import JWTError, TokenPurpose, create_token, decode_token


class TestPurposeScopedTokens:
    """Tests for create_token and decode_token."""

    def test_decode_strips_expiry(self):
        """Callers only see their own claims."""
        # Arrange
        settings = AuthSettings(jwt_secret="s")
        token = create_token(
            TokenPurpose.EMAIL_VERIFY, {"email": "a@b.c"}, timedelta(minutes=1), settings
        )

        # Act
        claims = decode_token(token, TokenPurpose.EMAIL_VERIFY, settings)

        # Assert
        assert claims == {"email": "a@b.c"}

    @pytest.mark.parametrize(
        "issued_for",
        [TokenPurpose.ACCEPT_NOTIFY, TokenPurpose.EMAIL_VERIFY],
    )
    def test_other_purposes_cannot_approve(self, issued_for):
        """Each purpose signs with its own key."""
        # Arrange
        settings = AuthSettings(jwt_secret="s")
        token = create_token(issued_for, {"x": 1}, timedelta(minutes=1), settings)

        # Act & Assert
        with pytest.raises(JWTError, match="Invalid token"):
            decode_token(token, TokenPurpose.APPROVE_COMMENT, settings)

    def test_garbage_is_invalid(self):
        """Non-JWT input raises JWTError, not a library error."""
        # Act & Assert
        with pytest.raises(JWTError):
            decode_token("garbage", TokenPurpose.ACCEPT_NOTIFY, AuthSettings())
