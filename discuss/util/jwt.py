"""JWT token utilities.

Tokens are scoped by purpose: each purpose signs with its own derived key, so
a token issued for one flow (e.g. reply notification opt-in) can never be
replayed against another (e.g. comment approval).
"""

from datetime import datetime, timedelta, timezone
from enum import Enum
from typing import Any

import jwt

from discuss.config import AuthSettings


class TokenPurpose(str, Enum):
    """Flows that are authorised by a signed link."""

    APPROVE_COMMENT = "approve_comment"
    ACCEPT_NOTIFY = "accept_notify"
    EMAIL_VERIFY = "email_verify"


class JWTError(Exception):
    """JWT-related error."""

    pass


def _signing_key(purpose: TokenPurpose, settings: AuthSettings) -> str:
    return f"{settings.jwt_secret}-{purpose.value}"


def create_token(
    purpose: TokenPurpose,
    claims: dict[str, Any],
    expires_in: timedelta,
    settings: AuthSettings,
) -> str:
    """Create a purpose-scoped JWT.

    Args:
        purpose: Flow the token authorises
        claims: Payload claims (JSON-serialisable)
        expires_in: Lifetime of the token
        settings: Authentication settings

    Returns:
        Encoded JWT token
    """
    payload = {
        **claims,
        "exp": datetime.now(timezone.utc) + expires_in,
    }
    return jwt.encode(
        payload, _signing_key(purpose, settings), algorithm=settings.jwt_algorithm
    )


def decode_token(
    token: str, purpose: TokenPurpose, settings: AuthSettings
) -> dict[str, Any]:
    """Verify and decode a purpose-scoped JWT.

    Args:
        token: JWT token to verify
        purpose: Flow the token must have been issued for
        settings: Authentication settings

    Returns:
        Decoded claims (without ``exp``)

    Raises:
        JWTError: If token is invalid, expired or issued for another purpose
    """
    try:
        payload = jwt.decode(
            token,
            _signing_key(purpose, settings),
            algorithms=[settings.jwt_algorithm],
        )
    except jwt.ExpiredSignatureError:
        raise JWTError("Token has expired")
    except jwt.InvalidTokenError:
        raise JWTError("Invalid token")

    payload.pop("exp", None)
    return payload
