"""Session cookie tokens.

The portal's reader session is an HS256 JWT carried in the ``auth_token``
cookie. The user ID travels in the registered ``sub`` claim as a string.
"""

from datetime import datetime, timedelta, timezone

import jwt
from pydantic import BaseModel, ValidationError

from portal.config import AuthSettings


class SessionClaims(BaseModel):
    """Claims of a verified session cookie."""

    user_id: int
    issued_at: datetime
    expires_at: datetime


class SessionTokenError(Exception):
    """The cookie could not be turned into session claims."""

    def __init__(self, reason: str, expired: bool = False):
        self.expired = expired
        super().__init__(reason)


def encode_session(
    user_id: int, settings: AuthSettings, now: datetime | None = None
) -> str:
    """Sign a session token for a WordPress user."""
    issued_at = now or datetime.now(timezone.utc)
    claims = {
        "sub": str(user_id),
        "iat": issued_at,
        "exp": issued_at + timedelta(days=settings.jwt_expiry_days),
    }
    return jwt.encode(claims, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def decode_session(token: str, settings: AuthSettings) -> SessionClaims:
    """Check the signature and expiry of a session token.

    Raises:
        SessionTokenError: If the token is expired, forged or lacks a user ID
    """
    try:
        claims = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            options={"require": ["sub", "iat", "exp"]},
        )
    except jwt.ExpiredSignatureError as e:
        raise SessionTokenError("session expired", expired=True) from e
    except jwt.InvalidTokenError as e:
        raise SessionTokenError(f"unreadable session: {e}") from e

    try:
        return SessionClaims(
            user_id=claims["sub"],
            issued_at=datetime.fromtimestamp(claims["iat"], timezone.utc),
            expires_at=datetime.fromtimestamp(claims["exp"], timezone.utc),
        )
    except (ValidationError, TypeError, ValueError) as e:
        raise SessionTokenError("session subject is not a user ID") from e
