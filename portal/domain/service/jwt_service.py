"""Session cookie service."""

import logfire

from portal.config import AuthSettings
from portal.util.jwt import (
    SessionClaims,
    SessionTokenError,
    decode_session,
    encode_session,
)

from .base import Service


class JWTService(Service):
    """Reads and signs the ``auth_token`` session cookie.

    Issuing is only used by tests and tooling; login lives in WordPress.
    """

    def __init__(self, auth_settings: AuthSettings) -> None:
        self.auth_settings = auth_settings

    def create_token(self, user_id: int) -> str:
        """Sign a session cookie value for ``user_id``."""
        return encode_session(user_id, self.auth_settings)

    def read_claims(self, token: str) -> SessionClaims:
        """Verify a cookie value.

        Raises:
            SessionTokenError: If the cookie is expired or not ours
        """
        with logfire.span("jwt_service.read_claims"):
            return decode_session(token, self.auth_settings)

    def user_id_from_cookie(self, token: str | None) -> int | None:
        """Return the user ID of a valid cookie, None for anonymous readers.

        A bad cookie is logged and otherwise treated like no cookie at all.
        """
        if not token:
            return None

        try:
            claims = self.read_claims(token)
        except SessionTokenError as e:
            logfire.warn(
                "Ignoring session cookie", reason=str(e), expired=e.expired
            )
            return None
        return claims.user_id
