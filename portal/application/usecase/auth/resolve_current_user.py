"""Resolve current user use case."""

from pydantic import BaseModel

from portal.application.usecase.base import BaseUseCase
from portal.domain.service import JWTService, UserService
from portal.domain.value import AuthenticatedUser, UserId


class ResolveCurrentUserRequest(BaseModel):
    """Resolve current user request."""

    token: str | None = None  # JWT token from the auth cookie


class ResolveCurrentUserUseCase(BaseUseCase):
    """Use case for turning an auth cookie into an explicit user context.

    Never raises for bad credentials: a missing, invalid or expired token,
    or a token for a deleted account, all mean "no user".
    """

    def __init__(self, jwt_service: JWTService, user_service: UserService) -> None:
        """Initialize resolve current user use case.

        Args:
            jwt_service: JWT token domain service
            user_service: User domain service
        """
        self.jwt_service = jwt_service
        self.user_service = user_service

    async def execute(
        self, request: ResolveCurrentUserRequest
    ) -> AuthenticatedUser | None:
        """Execute resolve current user flow.

        Args:
            request: Request with the optional JWT token

        Returns:
            The authenticated user, or None
        """
        user_id = self.jwt_service.user_id_from_cookie(request.token)
        if user_id is None:
            return None

        user = await self.user_service.find_by_id(UserId(user_id))
        if user is None:
            return None

        return AuthenticatedUser(id=user.id, name=user.display_name, email=user.email)
