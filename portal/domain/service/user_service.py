"""User domain service."""

import logfire

from portal.domain.model import User
from portal.domain.repository import UserRepository
from portal.domain.value import UserId

from .base import Service


class UserService(Service):
    """Domain service for user lookups."""

    def __init__(self, user_repository: UserRepository) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
        """
        self.user_repository = user_repository

    async def find_by_id(self, user_id: UserId) -> User | None:
        """Find a user by ID.

        Args:
            user_id: User ID

        Returns:
            User if found, None otherwise
        """
        with logfire.span("user_service.find_by_id", user_id=user_id):
            user = await self.user_repository.find_by_id(user_id)
            if not user:
                logfire.warn("User not found", user_id=user_id)
            return user
