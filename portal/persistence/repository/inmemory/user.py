"""In-memory user repository for testing."""

from typing import Optional

from portal.domain.model.user import User
from portal.domain.repository.user import UserRepository
from portal.domain.value import UserId


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self) -> None:
        self._users: dict[UserId, User] = {}

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return self._users.get(user_id)

    async def save(self, user: User) -> User:
        """Store a user (test setup only)."""
        self._users[user.id] = user
        return user
