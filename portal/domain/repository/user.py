"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from portal.domain.model.user import User
from portal.domain.value import UserId


class UserRepository(ABC):
    """Read access to WordPress user accounts."""

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: The user's identifier

        Returns:
            The user if found, None otherwise
        """
        pass
