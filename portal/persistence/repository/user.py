"""SQL implementation of User repository."""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from portal.domain.model import User
from portal.domain.repository import UserRepository
from portal.domain.value import UserId
from portal.persistence.mappers import row_to_user
from portal.persistence.tables import users_table


class SqlUserRepository(UserRepository):
    """SQL implementation of UserRepository over ``wp_users``."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        stmt = select(users_table).where(users_table.c.ID == user_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_user(row._asdict()) if row else None
