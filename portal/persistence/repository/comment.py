"""SQL implementation of Comment repository."""

from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from portal.domain.model import Comment
from portal.domain.repository import CommentRepository
from portal.domain.value import ArticleId, CommentId
from portal.persistence.mappers import APPROVED, comment_to_dict, row_to_comment
from portal.persistence.tables import comments_table


class SqlCommentRepository(CommentRepository):
    """SQL implementation of CommentRepository over ``wp_comments``."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        stmt = select(comments_table).where(
            comments_table.c.comment_ID == comment_id
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_comment(row._asdict()) if row else None

    async def find_approved_by_article(self, article_id: ArticleId) -> List[Comment]:
        """Find approved comments of an article, oldest first."""
        stmt = (
            select(comments_table)
            .where(comments_table.c.comment_post_ID == article_id)
            .where(comments_table.c.comment_approved == APPROVED)
            .order_by(comments_table.c.comment_date, comments_table.c.comment_ID)
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def add(self, comment: Comment) -> Comment:
        """Insert a comment and return it with its new ID."""
        stmt = comments_table.insert().values(**comment_to_dict(comment))
        result = await self.session.execute(stmt)
        await self.session.flush()

        (comment_id,) = result.inserted_primary_key
        return comment.model_copy(update={"id": CommentId(int(comment_id))})
