"""SQL implementation of Article repository."""

from typing import List, Optional

from sqlalchemy import Select, Text, and_, desc, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from portal.domain.model import Article
from portal.domain.repository import ArticleRepository
from portal.domain.value import ArticleId, ArticleStatus, parse_id
from portal.persistence.mappers import row_to_article
from portal.persistence.tables import postmeta_table, posts_table, users_table

THUMBNAIL_META_KEY = "_thumbnail_id"


class SqlArticleRepository(ArticleRepository):
    """SQL implementation of ArticleRepository over ``wp_posts``.

    Author display names come from ``wp_users`` and featured images from the
    ``_thumbnail_id`` post meta pointing at an attachment post.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    def _base_query(self) -> Select:
        """Select article columns with author name and thumbnail URL."""
        attachments = posts_table.alias("attachments")
        thumbnail_url = (
            select(attachments.c.guid)
            .select_from(
                postmeta_table.join(
                    attachments,
                    # meta_value holds the attachment ID as text
                    attachments.c.ID.cast(Text) == postmeta_table.c.meta_value,
                )
            )
            .where(postmeta_table.c.post_id == posts_table.c.ID)
            .where(postmeta_table.c.meta_key == THUMBNAIL_META_KEY)
            .limit(1)
            .scalar_subquery()
        )
        return select(
            posts_table,
            users_table.c.display_name.label("author_name"),
            thumbnail_url.label("thumbnail_url"),
        ).select_from(
            posts_table.outerjoin(
                users_table, users_table.c.ID == posts_table.c.post_author
            )
        )

    def _published(self, stmt: Select) -> Select:
        return stmt.where(
            and_(
                posts_table.c.post_status == ArticleStatus.PUBLISH.value,
                posts_table.c.post_type == "post",
            )
        )

    async def _fetch_all(self, stmt: Select) -> List[Article]:
        result = await self.session.execute(stmt)
        return [row_to_article(row._asdict()) for row in result.fetchall()]

    async def find_by_id(self, article_id: ArticleId) -> Optional[Article]:
        """Find an article by ID, whatever its status."""
        stmt = self._base_query().where(posts_table.c.ID == article_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_article(row._asdict()) if row else None

    async def exists(self, article_id: ArticleId) -> bool:
        """Check whether a post row with this ID exists, whatever its status."""
        stmt = select(posts_table.c.ID).where(posts_table.c.ID == article_id)
        result = await self.session.execute(stmt)
        return result.first() is not None

    async def find_published(self, identifier: str) -> Optional[Article]:
        """Find a published article by numeric ID or slug."""
        numeric_id = parse_id(identifier)
        if numeric_id is not None:
            match = or_(
                posts_table.c.ID == numeric_id,
                posts_table.c.post_name == identifier,
            )
        else:
            match = posts_table.c.post_name == identifier

        stmt = (
            self._published(self._base_query())
            .where(match)
            .order_by(posts_table.c.ID)
            .limit(1)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_article(row._asdict()) if row else None

    async def find_recent_published(
        self, exclude_id: Optional[ArticleId] = None, limit: int = 5
    ) -> List[Article]:
        """Find the newest published articles."""
        stmt = self._published(self._base_query())
        if exclude_id is not None:
            stmt = stmt.where(posts_table.c.ID != exclude_id)
        stmt = stmt.order_by(desc(posts_table.c.post_date)).limit(limit)
        return await self._fetch_all(stmt)

    async def find_trending_published(
        self, exclude_id: Optional[ArticleId] = None, limit: int = 5
    ) -> List[Article]:
        """Find the most commented published articles."""
        stmt = self._published(self._base_query())
        if exclude_id is not None:
            stmt = stmt.where(posts_table.c.ID != exclude_id)
        stmt = stmt.order_by(
            desc(posts_table.c.comment_count), desc(posts_table.c.post_date)
        ).limit(limit)
        return await self._fetch_all(stmt)
