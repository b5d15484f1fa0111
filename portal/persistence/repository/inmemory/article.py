"""In-memory article repository for testing."""

from datetime import datetime
from typing import Optional

from portal.domain.model.article import Article
from portal.domain.repository.article import ArticleRepository
from portal.domain.value import ArticleId, parse_id


class InMemoryArticleRepository(ArticleRepository):
    """In-memory implementation of ArticleRepository for testing."""

    def __init__(self) -> None:
        self._articles: dict[ArticleId, Article] = {}

    async def save(self, article: Article) -> Article:
        """Store an article (test setup only; the portal never writes articles)."""
        self._articles[article.id] = article
        return article

    def _published(self, exclude_id: Optional[ArticleId]) -> list[Article]:
        return [
            a
            for a in self._articles.values()
            if a.is_published and a.id != exclude_id
        ]

    async def find_by_id(self, article_id: ArticleId) -> Optional[Article]:
        """Find an article by ID."""
        return self._articles.get(article_id)

    async def exists(self, article_id: ArticleId) -> bool:
        """Check whether an article with this ID is stored."""
        return article_id in self._articles

    async def find_published(self, identifier: str) -> Optional[Article]:
        """Find a published article by numeric ID or slug."""
        numeric_id = parse_id(identifier)
        matches = [
            a
            for a in self._published(None)
            if a.slug == identifier or a.id == numeric_id
        ]
        matches.sort(key=lambda a: a.id)
        return matches[0] if matches else None

    async def find_recent_published(
        self, exclude_id: Optional[ArticleId] = None, limit: int = 5
    ) -> list[Article]:
        """Find the newest published articles."""
        articles = self._published(exclude_id)
        articles.sort(key=lambda a: a.published_at or datetime.min, reverse=True)
        return articles[:limit]

    async def find_trending_published(
        self, exclude_id: Optional[ArticleId] = None, limit: int = 5
    ) -> list[Article]:
        """Find the most commented published articles."""
        articles = self._published(exclude_id)
        articles.sort(
            key=lambda a: (a.comment_count, a.published_at or datetime.min),
            reverse=True,
        )
        return articles[:limit]
