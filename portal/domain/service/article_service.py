"""Article domain service."""

import re

import logfire

from portal.domain.error import NotFoundError
from portal.domain.model import Article
from portal.domain.repository import ArticleRepository
from portal.domain.value import ArticleId

from .base import Service

# Root-relative src/href attributes, e.g. src="/wp-content/uploads/a.jpg"
_RELATIVE_URL_ATTR = re.compile(r"""(src|href)=["']/([^"']*)["']""")


class ArticleService(Service):
    """Domain service for reading articles."""

    def __init__(self, article_repository: ArticleRepository, site_url: str) -> None:
        """Initialize article service.

        Args:
            article_repository: Article repository
            site_url: WordPress site URL used to absolutize body links
        """
        self.article_repository = article_repository
        self.site_url = site_url.rstrip("/")

    async def get_published(self, identifier: str) -> Article:
        """Get a published article by ID or slug.

        Args:
            identifier: Article ID or slug

        Returns:
            The published article

        Raises:
            NotFoundError: If no published article matches
        """
        with logfire.span("article_service.get_published", identifier=identifier):
            article = await self.article_repository.find_published(identifier)
            if article is None:
                logfire.warn("Published article not found", identifier=identifier)
                raise NotFoundError("Article", identifier)
            logfire.info("Article found", article_id=article.id, slug=article.slug)
            return article

    async def get_recent(
        self, exclude_id: ArticleId | None = None, limit: int = 5
    ) -> list[Article]:
        """Get the newest published articles.

        Args:
            exclude_id: Article to leave out
            limit: Maximum number of articles

        Returns:
            Published articles, newest first
        """
        with logfire.span("article_service.get_recent", exclude_id=exclude_id):
            return await self.article_repository.find_recent_published(
                exclude_id=exclude_id, limit=limit
            )

    async def get_trending(
        self, exclude_id: ArticleId | None = None, limit: int = 5
    ) -> list[Article]:
        """Get the most commented published articles.

        Args:
            exclude_id: Article to leave out
            limit: Maximum number of articles

        Returns:
            Published articles by comment count, then newest first
        """
        with logfire.span("article_service.get_trending", exclude_id=exclude_id):
            return await self.article_repository.find_trending_published(
                exclude_id=exclude_id, limit=limit
            )

    def process_content(self, content: str) -> str:
        """Point root-relative links and images in a body at the WordPress site.

        Args:
            content: Article HTML

        Returns:
            HTML with ``src="/..."`` and ``href="/..."`` made absolute
        """
        return _RELATIVE_URL_ATTR.sub(
            lambda m: f'{m.group(1)}="{self.site_url}/{m.group(2)}"', content
        )
