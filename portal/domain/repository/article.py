"""Article repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from portal.domain.model.article import Article
from portal.domain.value import ArticleId


class ArticleRepository(ABC):
    """Repository for Article entity.

    Defines the contract for reading articles from the WordPress posts
    table. Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, article_id: ArticleId) -> Optional[Article]:
        """Find an article by ID, whatever its status.

        Args:
            article_id: The article's identifier

        Returns:
            The article if found, None otherwise
        """
        pass

    @abstractmethod
    async def exists(self, article_id: ArticleId) -> bool:
        """Check whether any post row has this ID.

        Status and post type are not considered, and no Article is built,
        so rows with statuses the portal does not know still count.

        Args:
            article_id: The article's identifier

        Returns:
            True if the row exists
        """
        pass

    @abstractmethod
    async def find_published(self, identifier: str) -> Optional[Article]:
        """Find a published article by numeric ID or slug.

        A numeric identifier matches either the ID or the slug; anything
        else matches the slug only.

        Args:
            identifier: Article ID or slug as given in the URL

        Returns:
            The published article if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_recent_published(
        self, exclude_id: Optional[ArticleId] = None, limit: int = 5
    ) -> List[Article]:
        """Find the newest published articles.

        Args:
            exclude_id: Article to leave out (usually the one being read)
            limit: Maximum number of articles to return

        Returns:
            Published articles, newest first
        """
        pass

    @abstractmethod
    async def find_trending_published(
        self, exclude_id: Optional[ArticleId] = None, limit: int = 5
    ) -> List[Article]:
        """Find the most commented published articles.

        Args:
            exclude_id: Article to leave out (usually the one being read)
            limit: Maximum number of articles to return

        Returns:
            Published articles by comment count desc, then newest first
        """
        pass
