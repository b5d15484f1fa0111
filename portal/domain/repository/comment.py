"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from portal.domain.model.comment import Comment
from portal.domain.value import ArticleId, CommentId


class CommentRepository(ABC):
    """Repository for Comment entity.

    Defines the contract for comment persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID, approved or not.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_approved_by_article(self, article_id: ArticleId) -> List[Comment]:
        """Find approved comments of an article.

        Args:
            article_id: The article ID

        Returns:
            Approved comments ordered by creation time ascending
        """
        pass

    @abstractmethod
    async def add(self, comment: Comment) -> Comment:
        """Insert a new comment.

        Comments are never updated by the portal, so there is no upsert.

        Args:
            comment: The comment to insert (without an ID)

        Returns:
            The stored comment with its assigned ID
        """
        pass
