"""In-memory comment repository for testing."""

from itertools import count
from typing import Optional

from portal.domain.model.comment import Comment
from portal.domain.repository.comment import CommentRepository
from portal.domain.value import ArticleId, CommentId


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self) -> None:
        self._comments: dict[CommentId, Comment] = {}
        self._ids = count(1)

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        return self._comments.get(comment_id)

    async def find_approved_by_article(self, article_id: ArticleId) -> list[Comment]:
        """Find approved comments of an article, oldest first."""
        comments = [
            c
            for c in self._comments.values()
            if c.article_id == article_id and c.approved
        ]
        comments.sort(key=lambda c: (c.created_at, c.id))
        return comments

    async def add(self, comment: Comment) -> Comment:
        """Insert a comment, assigning the next ID when it has none."""
        comment_id = comment.id
        if comment_id is None:
            comment_id = CommentId(next(self._ids))
            while comment_id in self._comments:
                comment_id = CommentId(next(self._ids))
            comment = comment.model_copy(update={"id": comment_id})
        self._comments[comment_id] = comment
        return comment

    def all(self) -> list[Comment]:
        """Every stored comment, in insertion order."""
        return list(self._comments.values())
