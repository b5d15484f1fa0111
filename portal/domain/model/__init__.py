"""Domain model entities for the portal."""

from portal.domain.model.article import Article
from portal.domain.model.comment import Comment
from portal.domain.model.user import User

__all__ = [
    "Article",
    "Comment",
    "User",
]
