"""SQL repository implementations."""

from portal.persistence.repository.article import SqlArticleRepository
from portal.persistence.repository.comment import SqlCommentRepository
from portal.persistence.repository.user import SqlUserRepository

__all__ = [
    "SqlArticleRepository",
    "SqlCommentRepository",
    "SqlUserRepository",
]
