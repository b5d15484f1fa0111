"""Repository interfaces for the portal domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from portal.domain.repository.article import ArticleRepository
from portal.domain.repository.comment import CommentRepository
from portal.domain.repository.user import UserRepository

__all__ = [
    "ArticleRepository",
    "CommentRepository",
    "UserRepository",
]
