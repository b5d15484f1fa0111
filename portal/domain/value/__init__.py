"""Domain value objects for the portal."""

from portal.domain.value.identifiers import (
    MAX_ID,
    ArticleId,
    CommentId,
    UserId,
    parse_id,
)
from portal.domain.value.types import (
    DEFAULT_COMMENTER_NAME,
    MAX_COMMENT_LENGTH,
    ArticleStatus,
    AuthenticatedUser,
    CommentSubmission,
)

__all__ = [
    # Identifiers
    "ArticleId",
    "CommentId",
    "UserId",
    "MAX_ID",
    "parse_id",
    # Types
    "ArticleStatus",
    "AuthenticatedUser",
    "CommentSubmission",
    "DEFAULT_COMMENTER_NAME",
    "MAX_COMMENT_LENGTH",
]
