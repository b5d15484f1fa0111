"""Domain value objects for the portal.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and display fallbacks.
"""

from enum import Enum
from typing import Optional

from pydantic import Field, field_validator

from portal.domain.value.common import ValueObject
from portal.domain.value.identifiers import MAX_ID, ArticleId, UserId

# Shown instead of an empty name on comments written by this portal
DEFAULT_COMMENTER_NAME = "Usuario"

MAX_COMMENT_LENGTH = 2000


class ArticleStatus(str, Enum):
    """WordPress ``post_status`` values."""

    PUBLISH = "publish"
    FUTURE = "future"
    DRAFT = "draft"
    PENDING = "pending"
    PRIVATE = "private"
    TRASH = "trash"
    AUTO_DRAFT = "auto-draft"
    INHERIT = "inherit"


class AuthenticatedUser(ValueObject):
    """The signed-in user submitting a request.

    Name and email placeholders are resolved here, once, so the rest of the
    code never has to coalesce missing profile values.
    """

    id: UserId
    name: str = DEFAULT_COMMENTER_NAME
    email: str = ""

    @field_validator("name", mode="before")
    @classmethod
    def default_name(cls, v: Optional[str]) -> str:
        return v or DEFAULT_COMMENTER_NAME

    @field_validator("email", mode="before")
    @classmethod
    def default_email(cls, v: Optional[str]) -> str:
        return v or ""


class CommentSubmission(ValueObject):
    """Structurally valid comment submission.

    Only checks shape and limits; references to articles and parent
    comments are checked against the store by ``CommentService``.
    """

    article_id: ArticleId = Field(ge=1, le=MAX_ID)
    content: str = Field(min_length=1, max_length=MAX_COMMENT_LENGTH)
    parent_id: Optional[int] = Field(default=None, ge=0, le=MAX_ID)

    @field_validator("parent_id")
    @classmethod
    def zero_means_root(cls, v: Optional[int]) -> Optional[int]:
        """WordPress stores root comments with parent 0."""
        return v or None
