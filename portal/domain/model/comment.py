"""Comment entity.

Comments form a reply tree per article through ``parent_id``. They are
stored flat, one row per comment, and assembled into a tree on read.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from portal.domain.model.common import DomainModel
from portal.domain.value import ArticleId, CommentId, UserId


class Comment(DomainModel):
    """Comment entity.

    Represents a comment on an article or a reply to another comment of
    the same article. Depth is unbounded.

    Threading is managed through:
    - parent_id: Direct parent comment (None for top-level, 0 in storage)
    - created_at: Sibling order inside the tree
    """

    id: Optional[CommentId] = None  # Assigned by the store on insert
    article_id: ArticleId
    parent_id: Optional[CommentId] = None
    author_name: str = ""
    author_email: str = ""
    author_url: str = ""
    author_ip: str = ""
    user_agent: str = Field(default="", max_length=255)
    content: str
    approved: bool = False
    comment_type: str = ""
    user_id: Optional[UserId] = None
    created_at: datetime = Field(default_factory=datetime.now)
    created_at_gmt: datetime = Field(default_factory=datetime.now)
