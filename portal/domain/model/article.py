"""Article entity.

Articles are WordPress posts of type ``post``. The portal never writes them;
they are authored in WordPress and only read here.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from portal.domain.model.common import DomainModel
from portal.domain.value import ArticleId, ArticleStatus, UserId


class Article(DomainModel):
    """Article entity.

    Only published articles (status ``publish`` and type ``post``) are
    visible to readers; see ``is_published``.
    """

    id: ArticleId
    slug: str = ""
    title: str
    excerpt: str = ""
    content: str = ""
    # Core statuses are listed in ArticleStatus; plugins register others
    status: str = ArticleStatus.DRAFT.value
    post_type: str = "post"
    author_id: Optional[UserId] = None
    author_name: Optional[str] = None  # Joined from wp_users.display_name
    published_at: Optional[datetime] = None
    comment_count: int = Field(default=0, ge=0)
    thumbnail_url: Optional[str] = None

    @property
    def is_published(self) -> bool:
        """Whether readers may see this article."""
        return self.status == ArticleStatus.PUBLISH and self.post_type == "post"
