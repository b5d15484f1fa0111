"""Show article use case."""

from pydantic import BaseModel

from portal.application.usecase.base import BaseUseCase
from portal.application.usecase.comment.tree import CommentNodeResponse
from portal.domain.model import Article
from portal.domain.service import ArticleService, CommentService
from portal.domain.value import AuthenticatedUser

ARTICLE_DATE_FORMAT = "%d/%m/%Y"

# Author fallbacks: sidebar cards vs. the article page byline
NEWSROOM_AUTHOR = "Redacao"
UNKNOWN_AUTHOR = "Autor Desconhecido"

SIDEBAR_SIZE = 5


class ArticleSummary(BaseModel):
    """Article card data."""

    id: int
    title: str
    excerpt: str
    content: str
    date: str | None
    author: str
    thumbnail: str | None
    slug: str
    views: int

    @classmethod
    def from_domain(
        cls, article: Article, author_fallback: str = NEWSROOM_AUTHOR
    ) -> "ArticleSummary":
        """Convert a domain Article to a card.

        ``views`` mirrors the comment count; WordPress keeps no view counter.
        """
        return cls(
            id=article.id,
            title=article.title,
            excerpt=article.excerpt,
            content=article.content,
            date=(
                article.published_at.strftime(ARTICLE_DATE_FORMAT)
                if article.published_at
                else None
            ),
            author=article.author_name or author_fallback,
            thumbnail=article.thumbnail_url,
            slug=article.slug,
            views=article.comment_count,
        )


class ShowArticleRequest(BaseModel):
    """Show article request."""

    identifier: str  # Article ID or slug
    user: AuthenticatedUser | None = None


class ShowArticleResponse(BaseModel):
    """Show article response."""

    post: ArticleSummary
    recent: list[ArticleSummary]
    trending: list[ArticleSummary]
    comments: list[CommentNodeResponse]
    can_comment: bool


class ShowArticleUseCase(BaseUseCase):
    """Use case for the article page: body, sidebars and comment tree."""

    def __init__(
        self, article_service: ArticleService, comment_service: CommentService
    ) -> None:
        """Initialize show article use case.

        Args:
            article_service: Article domain service
            comment_service: Comment domain service
        """
        self.article_service = article_service
        self.comment_service = comment_service

    async def execute(self, request: ShowArticleRequest) -> ShowArticleResponse:
        """Execute show article flow.

        Steps:
        1. Look up the published article (404 otherwise, nothing else runs)
        2. Load the recent and trending sidebars, excluding this article
        3. Build the comment tree from the approved comments

        Args:
            request: Request with the article ID or slug and the optional user

        Returns:
            Article page data

        Raises:
            NotFoundError: If no published article matches
        """
        article = await self.article_service.get_published(request.identifier)

        recent = await self.article_service.get_recent(
            exclude_id=article.id, limit=SIDEBAR_SIZE
        )
        trending = await self.article_service.get_trending(
            exclude_id=article.id, limit=SIDEBAR_SIZE
        )
        tree = await self.comment_service.get_comment_tree(article.id)

        post = ArticleSummary.from_domain(article, author_fallback=UNKNOWN_AUTHOR)
        post = post.model_copy(
            update={"content": self.article_service.process_content(article.content)}
        )

        return ShowArticleResponse(
            post=post,
            recent=[ArticleSummary.from_domain(a) for a in recent],
            trending=[ArticleSummary.from_domain(a) for a in trending],
            comments=[CommentNodeResponse.from_domain(node) for node in tree],
            can_comment=request.user is not None,
        )
