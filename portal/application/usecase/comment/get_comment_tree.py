"""Get comment tree use case."""

from pydantic import BaseModel

from portal.application.usecase.base import BaseUseCase
from portal.application.usecase.comment.tree import CommentNodeResponse
from portal.domain.service import ArticleService, CommentService


class GetCommentTreeRequest(BaseModel):
    """Get comment tree request."""

    identifier: str  # Article ID or slug


class GetCommentTreeResponse(BaseModel):
    """Get comment tree response."""

    article_id: int
    comments: list[CommentNodeResponse]
    total: int


class GetCommentTreeUseCase(BaseUseCase):
    """Use case for reading the comment forest of a published article."""

    def __init__(
        self, article_service: ArticleService, comment_service: CommentService
    ) -> None:
        """Initialize get comment tree use case.

        Args:
            article_service: Article domain service
            comment_service: Comment domain service
        """
        self.article_service = article_service
        self.comment_service = comment_service

    async def execute(self, request: GetCommentTreeRequest) -> GetCommentTreeResponse:
        """Execute get comment tree flow.

        Args:
            request: Request with the article ID or slug

        Returns:
            Root comments with nested replies and the total comment count

        Raises:
            NotFoundError: If no published article matches
        """
        article = await self.article_service.get_published(request.identifier)
        tree = await self.comment_service.get_comment_tree(article.id)

        return GetCommentTreeResponse(
            article_id=article.id,
            comments=[CommentNodeResponse.from_domain(node) for node in tree],
            total=sum(node.count() for node in tree),
        )
