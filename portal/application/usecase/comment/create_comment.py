"""Create comment use case."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field

from portal.application.usecase.base import BaseUseCase
from portal.domain.error import CommentValidationError, NotAuthorizedError
from portal.domain.service import CommentService
from portal.domain.value import AuthenticatedUser

COMMENT_PUBLISHED_MESSAGE = "Comentario publicado com sucesso."
MALFORMED_BODY_MESSAGE = "The request body must be a JSON object."


class CreateCommentRequest(BaseModel):
    """Create comment request.

    ``payload`` is kept raw so that the authentication check can run before
    any field is looked at. None stands for a body that is not a JSON object.
    """

    payload: dict[str, Any] | None = Field(default_factory=dict)
    user: AuthenticatedUser | None = None
    ip_address: str = ""
    user_agent: str = ""


class CreateCommentResponse(BaseModel):
    """Create comment response."""

    message: str
    comment_id: int
    article_id: int
    parent_id: int | None
    created_at: datetime
    redirect_to: str


class CreateCommentUseCase(BaseUseCase):
    """Use case for commenting on an article or replying to a comment."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: CreateCommentRequest) -> CreateCommentResponse:
        """Execute create comment flow.

        Steps:
        1. Refuse anonymous callers before looking at any field
        2. Validate fields, article and parent via comment service
        3. Store the approved comment

        Args:
            request: Create comment request

        Returns:
            Acknowledgement with the new comment's details

        Raises:
            NotAuthorizedError: If there is no authenticated user
            CommentValidationError: If any field is invalid
        """
        if request.user is None:
            raise NotAuthorizedError()

        if request.payload is None:
            raise CommentValidationError({"body": [MALFORMED_BODY_MESSAGE]})

        submission = await self.comment_service.validate_submission(request.payload)

        comment = await self.comment_service.create_comment(
            submission=submission,
            user=request.user,
            ip_address=request.ip_address,
            user_agent=request.user_agent,
        )

        return CreateCommentResponse(
            message=COMMENT_PUBLISHED_MESSAGE,
            comment_id=comment.id,
            article_id=comment.article_id,
            parent_id=comment.parent_id,
            created_at=comment.created_at,
            redirect_to=f"/posts/{comment.article_id}",
        )
