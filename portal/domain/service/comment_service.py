"""Comment domain service."""

from datetime import datetime, timezone, tzinfo
from typing import Any, Mapping

import logfire
from pydantic import ValidationError

from portal.domain.error import CommentValidationError
from portal.domain.model import Comment
from portal.domain.repository import ArticleRepository, CommentRepository
from portal.domain.value import (
    ArticleId,
    AuthenticatedUser,
    CommentId,
    CommentSubmission,
)

from .base import Service
from .comment_tree import CommentTreeNode, build_comment_tree

MAX_USER_AGENT_LENGTH = 255


def _field_errors(error: ValidationError) -> dict[str, list[str]]:
    """Group pydantic errors by top-level field name."""
    errors: dict[str, list[str]] = {}
    for item in error.errors():
        field = str(item["loc"][0]) if item["loc"] else "__root__"
        errors.setdefault(field, []).append(item["msg"])
    return errors


class CommentService(Service):
    """Domain service for comment operations."""

    def __init__(
        self,
        comment_repository: CommentRepository,
        article_repository: ArticleRepository,
        site_timezone: tzinfo = timezone.utc,
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            article_repository: Article repository (existence checks)
            site_timezone: Timezone of the local comment timestamp
        """
        self.comment_repository = comment_repository
        self.article_repository = article_repository
        self.site_timezone = site_timezone

    async def validate_submission(
        self, payload: Mapping[str, Any]
    ) -> CommentSubmission:
        """Validate a raw comment submission.

        Structural problems (missing or malformed fields, content too long)
        are reported first. Only a structurally valid submission is checked
        against the store:
        - the article must exist (any status)
        - the parent comment, if given, must exist on that same article

        Args:
            payload: Submitted fields (article_id, content, parent_id)

        Returns:
            The validated submission

        Raises:
            CommentValidationError: With field-keyed messages
        """
        with logfire.span(
            "comment_service.validate_submission",
            article_id=str(payload.get("article_id")),
            parent_id=str(payload.get("parent_id")),
        ):
            try:
                submission = CommentSubmission.model_validate(dict(payload))
            except ValidationError as e:
                field_errors = _field_errors(e)
                logfire.warn(
                    "Comment submission malformed", fields=sorted(field_errors)
                )
                raise CommentValidationError(field_errors) from e

            errors: dict[str, list[str]] = {}

            if not await self.article_repository.exists(submission.article_id):
                errors["article_id"] = ["The selected article does not exist."]

            if submission.parent_id is not None:
                parent = await self.comment_repository.find_by_id(
                    CommentId(submission.parent_id)
                )
                if parent is None or parent.article_id != submission.article_id:
                    logfire.warn(
                        "Parent comment does not belong to article",
                        parent_id=submission.parent_id,
                        parent_article_id=parent.article_id if parent else None,
                        target_article_id=submission.article_id,
                    )
                    errors["parent_id"] = [
                        "The selected parent comment does not belong to this article."
                    ]

            if errors:
                raise CommentValidationError(errors)

            return submission

    async def create_comment(
        self,
        submission: CommentSubmission,
        user: AuthenticatedUser,
        ip_address: str,
        user_agent: str,
    ) -> Comment:
        """Create an approved comment or reply from a validated submission.

        Args:
            submission: Validated submission
            user: Author of the comment
            ip_address: Submitter IP
            user_agent: Submitter user agent (truncated to 255 characters)

        Returns:
            Created comment with its store-assigned ID
        """
        with logfire.span(
            "comment_service.create_comment",
            article_id=submission.article_id,
            user_id=user.id,
            parent_id=submission.parent_id,
        ):
            now = datetime.now(self.site_timezone)

            comment = Comment(
                article_id=submission.article_id,
                parent_id=(
                    CommentId(submission.parent_id) if submission.parent_id else None
                ),
                author_name=user.name,
                author_email=user.email,
                author_url="",
                author_ip=ip_address,
                user_agent=user_agent[:MAX_USER_AGENT_LENGTH],
                content=submission.content,
                approved=True,  # No moderation queue
                comment_type="",
                user_id=user.id,
                created_at=now,
                created_at_gmt=now.astimezone(timezone.utc),
            )

            saved = await self.comment_repository.add(comment)
            logfire.info(
                "Comment created",
                comment_id=saved.id,
                article_id=saved.article_id,
                parent_id=saved.parent_id,
            )
            return saved

    async def get_comment_tree(self, article_id: ArticleId) -> list[CommentTreeNode]:
        """Get the approved comments of an article as a reply forest.

        Args:
            article_id: Article ID

        Returns:
            Root comment nodes with their replies attached
        """
        with logfire.span(
            "comment_service.get_comment_tree", article_id=article_id
        ):
            comments = await self.comment_repository.find_approved_by_article(
                article_id
            )
            tree = build_comment_tree(comments)
            logfire.info(
                "Comment tree built",
                article_id=article_id,
                count=len(comments),
                roots=len(tree),
            )
            return tree
