"""Mappers for converting between WordPress rows and domain models.

WordPress column names and conventions (0 for "no parent"/"no user",
``comment_approved`` as a string, naive timestamps) stay in this module.
"""

from datetime import timezone
from typing import Any, Dict

from portal.domain.model import Article, Comment, User
from portal.domain.value import ArticleId, ArticleStatus, CommentId, UserId

APPROVED = "1"
UNAPPROVED = "0"


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert ``wp_users`` row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    return User(
        id=UserId(int(row["ID"])),
        login=row["user_login"],
        display_name=row.get("display_name") or None,
        email=row.get("user_email") or None,
    )


def row_to_article(row: Dict[str, Any]) -> Article:
    """Convert ``wp_posts`` row to Article domain model.

    Expects the author's display name under ``author_name`` and the featured
    image URL under ``thumbnail_url`` when the query joined them.

    Args:
        row: Database row as dict

    Returns:
        Article domain model
    """
    author_id = int(row.get("post_author") or 0)
    return Article(
        id=ArticleId(int(row["ID"])),
        slug=row.get("post_name") or "",
        title=row.get("post_title") or "",
        excerpt=row.get("post_excerpt") or "",
        content=row.get("post_content") or "",
        status=row.get("post_status") or ArticleStatus.DRAFT.value,
        post_type=row.get("post_type") or "post",
        author_id=UserId(author_id) if author_id else None,
        author_name=row.get("author_name") or None,
        published_at=row.get("post_date"),
        comment_count=int(row.get("comment_count") or 0),
        thumbnail_url=row.get("thumbnail_url") or None,
    )


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert ``wp_comments`` row to Comment domain model.

    Args:
        row: Database row as dict

    Returns:
        Comment domain model
    """
    parent_id = int(row.get("comment_parent") or 0)
    user_id = int(row.get("user_id") or 0)
    created_at_gmt = row["comment_date_gmt"]
    if created_at_gmt is not None and created_at_gmt.tzinfo is None:
        created_at_gmt = created_at_gmt.replace(tzinfo=timezone.utc)

    return Comment(
        id=CommentId(int(row["comment_ID"])),
        article_id=ArticleId(int(row["comment_post_ID"])),
        parent_id=CommentId(parent_id) if parent_id else None,
        author_name=row.get("comment_author") or "",
        author_email=row.get("comment_author_email") or "",
        author_url=row.get("comment_author_url") or "",
        author_ip=row.get("comment_author_IP") or "",
        user_agent=row.get("comment_agent") or "",
        content=row["comment_content"],
        approved=row.get("comment_approved") == APPROVED,
        comment_type=row.get("comment_type") or "",
        user_id=UserId(user_id) if user_id else None,
        created_at=row["comment_date"],
        created_at_gmt=created_at_gmt,
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to a ``wp_comments`` insert dict.

    WordPress stores naive timestamps: local wall time in ``comment_date``
    and UTC in ``comment_date_gmt``.

    Args:
        comment: Comment domain model

    Returns:
        Dict suitable for database insertion (without ``comment_ID``)
    """
    created_at_gmt = comment.created_at_gmt
    if created_at_gmt.tzinfo is not None:
        created_at_gmt = created_at_gmt.astimezone(timezone.utc)

    return {
        "comment_post_ID": comment.article_id,
        "comment_author": comment.author_name,
        "comment_author_email": comment.author_email,
        "comment_author_url": comment.author_url,
        "comment_author_IP": comment.author_ip,
        "comment_date": comment.created_at.replace(tzinfo=None),
        "comment_date_gmt": created_at_gmt.replace(tzinfo=None),
        "comment_content": comment.content,
        "comment_approved": APPROVED if comment.approved else UNAPPROVED,
        "comment_agent": comment.user_agent,
        "comment_type": comment.comment_type,
        "comment_parent": comment.parent_id or 0,
        "user_id": comment.user_id or 0,
    }
