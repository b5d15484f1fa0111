"""Test configuration and shared builders."""

from datetime import datetime, timedelta

from portal.domain.model import Article, Comment, User
from portal.domain.value import (
    ArticleId,
    ArticleStatus,
    AuthenticatedUser,
    CommentId,
    UserId,
)

BASE_TIME = datetime(2024, 3, 1, 9, 0)


def at(minutes: int) -> datetime:
    """Timestamp ``minutes`` after a fixed base time."""
    return BASE_TIME + timedelta(minutes=minutes)


def make_article(
    article_id: int,
    slug: str | None = None,
    status: ArticleStatus = ArticleStatus.PUBLISH,
    **overrides,
) -> Article:
    """Build an article, published by default."""
    fields = {
        "id": ArticleId(article_id),
        "slug": slug if slug is not None else f"article-{article_id}",
        "title": f"Article {article_id}",
        "excerpt": "Excerpt",
        "content": "<p>Body</p>",
        "status": status,
        "published_at": at(article_id),
    }
    fields.update(overrides)
    return Article(**fields)


def make_comment(
    comment_id: int,
    article_id: int,
    parent_id: int | None = None,
    minutes: int = 0,
    **overrides,
) -> Comment:
    """Build an approved comment created ``minutes`` after the base time."""
    fields = {
        "id": CommentId(comment_id),
        "article_id": ArticleId(article_id),
        "parent_id": CommentId(parent_id) if parent_id else None,
        "author_name": f"Reader {comment_id}",
        "content": f"Comment {comment_id}",
        "approved": True,
        "created_at": at(minutes),
        "created_at_gmt": at(minutes),
    }
    fields.update(overrides)
    return Comment(**fields)


def make_user(user_id: int = 7, **overrides) -> User:
    """Build a WordPress user."""
    fields = {
        "id": UserId(user_id),
        "login": f"user{user_id}",
        "display_name": "Ana Macuacua",
        "email": "ana@example.com",
    }
    fields.update(overrides)
    return User(**fields)


def make_author(user_id: int = 7, **overrides) -> AuthenticatedUser:
    """Build the signed-in user context."""
    fields = {"id": UserId(user_id), "name": "Ana Macuacua", "email": "ana@example.com"}
    fields.update(overrides)
    return AuthenticatedUser(**fields)
