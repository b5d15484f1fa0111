"""Domain services."""

from .article_service import ArticleService
from .base import Service
from .comment_service import CommentService
from .comment_tree import CommentTreeNode, build_comment_tree
from .jwt_service import JWTService
from .user_service import UserService

__all__ = [
    "ArticleService",
    "CommentService",
    "CommentTreeNode",
    "JWTService",
    "Service",
    "UserService",
    "build_comment_tree",
]
