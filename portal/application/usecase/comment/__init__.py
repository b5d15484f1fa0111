"""Comment use cases."""

from .create_comment import (
    COMMENT_PUBLISHED_MESSAGE,
    CreateCommentRequest,
    CreateCommentResponse,
    CreateCommentUseCase,
)
from .get_comment_tree import (
    GetCommentTreeRequest,
    GetCommentTreeResponse,
    GetCommentTreeUseCase,
)
from .tree import CommentAuthor, CommentNodeResponse

__all__ = [
    "COMMENT_PUBLISHED_MESSAGE",
    "CommentAuthor",
    "CommentNodeResponse",
    "CreateCommentRequest",
    "CreateCommentResponse",
    "CreateCommentUseCase",
    "GetCommentTreeRequest",
    "GetCommentTreeResponse",
    "GetCommentTreeUseCase",
]
