"""Article use cases."""

from .show_article import (
    ArticleSummary,
    ShowArticleRequest,
    ShowArticleResponse,
    ShowArticleUseCase,
)

__all__ = [
    "ArticleSummary",
    "ShowArticleRequest",
    "ShowArticleResponse",
    "ShowArticleUseCase",
]
