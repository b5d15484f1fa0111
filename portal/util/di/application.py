"""Application layer DI providers."""

from dishka import Scope, provide

from portal.application.usecase.article import ShowArticleUseCase
from portal.application.usecase.auth import ResolveCurrentUserUseCase
from portal.application.usecase.comment import (
    CreateCommentUseCase,
    GetCommentTreeUseCase,
)
from portal.domain.service import (
    ArticleService,
    CommentService,
    JWTService,
    UserService,
)
from portal.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Use cases, built per request around the domain services."""

    scope = Scope.REQUEST

    @provide
    def get_resolve_current_user_use_case(
        self, jwt_service: JWTService, user_service: UserService
    ) -> ResolveCurrentUserUseCase:
        return ResolveCurrentUserUseCase(
            jwt_service=jwt_service, user_service=user_service
        )

    @provide
    def get_create_comment_use_case(
        self, comment_service: CommentService
    ) -> CreateCommentUseCase:
        return CreateCommentUseCase(comment_service=comment_service)

    @provide
    def get_comment_tree_use_case(
        self, article_service: ArticleService, comment_service: CommentService
    ) -> GetCommentTreeUseCase:
        return GetCommentTreeUseCase(
            article_service=article_service, comment_service=comment_service
        )

    @provide
    def get_show_article_use_case(
        self, article_service: ArticleService, comment_service: CommentService
    ) -> ShowArticleUseCase:
        return ShowArticleUseCase(
            article_service=article_service, comment_service=comment_service
        )
