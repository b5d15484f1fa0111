"""Domain layer DI providers."""

from dishka import Scope, provide

from portal.config import AuthSettings, SiteSettings
from portal.domain.repository import (
    ArticleRepository,
    CommentRepository,
    UserRepository,
)
from portal.domain.service import (
    ArticleService,
    CommentService,
    JWTService,
    UserService,
)
from portal.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Domain services, one set per request since they hold repositories."""

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_article_service(
        self, article_repository: ArticleRepository, site_settings: SiteSettings
    ) -> ArticleService:
        return ArticleService(
            article_repository=article_repository, site_url=site_settings.wp_url
        )

    @provide
    def get_comment_service(
        self,
        comment_repository: CommentRepository,
        article_repository: ArticleRepository,
        site_settings: SiteSettings,
    ) -> CommentService:
        return CommentService(
            comment_repository=comment_repository,
            article_repository=article_repository,
            site_timezone=site_settings.tzinfo,
        )

    @provide
    def get_user_service(self, user_repository: UserRepository) -> UserService:
        return UserService(user_repository=user_repository)
