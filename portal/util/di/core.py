"""Settings providers."""

from dishka import Scope, provide

from portal.config import AuthSettings, Settings, SiteSettings
from portal.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Settings are read once per container from the environment and ``.env``.

    The auth and site sections are exposed on their own so services depend
    only on the part they read.
    """

    scope = Scope.APP

    @provide
    def provide_settings(self) -> Settings:
        return Settings()

    @provide
    def provide_auth_settings(self, settings: Settings) -> AuthSettings:
        return settings.auth

    @provide
    def provide_site_settings(self, settings: Settings) -> SiteSettings:
        return settings.site
