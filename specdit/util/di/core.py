"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from specdit.config import AuthSettings, PaginationSettings, Settings
from specdit.util.codec import IdCodec
from specdit.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file automatically.
    """

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide(scope=Scope.APP)
    def provide_auth_settings(self, settings: Settings) -> AuthSettings:
        """Provide auth settings."""
        return settings.auth

    @provide(scope=Scope.APP)
    def provide_pagination_settings(self, settings: Settings) -> PaginationSettings:
        """Provide pagination settings."""
        return settings.pagination

    @provide(scope=Scope.APP)
    def provide_id_codec(self, settings: Settings) -> IdCodec:
        """Provide the process-wide identifier codec."""
        return IdCodec(
            salt=settings.hashids.salt, min_length=settings.hashids.min_length
        )
