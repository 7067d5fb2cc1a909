"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from federate.config import AuthSettings, Settings, SocialSettings
from federate.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file automatically,
    once per container.
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
    def provide_social_settings(self, settings: Settings) -> SocialSettings:
        """Provide social provider settings."""
        return settings.social
