"""Application layer DI providers."""

from dishka import Scope, provide

from federate.application.usecase.social_login import (
    BeginTwitterLoginUseCase,
    SocialLoginUseCase,
)
from federate.domain.repository import TwitterHandshakeRepository
from federate.domain.service import (
    IdentityResolutionService,
    LocalUserService,
    ProviderService,
)
from federate.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    @provide(scope=Scope.REQUEST)
    def get_begin_twitter_login_use_case(
        self,
        provider_service: ProviderService,
        twitter_handshake_repository: TwitterHandshakeRepository,
    ) -> BeginTwitterLoginUseCase:
        """Provide begin Twitter login use case."""
        return BeginTwitterLoginUseCase(
            provider_service=provider_service,
            twitter_handshake_repository=twitter_handshake_repository,
        )

    @provide(scope=Scope.REQUEST)
    def get_social_login_use_case(
        self,
        provider_service: ProviderService,
        local_user_service: LocalUserService,
        identity_resolution_service: IdentityResolutionService,
        twitter_handshake_repository: TwitterHandshakeRepository,
    ) -> SocialLoginUseCase:
        """Provide social login use case."""
        return SocialLoginUseCase(
            provider_service=provider_service,
            local_user_service=local_user_service,
            identity_resolution_service=identity_resolution_service,
            twitter_handshake_repository=twitter_handshake_repository,
        )
