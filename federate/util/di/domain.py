"""Domain layer DI providers."""

from dishka import Scope, provide

from federate.config import AuthSettings
from federate.domain.repository import IdentityRepository, LocalUserRepository
from federate.domain.service import (
    IdentityResolutionService,
    IdentityService,
    LocalUserService,
    ProviderClient,
    ProviderService,
    SignInTokenService,
)
from federate.domain.value import AuthProvider
from federate.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_provider_service(
        self, provider_clients: dict[AuthProvider, ProviderClient]
    ) -> ProviderService:
        """Provide provider dispatch domain service.

        Args:
            provider_clients: Dictionary mapping providers to their clients

        Returns:
            ProviderService configured with all provider clients
        """
        return ProviderService(provider_clients=provider_clients)

    @provide
    def get_sign_in_token_service(
        self, auth_settings: AuthSettings
    ) -> SignInTokenService:
        """Provide sign-in token domain service."""
        return SignInTokenService(auth_settings=auth_settings)

    @provide
    def get_identity_service(
        self, identity_repository: IdentityRepository
    ) -> IdentityService:
        """Provide provider identity domain service."""
        return IdentityService(identity_repository=identity_repository)

    @provide
    def get_local_user_service(
        self, local_user_repository: LocalUserRepository
    ) -> LocalUserService:
        """Provide local user domain service."""
        return LocalUserService(local_user_repository=local_user_repository)

    @provide
    def get_identity_resolution_service(
        self,
        identity_service: IdentityService,
        local_user_service: LocalUserService,
        sign_in_token_service: SignInTokenService,
    ) -> IdentityResolutionService:
        """Provide identity resolution domain service."""
        return IdentityResolutionService(
            identity_service=identity_service,
            local_user_service=local_user_service,
            sign_in_token_service=sign_in_token_service,
        )
