"""Social provider domain service."""

import logfire

from federate.domain.value import (
    AuthProvider,
    ExternalProfile,
    ProviderGrant,
    TwitterRequestToken,
)

from .base import Service


class ProviderClient:
    """Generic social provider client interface."""

    async def exchange(self, grant: ProviderGrant) -> ExternalProfile:
        """Exchange an authorization grant for a verified profile.

        Args:
            grant: Authorization code (OAuth2) or verifier (OAuth1)

        Returns:
            Normalized external profile

        Raises:
            ProviderError: If the provider rejects the grant or is unreachable
        """
        raise NotImplementedError


class HandshakeProviderClient(ProviderClient):
    """Provider client for OAuth 1.0a three-legged handshakes."""

    async def begin_handshake(self) -> TwitterRequestToken:
        """Obtain a request token and the URL the user must visit.

        Returns:
            Request token and authorization URL

        Raises:
            ProviderError: If the provider refuses to issue a request token
        """
        raise NotImplementedError


class ProviderService(Service):
    """Domain service dispatching grant exchanges to provider clients."""

    def __init__(self, provider_clients: dict[AuthProvider, ProviderClient]) -> None:
        """Initialize provider service.

        Args:
            provider_clients: Map of provider to client implementation
        """
        self.provider_clients = provider_clients

    def _client_for(self, provider: AuthProvider) -> ProviderClient:
        client = self.provider_clients.get(provider)
        if not client:
            raise ValueError(f"Unsupported provider: {provider}")
        return client

    async def exchange(
        self, provider: AuthProvider, grant: ProviderGrant
    ) -> ExternalProfile:
        """Exchange a grant with the given provider.

        Args:
            provider: Provider that issued the grant
            grant: Authorization code or verifier

        Returns:
            Normalized external profile

        Raises:
            ValueError: If provider not supported
            ProviderError: If the exchange fails
        """
        client = self._client_for(provider)
        with logfire.span("provider_service.exchange", provider=provider.value):
            profile = await client.exchange(grant)
            logfire.info(
                "Provider exchange succeeded",
                provider=provider.value,
                external_id=profile.external_id,
            )
            return profile

    async def begin_twitter_handshake(self) -> TwitterRequestToken:
        """Start an OAuth 1.0a handshake with Twitter.

        Returns:
            Request token and authorization URL

        Raises:
            ValueError: If Twitter is not configured for handshakes
            ProviderError: If Twitter refuses to issue a request token
        """
        client = self._client_for(AuthProvider.TWITTER)
        if not isinstance(client, HandshakeProviderClient):
            raise ValueError("Twitter client does not support handshakes")
        with logfire.span("provider_service.begin_twitter_handshake"):
            return await client.begin_handshake()
