"""Instagram OAuth 2.0 client implementation."""

from typing import Any

from federate.adapter.error import ProviderError
from federate.adapter.oauth2 import OAuth2Client
from federate.domain.service.provider_service import ProviderClient
from federate.domain.value import (
    AuthorizationCode,
    AuthProvider,
    ExternalProfile,
    ProviderGrant,
)


class InstagramOAuthClient(ProviderClient):
    """Base class for Instagram OAuth clients.

    Provides type distinction for dependency injection.
    """

    pass


class RealInstagramOAuthClient(OAuth2Client, InstagramOAuthClient):
    """Instagram code exchange.

    The profile is nested under ``data`` and never includes an email.
    """

    provider = AuthProvider.INSTAGRAM

    def _to_profile(self, body: dict[str, Any], access_token: str) -> ExternalProfile:
        data = body.get("data")
        if not isinstance(data, dict) or not data.get("id"):
            raise self._missing_id()

        return ExternalProfile(
            provider=AuthProvider.INSTAGRAM,
            external_id=str(data["id"]),
            display_name=data.get("full_name") or None,
            avatar_url=data.get("profile_picture") or None,
            access_token=access_token,
        )


class MockInstagramOAuthClient(InstagramOAuthClient):
    """Mock Instagram OAuth client for testing."""

    async def exchange(self, grant: ProviderGrant) -> ExternalProfile:
        """Return mock user information (no email, like the real API).

        Raises:
            ProviderError: For the code ``invalid``
        """
        if not isinstance(grant, AuthorizationCode) or grant.code == "invalid":
            raise ProviderError(message="Matching code was not found or was already used.")

        return ExternalProfile(
            provider=AuthProvider.INSTAGRAM,
            external_id=f"ig-{grant.code}",
            display_name="Mock Instagram User",
            avatar_url="https://example.com/instagram-avatar.jpg",
            access_token=f"mock-instagram-token-{grant.code}",
        )
