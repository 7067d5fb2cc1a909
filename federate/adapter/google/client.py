"""Google OAuth 2.0 client implementation."""

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


class GoogleOAuthClient(ProviderClient):
    """Base class for Google OAuth clients.

    Provides type distinction for dependency injection.
    """

    pass


class RealGoogleOAuthClient(OAuth2Client, GoogleOAuthClient):
    """Google code exchange using the v1 userinfo endpoint."""

    provider = AuthProvider.GOOGLE

    def _to_profile(self, body: dict[str, Any], access_token: str) -> ExternalProfile:
        if not body.get("id"):
            raise self._missing_id()

        return ExternalProfile(
            provider=AuthProvider.GOOGLE,
            external_id=str(body["id"]),
            email=body.get("email") or None,
            display_name=body.get("name") or None,
            avatar_url=body.get("picture") or None,
            access_token=access_token,
        )


class MockGoogleOAuthClient(GoogleOAuthClient):
    """Mock Google OAuth client for testing."""

    async def exchange(self, grant: ProviderGrant) -> ExternalProfile:
        """Return mock user information.

        Raises:
            ProviderError: For the code ``invalid``
        """
        if not isinstance(grant, AuthorizationCode) or grant.code == "invalid":
            raise ProviderError(message="Bad Request")

        return ExternalProfile(
            provider=AuthProvider.GOOGLE,
            external_id=f"google-{grant.code}",
            email=f"{grant.code}@gmail.example.com",
            display_name="Mock Google User",
            avatar_url="https://example.com/google-avatar.jpg",
            access_token=f"mock-google-token-{grant.code}",
        )
