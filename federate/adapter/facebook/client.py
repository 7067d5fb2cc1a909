"""Facebook OAuth 2.0 client implementation."""

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


class FacebookOAuthClient(ProviderClient):
    """Base class for Facebook OAuth clients.

    Provides type distinction for dependency injection.
    """

    pass


class RealFacebookOAuthClient(OAuth2Client, FacebookOAuthClient):
    """Facebook Graph API code exchange."""

    provider = AuthProvider.FACEBOOK
    profile_params = {"fields": "id,email,name,picture"}

    def _to_profile(self, body: dict[str, Any], access_token: str) -> ExternalProfile:
        if not body.get("id"):
            raise self._missing_id()

        picture = body.get("picture")
        avatar_url = None
        if isinstance(picture, dict) and isinstance(picture.get("data"), dict):
            avatar_url = picture["data"].get("url") or None

        return ExternalProfile(
            provider=AuthProvider.FACEBOOK,
            external_id=str(body["id"]),
            email=body.get("email") or None,
            display_name=body.get("name") or None,
            avatar_url=avatar_url,
            access_token=access_token,
        )


class MockFacebookOAuthClient(FacebookOAuthClient):
    """Mock Facebook OAuth client for testing.

    Returns deterministic test data without making real API calls. The
    external id is derived from the code so tests can mint distinct users.
    """

    async def exchange(self, grant: ProviderGrant) -> ExternalProfile:
        """Return mock user information.

        Raises:
            ProviderError: For the code ``invalid``
        """
        if not isinstance(grant, AuthorizationCode) or grant.code == "invalid":
            raise ProviderError(message="Invalid verification code format.")

        return ExternalProfile(
            provider=AuthProvider.FACEBOOK,
            external_id=f"fb-{grant.code}",
            email=f"{grant.code}@facebook.example.com",
            display_name="Mock Facebook User",
            avatar_url="https://example.com/facebook-avatar.jpg",
            access_token=f"mock-facebook-token-{grant.code}",
        )
