"""Twitter OAuth 1.0a client implementation.

Three-legged OAuth 1.0a: a request token is fetched when the handshake
starts, the user authorizes it on Twitter, and the verifier Twitter hands
back is exchanged for an access token that signs the profile request.
"""

from typing import Any
from urllib.parse import urlencode

from authlib.common.errors import AuthlibBaseError
from authlib.integrations.httpx_client import AsyncOAuth1Client
import httpx
import logfire

from federate.adapter.error import ProviderError
from federate.adapter.oauth2 import decode_json_object
from federate.config import TwitterOAuthSettings
from federate.domain.service.provider_service import HandshakeProviderClient
from federate.domain.value import (
    AuthProvider,
    ExternalProfile,
    ProviderGrant,
    TwitterRequestToken,
    TwitterVerifier,
)


class TwitterOAuthClient(HandshakeProviderClient):
    """Base class for Twitter OAuth clients.

    Provides type distinction for dependency injection.
    """

    pass


class RealTwitterOAuthClient(TwitterOAuthClient):
    """Twitter OAuth 1.0a client signed with authlib."""

    def __init__(
        self,
        settings: TwitterOAuthSettings,
        redirect_uri: str,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize Twitter OAuth client.

        Args:
            settings: Consumer credentials and endpoints
            redirect_uri: Callback URL registered with Twitter
            timeout: Timeout (seconds) for each Twitter call
            transport: Optional httpx transport (used by tests)
        """
        self.settings = settings
        self.redirect_uri = redirect_uri
        self.timeout = timeout
        self.transport = transport

    def _client(self, **kwargs: Any) -> AsyncOAuth1Client:
        return AsyncOAuth1Client(
            client_id=self.settings.consumer_key,
            client_secret=self.settings.consumer_secret,
            timeout=self.timeout,
            transport=self.transport,
            **kwargs,
        )

    async def begin_handshake(self) -> TwitterRequestToken:
        """Fetch a request token and build the authorization URL.

        Returns:
            Request token, its secret and the Twitter authorization URL

        Raises:
            ProviderError: If Twitter refuses to issue a request token
        """
        try:
            async with self._client(redirect_uri=self.redirect_uri) as client:
                token = await client.fetch_request_token(
                    self.settings.request_token_url
                )
        except httpx.HTTPError as e:
            logfire.error("Twitter request token HTTP error", error=str(e))
            raise ProviderError(transient=True) from e
        except (AuthlibBaseError, ValueError) as e:
            logfire.error("Twitter request token rejected", error=str(e))
            raise ProviderError() from e

        oauth_token = token.get("oauth_token")
        oauth_token_secret = token.get("oauth_token_secret")
        if not oauth_token or not oauth_token_secret:
            logfire.error("Twitter request token response incomplete")
            raise ProviderError()

        authorization_url = (
            f"{self.settings.authenticate_url}?{urlencode({'oauth_token': oauth_token})}"
        )
        logfire.info("Twitter request token issued")
        return TwitterRequestToken(
            oauth_token=oauth_token,
            oauth_token_secret=oauth_token_secret,
            authorization_url=authorization_url,
        )

    async def exchange(self, grant: ProviderGrant) -> ExternalProfile:
        """Exchange a verifier for an access token and fetch the profile.

        Args:
            grant: Verifier and request token from the callback, with the
                request secret persisted when the handshake started

        Returns:
            Normalized external profile carrying the access token and secret

        Raises:
            ProviderError: If any call fails or returns an unusable body
        """
        if not isinstance(grant, TwitterVerifier):
            raise ValueError("twitter expects an OAuth 1.0a verifier")

        access_token, access_secret = await self._fetch_access_token(grant)
        user = await self._verify_credentials(access_token, access_secret)

        user_id = user.get("id_str") or user.get("id")
        if not user_id:
            logfire.error("Twitter credentials response has no user id")
            raise ProviderError()

        logfire.info("Twitter OAuth completed", user_id=str(user_id))
        return ExternalProfile(
            provider=AuthProvider.TWITTER,
            external_id=str(user_id),
            email=user.get("email") or None,
            display_name=user.get("name") or None,
            avatar_url=(
                user.get("profile_image_url")
                or user.get("profile_image_url_https")
                or None
            ),
            access_token=access_token,
            access_secret=access_secret,
        )

    async def _fetch_access_token(self, grant: TwitterVerifier) -> tuple[str, str]:
        """Exchange the verifier for an access token and secret.

        Raises:
            ProviderError: If the exchange fails
        """
        try:
            async with self._client(
                token=grant.oauth_token, token_secret=grant.request_secret
            ) as client:
                token = await client.fetch_access_token(
                    self.settings.access_token_url, verifier=grant.oauth_verifier
                )
        except httpx.HTTPError as e:
            logfire.error("Twitter access token HTTP error", error=str(e))
            raise ProviderError(transient=True) from e
        except (AuthlibBaseError, ValueError) as e:
            logfire.error("Twitter access token rejected", error=str(e))
            raise ProviderError() from e

        access_token = token.get("oauth_token")
        access_secret = token.get("oauth_token_secret")
        if not access_token or not access_secret:
            logfire.error("Twitter access token response incomplete")
            raise ProviderError()
        return access_token, access_secret

    async def _verify_credentials(
        self, access_token: str, access_secret: str
    ) -> dict[str, Any]:
        """Fetch the authenticated user's profile.

        Raises:
            ProviderError: If the request fails
        """
        try:
            async with self._client(
                token=access_token, token_secret=access_secret
            ) as client:
                response = await client.get(
                    self.settings.verify_credentials_url,
                    params={"include_email": "true"},
                )
        except httpx.HTTPError as e:
            logfire.error("Twitter verify credentials HTTP error", error=str(e))
            raise ProviderError(transient=True) from e

        body = decode_json_object(response)
        if response.status_code != 200 or body is None:
            logfire.error(
                "Twitter verify credentials failed", status_code=response.status_code
            )
            raise ProviderError(transient=response.status_code >= 500)
        return body


class MockTwitterOAuthClient(TwitterOAuthClient):
    """Mock Twitter OAuth client for testing.

    Returns deterministic test data without making real API calls.
    """

    async def begin_handshake(self) -> TwitterRequestToken:
        """Return a mock request token."""
        return TwitterRequestToken(
            oauth_token="mock-request-token",
            oauth_token_secret="mock-request-secret",
            authorization_url=(
                "https://api.twitter.com/oauth/authenticate"
                "?oauth_token=mock-request-token"
            ),
        )

    async def exchange(self, grant: ProviderGrant) -> ExternalProfile:
        """Return mock user information.

        Raises:
            ProviderError: For the verifier ``invalid``
        """
        if not isinstance(grant, TwitterVerifier) or grant.oauth_verifier == "invalid":
            raise ProviderError()

        return ExternalProfile(
            provider=AuthProvider.TWITTER,
            external_id=f"tw-{grant.oauth_verifier}",
            email=f"{grant.oauth_verifier}@twitter.example.com",
            display_name="Mock Twitter User",
            avatar_url="https://example.com/twitter-avatar.jpg",
            access_token=f"mock-twitter-token-{grant.oauth_verifier}",
            access_secret=f"mock-twitter-secret-{grant.oauth_verifier}",
        )
