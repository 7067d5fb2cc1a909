"""Shared OAuth 2.0 authorization code exchange.

Facebook, Google and Instagram all follow the same two calls: a form POST
to the token endpoint, then a GET to a profile endpoint authenticated with
the returned access token. Only the profile shape differs per provider.
"""

import logging
from typing import Any, Optional

import httpx

from federate.adapter.error import ProviderError
from federate.config import OAuth2ProviderSettings
from federate.domain.service.provider_service import ProviderClient
from federate.domain.value import (
    AuthorizationCode,
    AuthProvider,
    ExternalProfile,
    ProviderGrant,
)

logger = logging.getLogger(__name__)


def extract_error_message(body: Optional[dict[str, Any]]) -> Optional[str]:
    """Extract the human-readable error a provider put in a token response.

    Providers disagree on the field: ``error_description`` (Google),
    ``error_message`` (Instagram) or ``error.message`` (Facebook).

    Args:
        body: Decoded JSON body, if the response had one

    Returns:
        Provider message, or None if the body carries none
    """
    if not body:
        return None
    for key in ("error_description", "error_message"):
        value = body.get(key)
        if isinstance(value, str) and value:
            return value
    error = body.get("error")
    if isinstance(error, dict):
        message = error.get("message")
        if isinstance(message, str) and message:
            return message
    return None


def decode_json_object(response: httpx.Response) -> Optional[dict[str, Any]]:
    """Decode a response body that should be a JSON object.

    Returns:
        Decoded object, or None if the body is not a JSON object
    """
    try:
        body = response.json()
    except ValueError:
        return None
    return body if isinstance(body, dict) else None


class OAuth2Client(ProviderClient):
    """OAuth 2.0 code exchange against one provider.

    Subclasses set ``provider`` and ``profile_params`` and map the provider's
    profile JSON with ``_to_profile``.
    """

    provider: AuthProvider
    profile_params: dict[str, str] = {}

    def __init__(
        self,
        settings: OAuth2ProviderSettings,
        redirect_uri: str,
        grant_type: str = "authorization_code",
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize OAuth 2.0 client.

        Args:
            settings: Provider credentials and endpoints
            redirect_uri: Redirect URL registered with the provider
            grant_type: OAuth grant type sent to the token endpoint
            timeout: Timeout (seconds) for each provider call
            transport: Optional httpx transport (used by tests)
        """
        self.settings = settings
        self.redirect_uri = redirect_uri
        self.grant_type = grant_type
        self.timeout = timeout
        self.transport = transport

    async def exchange(self, grant: ProviderGrant) -> ExternalProfile:
        """Exchange an authorization code for the user's profile.

        Args:
            grant: Authorization code from the provider redirect

        Returns:
            Normalized external profile

        Raises:
            ProviderError: If any call fails or returns an unusable body
        """
        if not isinstance(grant, AuthorizationCode):
            raise ValueError(f"{self.provider.value} expects an authorization code")

        async with httpx.AsyncClient(
            timeout=self.timeout, transport=self.transport
        ) as client:
            access_token = await self._exchange_code_for_token(client, grant.code)
            body = await self._get_profile(client, access_token)

        profile = self._to_profile(body, access_token)
        logger.info(
            f"{self.provider.value} profile resolved for user {profile.external_id}"
        )
        return profile

    async def _exchange_code_for_token(
        self, client: httpx.AsyncClient, code: str
    ) -> str:
        """Exchange authorization code for access token.

        Raises:
            ProviderError: If token exchange fails
        """
        data = {
            "client_id": self.settings.client_id,
            "client_secret": self.settings.client_secret,
            "grant_type": self.grant_type,
            "redirect_uri": self.redirect_uri,
            "code": code,
        }

        try:
            response = await client.post(self.settings.oauth_url, data=data)
        except httpx.HTTPError as e:
            logger.error(f"{self.provider.value} token exchange HTTP error: {e}")
            raise ProviderError(transient=True) from e

        body = decode_json_object(response)
        if response.status_code != 200 or not body or not body.get("access_token"):
            logger.error(
                f"{self.provider.value} token exchange failed: "
                f"status={response.status_code}"
            )
            raise ProviderError(
                message=extract_error_message(body),
                transient=response.status_code >= 500,
            )

        return body["access_token"]

    async def _get_profile(
        self, client: httpx.AsyncClient, access_token: str
    ) -> dict[str, Any]:
        """Fetch the raw profile JSON with the access token.

        Raises:
            ProviderError: If the profile request fails
        """
        params = {**self.profile_params, "access_token": access_token}

        try:
            response = await client.get(self.settings.profile_url, params=params)
        except httpx.HTTPError as e:
            logger.error(f"{self.provider.value} profile HTTP error: {e}")
            raise ProviderError(transient=True) from e

        body = decode_json_object(response)
        if response.status_code != 200 or body is None:
            logger.error(
                f"{self.provider.value} profile request failed: "
                f"status={response.status_code}"
            )
            raise ProviderError(transient=response.status_code >= 500)

        return body

    def _to_profile(self, body: dict[str, Any], access_token: str) -> ExternalProfile:
        """Map provider profile JSON to an ExternalProfile.

        Raises:
            ProviderError: If the body lacks the user id
        """
        raise NotImplementedError

    def _missing_id(self) -> ProviderError:
        logger.error(f"{self.provider.value} profile response has no user id")
        return ProviderError()
