"""Begin Twitter login use case."""

import logfire
from pydantic import BaseModel

from federate.application.usecase.base import BaseUseCase
from federate.domain.error import InputError
from federate.domain.repository import TwitterHandshakeRepository
from federate.domain.service import ProviderService
from federate.domain.value import ClientId


class BeginTwitterLoginRequest(BaseModel):
    """Request to start an OAuth 1.0a handshake with Twitter."""

    client_id: str  # Caller-chosen correlation id, echoed back on the callback


class BeginTwitterLoginResponse(BaseModel):
    """Where to send the user to authorize the request token."""

    authorization_url: str


class BeginTwitterLoginUseCase(BaseUseCase):
    """Use case for the first leg of the Twitter OAuth 1.0a handshake."""

    def __init__(
        self,
        provider_service: ProviderService,
        twitter_handshake_repository: TwitterHandshakeRepository,
    ) -> None:
        """Initialize begin Twitter login use case.

        Args:
            provider_service: Provider dispatch domain service
            twitter_handshake_repository: Store for pending request secrets
        """
        self.provider_service = provider_service
        self.twitter_handshake_repository = twitter_handshake_repository

    async def execute(
        self, request: BeginTwitterLoginRequest
    ) -> BeginTwitterLoginResponse:
        """Obtain a request token and persist its secret under the client id.

        Args:
            request: Handshake request

        Returns:
            Twitter authorization URL

        Raises:
            InputError: If the client id cannot be used as a storage key
            ProviderError: If Twitter refuses to issue a request token
        """
        with logfire.span("begin_twitter_login"):
            request_token = await self.provider_service.begin_twitter_handshake()

            try:
                await self.twitter_handshake_repository.save_request_secret(
                    ClientId(request.client_id), request_token.oauth_token_secret
                )
            except ValueError as e:
                raise InputError(f"Unusable client_id: {e}") from e

            logfire.info("Twitter handshake started")
            return BeginTwitterLoginResponse(
                authorization_url=request_token.authorization_url
            )
