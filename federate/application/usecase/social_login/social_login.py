"""Social login use case."""

from typing import Any, Optional

import logfire
from pydantic import BaseModel, ValidationError, field_validator

from federate.application.usecase.base import BaseUseCase
from federate.domain.error import InputError, LinkTargetNotFoundError
from federate.domain.model.outcome import ResolutionOutcome
from federate.domain.repository import TwitterHandshakeRepository
from federate.domain.service import (
    IdentityResolutionService,
    LocalUserService,
    ProviderService,
)
from federate.domain.value import (
    AuthorizationCode,
    AuthProvider,
    ClientId,
    LocalUserId,
    ProviderGrant,
    TwitterVerifier,
)


class SocialLoginRequest(BaseModel):
    """Social login request from the provider redirect.

    For Twitter, ``code`` is a JSON object holding ``oauth_token`` and
    ``oauth_verifier`` and ``client_id`` names the pending handshake.
    """

    provider: AuthProvider
    code: str
    uid: Optional[str] = None  # Present when linking to a signed-in user
    client_id: Optional[str] = None  # Twitter only


class TwitterCallbackCode(BaseModel):
    """Values Twitter appended to the callback URL."""

    oauth_token: str = ""
    oauth_verifier: str = ""

    @field_validator("oauth_token", "oauth_verifier", mode="before")
    @classmethod
    def non_text_is_missing(cls, v: Any) -> str:
        """Treat non-string values as absent so the code still parses."""
        return v if isinstance(v, str) else ""


class SocialLoginUseCase(BaseUseCase):
    """Use case exchanging a provider grant and resolving the profile."""

    def __init__(
        self,
        provider_service: ProviderService,
        local_user_service: LocalUserService,
        identity_resolution_service: IdentityResolutionService,
        twitter_handshake_repository: TwitterHandshakeRepository,
    ) -> None:
        """Initialize social login use case.

        Args:
            provider_service: Provider dispatch domain service
            local_user_service: Local user directory service
            identity_resolution_service: Resolution engine
            twitter_handshake_repository: Store for pending request secrets
        """
        self.provider_service = provider_service
        self.local_user_service = local_user_service
        self.identity_resolution_service = identity_resolution_service
        self.twitter_handshake_repository = twitter_handshake_repository

    async def execute(self, request: SocialLoginRequest) -> ResolutionOutcome:
        """Execute the exchange-then-resolve pipeline.

        Steps:
        1. Validate input (Twitter code JSON is parsed before any network call)
        2. Check the link target exists when linking
        3. Consume the pending Twitter request secret
        4. Exchange the grant with the provider
        5. Resolve the profile against the local user directory

        Args:
            request: Social login request

        Returns:
            Resolution outcome

        Raises:
            InputError: If parameters are missing or malformed
            LinkTargetNotFoundError: If linking against an unknown user
            ProviderError: If the provider exchange fails
            InternalError: If persisting the resolution fails
        """
        linking_user_id = LocalUserId(request.uid) if request.uid else None

        with logfire.span(
            "social_login",
            provider=request.provider.value,
            linking=linking_user_id is not None,
        ):
            callback_code = None
            if request.provider == AuthProvider.TWITTER:
                callback_code = self._parse_twitter_code(request.code)
                if not request.client_id:
                    raise InputError("client_id is required for twitter")

            if linking_user_id is not None:
                target = await self.local_user_service.get_by_id(linking_user_id)
                if target is None:
                    logfire.warn("Link target not found", local_user_id=linking_user_id)
                    raise LinkTargetNotFoundError(linking_user_id)

            grant: ProviderGrant
            if callback_code is not None and request.client_id:
                grant = await self._twitter_grant(request.client_id, callback_code)
            else:
                grant = AuthorizationCode(code=request.code)

            profile = await self.provider_service.exchange(request.provider, grant)
            return await self.identity_resolution_service.resolve(
                profile, linking_user_id
            )

    def _parse_twitter_code(self, code: str) -> TwitterCallbackCode:
        try:
            return TwitterCallbackCode.model_validate_json(code)
        except ValidationError as e:
            logfire.warn("Twitter code is not parsable", error=str(e))
            raise InputError("Twitter code must be a JSON object") from e

    async def _twitter_grant(
        self, client_id: str, callback_code: TwitterCallbackCode
    ) -> TwitterVerifier:
        """Build the verifier grant, consuming the pending request secret.

        The secret is removed before the callback values are checked, so a
        handshake can only be completed once.
        """
        try:
            secret = await self.twitter_handshake_repository.take_request_secret(
                ClientId(client_id)
            )
        except ValueError as e:
            raise InputError(f"Unusable client_id: {e}") from e

        if secret is None:
            logfire.warn("No pending Twitter handshake for client")
            raise InputError("No pending Twitter handshake for client_id")

        if not callback_code.oauth_token or not callback_code.oauth_verifier:
            raise InputError("Twitter code lacks oauth_token or oauth_verifier")

        return TwitterVerifier(
            oauth_token=callback_code.oauth_token,
            oauth_verifier=callback_code.oauth_verifier,
            request_secret=secret,
        )
