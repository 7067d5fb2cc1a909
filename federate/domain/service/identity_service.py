"""Provider identity domain service."""

from typing import Optional

import logfire

from federate.domain.model.provider_identity import ProviderIdentity
from federate.domain.repository import IdentityRepository
from federate.domain.value import AuthProvider, LocalUserId


class IdentityService:
    """Domain service for provider identity operations."""

    def __init__(self, identity_repository: IdentityRepository) -> None:
        """Initialize identity service.

        Args:
            identity_repository: Provider identity repository
        """
        self.identity_repository = identity_repository

    async def get_identity(
        self, provider: AuthProvider, external_id: str
    ) -> Optional[ProviderIdentity]:
        """Get identity by provider and external id.

        Instagram accounts first linked through the former Instagram-only
        login are found in their legacy location when no unified record
        exists yet.

        Args:
            provider: Social provider
            external_id: Provider-specific user ID

        Returns:
            Identity if found, None otherwise
        """
        with logfire.span(
            "identity_service.get_identity",
            provider=provider.value,
            external_id=external_id,
        ):
            identity = await self.identity_repository.find_by_provider(
                provider, external_id
            )
            if identity is None and provider == AuthProvider.INSTAGRAM:
                identity = await self.identity_repository.find_legacy_instagram(
                    external_id
                )
                if identity:
                    logfire.info(
                        "Legacy Instagram identity adopted",
                        external_id=external_id,
                        local_user_id=identity.local_user_id,
                    )
            if identity:
                logfire.info(
                    "Identity found",
                    provider=provider.value,
                    external_id=external_id,
                    local_user_id=identity.local_user_id,
                )
            else:
                logfire.info(
                    "Identity not found",
                    provider=provider.value,
                    external_id=external_id,
                )
            return identity

    async def get_linked_providers(self, local_user_id: LocalUserId) -> list[AuthProvider]:
        """Get the providers linked to a local user.

        Args:
            local_user_id: Local user ID

        Returns:
            Linked providers (may be empty)
        """
        with logfire.span(
            "identity_service.get_linked_providers", local_user_id=local_user_id
        ):
            providers = await self.identity_repository.list_providers(local_user_id)
            logfire.info(
                "Linked providers retrieved",
                local_user_id=local_user_id,
                count=len(providers),
            )
            return providers

    async def save(self, identity: ProviderIdentity) -> ProviderIdentity:
        """Save identity together with its inverse index entry.

        Args:
            identity: Identity to save

        Returns:
            Saved identity
        """
        with logfire.span(
            "identity_service.save",
            provider=identity.provider.value,
            external_id=identity.external_id,
            local_user_id=identity.local_user_id,
        ):
            saved = await self.identity_repository.save(identity)
            logfire.info(
                "Identity saved",
                provider=saved.provider.value,
                external_id=saved.external_id,
                local_user_id=saved.local_user_id,
            )
            return saved
