"""Provider identity repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from federate.domain.model.provider_identity import ProviderIdentity
from federate.domain.value import AuthProvider, LocalUserId


class IdentityRepository(ABC):
    """Repository for ProviderIdentity records and their inverse index.

    Every identity is stored twice: by (provider, external_id) and, as a
    denormalized index, by (local_user_id, provider). Both are written
    together.
    """

    @abstractmethod
    async def find_by_provider(
        self, provider: AuthProvider, external_id: str
    ) -> Optional[ProviderIdentity]:
        """Find an identity by provider and external id.

        Args:
            provider: The social login provider
            external_id: The user's id on that provider

        Returns:
            The identity if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_legacy_instagram(self, external_id: str) -> Optional[ProviderIdentity]:
        """Find an identity written by the former Instagram-only login.

        Args:
            external_id: Instagram user id

        Returns:
            The legacy identity if found, None otherwise
        """
        pass

    @abstractmethod
    async def list_providers(self, local_user_id: LocalUserId) -> list[AuthProvider]:
        """List the providers linked to a local user.

        Args:
            local_user_id: The local user's id

        Returns:
            Linked providers (may be empty)
        """
        pass

    @abstractmethod
    async def save(self, identity: ProviderIdentity) -> ProviderIdentity:
        """Upsert an identity together with its inverse index entry.

        Args:
            identity: The identity to save

        Returns:
            The saved identity
        """
        pass
