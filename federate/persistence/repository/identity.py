"""Provider identity repository backed by the key-value tree."""

from typing import Optional

from federate.domain.model.provider_identity import ProviderIdentity
from federate.domain.repository.identity import IdentityRepository
from federate.domain.value import AuthProvider, LocalUserId
from federate.persistence.mappers import (
    identity_to_index_record,
    identity_to_record,
    record_to_identity,
)
from federate.persistence.tree import KeyValueTree, tree_path

SOCIAL_IDENTITIES = "socialIdentities"
USER_SOCIAL_IDENTITIES = "userSocialIdentities"
LEGACY_INSTAGRAM_IDENTITIES = "instagramIdentities"
LEGACY_USER_INSTAGRAM_IDENTITIES = "userInstagramIdentities"


def identity_path(provider: AuthProvider, external_id: str) -> str:
    """Path of the identity record for (provider, external_id)."""
    return tree_path(SOCIAL_IDENTITIES, provider.value, external_id)


def index_path(local_user_id: str, provider: AuthProvider) -> str:
    """Path of the inverse index entry for (local_user_id, provider)."""
    return tree_path(USER_SOCIAL_IDENTITIES, local_user_id, provider.value)


class TreeIdentityRepository(IdentityRepository):
    """Tree implementation of IdentityRepository.

    Layout::

        /socialIdentities/{provider}/{externalId}    {accessToken, firebaseUserId, accessSecret?}
        /userSocialIdentities/{localUserId}/{provider}    {userId}

    Records of the former Instagram-only login are read but never written::

        /instagramIdentities/{externalId}    {accessToken, firebaseUserId, user}
        /userInstagramIdentities/{localUserId}    {instagramUserId}
    """

    def __init__(self, tree: KeyValueTree) -> None:
        """Initialize repository with a key-value tree.

        Args:
            tree: Tree holding identity data
        """
        self.tree = tree

    async def find_by_provider(
        self, provider: AuthProvider, external_id: str
    ) -> Optional[ProviderIdentity]:
        """Find an identity by provider and external id."""
        record = await self.tree.get(identity_path(provider, external_id))
        return record_to_identity(provider, external_id, record)

    async def find_legacy_instagram(self, external_id: str) -> Optional[ProviderIdentity]:
        """Find an identity under ``/instagramIdentities/{externalId}``."""
        record = await self.tree.get(tree_path(LEGACY_INSTAGRAM_IDENTITIES, external_id))
        return record_to_identity(AuthProvider.INSTAGRAM, external_id, record)

    async def list_providers(self, local_user_id: LocalUserId) -> list[AuthProvider]:
        """List providers under ``/userSocialIdentities/{localUserId}``.

        Instagram is also reported for users only present in the legacy
        ``/userInstagramIdentities`` index.
        """
        entries = await self.tree.children(tree_path(USER_SOCIAL_IDENTITIES, local_user_id))
        known = {p.value: p for p in AuthProvider}
        providers = [known[key] for key in entries if key in known]

        if AuthProvider.INSTAGRAM not in providers:
            legacy = await self.tree.get(
                tree_path(LEGACY_USER_INSTAGRAM_IDENTITIES, local_user_id)
            )
            if legacy:
                providers.append(AuthProvider.INSTAGRAM)
        return providers

    async def save(self, identity: ProviderIdentity) -> ProviderIdentity:
        """Write identity record and inverse index in one update."""
        await self.tree.update(
            {
                identity_path(identity.provider, identity.external_id): (
                    identity_to_record(identity)
                ),
                index_path(identity.local_user_id, identity.provider): (
                    identity_to_index_record(identity)
                ),
            }
        )
        return identity
