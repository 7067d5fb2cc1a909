"""Unit tests for the tree-backed identity and handshake repositories."""

import pytest

from federate.domain.model import ProviderIdentity
from federate.domain.value import AuthProvider, ClientId, LocalUserId
from federate.persistence.repository import (
    TreeIdentityRepository,
    TreeTwitterHandshakeRepository,
)
from federate.persistence.tree import InMemoryTree


class TestTreeIdentityRepository:
    """Tests for TreeIdentityRepository."""

    @pytest.mark.asyncio
    async def test_save_writes_record_and_index(self):
        """Should write the identity record and its inverse index together."""
        # Arrange
        tree = InMemoryTree()
        repo = TreeIdentityRepository(tree)
        identity = ProviderIdentity(
            provider=AuthProvider.TWITTER,
            external_id="783214",
            access_token="at",
            access_secret="as",
            local_user_id=LocalUserId("twitterUserId::783214"),
        )

        # Act
        await repo.save(identity)

        # Assert
        assert tree.snapshot() == {
            "/socialIdentities/twitter/783214": {
                "accessToken": "at",
                "accessSecret": "as",
                "firebaseUserId": "twitterUserId::783214",
            },
            "/userSocialIdentities/twitterUserId::783214/twitter": {
                "userId": "783214"
            },
        }

    @pytest.mark.asyncio
    async def test_record_omits_missing_secret(self):
        """Should not store an access secret for OAuth2 providers."""
        # Arrange
        tree = InMemoryTree()
        repo = TreeIdentityRepository(tree)

        # Act
        await repo.save(
            ProviderIdentity(
                provider=AuthProvider.GOOGLE,
                external_id="42",
                access_token="at",
                local_user_id=LocalUserId("u1"),
            )
        )

        # Assert
        record = await tree.get("/socialIdentities/google/42")
        assert "accessSecret" not in record

    @pytest.mark.asyncio
    async def test_find_by_provider_round_trip(self):
        """Should find a saved identity by provider and external id."""
        # Arrange
        repo = TreeIdentityRepository(InMemoryTree())
        identity = ProviderIdentity(
            provider=AuthProvider.FACEBOOK,
            external_id="10155",
            access_token="at",
            local_user_id=LocalUserId("u1"),
        )
        await repo.save(identity)

        # Act
        found = await repo.find_by_provider(AuthProvider.FACEBOOK, "10155")

        # Assert
        assert found == identity
        assert await repo.find_by_provider(AuthProvider.GOOGLE, "10155") is None

    @pytest.mark.asyncio
    async def test_record_without_local_user_is_ignored(self):
        """Should treat a record lacking the local user id as absent."""
        tree = InMemoryTree({"/socialIdentities/google/42": {"accessToken": "at"}})
        repo = TreeIdentityRepository(tree)

        assert await repo.find_by_provider(AuthProvider.GOOGLE, "42") is None

    @pytest.mark.asyncio
    async def test_find_legacy_instagram(self):
        """Should read identities written by the Instagram-only login."""
        # Arrange
        tree = InMemoryTree(
            {
                "/instagramIdentities/555": {
                    "accessToken": "old",
                    "firebaseUserId": "instagramUserId::555",
                }
            }
        )
        repo = TreeIdentityRepository(tree)

        # Act
        found = await repo.find_legacy_instagram("555")

        # Assert
        assert found is not None
        assert found.provider == AuthProvider.INSTAGRAM
        assert found.local_user_id == "instagramUserId::555"
        assert await repo.find_by_provider(AuthProvider.INSTAGRAM, "555") is None

    @pytest.mark.asyncio
    async def test_list_providers(self):
        """Should list every provider linked to a local user."""
        # Arrange
        repo = TreeIdentityRepository(InMemoryTree())
        for provider, external_id in [
            (AuthProvider.GOOGLE, "42"),
            (AuthProvider.TWITTER, "7"),
        ]:
            await repo.save(
                ProviderIdentity(
                    provider=provider,
                    external_id=external_id,
                    access_token="at",
                    local_user_id=LocalUserId("u1"),
                )
            )

        # Act
        providers = await repo.list_providers(LocalUserId("u1"))

        # Assert
        assert providers == [AuthProvider.GOOGLE, AuthProvider.TWITTER]
        assert await repo.list_providers(LocalUserId("nobody")) == []

    @pytest.mark.asyncio
    async def test_list_providers_includes_legacy_instagram(self):
        """Should report Instagram for users in the legacy Instagram index."""
        # Arrange
        tree = InMemoryTree(
            {
                "/userSocialIdentities/u1/google": {"userId": "42"},
                "/userInstagramIdentities/u1": {"instagramUserId": "555"},
            }
        )
        repo = TreeIdentityRepository(tree)

        # Act
        providers = await repo.list_providers(LocalUserId("u1"))

        # Assert
        assert providers == [AuthProvider.GOOGLE, AuthProvider.INSTAGRAM]


class TestTreeTwitterHandshakeRepository:
    """Tests for TreeTwitterHandshakeRepository."""

    @pytest.mark.asyncio
    async def test_save_and_take_secret(self):
        """Should hand the secret out once and then forget it."""
        # Arrange
        tree = InMemoryTree()
        repo = TreeTwitterHandshakeRepository(tree)

        # Act
        await repo.save_request_secret(ClientId("client-1"), "request-secret")

        # Assert
        assert await tree.get("/twitterRequestTokenSecrets/client-1") == (
            "request-secret"
        )
        assert await repo.take_request_secret(ClientId("client-1")) == "request-secret"
        assert await repo.take_request_secret(ClientId("client-1")) is None
        assert tree.snapshot() == {}

    @pytest.mark.asyncio
    async def test_rejects_unusable_client_id(self):
        """Should refuse client ids that cannot be used as a path segment."""
        repo = TreeTwitterHandshakeRepository(InMemoryTree())

        with pytest.raises(ValueError):
            await repo.save_request_secret(ClientId("a/b"), "secret")
