"""Integration tests for SqlTree and the tree-backed repositories."""

import pytest

from federate.domain.model import ProviderIdentity
from federate.domain.value import AuthProvider, ClientId, LocalUserId
from federate.persistence.repository import (
    TreeIdentityRepository,
    TreeTwitterHandshakeRepository,
)
from federate.persistence.tree import SqlTree


class TestSqlTree:
    """Tests for SqlTree against a real database."""

    @pytest.mark.asyncio
    async def test_update_and_get(self, session):
        """Should store JSON objects and plain strings."""
        # Arrange
        tree = SqlTree(session)

        # Act
        await tree.update({"/a/1": {"x": 1, "y": ["z"]}, "/b/2": "two"})

        # Assert
        assert await tree.get("/a/1") == {"x": 1, "y": ["z"]}
        assert await tree.get("/b/2") == "two"
        assert await tree.get("/c") is None

    @pytest.mark.asyncio
    async def test_update_replaces_subtree(self, session):
        """Should drop everything below an overwritten path."""
        # Arrange
        tree = SqlTree(session)
        await tree.update({"/a/b/c": 1, "/a/b/d": 2, "/a/e": 3})

        # Act
        await tree.update({"/a/b": "leaf"})

        # Assert
        assert await tree.get("/a/b") == "leaf"
        assert await tree.get("/a/b/c") is None
        assert await tree.get("/a/e") == 3

    @pytest.mark.asyncio
    async def test_update_none_deletes(self, session):
        """Should delete paths written with None."""
        tree = SqlTree(session)
        await tree.update({"/a/b": 1})

        await tree.update({"/a/b": None})

        assert await tree.get("/a/b") is None

    @pytest.mark.asyncio
    async def test_children_are_direct_and_sorted(self, session):
        """Should list only direct children, ordered by key."""
        # Arrange
        tree = SqlTree(session)
        await tree.update(
            {
                "/u/1/twitter": {"userId": "7"},
                "/u/1/facebook": {"userId": "8"},
                "/u/1/google/deep": 1,
                "/u/10/google": 2,
            }
        )

        # Act
        children = await tree.children("/u/1")

        # Assert
        assert children == {"facebook": {"userId": "8"}, "twitter": {"userId": "7"}}

    @pytest.mark.asyncio
    async def test_children_prefix_is_escaped(self, session):
        """Should not treat LIKE wildcards in keys as patterns."""
        tree = SqlTree(session)
        await tree.update({"/u/a_b/x": 1, "/u/axb/y": 2})

        assert await tree.children("/u/a_b") == {"x": 1}

    @pytest.mark.asyncio
    async def test_pop(self, session):
        """Should return the value once and delete it."""
        # Arrange
        tree = SqlTree(session)
        await tree.update({"/secrets/client": "s3cret"})

        # Act
        first = await tree.pop("/secrets/client")
        second = await tree.pop("/secrets/client")

        # Assert
        assert first == "s3cret"
        assert second is None
        assert await tree.get("/secrets/client") is None


class TestTreeRepositoriesOnSql:
    """Tests for the tree repositories on the SQL tree."""

    @pytest.mark.asyncio
    async def test_identity_round_trip(self, session):
        """Should save and find identities and list linked providers."""
        # Arrange
        repo = TreeIdentityRepository(SqlTree(session))
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
        assert await repo.find_by_provider(AuthProvider.TWITTER, "783214") == identity
        assert await repo.list_providers(LocalUserId("twitterUserId::783214")) == [
            AuthProvider.TWITTER
        ]

    @pytest.mark.asyncio
    async def test_handshake_secret_is_single_use(self, session):
        """Should hand a stored secret out exactly once."""
        repo = TreeTwitterHandshakeRepository(SqlTree(session))
        await repo.save_request_secret(ClientId("client-1"), "request-secret")

        assert await repo.take_request_secret(ClientId("client-1")) == "request-secret"
        assert await repo.take_request_secret(ClientId("client-1")) is None
