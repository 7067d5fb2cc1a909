"""Unit tests for key-value tree paths and the in-memory tree."""

import asyncio

import pytest

from federate.persistence.tree import InMemoryTree, normalize_path, tree_path, validate_key
from federate.persistence.tree.base import MAX_KEY_BYTES


class TestPaths:
    """Tests for path building and validation."""

    def test_tree_path_joins_segments(self):
        """Should build an absolute slash-separated path."""
        assert tree_path("socialIdentities", "google", "42") == (
            "/socialIdentities/google/42"
        )

    @pytest.mark.parametrize("key", ["a.b", "a#b", "a$b", "a[b", "a]b", "a/b"])
    def test_rejects_forbidden_characters(self, key):
        """Should reject segments containing reserved characters."""
        with pytest.raises(ValueError):
            validate_key(key)

    def test_rejects_control_characters(self):
        """Should reject segments containing control characters."""
        with pytest.raises(ValueError):
            validate_key("abc\n")

    def test_rejects_empty_segment(self):
        """Should reject empty segments."""
        with pytest.raises(ValueError):
            validate_key("")

    def test_rejects_overlong_segment(self):
        """Should reject segments longer than the byte limit."""
        with pytest.raises(ValueError):
            validate_key("a" * (MAX_KEY_BYTES + 1))

    def test_accepts_synthetic_user_ids(self):
        """Should accept ids such as googleUserId::42 as segments."""
        assert validate_key("googleUserId::42") == "googleUserId::42"

    def test_normalize_strips_trailing_slash(self):
        """Should drop a trailing slash."""
        assert normalize_path("/a/b/") == "/a/b"

    def test_normalize_rejects_relative_path(self):
        """Should reject paths that are not absolute."""
        with pytest.raises(ValueError):
            normalize_path("a/b")


class TestInMemoryTree:
    """Tests for InMemoryTree."""

    @pytest.mark.asyncio
    async def test_get_missing_returns_none(self):
        """Should return None for an empty path."""
        tree = InMemoryTree()

        assert await tree.get("/nothing/here") is None

    @pytest.mark.asyncio
    async def test_update_writes_several_paths(self):
        """Should write every path of a multi-path update."""
        # Arrange
        tree = InMemoryTree()

        # Act
        await tree.update({"/a/1": {"x": 1}, "/b/2": "two"})

        # Assert
        assert await tree.get("/a/1") == {"x": 1}
        assert await tree.get("/b/2") == "two"

    @pytest.mark.asyncio
    async def test_update_replaces_subtree(self):
        """Should drop everything below a path that is overwritten."""
        # Arrange
        tree = InMemoryTree({"/a/b/c": 1, "/a/b/d": 2, "/a/e": 3})

        # Act
        await tree.update({"/a/b": "leaf"})

        # Assert
        assert tree.snapshot() == {"/a/b": "leaf", "/a/e": 3}

    @pytest.mark.asyncio
    async def test_update_none_deletes(self):
        """Should delete a path written with None."""
        # Arrange
        tree = InMemoryTree({"/a/b": 1, "/a/c": 2})

        # Act
        await tree.update({"/a/b": None})

        # Assert
        assert tree.snapshot() == {"/a/c": 2}

    @pytest.mark.asyncio
    async def test_children_returns_direct_children_sorted(self):
        """Should list only direct children, ordered by key."""
        # Arrange
        tree = InMemoryTree(
            {"/u/1/twitter": "t", "/u/1/facebook": "f", "/u/1/google/deep": "g", "/u/2/x": 1}
        )

        # Act
        children = await tree.children("/u/1")

        # Assert
        assert list(children) == ["facebook", "twitter"]

    @pytest.mark.asyncio
    async def test_values_are_copies(self):
        """Should not let callers mutate stored values."""
        # Arrange
        tree = InMemoryTree({"/a": {"k": "v"}})

        # Act
        value = await tree.get("/a")
        value["k"] = "changed"

        # Assert
        assert await tree.get("/a") == {"k": "v"}

    @pytest.mark.asyncio
    async def test_pop_reads_and_deletes(self):
        """Should return the value and remove it."""
        # Arrange
        tree = InMemoryTree({"/secrets/client": "s3cret"})

        # Act
        value = await tree.pop("/secrets/client")

        # Assert
        assert value == "s3cret"
        assert await tree.get("/secrets/client") is None
        assert await tree.pop("/secrets/client") is None

    @pytest.mark.asyncio
    async def test_concurrent_pop_has_single_winner(self):
        """Should hand the value to exactly one of several concurrent callers."""
        # Arrange
        tree = InMemoryTree({"/secrets/client": "s3cret"})

        # Act
        results = await asyncio.gather(*(tree.pop("/secrets/client") for _ in range(10)))

        # Assert
        assert [r for r in results if r is not None] == ["s3cret"]

    @pytest.mark.asyncio
    async def test_update_rejects_invalid_path(self):
        """Should refuse paths with forbidden characters."""
        tree = InMemoryTree()

        with pytest.raises(ValueError):
            await tree.update({"/a/b.c": 1})
