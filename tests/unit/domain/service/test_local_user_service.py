"""Unit tests for LocalUserService."""

import pytest

from federate.domain.error import NotFoundError
from federate.domain.model import LocalUserPatch
from federate.domain.service import LocalUserService
from federate.domain.value import LocalUserId
from federate.persistence.repository.inmemory import InMemoryLocalUserRepository
from tests.conftest import make_user


class TestLocalUserService:
    """Tests for LocalUserService."""

    @pytest.mark.asyncio
    async def test_create_applies_patch(self):
        """Should create a user carrying the patch fields."""
        # Arrange
        service = LocalUserService(InMemoryLocalUserRepository())

        # Act
        user = await service.create(
            LocalUserId("u1"), LocalUserPatch(display_name="Alice")
        )

        # Assert
        assert user.id == "u1"
        assert user.display_name == "Alice"
        assert user.email is None

    @pytest.mark.asyncio
    async def test_update_changes_only_patch_fields(self):
        """Should leave fields missing from the patch untouched."""
        # Arrange
        repo = InMemoryLocalUserRepository()
        service = LocalUserService(repo)
        original = await repo.save(make_user("u1", email="a@example.com"))

        # Act
        updated = await service.update(
            LocalUserId("u1"), LocalUserPatch(photo_url="https://example.com/p.jpg")
        )

        # Assert
        assert updated.email == "a@example.com"
        assert updated.photo_url == "https://example.com/p.jpg"
        assert updated.updated_at >= original.updated_at

    @pytest.mark.asyncio
    async def test_update_missing_user(self):
        """Should raise NotFoundError for unknown users."""
        service = LocalUserService(InMemoryLocalUserRepository())

        with pytest.raises(NotFoundError):
            await service.update(LocalUserId("ghost"), LocalUserPatch(display_name="x"))

    @pytest.mark.asyncio
    async def test_get_by_email(self):
        """Should find users by exact email."""
        repo = InMemoryLocalUserRepository()
        await repo.save(make_user("u1", email="a@example.com"))
        service = LocalUserService(repo)

        found = await service.get_by_email("a@example.com")

        assert found.id == "u1"
        assert await service.get_by_email("b@example.com") is None

    def test_empty_patch(self):
        """Should report a patch without fields as empty."""
        assert LocalUserPatch().is_empty()
        assert not LocalUserPatch(email="a@example.com").is_empty()
