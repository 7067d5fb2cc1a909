"""In-memory repository implementations for testing."""

from .local_user import InMemoryLocalUserRepository

__all__ = ["InMemoryLocalUserRepository"]
