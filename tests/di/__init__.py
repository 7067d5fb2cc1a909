"""Mock providers for testing."""

from .oauth2 import MockOAuth2Provider
from .twitter import MockTwitterProvider
from .persistence import MockPersistenceProvider
from .container import build_test_container

__all__ = [
    "MockOAuth2Provider",
    "MockTwitterProvider",
    "MockPersistenceProvider",
    "build_test_container",
]
