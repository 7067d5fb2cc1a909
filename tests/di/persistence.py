"""Mock persistence providers for testing."""

from dishka import Scope, provide

from federate.domain.repository import (
    IdentityRepository,
    LocalUserRepository,
    TwitterHandshakeRepository,
)
from federate.persistence.repository import (
    TreeIdentityRepository,
    TreeTwitterHandshakeRepository,
)
from federate.persistence.repository.inmemory import InMemoryLocalUserRepository
from federate.persistence.tree import InMemoryTree, KeyValueTree
from federate.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory stores.

    The stores are APP-scoped so every request of one container sees the
    same data; each test builds its own container, which keeps tests
    isolated.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_in_memory_tree(self) -> InMemoryTree:
        """Provide in-memory key-value tree."""
        return InMemoryTree()

    @provide(scope=Scope.APP)
    def get_tree(self, tree: InMemoryTree) -> KeyValueTree:
        """Expose the in-memory tree as the tree port."""
        return tree

    @provide(scope=Scope.APP)
    def get_in_memory_local_user_repository(self) -> InMemoryLocalUserRepository:
        """Provide in-memory local user repository."""
        return InMemoryLocalUserRepository()

    @provide(scope=Scope.APP)
    def get_local_user_repository(
        self, repository: InMemoryLocalUserRepository
    ) -> LocalUserRepository:
        """Expose the in-memory repository as the local user port."""
        return repository

    @provide(scope=Scope.REQUEST)
    def get_identity_repository(self, tree: KeyValueTree) -> IdentityRepository:
        """Provide tree-backed identity repository."""
        return TreeIdentityRepository(tree)

    @provide(scope=Scope.REQUEST)
    def get_twitter_handshake_repository(
        self, tree: KeyValueTree
    ) -> TwitterHandshakeRepository:
        """Provide tree-backed Twitter handshake repository."""
        return TreeTwitterHandshakeRepository(tree)
