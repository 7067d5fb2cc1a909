"""Persistence infrastructure providers."""

from collections.abc import AsyncIterator

from dishka import Scope, provide
import logfire
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from federate.config import Settings
from federate.domain.repository import (
    IdentityRepository,
    LocalUserRepository,
    TwitterHandshakeRepository,
)
from federate.persistence.database import create_engine, create_session_factory
from federate.persistence.repository import (
    SqlLocalUserRepository,
    TreeIdentityRepository,
    TreeTwitterHandshakeRepository,
)
from federate.persistence.tree import CommittingSqlTree, KeyValueTree, SqlTree
from federate.util.di.base import ProviderBase
from federate.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider using PostgreSQL."""

    __is_mock__ = False

    scope = Scope.APP

    @provide(scope=Scope.APP)
    async def get_engine(self, settings: Settings) -> AsyncIterator[AsyncEngine]:
        """Provide database engine, disposed when the container closes."""
        engine = create_engine(settings)
        # Instrument SQLAlchemy for observability
        instrument_sqlalchemy(engine)
        yield engine
        await engine.dispose()

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        """Provide session factory."""
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        """Provide database session for request scope.

        The session is automatically committed at the end of the request
        if no exception occurred, or rolled back if an exception was raised.
        """
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception as e:
                logfire.warn("Session rollback", error=str(e))
                await session.rollback()
                raise

    @provide(scope=Scope.REQUEST)
    def get_tree(self, session: AsyncSession) -> KeyValueTree:
        """Provide key-value tree."""
        return SqlTree(session)

    @provide(scope=Scope.REQUEST)
    def get_identity_repository(self, tree: KeyValueTree) -> IdentityRepository:
        """Provide provider identity repository."""
        return TreeIdentityRepository(tree)

    @provide(scope=Scope.REQUEST)
    def get_twitter_handshake_repository(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> TwitterHandshakeRepository:
        """Provide Twitter handshake repository.

        Secrets live outside the request transaction so a consumed secret
        stays deleted when the rest of the request rolls back.
        """
        return TreeTwitterHandshakeRepository(CommittingSqlTree(session_factory))

    @provide(scope=Scope.REQUEST)
    def get_local_user_repository(self, session: AsyncSession) -> LocalUserRepository:
        """Provide local user repository."""
        return SqlLocalUserRepository(session)
