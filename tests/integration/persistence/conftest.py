"""Fixtures for persistence integration tests.

Runs the SQL repositories against an in-process SQLite database built from
the table metadata.
"""

import pytest_asyncio
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.pool import NullPool, StaticPool

from federate.persistence.database import create_session_factory
from federate.persistence.tables import metadata


@pytest_asyncio.fixture
async def engine():
    """Fresh in-memory database per test."""
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(metadata.create_all)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture
async def session(engine):
    """Session bound to the test database."""
    session_factory = create_session_factory(engine)
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def file_engine(tmp_path):
    """Database file giving every session its own connection and transaction."""
    engine = create_async_engine(
        f"sqlite+aiosqlite:///{tmp_path / 'federate.db'}",
        poolclass=NullPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(metadata.create_all)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture
async def session_factory(file_engine):
    """Session factory bound to the database file."""
    return create_session_factory(file_engine)
