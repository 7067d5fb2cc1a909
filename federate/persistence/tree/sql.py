"""Key-value tree stored in a SQL table."""

from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from federate.persistence.tables import tree_nodes_table
from federate.persistence.tree.base import (
    KeyValueTree,
    TreeValue,
    last_key,
    normalize_path,
)
from federate.persistence.upsert import upsert


class SqlTree(KeyValueTree):
    """SQL implementation of KeyValueTree.

    Every path is one row of ``tree_nodes``. All writes go through the
    request session, so a multi-path update commits or rolls back as one.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize tree with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def get(self, path: str) -> Optional[TreeValue]:
        """Read the value stored at a path."""
        stmt = select(tree_nodes_table.c.value).where(
            tree_nodes_table.c.path == normalize_path(path)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def children(self, path: str) -> dict[str, TreeValue]:
        """Read the direct children of a path."""
        prefix = normalize_path(path) + "/"
        stmt = (
            select(tree_nodes_table.c.path, tree_nodes_table.c.value)
            .where(tree_nodes_table.c.path.startswith(prefix, autoescape=True))
            .order_by(tree_nodes_table.c.path)
        )
        result = await self.session.execute(stmt)
        return {
            last_key(row.path): row.value
            for row in result
            if "/" not in row.path[len(prefix) :]
        }

    async def update(self, updates: dict[str, Optional[TreeValue]]) -> None:
        """Write several paths within the session transaction.

        A written path replaces its subtree. Existing rows are overwritten in
        place, so concurrent writers of one path converge on the last write.
        """
        now = datetime.now(timezone.utc)
        for raw_path, value in updates.items():
            path = normalize_path(raw_path)
            await self.session.execute(
                delete(tree_nodes_table).where(
                    tree_nodes_table.c.path.startswith(path + "/", autoescape=True)
                )
            )
            if value is None:
                await self.session.execute(
                    delete(tree_nodes_table).where(tree_nodes_table.c.path == path)
                )
            else:
                await self.session.execute(
                    upsert(
                        self.session,
                        tree_nodes_table,
                        {"path": path, "value": value, "updated_at": now},
                        index_elements=["path"],
                        update_columns=["value", "updated_at"],
                    )
                )
        await self.session.flush()

    async def pop(self, path: str) -> Optional[TreeValue]:
        """Atomically read and delete the value at a path.

        Uses ``DELETE ... RETURNING`` so the row lock decides the single
        winner among concurrent callers.
        """
        stmt = (
            delete(tree_nodes_table)
            .where(tree_nodes_table.c.path == normalize_path(path))
            .returning(tree_nodes_table.c.value)
        )
        result = await self.session.execute(stmt)
        value = result.scalar_one_or_none()
        await self.session.flush()
        return value


class CommittingSqlTree(KeyValueTree):
    """SQL tree whose every call runs and commits in its own transaction.

    Holds data whose writes must not depend on the outcome of the request
    transaction, such as consumed Twitter request secrets.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        """Initialize tree with a session factory.

        Args:
            session_factory: Factory for short-lived sessions
        """
        self.session_factory = session_factory

    async def get(self, path: str) -> Optional[TreeValue]:
        async with self.session_factory.begin() as session:
            return await SqlTree(session).get(path)

    async def children(self, path: str) -> dict[str, TreeValue]:
        async with self.session_factory.begin() as session:
            return await SqlTree(session).children(path)

    async def update(self, updates: dict[str, Optional[TreeValue]]) -> None:
        async with self.session_factory.begin() as session:
            await SqlTree(session).update(updates)

    async def pop(self, path: str) -> Optional[TreeValue]:
        """Read and delete the value at a path, committed before returning."""
        async with self.session_factory.begin() as session:
            return await SqlTree(session).pop(path)
