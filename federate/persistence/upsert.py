"""Insert-or-update statements for the supported SQL dialects."""

from typing import Any, Iterable

from sqlalchemy import Table
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.ext.asyncio import AsyncSession


def upsert(
    session: AsyncSession,
    table: Table,
    values: dict[str, Any],
    index_elements: Iterable[str],
    update_columns: Iterable[str],
):
    """Build ``INSERT ... ON CONFLICT DO UPDATE`` for the session's database.

    Concurrent writers of the same key converge: the last one to commit
    wins instead of failing on the unique constraint.

    Args:
        session: Session whose bind selects the dialect
        table: Target table
        values: Column values of the row
        index_elements: Columns of the conflicting unique key
        update_columns: Columns overwritten when the row already exists

    Returns:
        Executable insert statement
    """
    dialect = session.get_bind().dialect.name
    insert = sqlite.insert if dialect == "sqlite" else postgresql.insert

    stmt = insert(table).values(**values)
    return stmt.on_conflict_do_update(
        index_elements=list(index_elements),
        set_={column: stmt.excluded[column] for column in update_columns},
    )
