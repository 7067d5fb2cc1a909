"""LocalUser repository implementation using SQL."""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from federate.domain.model.local_user import LocalUser
from federate.domain.repository.local_user import LocalUserRepository
from federate.domain.value import LocalUserId
from federate.persistence.mappers import local_user_to_dict, row_to_local_user
from federate.persistence.tables import local_users_table
from federate.persistence.upsert import upsert


class SqlLocalUserRepository(LocalUserRepository):
    """SQL implementation of LocalUserRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, user_id: LocalUserId) -> Optional[LocalUser]:
        """Get user by ID.

        Args:
            user_id: User ID to look up

        Returns:
            LocalUser if found, None otherwise
        """
        stmt = select(local_users_table).where(local_users_table.c.id == user_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()

        if not row:
            return None

        return row_to_local_user(dict(row))

    async def find_by_email(self, email: str) -> Optional[LocalUser]:
        """Get user by email.

        Args:
            email: Email address

        Returns:
            LocalUser if found, None otherwise
        """
        stmt = select(local_users_table).where(local_users_table.c.email == email)
        result = await self.session.execute(stmt)
        row = result.mappings().first()

        if not row:
            return None

        return row_to_local_user(dict(row))

    async def save(self, user: LocalUser) -> LocalUser:
        """Insert the user or overwrite the existing row with the same id.

        Args:
            user: LocalUser to save

        Returns:
            Saved LocalUser
        """
        user_dict = local_user_to_dict(user)

        stmt = upsert(
            self.session,
            local_users_table,
            user_dict,
            index_elements=["id"],
            update_columns=[c for c in user_dict if c not in ("id", "created_at")],
        )
        await self.session.execute(stmt)

        await self.session.flush()
        return user
