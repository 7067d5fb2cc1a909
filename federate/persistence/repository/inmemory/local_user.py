"""In-memory local user repository for testing."""

from typing import Optional

from federate.domain.model.local_user import LocalUser
from federate.domain.repository.local_user import LocalUserRepository
from federate.domain.value import LocalUserId


class InMemoryLocalUserRepository(LocalUserRepository):
    """In-memory implementation of LocalUserRepository for testing."""

    def __init__(self) -> None:
        self._users: dict[LocalUserId, LocalUser] = {}

    async def find_by_id(self, user_id: LocalUserId) -> Optional[LocalUser]:
        """Find user by ID."""
        return self._users.get(user_id)

    async def find_by_email(self, email: str) -> Optional[LocalUser]:
        """Find user by email."""
        for user in self._users.values():
            if user.email == email:
                return user
        return None

    async def save(self, user: LocalUser) -> LocalUser:
        """Save user."""
        if user.email:
            owner = await self.find_by_email(user.email)
            if owner and owner.id != user.id:
                raise ValueError(f"Email already in use: {user.email}")
        self._users[user.id] = user
        return user

    def snapshot(self) -> dict[LocalUserId, LocalUser]:
        """Return a copy of every stored user."""
        return dict(self._users)
