"""Local user repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from federate.domain.model.local_user import LocalUser
from federate.domain.value import LocalUserId


class LocalUserRepository(ABC):
    """Repository for LocalUser entity."""

    @abstractmethod
    async def find_by_id(self, user_id: LocalUserId) -> Optional[LocalUser]:
        """Find a user by ID.

        Args:
            user_id: The user's unique identifier

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[LocalUser]:
        """Find a user by email.

        Args:
            email: Email address to search for

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, user: LocalUser) -> LocalUser:
        """Save a user (create or update).

        Args:
            user: The user to save

        Returns:
            The saved user
        """
        pass
