"""Local user domain service."""

from datetime import datetime
from typing import Optional

import logfire

from federate.domain.error import NotFoundError
from federate.domain.model.local_user import LocalUser, LocalUserPatch
from federate.domain.repository import LocalUserRepository
from federate.domain.value import LocalUserId


class LocalUserService:
    """Domain service for local user directory operations."""

    def __init__(self, local_user_repository: LocalUserRepository) -> None:
        """Initialize local user service.

        Args:
            local_user_repository: Local user repository
        """
        self.local_user_repository = local_user_repository

    async def get_by_id(self, user_id: LocalUserId) -> Optional[LocalUser]:
        """Get user by ID.

        Args:
            user_id: Local user ID

        Returns:
            User if found, None otherwise
        """
        with logfire.span("local_user_service.get_by_id", user_id=user_id):
            user = await self.local_user_repository.find_by_id(user_id)
            if not user:
                logfire.info("Local user not found", user_id=user_id)
            return user

    async def get_by_email(self, email: str) -> Optional[LocalUser]:
        """Get user by email.

        Args:
            email: Email address

        Returns:
            User if found, None otherwise
        """
        with logfire.span("local_user_service.get_by_email"):
            user = await self.local_user_repository.find_by_email(email)
            if user:
                logfire.info("Local user found by email", user_id=user.id)
            return user

    async def create(self, user_id: LocalUserId, patch: LocalUserPatch) -> LocalUser:
        """Create a user with the given attributes.

        Args:
            user_id: ID of the new user
            patch: Initial attributes

        Returns:
            Created user
        """
        with logfire.span("local_user_service.create", user_id=user_id):
            user = LocalUser(id=user_id, **patch.model_dump(exclude_none=True))
            saved = await self.local_user_repository.save(user)
            logfire.info("Local user created", user_id=user_id)
            return saved

    async def update(self, user_id: LocalUserId, patch: LocalUserPatch) -> LocalUser:
        """Apply a partial update to an existing user.

        Args:
            user_id: ID of the user to update
            patch: Attributes to change

        Returns:
            Updated user

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("local_user_service.update", user_id=user_id):
            user = await self.local_user_repository.find_by_id(user_id)
            if not user:
                logfire.warn("Local user not found", user_id=user_id)
                raise NotFoundError("Local user", user_id)

            updated = user.model_copy(
                update={
                    **patch.model_dump(exclude_none=True),
                    "updated_at": datetime.now(),
                }
            )
            saved = await self.local_user_repository.save(updated)
            logfire.info(
                "Local user updated",
                user_id=user_id,
                fields=sorted(patch.model_dump(exclude_none=True)),
            )
            return saved
