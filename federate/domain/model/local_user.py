"""Local user entity.

Owned by the local user directory; social login only reads, creates and
patches it.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from federate.domain.model.common import DomainModel
from federate.domain.value import LocalUserId


class LocalUser(DomainModel):
    """User account in the local directory."""

    id: LocalUserId
    email: Optional[str] = None
    display_name: Optional[str] = None
    photo_url: Optional[str] = None
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)


class LocalUserPatch(DomainModel):
    """Partial update of a local user. Unset fields are left untouched."""

    email: Optional[str] = None
    display_name: Optional[str] = None
    photo_url: Optional[str] = None

    def is_empty(self) -> bool:
        """Whether the patch changes nothing."""
        return not self.model_dump(exclude_none=True)
