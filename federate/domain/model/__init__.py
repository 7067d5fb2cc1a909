"""Domain model entities for social identity federation."""

from federate.domain.model.local_user import LocalUser, LocalUserPatch
from federate.domain.model.outcome import (
    AlreadyLinkedElsewhere,
    EmailCollision,
    Linked,
    ResolutionOutcome,
    SignedIn,
)
from federate.domain.model.provider_identity import ProviderIdentity

__all__ = [
    "LocalUser",
    "LocalUserPatch",
    "ProviderIdentity",
    "SignedIn",
    "Linked",
    "AlreadyLinkedElsewhere",
    "EmailCollision",
    "ResolutionOutcome",
]
