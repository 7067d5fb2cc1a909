"""Outcomes of resolving an external profile against the local directory."""

from typing import Literal

from federate.domain.model.common import DomainModel
from federate.domain.value import AuthProvider, ExternalProfile, LocalUserId


class SignedIn(DomainModel):
    """External account resolved to a local user who is now signed in."""

    kind: Literal["signed_in"] = "signed_in"
    local_user_id: LocalUserId
    token: str  # One-time sign-in token


class Linked(DomainModel):
    """External account linked to the already-authenticated local user."""

    kind: Literal["linked"] = "linked"
    local_user_id: LocalUserId


class AlreadyLinkedElsewhere(DomainModel):
    """Linking refused: the external account already belongs to a local user."""

    kind: Literal["already_linked_elsewhere"] = "already_linked_elsewhere"


class EmailCollision(DomainModel):
    """Sign-in refused: the profile email belongs to an existing local user.

    Carries what the caller needs to resolve the collision by re-running the
    exchange in linking mode as the colliding user.
    """

    kind: Literal["email_collision"] = "email_collision"
    email: str
    social_providers: list[AuthProvider]
    social_user: ExternalProfile


ResolutionOutcome = SignedIn | Linked | AlreadyLinkedElsewhere | EmailCollision
