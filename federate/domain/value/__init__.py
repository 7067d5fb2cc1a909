"""Domain value objects for social identity federation."""

from federate.domain.value.identifiers import (
    ClientId,
    ExternalId,
    LocalUserId,
    synthetic_local_user_id,
)
from federate.domain.value.types import (
    AuthorizationCode,
    AuthProvider,
    ExternalProfile,
    ProviderGrant,
    TwitterRequestToken,
    TwitterVerifier,
)

__all__ = [
    # Identifiers
    "LocalUserId",
    "ExternalId",
    "ClientId",
    "synthetic_local_user_id",
    # Types
    "AuthProvider",
    "ExternalProfile",
    "AuthorizationCode",
    "TwitterVerifier",
    "ProviderGrant",
    "TwitterRequestToken",
]
