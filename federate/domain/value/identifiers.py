"""Strongly typed identifiers for federation entities.

Using NewType for strong typing prevents mixing up a local user id with a
provider-side id or a handshake correlation id.
"""

from typing import NewType

from federate.domain.value.types import AuthProvider

# Id of a user in the local user directory
LocalUserId = NewType("LocalUserId", str)

# Id of a user on an external provider (Facebook id, Twitter id_str, ...)
ExternalId = NewType("ExternalId", str)

# Caller-chosen correlation id for a Twitter OAuth1 handshake
ClientId = NewType("ClientId", str)


def synthetic_local_user_id(provider: AuthProvider, external_id: str) -> LocalUserId:
    """Derive the local user id for an account created from a social login.

    Deterministic in (provider, external_id), so re-resolving the same
    external account always lands on the same local user.

    Args:
        provider: Provider the account was created from
        external_id: User id on that provider

    Returns:
        Local user id of the form ``{provider}UserId::{external_id}``
    """
    return LocalUserId(f"{provider.value}UserId::{external_id}")
