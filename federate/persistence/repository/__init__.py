"""Repository implementations."""

from federate.persistence.repository.identity import TreeIdentityRepository
from federate.persistence.repository.local_user import SqlLocalUserRepository
from federate.persistence.repository.twitter_handshake import (
    TreeTwitterHandshakeRepository,
)

__all__ = [
    "SqlLocalUserRepository",
    "TreeIdentityRepository",
    "TreeTwitterHandshakeRepository",
]
