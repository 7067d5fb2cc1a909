"""Repository interfaces for the federation domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from federate.domain.repository.identity import IdentityRepository
from federate.domain.repository.local_user import LocalUserRepository
from federate.domain.repository.twitter_handshake import TwitterHandshakeRepository

__all__ = [
    "IdentityRepository",
    "LocalUserRepository",
    "TwitterHandshakeRepository",
]
