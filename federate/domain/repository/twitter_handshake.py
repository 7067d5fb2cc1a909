"""Pending Twitter handshake repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from federate.domain.value import ClientId


class TwitterHandshakeRepository(ABC):
    """Repository for OAuth1 request secrets awaiting their verifier callback.

    Secrets are keyed by a caller-chosen client id and are single use.
    """

    @abstractmethod
    async def save_request_secret(self, client_id: ClientId, secret: str) -> None:
        """Persist the request secret of a handshake that just started.

        Args:
            client_id: Caller-chosen correlation id
            secret: OAuth1 request token secret
        """
        pass

    @abstractmethod
    async def take_request_secret(self, client_id: ClientId) -> Optional[str]:
        """Read and delete the request secret in one atomic step.

        At most one caller obtains a given secret.

        Args:
            client_id: Caller-chosen correlation id

        Returns:
            The secret if a handshake was pending, None otherwise
        """
        pass
