"""Twitter handshake repository backed by the key-value tree."""

from typing import Optional

from federate.domain.repository.twitter_handshake import TwitterHandshakeRepository
from federate.domain.value import ClientId
from federate.persistence.tree import KeyValueTree, tree_path

TWITTER_REQUEST_TOKEN_SECRETS = "twitterRequestTokenSecrets"


class TreeTwitterHandshakeRepository(TwitterHandshakeRepository):
    """Stores request secrets under ``/twitterRequestTokenSecrets/{clientId}``."""

    def __init__(self, tree: KeyValueTree) -> None:
        self.tree = tree

    async def save_request_secret(self, client_id: ClientId, secret: str) -> None:
        await self.tree.update({tree_path(TWITTER_REQUEST_TOKEN_SECRETS, client_id): secret})

    async def take_request_secret(self, client_id: ClientId) -> Optional[str]:
        secret = await self.tree.pop(tree_path(TWITTER_REQUEST_TOKEN_SECRETS, client_id))
        return secret if isinstance(secret, str) and secret else None
