"""Infrastructure providers."""

# Import bases
from .oauth import OAuthAggregatorProvider
from .oauth2 import OAuth2Provider
from .persistence import PersistenceProvider
from .twitter import TwitterProvider

# Import implementations (needed for __subclasses__())
from .oauth2 import ProdOAuth2Provider  # noqa: F401
from .persistence import ProdPersistenceProvider  # noqa: F401
from .twitter import ProdTwitterProvider  # noqa: F401

__all__ = [
    "OAuth2Provider",
    "OAuthAggregatorProvider",
    "PersistenceProvider",
    "ProdOAuth2Provider",
    "ProdPersistenceProvider",
    "ProdTwitterProvider",
    "TwitterProvider",
]
