"""Instagram OAuth adapter."""

from .client import (
    InstagramOAuthClient,
    MockInstagramOAuthClient,
    RealInstagramOAuthClient,
)

__all__ = [
    "InstagramOAuthClient",
    "RealInstagramOAuthClient",
    "MockInstagramOAuthClient",
]
