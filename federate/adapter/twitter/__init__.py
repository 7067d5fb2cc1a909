"""Twitter OAuth adapter."""

from .client import (
    MockTwitterOAuthClient,
    RealTwitterOAuthClient,
    TwitterOAuthClient,
)

__all__ = ["TwitterOAuthClient", "RealTwitterOAuthClient", "MockTwitterOAuthClient"]
