"""Facebook OAuth adapter."""

from .client import (
    FacebookOAuthClient,
    MockFacebookOAuthClient,
    RealFacebookOAuthClient,
)

__all__ = ["FacebookOAuthClient", "RealFacebookOAuthClient", "MockFacebookOAuthClient"]
