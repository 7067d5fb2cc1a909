"""Domain services."""

from .base import Service
from .identity_resolution_service import IdentityResolutionService
from .identity_service import IdentityService
from .local_user_service import LocalUserService
from .provider_service import HandshakeProviderClient, ProviderClient, ProviderService
from .sign_in_token_service import SignInTokenService

__all__ = [
    "HandshakeProviderClient",
    "IdentityResolutionService",
    "IdentityService",
    "LocalUserService",
    "ProviderClient",
    "ProviderService",
    "Service",
    "SignInTokenService",
]
