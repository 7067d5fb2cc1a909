"""Test configuration and fixtures."""

from typing import Optional

from federate.domain.model import LocalUser
from federate.domain.value import AuthProvider, ExternalProfile, LocalUserId


def make_profile(
    provider: AuthProvider = AuthProvider.GOOGLE,
    external_id: str = "42",
    email: Optional[str] = "alice@example.com",
    display_name: Optional[str] = "Alice",
    avatar_url: Optional[str] = "https://example.com/alice.jpg",
    access_token: str = "access-token",
    access_secret: Optional[str] = None,
) -> ExternalProfile:
    """Helper function to build a verified provider profile for tests."""
    return ExternalProfile(
        provider=provider,
        external_id=external_id,
        email=email,
        display_name=display_name,
        avatar_url=avatar_url,
        access_token=access_token,
        access_secret=access_secret,
    )


def make_user(
    user_id: str = "local-1",
    email: Optional[str] = None,
    display_name: Optional[str] = None,
    photo_url: Optional[str] = None,
) -> LocalUser:
    """Helper function to build a local user for tests."""
    return LocalUser(
        id=LocalUserId(user_id),
        email=email,
        display_name=display_name,
        photo_url=photo_url,
    )
