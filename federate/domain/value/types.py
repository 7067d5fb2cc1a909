"""Domain value objects for social identity federation.

Value objects are immutable and defined by their values, not identity.
"""

from enum import Enum

from pydantic import field_validator

from federate.domain.value.common import ValueObject


class AuthProvider(str, Enum):
    """Supported social login providers."""

    FACEBOOK = "facebook"
    GOOGLE = "google"
    INSTAGRAM = "instagram"
    TWITTER = "twitter"


class ExternalProfile(ValueObject):
    """Verified profile returned by a provider after a successful exchange.

    Produced fresh for every request and never persisted as-is.
    """

    provider: AuthProvider
    external_id: str  # Permanent id on the provider
    email: str | None = None
    display_name: str | None = None
    avatar_url: str | None = None
    access_token: str
    access_secret: str | None = None  # OAuth1 (Twitter) only

    @field_validator("external_id", "access_token")
    @classmethod
    def validate_not_empty(cls, v: str) -> str:
        """Reject empty ids and tokens."""
        if not v:
            raise ValueError("must not be empty")
        return v


class AuthorizationCode(ValueObject):
    """OAuth 2.0 authorization code grant."""

    code: str


class TwitterVerifier(ValueObject):
    """OAuth 1.0a verifier grant.

    Combines the values Twitter sent to the callback with the request secret
    persisted when the handshake started.
    """

    oauth_token: str
    oauth_verifier: str
    request_secret: str


ProviderGrant = AuthorizationCode | TwitterVerifier


class TwitterRequestToken(ValueObject):
    """Temporary OAuth 1.0a request token issued at the start of a handshake."""

    oauth_token: str
    oauth_token_secret: str
    authorization_url: str
