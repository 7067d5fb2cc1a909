"""Mock OAuth 2.0 providers for testing."""

from dishka import Scope, provide

from federate.adapter.facebook import FacebookOAuthClient, MockFacebookOAuthClient
from federate.adapter.google import GoogleOAuthClient, MockGoogleOAuthClient
from federate.adapter.instagram import InstagramOAuthClient, MockInstagramOAuthClient
from federate.util.di.infrastructure.oauth2 import OAuth2Provider


class MockOAuth2Provider(OAuth2Provider):
    """Mock OAuth 2.0 provider using mock clients."""

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_facebook_oauth_client(self) -> FacebookOAuthClient:
        """Provide mock Facebook OAuth client."""
        return MockFacebookOAuthClient()

    @provide(scope=Scope.APP)
    def get_google_oauth_client(self) -> GoogleOAuthClient:
        """Provide mock Google OAuth client."""
        return MockGoogleOAuthClient()

    @provide(scope=Scope.APP)
    def get_instagram_oauth_client(self) -> InstagramOAuthClient:
        """Provide mock Instagram OAuth client."""
        return MockInstagramOAuthClient()
