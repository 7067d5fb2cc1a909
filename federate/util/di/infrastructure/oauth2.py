"""OAuth 2.0 provider client infrastructure providers."""

from dishka import Scope, provide

from federate.adapter.facebook import FacebookOAuthClient, RealFacebookOAuthClient
from federate.adapter.google import GoogleOAuthClient, RealGoogleOAuthClient
from federate.adapter.instagram import InstagramOAuthClient, RealInstagramOAuthClient
from federate.config import SocialSettings
from federate.util.di.base import ProviderBase


class OAuth2Provider(ProviderBase):
    """OAuth 2.0 clients component base (Facebook, Google, Instagram)."""

    __mock_component__ = "oauth2"


class ProdOAuth2Provider(OAuth2Provider):
    """Production OAuth 2.0 clients talking to the real provider APIs."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_facebook_oauth_client(self, social: SocialSettings) -> FacebookOAuthClient:
        """Provide Facebook OAuth client."""
        return RealFacebookOAuthClient(
            settings=social.facebook,
            redirect_uri=social.redirect_url,
            grant_type=social.grant_type,
            timeout=social.http_timeout,
        )

    @provide(scope=Scope.APP)
    def get_google_oauth_client(self, social: SocialSettings) -> GoogleOAuthClient:
        """Provide Google OAuth client."""
        return RealGoogleOAuthClient(
            settings=social.google,
            redirect_uri=social.redirect_url,
            grant_type=social.grant_type,
            timeout=social.http_timeout,
        )

    @provide(scope=Scope.APP)
    def get_instagram_oauth_client(
        self, social: SocialSettings
    ) -> InstagramOAuthClient:
        """Provide Instagram OAuth client."""
        return RealInstagramOAuthClient(
            settings=social.instagram,
            redirect_uri=social.redirect_url,
            grant_type=social.grant_type,
            timeout=social.http_timeout,
        )
