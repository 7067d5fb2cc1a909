"""Twitter infrastructure providers."""

from dishka import Scope, provide

from federate.adapter.twitter.client import (
    RealTwitterOAuthClient,
    TwitterOAuthClient,
)
from federate.config import SocialSettings
from federate.util.di.base import ProviderBase


class TwitterProvider(ProviderBase):
    """Twitter component base."""

    __mock_component__ = "twitter"


class ProdTwitterProvider(TwitterProvider):
    """Production Twitter provider."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_twitter_oauth_client(self, social: SocialSettings) -> TwitterOAuthClient:
        """Provide Twitter OAuth client.

        Returns:
            Twitter OAuth 1.0a client

        Raises:
            ValueError: If Twitter consumer credentials are not configured
        """
        if not social.twitter.consumer_key:
            raise ValueError("Twitter consumer key must be configured")
        if not social.twitter.consumer_secret:
            raise ValueError("Twitter consumer secret must be configured")

        return RealTwitterOAuthClient(
            settings=social.twitter,
            redirect_uri=social.redirect_url,
            timeout=social.http_timeout,
        )
