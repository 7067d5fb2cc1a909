"""Provider dispatch table for multi-provider social login."""

from dishka import Scope, provide

from federate.adapter.facebook import FacebookOAuthClient
from federate.adapter.google import GoogleOAuthClient
from federate.adapter.instagram import InstagramOAuthClient
from federate.adapter.twitter import TwitterOAuthClient
from federate.domain.service import ProviderClient
from federate.domain.value import AuthProvider
from federate.util.di.base import ProviderBase


class OAuthAggregatorProvider(ProviderBase):
    """Provider that aggregates all provider clients into a dictionary."""

    scope = Scope.APP

    @provide(scope=Scope.APP)
    def get_provider_clients(
        self,
        facebook_oauth_client: FacebookOAuthClient,
        google_oauth_client: GoogleOAuthClient,
        instagram_oauth_client: InstagramOAuthClient,
        twitter_oauth_client: TwitterOAuthClient,
    ) -> dict[AuthProvider, ProviderClient]:
        """Provide dictionary of all provider clients by provider.

        Returns:
            Dictionary mapping AuthProvider to ProviderClient
        """
        return {
            AuthProvider.FACEBOOK: facebook_oauth_client,
            AuthProvider.GOOGLE: google_oauth_client,
            AuthProvider.INSTAGRAM: instagram_oauth_client,
            AuthProvider.TWITTER: twitter_oauth_client,
        }
