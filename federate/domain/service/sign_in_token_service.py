"""Sign-in token domain service."""

import logfire

from federate.config import AuthSettings
from federate.util.jwt import (
    SignInTokenPayload,
    create_sign_in_token,
    verify_sign_in_token,
)

from .base import Service


class SignInTokenService(Service):
    """Domain service issuing one-time sign-in tokens for local users."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize sign-in token service.

        Args:
            auth_settings: Authentication settings
        """
        self.auth_settings = auth_settings

    def issue(self, local_user_id: str) -> str:
        """Issue a sign-in token for a local user.

        Args:
            local_user_id: Local user ID

        Returns:
            JWT token string
        """
        with logfire.span("sign_in_token_service.issue", local_user_id=local_user_id):
            token = create_sign_in_token(local_user_id, self.auth_settings)
            logfire.info("Sign-in token issued", local_user_id=local_user_id)
            return token

    def verify(self, token: str) -> SignInTokenPayload:
        """Verify a sign-in token and extract its payload.

        Args:
            token: JWT token string

        Returns:
            Token payload

        Raises:
            JWTError: If token is invalid or expired
        """
        with logfire.span("sign_in_token_service.verify"):
            try:
                return verify_sign_in_token(token, self.auth_settings)
            except Exception as e:
                logfire.error("Sign-in token verification failed", error=str(e))
                raise
