"""Unit tests for sign-in token utilities."""

from datetime import timedelta

import pytest

from federate.config import AuthSettings
from federate.util.jwt import JWTError, create_sign_in_token, verify_sign_in_token

SECRET = "unit-test-secret-with-enough-bytes-for-hs256"


class TestSignInToken:
    """Tests for create_sign_in_token() and verify_sign_in_token()."""

    def test_round_trip_carries_user_id(self):
        """Should encode the local user id and issuer."""
        # Arrange
        settings = AuthSettings(jwt_secret=SECRET)

        # Act
        payload = verify_sign_in_token(
            create_sign_in_token("googleUserId::42", settings), settings
        )

        # Assert
        assert payload.uid == "googleUserId::42"
        assert payload.iss == "federate"
        assert payload.exp - payload.iat == timedelta(minutes=60)

    def test_wrong_secret_is_rejected(self):
        """Should reject tokens signed with another secret."""
        token = create_sign_in_token("u1", AuthSettings(jwt_secret=SECRET))

        with pytest.raises(JWTError):
            verify_sign_in_token(token, AuthSettings(jwt_secret=SECRET[::-1]))

    def test_wrong_issuer_is_rejected(self):
        """Should reject tokens from another issuer."""
        token = create_sign_in_token(
            "u1", AuthSettings(jwt_secret=SECRET, jwt_issuer="elsewhere")
        )

        with pytest.raises(JWTError):
            verify_sign_in_token(token, AuthSettings(jwt_secret=SECRET))

    def test_expired_token_is_rejected(self):
        """Should reject tokens past their expiry."""
        settings = AuthSettings(jwt_secret=SECRET, sign_in_token_expiry_minutes=-1)
        token = create_sign_in_token("u1", settings)

        with pytest.raises(JWTError, match="expired"):
            verify_sign_in_token(token, settings)
