"""Sign-in token utilities."""

from datetime import datetime, timedelta, timezone

import jwt
from pydantic import BaseModel

from federate.config import AuthSettings


class SignInTokenPayload(BaseModel):
    """Sign-in token payload."""

    uid: str
    iss: str
    iat: datetime
    exp: datetime


class JWTError(Exception):
    """JWT-related error."""

    pass


def create_sign_in_token(local_user_id: str, settings: AuthSettings) -> str:
    """Create a sign-in token for a local user.

    Args:
        local_user_id: Local user ID
        settings: Authentication settings

    Returns:
        Encoded JWT token
    """
    issued_at = datetime.now(timezone.utc)
    expiry = issued_at + timedelta(minutes=settings.sign_in_token_expiry_minutes)

    payload = {
        "uid": local_user_id,
        "iss": settings.jwt_issuer,
        "iat": issued_at,
        "exp": expiry,
    }

    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_sign_in_token(token: str, settings: AuthSettings) -> SignInTokenPayload:
    """Verify and decode a sign-in token.

    Args:
        token: JWT token to verify
        settings: Authentication settings

    Returns:
        Token payload if valid

    Raises:
        JWTError: If token is invalid or expired
    """
    try:
        payload = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            issuer=settings.jwt_issuer,
        )
        return SignInTokenPayload(**payload)
    except jwt.ExpiredSignatureError:
        raise JWTError("Token has expired")
    except jwt.InvalidTokenError:
        raise JWTError("Invalid token")
