"""Social login use cases."""

from .begin_twitter_login import (
    BeginTwitterLoginRequest,
    BeginTwitterLoginResponse,
    BeginTwitterLoginUseCase,
)
from .social_login import SocialLoginRequest, SocialLoginUseCase

__all__ = [
    "BeginTwitterLoginRequest",
    "BeginTwitterLoginResponse",
    "BeginTwitterLoginUseCase",
    "SocialLoginRequest",
    "SocialLoginUseCase",
]
