"""Social login routes.

Both endpoints accept any HTTP method and read their parameters from the
query string. Every outcome, including failures, is a 200 response whose
JSON body tells the caller what happened; the only exception is the start
of a Twitter handshake, which redirects.
"""

import logging
from typing import Optional

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter
from fastapi.responses import JSONResponse, RedirectResponse, Response
from pydantic import BaseModel

from federate.adapter.error import ProviderError
from federate.application.usecase.social_login import (
    BeginTwitterLoginRequest,
    BeginTwitterLoginUseCase,
    SocialLoginRequest,
    SocialLoginUseCase,
)
from federate.config import Settings
from federate.domain.error import DomainError, InternalError
from federate.domain.model import (
    AlreadyLinkedElsewhere,
    EmailCollision,
    Linked,
    ResolutionOutcome,
    SignedIn,
)
from federate.domain.value import AuthProvider

logger = logging.getLogger(__name__)

router = APIRouter(tags=["social-login"], route_class=DishkaRoute)

ANY_METHOD = ["GET", "POST", "PUT", "PATCH", "DELETE"]

SUPPORTED_PROVIDERS = {p.value for p in AuthProvider}


class TokenResponse(BaseModel):
    """Signed in; the token is exchanged for a session by the client."""

    token: str


class LinkedResponse(BaseModel):
    """Provider account linked to the signed-in user."""

    islinked: bool = True


class SocialUserAlreadyExistsResponse(BaseModel):
    """Provider account already belongs to another user."""

    socialUserAlreadyExists: bool = True


class SocialUser(BaseModel):
    """Fresh provider credentials, returned so the caller can link later."""

    provider: AuthProvider
    id: str
    accessToken: str
    accessSecret: Optional[str] = None


class EmailAlreadyExistsResponse(BaseModel):
    """Profile email belongs to an existing user."""

    emailAlreadyExists: bool = True
    email: str
    socialProviders: list[AuthProvider]
    socialUser: SocialUser


class MessageResponse(BaseModel):
    """Failure with a message supplied by the provider."""

    message: str


class ErrorResponse(BaseModel):
    """Generic failure."""

    error: bool = True


def _json(body: BaseModel) -> JSONResponse:
    return JSONResponse(
        status_code=200, content=body.model_dump(mode="json", exclude_none=True)
    )


def render_outcome(outcome: ResolutionOutcome) -> BaseModel:
    """Map a resolution outcome to its response body."""
    if isinstance(outcome, SignedIn):
        return TokenResponse(token=outcome.token)
    if isinstance(outcome, Linked):
        return LinkedResponse()
    if isinstance(outcome, AlreadyLinkedElsewhere):
        return SocialUserAlreadyExistsResponse()
    if isinstance(outcome, EmailCollision):
        return EmailAlreadyExistsResponse(
            email=outcome.email,
            socialProviders=outcome.social_providers,
            socialUser=SocialUser(
                provider=outcome.social_user.provider,
                id=outcome.social_user.external_id,
                accessToken=outcome.social_user.access_token,
                accessSecret=outcome.social_user.access_secret,
            ),
        )
    raise TypeError(f"Unknown resolution outcome: {outcome!r}")


async def _run_social_login(
    use_case: SocialLoginUseCase,
    provider: str,
    code: str,
    uid: Optional[str],
    client_id: Optional[str],
) -> JSONResponse:
    try:
        request = SocialLoginRequest(
            provider=AuthProvider(provider),
            code=code,
            uid=uid or None,
            client_id=client_id or None,
        )
        outcome = await use_case.execute(request)
        return _json(render_outcome(outcome))
    except ProviderError as e:
        logger.warning(f"{provider} exchange failed (transient={e.transient}): {e}")
        if e.message:
            return _json(MessageResponse(message=e.message))
        return _json(ErrorResponse())
    except InternalError:
        logger.exception(f"Persisting {provider} login failed")
        return _json(ErrorResponse())
    except DomainError as e:
        logger.info(f"{provider} login rejected: {e}")
        return _json(ErrorResponse())
    except Exception:
        logger.exception(f"Unexpected failure during {provider} login")
        return _json(ErrorResponse())


@router.api_route("/handleSocialLogin", methods=ANY_METHOD)
async def handle_social_login(
    begin_twitter_login: FromDishka[BeginTwitterLoginUseCase],
    social_login: FromDishka[SocialLoginUseCase],
    settings: FromDishka[Settings],
    client_id: Optional[str] = None,
    redirect_uri: Optional[str] = None,
    provider: Optional[str] = None,
    code: Optional[str] = None,
    uid: Optional[str] = None,
) -> Response:
    """Sign in, sign up or link with a social provider.

    Dispatch:
        - ``client_id`` and ``redirect_uri`` equal to the configured redirect,
          without ``provider``: start a Twitter handshake and redirect to
          Twitter (or back to the redirect URL if that fails)
        - ``provider`` and ``code``: exchange the grant and resolve the
          profile; ``uid`` links the account to that user instead
        - anything else: ``{"error": true}``

    Examples:
        GET /handleSocialLogin?provider=google&code=4/0Ad...
        {"token": "eyJ..."}

        GET /handleSocialLogin?provider=facebook&code=AQB...&uid=googleUserId::42
        {"islinked": true}
    """
    if client_id and redirect_uri == settings.social.redirect_url and not provider:
        try:
            response = await begin_twitter_login.execute(
                BeginTwitterLoginRequest(client_id=client_id)
            )
            return RedirectResponse(response.authorization_url, status_code=302)
        except Exception:
            logger.warning("Twitter handshake could not be started", exc_info=True)
            return RedirectResponse(settings.social.redirect_url, status_code=302)

    if provider in SUPPORTED_PROVIDERS and code:
        return await _run_social_login(social_login, provider, code, uid, client_id)

    logger.info("Social login request with unrecognized parameters")
    return _json(ErrorResponse())


@router.api_route("/handleInstagramLogin", methods=ANY_METHOD)
async def handle_instagram_login(
    social_login: FromDishka[SocialLoginUseCase],
    code: Optional[str] = None,
    uid: Optional[str] = None,
) -> Response:
    """Sign in, sign up or link with Instagram.

    Same as ``/handleSocialLogin?provider=instagram``.
    """
    if not code:
        logger.info("Instagram login request without code")
        return _json(ErrorResponse())

    return await _run_social_login(
        social_login, AuthProvider.INSTAGRAM.value, code, uid, None
    )
