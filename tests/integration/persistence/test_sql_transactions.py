"""Integration tests for resolutions spanning several SQL transactions."""

import pytest

from federate.adapter.twitter import MockTwitterOAuthClient
from federate.application.usecase.social_login import (
    SocialLoginRequest,
    SocialLoginUseCase,
)
from federate.config import AuthSettings
from federate.domain.error import InternalError
from federate.domain.model import SignedIn
from federate.domain.service import (
    IdentityResolutionService,
    IdentityService,
    LocalUserService,
    ProviderService,
    SignInTokenService,
)
from federate.domain.value import AuthProvider, ClientId, LocalUserId
from federate.persistence.repository import (
    SqlLocalUserRepository,
    TreeIdentityRepository,
    TreeTwitterHandshakeRepository,
)
from federate.persistence.tree import CommittingSqlTree, SqlTree
from tests.conftest import make_profile

SECRET_PATH = "/twitterRequestTokenSecrets/client-1"
TWITTER_CODE = '{"oauth_token": "request-token", "oauth_verifier": "dana"}'


class FailingLocalUserRepository(SqlLocalUserRepository):
    """Local user repository whose writes always fail."""

    async def save(self, user):
        raise RuntimeError("duplicate key value violates unique constraint")


class StaleIdentityRepository(TreeIdentityRepository):
    """Identity repository that cannot see identities committed by others."""

    async def find_by_provider(self, provider, external_id):
        return None


class StaleLocalUserRepository(SqlLocalUserRepository):
    """Local user repository that cannot see users committed by others."""

    async def find_by_id(self, user_id):
        return None

    async def find_by_email(self, email):
        return None


def _resolution_service(identity_repository, local_user_repository):
    return IdentityResolutionService(
        identity_service=IdentityService(identity_repository),
        local_user_service=LocalUserService(local_user_repository),
        sign_in_token_service=SignInTokenService(auth_settings=AuthSettings()),
    )


class TestTwitterSecretLifetime:
    """Tests for the pending secret across request transactions."""

    @pytest.mark.asyncio
    async def test_consumed_secret_stays_deleted_after_rollback(
        self, session_factory
    ):
        """Should keep the secret deleted when the request transaction rolls back."""
        # Arrange
        handshakes = TreeTwitterHandshakeRepository(CommittingSqlTree(session_factory))
        await handshakes.save_request_secret(ClientId("client-1"), "request-secret")

        # Act
        async with session_factory() as request_session:
            use_case = SocialLoginUseCase(
                provider_service=ProviderService(
                    provider_clients={AuthProvider.TWITTER: MockTwitterOAuthClient()}
                ),
                local_user_service=LocalUserService(
                    SqlLocalUserRepository(request_session)
                ),
                identity_resolution_service=_resolution_service(
                    TreeIdentityRepository(SqlTree(request_session)),
                    FailingLocalUserRepository(request_session),
                ),
                twitter_handshake_repository=handshakes,
            )
            with pytest.raises(InternalError):
                await use_case.execute(
                    SocialLoginRequest(
                        provider=AuthProvider.TWITTER,
                        code=TWITTER_CODE,
                        client_id="client-1",
                    )
                )
            await request_session.rollback()

        # Assert
        async with session_factory() as session:
            tree = SqlTree(session)
            assert await tree.get(SECRET_PATH) is None
            assert await tree.get("/socialIdentities/twitter/tw-dana") is None

    @pytest.mark.asyncio
    async def test_saved_secret_is_committed(self, session_factory):
        """Should make a stored secret visible to other sessions at once."""
        # Arrange
        handshakes = TreeTwitterHandshakeRepository(CommittingSqlTree(session_factory))

        # Act
        await handshakes.save_request_secret(ClientId("client-1"), "request-secret")

        # Assert
        async with session_factory() as session:
            assert await SqlTree(session).get(SECRET_PATH) == "request-secret"


class TestOverlappingFirstSignIn:
    """Tests for two first sign-ins of one external account."""

    @pytest.mark.asyncio
    async def test_overlapping_sign_ins_converge(self, session_factory):
        """Should let the later writer win instead of failing on existing rows."""
        # Arrange
        first_profile = make_profile(external_id="42", access_token="first-token")
        second_profile = make_profile(external_id="42", access_token="second-token")

        # Act
        async with session_factory() as first_session:
            first = await _resolution_service(
                TreeIdentityRepository(SqlTree(first_session)),
                SqlLocalUserRepository(first_session),
            ).resolve(first_profile)
            await first_session.commit()

        async with session_factory() as second_session:
            second = await _resolution_service(
                StaleIdentityRepository(SqlTree(second_session)),
                StaleLocalUserRepository(second_session),
            ).resolve(second_profile)
            await second_session.commit()

        # Assert
        assert isinstance(first, SignedIn)
        assert isinstance(second, SignedIn)
        assert first.local_user_id == second.local_user_id == "googleUserId::42"

        async with session_factory() as session:
            tree = SqlTree(session)
            record = await tree.get("/socialIdentities/google/42")
            assert record["accessToken"] == "second-token"
            assert await tree.children("/userSocialIdentities/googleUserId::42") == {
                "google": {"userId": "42"}
            }
            user = await SqlLocalUserRepository(session).find_by_id(
                LocalUserId("googleUserId::42")
            )
            assert user.email == "alice@example.com"
