"""Identity resolution domain service."""

from typing import Optional

import logfire

from federate.domain.error import InternalError, LinkTargetNotFoundError
from federate.domain.model.local_user import LocalUser, LocalUserPatch
from federate.domain.model.outcome import (
    AlreadyLinkedElsewhere,
    EmailCollision,
    Linked,
    ResolutionOutcome,
    SignedIn,
)
from federate.domain.model.provider_identity import ProviderIdentity
from federate.domain.value import ExternalProfile, LocalUserId, synthetic_local_user_id

from .base import Service
from .identity_service import IdentityService
from .local_user_service import LocalUserService
from .sign_in_token_service import SignInTokenService


class IdentityResolutionService(Service):
    """Resolves a verified external profile against the local user directory.

    Decides between signing in, creating an account, linking to the
    authenticated user, or reporting a conflict, and performs the writes the
    decision implies. Conflicts never write anything.
    """

    def __init__(
        self,
        identity_service: IdentityService,
        local_user_service: LocalUserService,
        sign_in_token_service: SignInTokenService,
    ) -> None:
        """Initialize identity resolution service.

        Args:
            identity_service: Provider identity service
            local_user_service: Local user directory service
            sign_in_token_service: Sign-in token issuer
        """
        self.identity_service = identity_service
        self.local_user_service = local_user_service
        self.sign_in_token_service = sign_in_token_service

    async def resolve(
        self,
        profile: ExternalProfile,
        linking_user_id: Optional[LocalUserId] = None,
    ) -> ResolutionOutcome:
        """Resolve an external profile to a local user.

        Args:
            profile: Profile verified by the provider
            linking_user_id: Authenticated local user to link the profile to

        Returns:
            SignedIn, Linked, AlreadyLinkedElsewhere or EmailCollision

        Raises:
            LinkTargetNotFoundError: If linking against an unknown local user
            InternalError: If persisting the resolution fails
        """
        linking = linking_user_id is not None
        with logfire.span(
            "identity_resolution_service.resolve",
            provider=profile.provider.value,
            external_id=profile.external_id,
            linking=linking,
        ):
            linking_user: Optional[LocalUser] = None
            if linking_user_id is not None:
                linking_user = await self.local_user_service.get_by_id(linking_user_id)
                if linking_user is None:
                    logfire.warn("Link target not found", local_user_id=linking_user_id)
                    raise LinkTargetNotFoundError(linking_user_id)

            existing = await self.identity_service.get_identity(
                profile.provider, profile.external_id
            )

            if linking_user_id is not None:
                if existing:
                    logfire.info(
                        "External account already linked",
                        provider=profile.provider.value,
                        external_id=profile.external_id,
                        local_user_id=existing.local_user_id,
                    )
                    return AlreadyLinkedElsewhere()
                local_user_id = linking_user_id
            elif existing:
                local_user_id = existing.local_user_id
            else:
                if profile.email:
                    collision = await self._find_email_collision(profile, profile.email)
                    if collision:
                        return collision
                local_user_id = synthetic_local_user_id(
                    profile.provider, profile.external_id
                )

            fresh_account = not linking and existing is None
            try:
                await self.identity_service.save(
                    ProviderIdentity(
                        provider=profile.provider,
                        external_id=profile.external_id,
                        access_token=profile.access_token,
                        access_secret=profile.access_secret,
                        local_user_id=local_user_id,
                    )
                )
                await self._reconcile_local_user(
                    local_user_id, profile, linking_user, fresh_account
                )

                if linking:
                    logfire.info(
                        "External account linked",
                        provider=profile.provider.value,
                        local_user_id=local_user_id,
                    )
                    return Linked(local_user_id=local_user_id)

                token = self.sign_in_token_service.issue(local_user_id)
                logfire.info(
                    "External account signed in",
                    provider=profile.provider.value,
                    local_user_id=local_user_id,
                    created=fresh_account,
                )
                return SignedIn(local_user_id=local_user_id, token=token)
            except Exception as e:
                logfire.error(
                    "Persisting resolution failed",
                    provider=profile.provider.value,
                    local_user_id=local_user_id,
                    error=str(e),
                )
                raise InternalError("Failed to persist identity resolution") from e

    async def _find_email_collision(
        self, profile: ExternalProfile, email: str
    ) -> Optional[EmailCollision]:
        colliding_user = await self.local_user_service.get_by_email(email)
        if colliding_user is None:
            return None

        providers = await self.identity_service.get_linked_providers(colliding_user.id)
        logfire.info(
            "Email already belongs to a local user",
            provider=profile.provider.value,
            local_user_id=colliding_user.id,
            linked_providers=[p.value for p in providers],
        )
        return EmailCollision(
            email=email,
            social_providers=providers,
            social_user=profile,
        )

    async def _reconcile_local_user(
        self,
        local_user_id: LocalUserId,
        profile: ExternalProfile,
        linking_user: Optional[LocalUser],
        fresh_account: bool,
    ) -> None:
        """Fill empty local user fields from the profile.

        Existing values are never overwritten. Email is only taken from the
        profile when the account is created by this resolution.
        """
        user = linking_user
        if user is None:
            user = await self.local_user_service.get_by_id(local_user_id)

        patch = LocalUserPatch(
            display_name=(
                profile.display_name if not (user and user.display_name) else None
            ),
            photo_url=profile.avatar_url if not (user and user.photo_url) else None,
            email=(
                profile.email
                if fresh_account and not (user and user.email)
                else None
            ),
        )

        if user is None:
            await self.local_user_service.create(local_user_id, patch)
        elif not patch.is_empty():
            await self.local_user_service.update(local_user_id, patch)
