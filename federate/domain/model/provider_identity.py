"""Provider identity entity.

Links an external provider account to a local user.
"""

from typing import Optional

from federate.domain.model.common import DomainModel
from federate.domain.value import AuthProvider, LocalUserId


class ProviderIdentity(DomainModel):
    """External provider account linked to a local user.

    (provider, external_id) is the natural key. Records are created on the
    first successful login or link, refreshed with new credentials on later
    logins, and never deleted.
    """

    provider: AuthProvider
    external_id: str
    access_token: str
    access_secret: Optional[str] = None  # OAuth1 (Twitter) only
    local_user_id: LocalUserId
