"""Mappers for converting between stored records and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
for both SQL rows and tree values.
"""

from typing import Any, Dict, Optional

from federate.domain.model import LocalUser, ProviderIdentity
from federate.domain.value import AuthProvider, LocalUserId


def row_to_local_user(row: Dict[str, Any]) -> LocalUser:
    """Convert database row to LocalUser domain model.

    Args:
        row: Database row as dict

    Returns:
        LocalUser domain model
    """
    return LocalUser(
        id=LocalUserId(row["id"]),
        email=row.get("email"),
        display_name=row.get("display_name"),
        photo_url=row.get("photo_url"),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def local_user_to_dict(user: LocalUser) -> Dict[str, Any]:
    """Convert LocalUser domain model to database dict.

    Args:
        user: LocalUser domain model

    Returns:
        Dict suitable for database insertion/update
    """
    return user.model_dump()


def identity_to_record(identity: ProviderIdentity) -> Dict[str, Any]:
    """Convert ProviderIdentity to its stored record.

    The record keeps the ``firebaseUserId`` key so data written by earlier
    deployments stays readable.
    """
    record: Dict[str, Any] = {
        "accessToken": identity.access_token,
        "firebaseUserId": identity.local_user_id,
    }
    if identity.access_secret:
        record["accessSecret"] = identity.access_secret
    return record


def record_to_identity(
    provider: AuthProvider, external_id: str, record: Any
) -> Optional[ProviderIdentity]:
    """Convert a stored identity record to ProviderIdentity.

    Args:
        provider: Provider from the record's path
        external_id: External id from the record's path
        record: Stored value

    Returns:
        ProviderIdentity, or None if the record is not a usable identity
    """
    if not isinstance(record, dict) or not record.get("firebaseUserId"):
        return None
    return ProviderIdentity(
        provider=provider,
        external_id=external_id,
        access_token=record.get("accessToken") or "",
        access_secret=record.get("accessSecret"),
        local_user_id=LocalUserId(record["firebaseUserId"]),
    )


def identity_to_index_record(identity: ProviderIdentity) -> Dict[str, Any]:
    """Convert ProviderIdentity to its inverse index record."""
    return {"userId": identity.external_id}
