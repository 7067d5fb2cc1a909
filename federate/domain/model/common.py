"""Base model for federation entities and outcomes."""

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Base class for identity records, local users and resolution outcomes.

    Entities are replaced, never mutated: updates go through ``model_copy``.
    """

    model_config = ConfigDict(
        frozen=True,
        arbitrary_types_allowed=True,  # Allow NewType ids and value objects
    )
