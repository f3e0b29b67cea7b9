"""Base model for domain entities."""

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Immutable entity loaded from storage.

    Entities are never rewritten in place; presentation builds new values
    from them.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)
