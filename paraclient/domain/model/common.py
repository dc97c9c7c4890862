"""Base models for client-side entities."""

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Base class for mutable client-side models.

    Unlike value objects these are updated in place: objects are edited before
    an update call and pagers receive result metadata from search calls.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        arbitrary_types_allowed=True,
    )
