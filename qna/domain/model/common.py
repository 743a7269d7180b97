"""Base model for domain entities."""

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Base class for questions, answers and votes.

    Entities are frozen; changes go through ``model_copy(update=...)``, which
    is also how repositories attach storage-assigned IDs.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")
