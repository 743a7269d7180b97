"""Base class for value objects."""

from pydantic import BaseModel, ConfigDict


class ValueObject(BaseModel):
    """Immutable value compared by its fields, such as a vote tally."""

    model_config = ConfigDict(frozen=True, extra="forbid")
