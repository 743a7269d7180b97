"""Question aggregate root."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from qna.domain.model.common import DomainModel
from qna.domain.value import QuestionId


class Question(DomainModel):
    """Question aggregate root.

    The id is assigned by storage on insertion, so unsaved questions carry
    ``id=None``. A question holds no vote count; totals are derived from the
    vote ledger.
    """

    id: Optional[QuestionId] = None
    title: str = Field(min_length=1)
    description: str = Field(min_length=1)
    category: str = Field(min_length=1)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
