"""Vote entity.

A vote is an immutable, append-only event tied to exactly one question or
answer. Totals are never stored: they are recomputed from every vote event
of the target each time a vote is cast.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field, model_validator

from qna.domain.model.answer import Answer
from qna.domain.model.common import DomainModel
from qna.domain.model.question import Question
from qna.domain.value import VoteDirection, VoteId, VoteTally, VoteTarget


class Vote(DomainModel):
    """Vote event.

    Business rules:
    - Never updated or deleted once written
    - No deduplication by voter; every accepted event counts
    - ``updated_at`` is set once and equals ``created_at``
    - Polymorphic reference to the target (question or answer), no ownership
    """

    id: Optional[VoteId] = None
    target_type: VoteTarget
    target_id: int  # QuestionId or AnswerId
    direction: VoteDirection
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: Optional[datetime] = None

    @model_validator(mode="after")
    def stamp_updated_at(self) -> "Vote":
        """Default the update timestamp to the creation timestamp."""
        if self.updated_at is None:
            object.__setattr__(self, "updated_at", self.created_at)
        return self


class TalliedQuestion(DomainModel):
    """A question together with its freshly computed vote totals."""

    question: Question
    tally: VoteTally


class TalliedAnswer(DomainModel):
    """An answer together with its freshly computed vote totals."""

    answer: Answer
    tally: VoteTally
