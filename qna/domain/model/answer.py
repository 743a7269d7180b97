"""Answer entity."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from qna.domain.model.common import DomainModel
from qna.domain.value import AnswerId, QuestionId

ANSWER_MAX_LENGTH = 300


class Answer(DomainModel):
    """Answer to a question.

    Content is limited to 300 characters (300 is accepted, 301 is not).
    """

    id: Optional[AnswerId] = None
    question_id: QuestionId
    content: str = Field(min_length=1, max_length=ANSWER_MAX_LENGTH)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
