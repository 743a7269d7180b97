"""Read models returned by use cases.

Field names match the JSON the API returns for questions and answers.
"""

from datetime import datetime

from pydantic import BaseModel

from qna.domain.model import Answer, Question, TalliedAnswer, TalliedQuestion


class QuestionView(BaseModel):
    """Question as returned to clients."""

    id: int
    title: str
    description: str
    category: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_domain(cls, question: Question) -> "QuestionView":
        return cls(
            id=question.id,
            title=question.title,
            description=question.description,
            category=question.category,
            created_at=question.created_at,
            updated_at=question.updated_at,
        )


class AnswerView(BaseModel):
    """Answer as returned to clients."""

    id: int
    question_id: int
    content: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_domain(cls, answer: Answer) -> "AnswerView":
        return cls(
            id=answer.id,
            question_id=answer.question_id,
            content=answer.content,
            created_at=answer.created_at,
            updated_at=answer.updated_at,
        )


class QuestionVoteView(QuestionView):
    """Question fields merged with freshly computed vote totals."""

    upvote: int
    downvote: int

    @classmethod
    def from_tallied(cls, tallied: TalliedQuestion) -> "QuestionVoteView":
        return cls(
            **QuestionView.from_domain(tallied.question).model_dump(),
            upvote=tallied.tally.upvotes,
            downvote=tallied.tally.downvotes,
        )


class AnswerVoteView(AnswerView):
    """Answer fields merged with freshly computed vote totals."""

    upvote: int
    downvote: int

    @classmethod
    def from_tallied(cls, tallied: TalliedAnswer) -> "AnswerVoteView":
        return cls(
            **AnswerView.from_domain(tallied.answer).model_dump(),
            upvote=tallied.tally.upvotes,
            downvote=tallied.tally.downvotes,
        )
