"""In-memory answer repository for testing."""

from typing import Optional

from qna.domain.model import Answer
from qna.domain.repository import AnswerRepository
from qna.domain.value import AnswerId, QuestionId

from .database import InMemoryDatabase


class InMemoryAnswerRepository(AnswerRepository):
    """In-memory implementation of AnswerRepository for testing."""

    def __init__(self, db: InMemoryDatabase) -> None:
        self._db = db

    async def find_by_id(self, answer_id: AnswerId) -> Optional[Answer]:
        """Find an answer by ID."""
        return self._db.answers.get(answer_id)

    async def exists(self, answer_id: AnswerId) -> bool:
        """Check whether an answer exists."""
        return answer_id in self._db.answers

    async def find_by_question(self, question_id: QuestionId) -> list[Answer]:
        """Find all answers to a question."""
        return sorted(
            (a for a in self._db.answers.values() if a.question_id == question_id),
            key=lambda a: a.id,
        )

    async def save(self, answer: Answer) -> Answer:
        """Insert a new answer with the next ID."""
        saved = answer.model_copy(update={"id": AnswerId(next(self._db.answer_ids))})
        self._db.answers[saved.id] = saved
        return saved
