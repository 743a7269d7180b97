"""In-memory question repository for testing."""

from typing import Optional

from qna.domain.model import Question
from qna.domain.repository import QuestionRepository
from qna.domain.value import QuestionId

from .database import InMemoryDatabase


class InMemoryQuestionRepository(QuestionRepository):
    """In-memory implementation of QuestionRepository for testing."""

    def __init__(self, db: InMemoryDatabase) -> None:
        self._db = db

    async def find_by_id(self, question_id: QuestionId) -> Optional[Question]:
        """Find a question by ID."""
        return self._db.questions.get(question_id)

    async def exists(self, question_id: QuestionId) -> bool:
        """Check whether a question exists."""
        return question_id in self._db.questions

    async def find_all(
        self,
        title: Optional[str] = None,
        category: Optional[str] = None,
    ) -> list[Question]:
        """Find questions matching exact title and/or category."""
        questions = sorted(self._db.questions.values(), key=lambda q: q.id)
        if title:
            questions = [q for q in questions if q.title == title]
        if category:
            questions = [q for q in questions if q.category == category]
        return questions

    async def save(self, question: Question) -> Question:
        """Insert a new question with the next ID."""
        saved = question.model_copy(
            update={"id": QuestionId(next(self._db.question_ids))}
        )
        self._db.questions[saved.id] = saved
        return saved

    async def update(self, question: Question) -> Optional[Question]:
        """Overwrite an existing question."""
        if question.id not in self._db.questions:
            return None
        self._db.questions[question.id] = question
        return question

    async def delete(self, question_id: QuestionId) -> bool:
        """Delete a question and cascade to its answers."""
        if self._db.questions.pop(question_id, None) is None:
            return False
        self._db.answers = {
            aid: a
            for aid, a in self._db.answers.items()
            if a.question_id != question_id
        }
        return True
