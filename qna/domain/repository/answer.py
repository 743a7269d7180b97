"""Answer repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from qna.domain.model import Answer
from qna.domain.value import AnswerId, QuestionId


class AnswerRepository(ABC):
    """Repository for Answer entity."""

    @abstractmethod
    async def find_by_id(self, answer_id: AnswerId) -> Optional[Answer]:
        """Find an answer by ID.

        Args:
            answer_id: The answer's identifier

        Returns:
            The answer if found, None otherwise
        """
        pass

    @abstractmethod
    async def exists(self, answer_id: AnswerId) -> bool:
        """Check whether an answer exists."""
        pass

    @abstractmethod
    async def find_by_question(self, question_id: QuestionId) -> List[Answer]:
        """Find all answers to a question, ordered by ID.

        Args:
            question_id: The question's identifier

        Returns:
            Answers to the question (empty if none or question missing)
        """
        pass

    @abstractmethod
    async def save(self, answer: Answer) -> Answer:
        """Insert a new answer.

        Args:
            answer: The answer to save (``id`` is ignored)

        Returns:
            The saved answer with its storage-assigned ID
        """
        pass
