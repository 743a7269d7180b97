"""Question repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from qna.domain.model import Question
from qna.domain.value import QuestionId


class QuestionRepository(ABC):
    """Repository for Question aggregate.

    Defines the contract for question persistence operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def find_by_id(self, question_id: QuestionId) -> Optional[Question]:
        """Find a question by ID.

        Args:
            question_id: The question's identifier

        Returns:
            The question if found, None otherwise
        """
        pass

    @abstractmethod
    async def exists(self, question_id: QuestionId) -> bool:
        """Check whether a question exists.

        Args:
            question_id: The question's identifier

        Returns:
            True if the question exists
        """
        pass

    @abstractmethod
    async def find_all(
        self,
        title: Optional[str] = None,
        category: Optional[str] = None,
    ) -> List[Question]:
        """Find questions matching exact title and/or category.

        A None or empty filter value matches every question.

        Args:
            title: Exact title to match
            category: Exact category to match

        Returns:
            Matching questions ordered by ID
        """
        pass

    @abstractmethod
    async def save(self, question: Question) -> Question:
        """Insert a new question.

        Args:
            question: The question to save (``id`` is ignored)

        Returns:
            The saved question with its storage-assigned ID
        """
        pass

    @abstractmethod
    async def update(self, question: Question) -> Optional[Question]:
        """Overwrite title, description, category and updated_at.

        Args:
            question: The question carrying the new field values

        Returns:
            The updated question, or None if it does not exist
        """
        pass

    @abstractmethod
    async def delete(self, question_id: QuestionId) -> bool:
        """Delete a question and its answers.

        Args:
            question_id: The question's identifier

        Returns:
            True if a question was deleted, False if none existed
        """
        pass
