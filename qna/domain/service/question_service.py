"""Question domain service."""

from datetime import datetime
from typing import Optional

import logfire

from qna.domain.model import Question
from qna.domain.repository import QuestionRepository
from qna.domain.value import QuestionId

from .base import Service, storage_errors


class QuestionService(Service):
    """Domain service for question operations."""

    def __init__(self, question_repository: QuestionRepository) -> None:
        """Initialize question service.

        Args:
            question_repository: Question repository
        """
        self.question_repository = question_repository

    async def create_question(
        self, title: str, description: str, category: str
    ) -> Question:
        """Create a question.

        Args:
            title: Question title
            description: Question body
            category: Category label

        Returns:
            Saved question with its assigned ID

        Raises:
            StorageError: If the database operation fails
        """
        with logfire.span("question_service.create_question", title=title):
            now = datetime.now()
            question = Question(
                title=title,
                description=description,
                category=category,
                created_at=now,
                updated_at=now,
            )
            with storage_errors("create_question"):
                saved = await self.question_repository.save(question)
            logfire.info("Question saved", question_id=saved.id)
            return saved

    async def get_question_by_id(self, question_id: QuestionId) -> Optional[Question]:
        """Get a question by ID.

        Args:
            question_id: Question ID

        Returns:
            Question if found, None otherwise
        """
        with logfire.span(
            "question_service.get_question_by_id", question_id=question_id
        ):
            with storage_errors("get_question"):
                question = await self.question_repository.find_by_id(question_id)

            if not question:
                logfire.warn("Question not found", question_id=question_id)

            return question

    async def question_exists(self, question_id: QuestionId) -> bool:
        """Check whether a question exists."""
        with storage_errors("question_exists"):
            return await self.question_repository.exists(question_id)

    async def list_questions(
        self, title: Optional[str] = None, category: Optional[str] = None
    ) -> list[Question]:
        """List questions filtered by exact title and/or category.

        Args:
            title: Title filter (None or empty matches all)
            category: Category filter (None or empty matches all)

        Returns:
            Matching questions
        """
        with logfire.span(
            "question_service.list_questions", title=title, category=category
        ):
            with storage_errors("list_questions"):
                questions = await self.question_repository.find_all(
                    title=title or None, category=category or None
                )
            logfire.info("Questions listed", count=len(questions))
            return questions

    async def update_question(
        self,
        question_id: QuestionId,
        title: str,
        description: str,
        category: str,
    ) -> Optional[Question]:
        """Replace a question's title, description and category.

        Args:
            question_id: Question ID
            title: New title
            description: New description
            category: New category

        Returns:
            Updated question, or None if the question does not exist
        """
        with logfire.span("question_service.update_question", question_id=question_id):
            with storage_errors("update_question"):
                existing = await self.question_repository.find_by_id(question_id)
                if not existing:
                    logfire.warn(
                        "Update on non-existent question", question_id=question_id
                    )
                    return None

                # Domain models are immutable
                updated = existing.model_copy(
                    update={
                        "title": title,
                        "description": description,
                        "category": category,
                        "updated_at": datetime.now(),
                    }
                )
                saved = await self.question_repository.update(updated)

            logfire.info("Question updated", question_id=question_id)
            return saved

    async def delete_question(self, question_id: QuestionId) -> bool:
        """Delete a question together with its answers.

        Args:
            question_id: Question ID

        Returns:
            True if deleted, False if no such question
        """
        with logfire.span("question_service.delete_question", question_id=question_id):
            with storage_errors("delete_question"):
                deleted = await self.question_repository.delete(question_id)

            if deleted:
                logfire.info("Question deleted", question_id=question_id)
            else:
                logfire.warn("Delete on non-existent question", question_id=question_id)
            return deleted
