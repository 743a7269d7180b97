"""Answer domain service."""

from datetime import datetime

import logfire

from qna.domain.error import NotFoundError
from qna.domain.model import Answer
from qna.domain.repository import AnswerRepository
from qna.domain.value import QuestionId

from .base import Service, storage_errors
from .question_service import QuestionService


class AnswerService(Service):
    """Domain service for answer operations."""

    def __init__(
        self, answer_repository: AnswerRepository, question_service: QuestionService
    ) -> None:
        """Initialize answer service.

        Args:
            answer_repository: Answer repository
            question_service: Question domain service
        """
        self.answer_repository = answer_repository
        self.question_service = question_service

    async def create_answer(self, question_id: QuestionId, content: str) -> Answer:
        """Answer a question.

        Args:
            question_id: ID of the question being answered
            content: Answer text (at most 300 characters)

        Returns:
            Saved answer

        Raises:
            NotFoundError: If the question does not exist
            StorageError: If the database operation fails
        """
        with logfire.span("answer_service.create_answer", question_id=question_id):
            if not await self.question_service.question_exists(question_id):
                logfire.warn("Answer on non-existent question", question_id=question_id)
                raise NotFoundError("Question", str(question_id))

            now = datetime.now()
            answer = Answer(
                question_id=question_id,
                content=content,
                created_at=now,
                updated_at=now,
            )
            with storage_errors("create_answer"):
                saved = await self.answer_repository.save(answer)

            logfire.info("Answer saved", answer_id=saved.id, question_id=question_id)
            return saved

    async def list_answers(self, question_id: QuestionId) -> list[Answer]:
        """List the answers to a question.

        Args:
            question_id: Question ID

        Returns:
            Answers, empty when the question has none
        """
        with logfire.span("answer_service.list_answers", question_id=question_id):
            with storage_errors("list_answers"):
                return await self.answer_repository.find_by_question(question_id)
