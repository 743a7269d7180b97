"""List questions use case."""

from typing import Optional

from pydantic import BaseModel

from qna.application.usecase.base import BaseUseCase
from qna.application.usecase.views import QuestionView
from qna.domain.service import QuestionService


class ListQuestionsRequest(BaseModel):
    """List questions request.

    Empty or missing filters match every question.
    """

    title: Optional[str] = None
    category: Optional[str] = None


class ListQuestionsResponse(BaseModel):
    """List questions response."""

    questions: list[QuestionView]


class ListQuestionsUseCase(BaseUseCase):
    """Use case for listing questions filtered by title and category."""

    def __init__(self, question_service: QuestionService) -> None:
        self.question_service = question_service

    async def execute(self, request: ListQuestionsRequest) -> ListQuestionsResponse:
        """Execute list questions flow.

        Raises:
            StorageError: If the database operation fails
        """
        questions = await self.question_service.list_questions(
            title=request.title, category=request.category
        )
        return ListQuestionsResponse(
            questions=[QuestionView.from_domain(q) for q in questions]
        )
