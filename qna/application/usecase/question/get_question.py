"""Get question use case."""

from pydantic import BaseModel

from qna.application.usecase.base import BaseUseCase
from qna.application.usecase.views import QuestionView
from qna.domain.error import NotFoundError
from qna.domain.service import QuestionService
from qna.domain.value import QuestionId


class GetQuestionRequest(BaseModel):
    """Get question request."""

    question_id: int


class GetQuestionUseCase(BaseUseCase):
    """Use case for retrieving a question by ID."""

    def __init__(self, question_service: QuestionService) -> None:
        self.question_service = question_service

    async def execute(self, request: GetQuestionRequest) -> QuestionView:
        """Execute get question flow.

        Raises:
            NotFoundError: If the question does not exist
            StorageError: If the database operation fails
        """
        question = await self.question_service.get_question_by_id(
            QuestionId(request.question_id)
        )
        if not question:
            raise NotFoundError("Question", str(request.question_id))
        return QuestionView.from_domain(question)
