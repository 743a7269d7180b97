"""Create answer use case."""

from pydantic import BaseModel

from qna.application.usecase.base import BaseUseCase
from qna.application.usecase.views import AnswerView
from qna.domain.service import AnswerService
from qna.domain.value import QuestionId


class CreateAnswerRequest(BaseModel):
    """Create answer request."""

    question_id: int
    content: str


class CreateAnswerUseCase(BaseUseCase):
    """Use case for answering a question."""

    def __init__(self, answer_service: AnswerService) -> None:
        """Initialize create answer use case.

        Args:
            answer_service: Answer domain service
        """
        self.answer_service = answer_service

    async def execute(self, request: CreateAnswerRequest) -> AnswerView:
        """Execute create answer flow.

        Raises:
            NotFoundError: If the question does not exist
            StorageError: If the database operation fails
        """
        answer = await self.answer_service.create_answer(
            QuestionId(request.question_id), request.content
        )
        return AnswerView.from_domain(answer)
