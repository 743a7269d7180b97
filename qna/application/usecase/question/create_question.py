"""Create question use case."""

from pydantic import BaseModel

from qna.application.usecase.base import BaseUseCase
from qna.application.usecase.views import QuestionView
from qna.domain.service import QuestionService


class CreateQuestionRequest(BaseModel):
    """Create question request."""

    title: str
    description: str
    category: str


class CreateQuestionUseCase(BaseUseCase):
    """Use case for creating a question."""

    def __init__(self, question_service: QuestionService) -> None:
        """Initialize create question use case.

        Args:
            question_service: Question domain service
        """
        self.question_service = question_service

    async def execute(self, request: CreateQuestionRequest) -> QuestionView:
        """Execute create question flow.

        Raises:
            StorageError: If the database operation fails
        """
        question = await self.question_service.create_question(
            title=request.title,
            description=request.description,
            category=request.category,
        )
        return QuestionView.from_domain(question)
