"""Update question use case."""

from pydantic import BaseModel

from qna.application.usecase.base import BaseUseCase
from qna.application.usecase.views import QuestionView
from qna.domain.error import NotFoundError
from qna.domain.service import QuestionService
from qna.domain.value import QuestionId


class UpdateQuestionRequest(BaseModel):
    """Update question request. All three fields are replaced."""

    question_id: int
    title: str
    description: str
    category: str


class UpdateQuestionUseCase(BaseUseCase):
    """Use case for editing a question."""

    def __init__(self, question_service: QuestionService) -> None:
        self.question_service = question_service

    async def execute(self, request: UpdateQuestionRequest) -> QuestionView:
        """Execute update question flow.

        Raises:
            NotFoundError: If the question does not exist
            StorageError: If the database operation fails
        """
        updated = await self.question_service.update_question(
            QuestionId(request.question_id),
            title=request.title,
            description=request.description,
            category=request.category,
        )
        if not updated:
            raise NotFoundError("Question", str(request.question_id))
        return QuestionView.from_domain(updated)
