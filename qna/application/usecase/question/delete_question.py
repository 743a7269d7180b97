"""Delete question use case."""

from pydantic import BaseModel

from qna.application.usecase.base import BaseUseCase
from qna.domain.error import NotFoundError
from qna.domain.service import QuestionService
from qna.domain.value import QuestionId


class DeleteQuestionRequest(BaseModel):
    """Delete question request."""

    question_id: int


class DeleteQuestionUseCase(BaseUseCase):
    """Use case for deleting a question and its answers.

    Votes are left in the ledger.
    """

    def __init__(self, question_service: QuestionService) -> None:
        self.question_service = question_service

    async def execute(self, request: DeleteQuestionRequest) -> None:
        """Execute delete question flow.

        Raises:
            NotFoundError: If the question does not exist
            StorageError: If the database operation fails
        """
        deleted = await self.question_service.delete_question(
            QuestionId(request.question_id)
        )
        if not deleted:
            raise NotFoundError("Question", str(request.question_id))
