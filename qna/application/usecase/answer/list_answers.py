"""List answers use case."""

from pydantic import BaseModel

from qna.application.usecase.base import BaseUseCase
from qna.application.usecase.views import AnswerView
from qna.domain.service import AnswerService
from qna.domain.value import QuestionId


class ListAnswersRequest(BaseModel):
    """List answers request."""

    question_id: int


class ListAnswersResponse(BaseModel):
    """List answers response."""

    answers: list[AnswerView]


class ListAnswersUseCase(BaseUseCase):
    """Use case for listing the answers to a question."""

    def __init__(self, answer_service: AnswerService) -> None:
        self.answer_service = answer_service

    async def execute(self, request: ListAnswersRequest) -> ListAnswersResponse:
        answers = await self.answer_service.list_answers(
            QuestionId(request.question_id)
        )
        return ListAnswersResponse(answers=[AnswerView.from_domain(a) for a in answers])
