"""Cast vote use case."""

from pydantic import BaseModel

from qna.application.usecase.base import BaseUseCase
from qna.application.usecase.views import AnswerVoteView, QuestionVoteView
from qna.domain.service import VoteService
from qna.domain.value import AnswerId, QuestionId, VoteDirection, VoteTarget


class CastVoteRequest(BaseModel):
    """Cast vote request.

    The direction has already been checked against the endpoint it came in on.
    """

    target_type: VoteTarget
    target_id: int
    direction: VoteDirection


class CastVoteUseCase(BaseUseCase):
    """Use case for voting on a question or an answer."""

    def __init__(self, vote_service: VoteService) -> None:
        """Initialize cast vote use case.

        Args:
            vote_service: Vote domain service
        """
        self.vote_service = vote_service

    async def ensure_target_exists(
        self, target_type: VoteTarget, target_id: int
    ) -> None:
        """Fail with NotFoundError before anything else is checked or written."""
        await self.vote_service.ensure_target_exists(target_type, target_id)

    async def execute(
        self, request: CastVoteRequest
    ) -> QuestionVoteView | AnswerVoteView:
        """Execute cast vote flow.

        Args:
            request: Cast vote request

        Returns:
            The voted item's fields plus totals that include this vote

        Raises:
            NotFoundError: If the target does not exist
            StorageError: If the database operation fails
        """
        if request.target_type == VoteTarget.QUESTION:
            tallied_question = await self.vote_service.cast_question_vote(
                QuestionId(request.target_id), request.direction
            )
            return QuestionVoteView.from_tallied(tallied_question)
        else:  # VoteTarget.ANSWER
            tallied_answer = await self.vote_service.cast_answer_vote(
                AnswerId(request.target_id), request.direction
            )
            return AnswerVoteView.from_tallied(tallied_answer)
