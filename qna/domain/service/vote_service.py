"""Vote domain service.

Votes are append-only events. Casting a vote records the event and returns
totals recomputed from the whole ledger of the target, in one atomic unit.
There is no stored counter to increment, so concurrent casts cannot lose
updates.
"""

from datetime import datetime

import logfire

from qna.domain.error import NotFoundError
from qna.domain.model import TalliedAnswer, TalliedQuestion, Vote
from qna.domain.repository import (
    AnswerRepository,
    QuestionRepository,
    VoteRepository,
)
from qna.domain.value import AnswerId, QuestionId, VoteDirection, VoteTarget

from .base import Service, storage_errors


class VoteService(Service):
    """Domain service for vote operations."""

    def __init__(
        self,
        vote_repository: VoteRepository,
        question_repository: QuestionRepository,
        answer_repository: AnswerRepository,
    ) -> None:
        """Initialize vote service.

        Args:
            vote_repository: Vote repository
            question_repository: Question repository, to look up vote targets
            answer_repository: Answer repository, to look up vote targets
        """
        self.vote_repository = vote_repository
        self.question_repository = question_repository
        self.answer_repository = answer_repository

    async def ensure_target_exists(
        self, target_type: VoteTarget, target_id: int
    ) -> None:
        """Check that a vote target exists without touching the ledger.

        Raises:
            NotFoundError: If the question or answer does not exist
            StorageError: If the database operation fails
        """
        with storage_errors("find_vote_target"):
            if target_type == VoteTarget.QUESTION:
                found = await self.question_repository.exists(QuestionId(target_id))
            else:
                found = await self.answer_repository.exists(AnswerId(target_id))

        if not found:
            resource = target_type.value.capitalize()
            logfire.warn(
                "Vote target not found",
                target_type=target_type.value,
                target_id=target_id,
            )
            raise NotFoundError(resource, str(target_id))

    async def cast_question_vote(
        self, question_id: QuestionId, direction: VoteDirection
    ) -> TalliedQuestion:
        """Cast a vote on a question.

        Args:
            question_id: Question ID
            direction: Up or down

        Returns:
            The question with totals that include this vote

        Raises:
            NotFoundError: If the question does not exist
            StorageError: If the database operation fails
        """
        with logfire.span(
            "cast_question_vote", question_id=question_id, direction=int(direction)
        ):
            vote = self._new_vote(VoteTarget.QUESTION, question_id, direction)

            with storage_errors("cast_question_vote"):
                result = await self.vote_repository.record_question_vote(vote)

            if result is None:
                logfire.warn("Vote on non-existent question", question_id=question_id)
                raise NotFoundError("Question", str(question_id))

            logfire.info(
                "Question vote recorded",
                question_id=question_id,
                upvotes=result.tally.upvotes,
                downvotes=result.tally.downvotes,
            )
            return result

    async def cast_answer_vote(
        self, answer_id: AnswerId, direction: VoteDirection
    ) -> TalliedAnswer:
        """Cast a vote on an answer.

        Args:
            answer_id: Answer ID
            direction: Up or down

        Returns:
            The answer with totals that include this vote

        Raises:
            NotFoundError: If the answer does not exist
            StorageError: If the database operation fails
        """
        with logfire.span(
            "cast_answer_vote", answer_id=answer_id, direction=int(direction)
        ):
            vote = self._new_vote(VoteTarget.ANSWER, answer_id, direction)

            with storage_errors("cast_answer_vote"):
                result = await self.vote_repository.record_answer_vote(vote)

            if result is None:
                logfire.warn("Vote on non-existent answer", answer_id=answer_id)
                raise NotFoundError("Answer", str(answer_id))

            logfire.info(
                "Answer vote recorded",
                answer_id=answer_id,
                upvotes=result.tally.upvotes,
                downvotes=result.tally.downvotes,
            )
            return result

    @staticmethod
    def _new_vote(
        target_type: VoteTarget, target_id: int, direction: VoteDirection
    ) -> Vote:
        now = datetime.now()
        return Vote(
            target_type=target_type,
            target_id=target_id,
            direction=direction,
            created_at=now,
            updated_at=now,
        )
