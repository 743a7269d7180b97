"""In-memory vote repository for testing."""

from typing import Optional

from qna.domain.model import TalliedAnswer, TalliedQuestion, Vote
from qna.domain.repository import VoteRepository
from qna.domain.value import (
    AnswerId,
    QuestionId,
    VoteDirection,
    VoteId,
    VoteTally,
    VoteTarget,
)

from .database import InMemoryDatabase


class InMemoryVoteRepository(VoteRepository):
    """In-memory implementation of VoteRepository for testing.

    Append and tally run without an ``await`` in between, so on a single event
    loop no other cast can interleave with them.
    """

    def __init__(self, db: InMemoryDatabase) -> None:
        self._db = db

    async def record_question_vote(self, vote: Vote) -> Optional[TalliedQuestion]:
        """Append a vote on a question and tally the question's votes."""
        question = self._db.questions.get(QuestionId(vote.target_id))
        if question is None:
            return None
        self._append(vote)
        return TalliedQuestion(question=question, tally=self._tally(vote))

    async def record_answer_vote(self, vote: Vote) -> Optional[TalliedAnswer]:
        """Append a vote on an answer and tally the answer's votes."""
        answer = self._db.answers.get(AnswerId(vote.target_id))
        if answer is None:
            return None
        self._append(vote)
        return TalliedAnswer(answer=answer, tally=self._tally(vote))

    async def find_by_target(
        self, target_type: VoteTarget, target_id: int
    ) -> list[Vote]:
        """Find every vote event of a target, oldest first."""
        return [
            v
            for v in self._db.votes
            if v.target_type == target_type and v.target_id == target_id
        ]

    def _append(self, vote: Vote) -> None:
        self._db.votes.append(
            vote.model_copy(update={"id": VoteId(next(self._db.vote_ids))})
        )

    def _tally(self, vote: Vote) -> VoteTally:
        directions = [
            v.direction
            for v in self._db.votes
            if v.target_type == vote.target_type and v.target_id == vote.target_id
        ]
        return VoteTally(
            upvotes=directions.count(VoteDirection.UP),
            downvotes=directions.count(VoteDirection.DOWN),
        )
