"""Vote repository interface.

The vote ledger is append-only: there is no update or delete operation.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from qna.domain.model import TalliedAnswer, TalliedQuestion, Vote
from qna.domain.value import VoteTarget


class VoteRepository(ABC):
    """Repository for Vote events.

    Recording a vote and computing the resulting tally are one operation.
    Implementations must perform the insert and the aggregate scan in a single
    atomic unit so the returned tally always includes the vote just written.
    """

    @abstractmethod
    async def record_question_vote(self, vote: Vote) -> Optional[TalliedQuestion]:
        """Append a vote on a question and tally every vote of that question.

        The unit is committed before this returns. A vote for a missing
        question is discarded and None is returned.

        Args:
            vote: Vote event with ``target_type == VoteTarget.QUESTION``

        Returns:
            The question with its totals, or None if the question does not exist
        """
        pass

    @abstractmethod
    async def record_answer_vote(self, vote: Vote) -> Optional[TalliedAnswer]:
        """Append a vote on an answer and tally every vote of that answer.

        Args:
            vote: Vote event with ``target_type == VoteTarget.ANSWER``

        Returns:
            The answer with its totals, or None if the answer does not exist
        """
        pass

    @abstractmethod
    async def find_by_target(
        self, target_type: VoteTarget, target_id: int
    ) -> List[Vote]:
        """Find every vote event of a target, oldest first.

        Args:
            target_type: Question or answer
            target_id: ID of the item

        Returns:
            Vote events of the target
        """
        pass
