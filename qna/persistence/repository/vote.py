"""PostgreSQL implementation of Vote repository.

Each cast runs two statements in one transaction: an INSERT of the vote
event, then one SELECT that joins the target row with all of its votes and
counts them by direction. Under READ COMMITTED the SELECT sees the
transaction's own insert plus every vote committed before it started, so the
returned tally always includes the vote just recorded.

The cast commits before returning, so a failed COMMIT reaches the caller
instead of surfacing after the response has been sent.
"""

from typing import Any, Dict, List, Optional

import logfire
from sqlalchemy import Table, and_, func, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from qna.domain.model import TalliedAnswer, TalliedQuestion, Vote
from qna.domain.repository import VoteRepository
from qna.domain.value import VoteDirection, VoteId, VoteTarget
from qna.persistence.mappers import (
    row_to_answer,
    row_to_question,
    row_to_tally,
    row_to_vote,
    vote_to_dict,
)
from qna.persistence.tables import answers_table, questions_table, votes_table


class PostgresVoteRepository(VoteRepository):
    """PostgreSQL implementation of VoteRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def record_question_vote(self, vote: Vote) -> Optional[TalliedQuestion]:
        """Append a vote on a question and tally the question's votes."""
        row = await self._record_and_tally(vote, questions_table)
        if row is None:
            return None
        return TalliedQuestion(question=row_to_question(row), tally=row_to_tally(row))

    async def record_answer_vote(self, vote: Vote) -> Optional[TalliedAnswer]:
        """Append a vote on an answer and tally the answer's votes."""
        row = await self._record_and_tally(vote, answers_table)
        if row is None:
            return None
        return TalliedAnswer(answer=row_to_answer(row), tally=row_to_tally(row))

    async def find_by_target(
        self, target_type: VoteTarget, target_id: int
    ) -> List[Vote]:
        """Find every vote event of a target, oldest first."""
        stmt = (
            select(votes_table)
            .where(
                and_(
                    votes_table.c.target_type == target_type.value,
                    votes_table.c.target_id == target_id,
                )
            )
            .order_by(votes_table.c.id)
        )
        result = await self.session.execute(stmt)
        return [row_to_vote(row._asdict()) for row in result.fetchall()]

    async def _record_and_tally(
        self, vote: Vote, item_table: Table
    ) -> Optional[Dict[str, Any]]:
        """Insert the vote, then aggregate all votes of its target joined with the item.

        Returns:
            Item columns plus ``upvotes``/``downvotes``, or None if the item is missing
        """
        with logfire.span(
            "vote_repository.record_and_tally",
            target_type=vote.target_type.value,
            target_id=vote.target_id,
        ):
            insert_stmt = (
                insert(votes_table)
                .values(**vote_to_dict(vote))
                .returning(votes_table.c.id)
            )
            result = await self.session.execute(insert_stmt)
            vote_id = VoteId(result.scalar_one())

            votes_of_target = and_(
                votes_table.c.target_type == vote.target_type.value,
                votes_table.c.target_id == item_table.c.id,
            )
            tally_stmt = (
                select(
                    item_table,
                    func.count(votes_table.c.id)
                    .filter(votes_table.c.direction == VoteDirection.UP.value)
                    .label("upvotes"),
                    func.count(votes_table.c.id)
                    .filter(votes_table.c.direction == VoteDirection.DOWN.value)
                    .label("downvotes"),
                )
                .select_from(item_table.outerjoin(votes_table, votes_of_target))
                .where(item_table.c.id == vote.target_id)
                .group_by(item_table.c.id)
            )
            result = await self.session.execute(tally_stmt)
            row = result.fetchone()

            if row is None:
                # Target vanished after the insert; drop the vote with it
                logfire.warn(
                    "Vote discarded for missing target",
                    vote_id=vote_id,
                    target_type=vote.target_type.value,
                    target_id=vote.target_id,
                )
                await self.session.rollback()
                return None

            await self.session.commit()
            return row._asdict()
