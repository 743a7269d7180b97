"""Unit tests for the in-memory vote ledger."""

from datetime import datetime

import pytest

from qna.domain.model import Question, Vote
from qna.domain.value import VoteDirection, VoteTarget
from qna.persistence.mappers import row_to_vote, vote_to_dict
from qna.persistence.repository.inmemory import (
    InMemoryDatabase,
    InMemoryQuestionRepository,
    InMemoryVoteRepository,
)


def _vote(target_id: int, direction: VoteDirection) -> Vote:
    return Vote(
        target_type=VoteTarget.QUESTION, target_id=target_id, direction=direction
    )


class TestInMemoryVoteRepository:
    @pytest.mark.asyncio
    async def test_vote_on_missing_target_is_not_recorded(self):
        """A vote for a target that does not exist never reaches the ledger."""
        # Arrange
        repo = InMemoryVoteRepository(InMemoryDatabase())

        # Act
        result = await repo.record_question_vote(_vote(9, VoteDirection.UP))

        # Assert
        assert result is None
        votes = await repo.find_by_target(VoteTarget.QUESTION, 9)
        assert votes == []

    @pytest.mark.asyncio
    async def test_ledger_is_append_only_and_ordered(self):
        # Arrange
        db = InMemoryDatabase()
        question = await InMemoryQuestionRepository(db).save(
            Question(title="Q", description="D", category="C")
        )
        repo = InMemoryVoteRepository(db)

        # Act
        await repo.record_question_vote(_vote(question.id, VoteDirection.DOWN))
        await repo.record_question_vote(_vote(question.id, VoteDirection.UP))

        # Assert
        votes = await repo.find_by_target(VoteTarget.QUESTION, question.id)
        assert [v.id for v in votes] == [1, 2]
        assert [v.direction for v in votes] == [VoteDirection.DOWN, VoteDirection.UP]


class TestVoteMapping:
    def test_vote_row_maps_back_to_the_same_vote(self):
        # Arrange
        created = datetime(2024, 5, 1, 12, 0, 0)
        vote = Vote(
            target_type=VoteTarget.ANSWER,
            target_id=3,
            direction=VoteDirection.DOWN,
            created_at=created,
        )

        # Act
        row = {"id": 7, **vote_to_dict(vote)}
        mapped = row_to_vote(row)

        # Assert
        assert row["target_type"] == "answer"
        assert row["direction"] == -1
        assert mapped.id == 7
        assert mapped.direction == VoteDirection.DOWN
        assert mapped.updated_at == created
