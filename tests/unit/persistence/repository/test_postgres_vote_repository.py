"""Unit tests for the PostgreSQL vote ledger against a stubbed session."""

from datetime import datetime
from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy.dialects import postgresql
from sqlalchemy.exc import OperationalError
from sqlalchemy.ext.asyncio import AsyncSession

from qna.domain.model import Vote
from qna.domain.value import VoteDirection, VoteTarget
from qna.persistence.repository.vote import PostgresVoteRepository

NOW = datetime(2024, 5, 1, 12, 0, 0)


def _question_row(upvotes: int, downvotes: int) -> dict:
    return {
        "id": 3,
        "title": "Why is the sky blue?",
        "description": "Physics",
        "category": "science",
        "created_at": NOW,
        "updated_at": NOW,
        "upvotes": upvotes,
        "downvotes": downvotes,
    }


def _session(row: dict | None) -> AsyncMock:
    """Session whose INSERT returns vote ID 7 and whose tally SELECT returns ``row``."""
    inserted = MagicMock()
    inserted.scalar_one.return_value = 7

    tallied = MagicMock()
    if row is None:
        tallied.fetchone.return_value = None
    else:
        tallied.fetchone.return_value._asdict.return_value = row

    session = AsyncMock(spec=AsyncSession)
    session.execute.side_effect = [inserted, tallied]
    return session


def _upvote(target_id: int = 3) -> Vote:
    return Vote(
        target_type=VoteTarget.QUESTION,
        target_id=target_id,
        direction=VoteDirection.UP,
        created_at=NOW,
        updated_at=NOW,
    )


class TestRecordQuestionVote:
    @pytest.mark.asyncio
    async def test_cast_commits_before_returning(self):
        """The vote is durable by the time the tally is handed back."""
        # Arrange
        session = _session(_question_row(upvotes=2, downvotes=1))
        repo = PostgresVoteRepository(session)

        # Act
        result = await repo.record_question_vote(_upvote())

        # Assert
        assert result is not None
        assert result.question.id == 3
        assert (result.tally.upvotes, result.tally.downvotes) == (2, 1)
        session.commit.assert_awaited_once()
        session.rollback.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_missing_target_rolls_back_the_vote(self):
        # Arrange
        session = _session(None)
        repo = PostgresVoteRepository(session)

        # Act
        result = await repo.record_question_vote(_upvote(target_id=999))

        # Assert
        assert result is None
        session.rollback.assert_awaited_once()
        session.commit.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_failed_commit_propagates(self):
        """A COMMIT that fails must not be reported as a recorded vote."""
        # Arrange
        session = _session(_question_row(upvotes=1, downvotes=0))
        session.commit.side_effect = OperationalError(
            "COMMIT", None, ConnectionResetError("connection lost")
        )
        repo = PostgresVoteRepository(session)

        # Act & Assert
        with pytest.raises(OperationalError):
            await repo.record_question_vote(_upvote())

    @pytest.mark.asyncio
    async def test_tally_counts_target_votes_by_direction(self):
        """One grouped SELECT over the item left-joined with its votes."""
        # Arrange
        session = _session(_question_row(upvotes=1, downvotes=0))
        repo = PostgresVoteRepository(session)

        # Act
        await repo.record_question_vote(_upvote())

        # Assert
        insert_stmt, tally_stmt = [c.args[0] for c in session.execute.await_args_list]
        insert_sql = str(insert_stmt.compile(dialect=postgresql.dialect()))
        tally_sql = str(tally_stmt.compile(dialect=postgresql.dialect()))

        assert insert_sql.startswith("INSERT INTO votes")
        assert "RETURNING votes.id" in insert_sql
        assert "FROM questions LEFT OUTER JOIN votes ON" in tally_sql
        assert "votes.target_id = questions.id" in tally_sql
        assert tally_sql.count("count(votes.id) FILTER (WHERE votes.direction") == 2
        assert "GROUP BY questions.id" in tally_sql
