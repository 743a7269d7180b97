"""Unit tests for CastVoteUseCase."""

import pytest

from qna.application.usecase.answer import CreateAnswerRequest, CreateAnswerUseCase
from qna.application.usecase.question import (
    CreateQuestionRequest,
    CreateQuestionUseCase,
)
from qna.application.usecase.views import AnswerVoteView, QuestionVoteView
from qna.application.usecase.vote import CastVoteRequest, CastVoteUseCase
from qna.domain.error import NotFoundError
from qna.domain.value import VoteDirection, VoteTarget
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def _create_question(env):
    create_question = await env.get(CreateQuestionUseCase)
    return await create_question.execute(
        CreateQuestionRequest(title="Q", description="D", category="general")
    )


class TestCastVoteUseCase:
    """Tests for CastVoteUseCase."""

    @pytest.mark.asyncio
    async def test_question_vote_returns_fields_and_totals(self, unit_env):
        # Arrange
        question = await _create_question(unit_env)
        use_case = await unit_env.get(CastVoteUseCase)

        # Act
        await use_case.execute(
            CastVoteRequest(
                target_type=VoteTarget.QUESTION,
                target_id=question.id,
                direction=VoteDirection.UP,
            )
        )
        view = await use_case.execute(
            CastVoteRequest(
                target_type=VoteTarget.QUESTION,
                target_id=question.id,
                direction=VoteDirection.DOWN,
            )
        )

        # Assert
        assert isinstance(view, QuestionVoteView)
        assert view.id == question.id
        assert view.title == "Q"
        assert (view.upvote, view.downvote) == (1, 1)

    @pytest.mark.asyncio
    async def test_answer_vote_returns_answer_view(self, unit_env):
        # Arrange
        question = await _create_question(unit_env)
        create_answer = await unit_env.get(CreateAnswerUseCase)
        answer = await create_answer.execute(
            CreateAnswerRequest(question_id=question.id, content="Because")
        )
        use_case = await unit_env.get(CastVoteUseCase)

        # Act
        view = await use_case.execute(
            CastVoteRequest(
                target_type=VoteTarget.ANSWER,
                target_id=answer.id,
                direction=VoteDirection.UP,
            )
        )

        # Assert
        assert isinstance(view, AnswerVoteView)
        assert view.question_id == question.id
        assert view.content == "Because"
        assert (view.upvote, view.downvote) == (1, 0)

    @pytest.mark.asyncio
    async def test_missing_target_raises_not_found(self, unit_env):
        # Arrange
        use_case = await unit_env.get(CastVoteUseCase)

        # Act & Assert
        with pytest.raises(NotFoundError):
            await use_case.execute(
                CastVoteRequest(
                    target_type=VoteTarget.ANSWER,
                    target_id=999,
                    direction=VoteDirection.DOWN,
                )
            )

    @pytest.mark.asyncio
    async def test_target_check_rejects_missing_answer(self, unit_env):
        """The target check runs alone, before any direction is known."""
        # Arrange
        use_case = await unit_env.get(CastVoteUseCase)

        # Act & Assert
        with pytest.raises(NotFoundError) as exc_info:
            await use_case.ensure_target_exists(VoteTarget.ANSWER, 999)
        assert exc_info.value.resource == "Answer"

    @pytest.mark.asyncio
    async def test_target_check_accepts_existing_question(self, unit_env):
        # Arrange
        question = await _create_question(unit_env)
        use_case = await unit_env.get(CastVoteUseCase)

        # Act & Assert - no exception
        await use_case.ensure_target_exists(VoteTarget.QUESTION, question.id)
