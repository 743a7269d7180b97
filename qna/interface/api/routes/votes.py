"""Vote routes.

Every cast appends one vote to the ledger and answers with the voted item
plus upvote and downvote totals recomputed from the whole ledger.
"""

from typing import Any

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, status
from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from qna.application.usecase.views import AnswerVoteView, QuestionVoteView
from qna.application.usecase.vote import CastVoteRequest, CastVoteUseCase
from qna.domain.error import NotFoundError, StorageError
from qna.domain.value import VoteDirection, VoteTarget
from qna.interface.api.validation import validate_vote
from qna.interface.error import ValidationError

router = APIRouter(tags=["votes"], route_class=DishkaRoute)


class VoteAPIRequest(BaseModel):
    """API request for a vote.

    ``direction`` must be the string ``"1"`` on upvote endpoints and ``"-1"``
    on downvote endpoints. Older clients send it as ``vote``.
    """

    direction: Any = Field(
        default=None, validation_alias=AliasChoices("direction", "vote")
    )


class QuestionVoteResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    message: str
    question_vote: QuestionVoteView = Field(alias="questionVote")


class AnswerVoteResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    message: str
    answer_vote: AnswerVoteView = Field(alias="answerVote")


async def _cast(
    use_case: CastVoteUseCase,
    target_type: VoteTarget,
    target_id: int,
    expected: VoteDirection,
    request: VoteAPIRequest | None,
) -> QuestionVoteView | AnswerVoteView:
    """Look up the target, validate the body, then record the vote and tally.

    A missing target is reported as 404 whatever the body holds.

    Raises:
        HTTPException: 400 on a bad direction, 404 if the target does not
            exist, 500 if the database fails
    """
    resource = "question" if target_type == VoteTarget.QUESTION else "answer"
    raw_direction = request.direction if request else None

    try:
        await use_case.ensure_target_exists(target_type, target_id)
        direction = validate_vote(raw_direction, expected)
        return await use_case.execute(
            CastVoteRequest(
                target_type=target_type, target_id=target_id, direction=direction
            )
        )
    except ValidationError as e:
        logfire.warn(
            "Vote rejected",
            target_type=target_type.value,
            target_id=target_id,
            error=e.message,
        )
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)
    except NotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"{resource.capitalize()} not found.",
        )
    except StorageError:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Server could not vote {resource} because database connection.",
        )


@router.post("/questions/{question_id}/upvote", response_model=QuestionVoteResponse)
async def upvote_question(
    question_id: int,
    cast_vote_use_case: FromDishka[CastVoteUseCase],
    request: VoteAPIRequest | None = None,
) -> QuestionVoteResponse:
    """Upvote a question.

    Body: ``{"direction": "1"}``
    """
    question_vote = await _cast(
        cast_vote_use_case, VoteTarget.QUESTION, question_id, VoteDirection.UP, request
    )
    return QuestionVoteResponse(
        message="Successfully upvoted the question.", question_vote=question_vote
    )


@router.post("/questions/{question_id}/downvote", response_model=QuestionVoteResponse)
async def downvote_question(
    question_id: int,
    cast_vote_use_case: FromDishka[CastVoteUseCase],
    request: VoteAPIRequest | None = None,
) -> QuestionVoteResponse:
    """Downvote a question.

    Body: ``{"direction": "-1"}``
    """
    question_vote = await _cast(
        cast_vote_use_case,
        VoteTarget.QUESTION,
        question_id,
        VoteDirection.DOWN,
        request,
    )
    return QuestionVoteResponse(
        message="Successfully downvoted the question.", question_vote=question_vote
    )


@router.post("/answers/{answer_id}/upvote", response_model=AnswerVoteResponse)
async def upvote_answer(
    answer_id: int,
    cast_vote_use_case: FromDishka[CastVoteUseCase],
    request: VoteAPIRequest | None = None,
) -> AnswerVoteResponse:
    """Upvote an answer.

    Body: ``{"direction": "1"}``
    """
    answer_vote = await _cast(
        cast_vote_use_case, VoteTarget.ANSWER, answer_id, VoteDirection.UP, request
    )
    return AnswerVoteResponse(
        message="Successfully upvoted the answer.", answer_vote=answer_vote
    )


@router.post("/answers/{answer_id}/downvote", response_model=AnswerVoteResponse)
async def downvote_answer(
    answer_id: int,
    cast_vote_use_case: FromDishka[CastVoteUseCase],
    request: VoteAPIRequest | None = None,
) -> AnswerVoteResponse:
    """Downvote an answer.

    Body: ``{"direction": "-1"}``
    """
    answer_vote = await _cast(
        cast_vote_use_case, VoteTarget.ANSWER, answer_id, VoteDirection.DOWN, request
    )
    return AnswerVoteResponse(
        message="Successfully downvoted the answer.", answer_vote=answer_vote
    )
