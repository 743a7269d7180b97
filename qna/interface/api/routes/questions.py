"""Question routes."""

from typing import Optional

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, Request, status
from pydantic import BaseModel, ConfigDict, Field

from qna.application.usecase.answer import (
    CreateAnswerRequest,
    CreateAnswerUseCase,
    ListAnswersRequest,
    ListAnswersUseCase,
)
from qna.application.usecase.question import (
    CreateQuestionRequest,
    CreateQuestionUseCase,
    DeleteQuestionRequest,
    DeleteQuestionUseCase,
    GetQuestionRequest,
    GetQuestionUseCase,
    ListQuestionsRequest,
    ListQuestionsUseCase,
    UpdateQuestionRequest,
    UpdateQuestionUseCase,
)
from qna.application.usecase.views import AnswerView, QuestionView
from qna.domain.error import NotFoundError, StorageError
from qna.interface.api.validation import (
    validate_answer,
    validate_query,
    validate_question,
)
from qna.interface.error import ValidationError

router = APIRouter(prefix="/questions", tags=["questions"], route_class=DishkaRoute)


class QuestionAPIRequest(BaseModel):
    """API request for creating or replacing a question."""

    title: Optional[str] = None
    description: Optional[str] = None
    category: Optional[str] = None


class AnswerAPIRequest(BaseModel):
    """API request for answering a question."""

    content: Optional[str] = None


class MessageResponse(BaseModel):
    """Response carrying only a message."""

    message: str


class QuestionListResponse(BaseModel):
    message: str
    data: list[QuestionView]


class QuestionDetailResponse(BaseModel):
    message: str
    data: QuestionView


class AnswerListResponse(BaseModel):
    message: str
    data: list[AnswerView]


class CreateQuestionAPIResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    message: str
    new_question: QuestionView = Field(alias="newQuestion")


class UpdateQuestionAPIResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    message: str
    updated_question: QuestionView = Field(alias="updatedQuestion")


class CreateAnswerAPIResponse(BaseModel):
    message: str
    answer: AnswerView


@router.get("", response_model=QuestionListResponse)
async def list_questions(
    request: Request,
    list_questions_use_case: FromDishka[ListQuestionsUseCase],
    title: Optional[str] = None,
    category: Optional[str] = None,
) -> QuestionListResponse:
    """List questions, optionally filtered by exact title and/or category.

    Only ``title`` and ``category`` are accepted as query parameters.

    Raises:
        HTTPException: 400 on unknown parameters, 404 if nothing matches
    """
    try:
        validate_query(request.query_params.keys())
        result = await list_questions_use_case.execute(
            ListQuestionsRequest(title=title, category=category)
        )
    except ValidationError as e:
        logfire.warn("Question query rejected", error=e.message)
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)
    except StorageError:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Server could not read question because database connection.",
        )

    if not result.questions:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Question not found."
        )

    return QuestionListResponse(
        message="Successfully retrieved the list of questions.",
        data=result.questions,
    )


@router.get("/{question_id}", response_model=QuestionDetailResponse)
async def get_question(
    question_id: int,
    get_question_use_case: FromDishka[GetQuestionUseCase],
) -> QuestionDetailResponse:
    """Get a question by ID."""
    try:
        question = await get_question_use_case.execute(
            GetQuestionRequest(question_id=question_id)
        )
    except NotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Question not found."
        )
    except StorageError:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Server could not read question because database connection.",
        )

    # Same message as the list endpoint
    return QuestionDetailResponse(
        message="Successfully retrieved the list of questions.", data=question
    )


@router.get("/{question_id}/answers", response_model=AnswerListResponse)
async def list_answers(
    question_id: int,
    list_answers_use_case: FromDishka[ListAnswersUseCase],
) -> AnswerListResponse:
    """List the answers to a question (empty list if there are none)."""
    try:
        result = await list_answers_use_case.execute(
            ListAnswersRequest(question_id=question_id)
        )
    except StorageError:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Server could not read answer because database connection.",
        )

    return AnswerListResponse(
        message="Successfully retrieved the answers.", data=result.answers
    )


@router.post(
    "",
    response_model=CreateQuestionAPIResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_question(
    create_question_use_case: FromDishka[CreateQuestionUseCase],
    request: QuestionAPIRequest | None = None,
) -> CreateQuestionAPIResponse:
    """Create a question.

    Raises:
        HTTPException: 400 if title, description or category is missing
    """
    request = request or QuestionAPIRequest()
    try:
        validate_question(request.title, request.description, request.category)
        question = await create_question_use_case.execute(
            CreateQuestionRequest(
                title=request.title,
                description=request.description,
                category=request.category,
            )
        )
    except ValidationError as e:
        logfire.warn("Question creation rejected", error=e.message)
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)
    except StorageError:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Server could not create question because database connection.",
        )

    return CreateQuestionAPIResponse(
        message="Question created successfully.", new_question=question
    )


@router.post(
    "/{question_id}/answers",
    response_model=CreateAnswerAPIResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_answer(
    question_id: int,
    create_answer_use_case: FromDishka[CreateAnswerUseCase],
    request: AnswerAPIRequest | None = None,
) -> CreateAnswerAPIResponse:
    """Answer a question.

    Raises:
        HTTPException: 400 if content is missing or over 300 characters,
            404 if the question does not exist
    """
    request = request or AnswerAPIRequest()
    try:
        validate_answer(request.content)
        answer = await create_answer_use_case.execute(
            CreateAnswerRequest(question_id=question_id, content=request.content)
        )
    except ValidationError as e:
        logfire.warn("Answer creation rejected", error=e.message)
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)
    except NotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Question not found."
        )
    except StorageError:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Server could not create answer because database connection.",
        )

    return CreateAnswerAPIResponse(
        message="Answer created successfully.", answer=answer
    )


@router.put("/{question_id}", response_model=UpdateQuestionAPIResponse)
async def update_question(
    question_id: int,
    update_question_use_case: FromDishka[UpdateQuestionUseCase],
    request: QuestionAPIRequest | None = None,
) -> UpdateQuestionAPIResponse:
    """Replace a question's title, description and category."""
    request = request or QuestionAPIRequest()
    try:
        validate_question(request.title, request.description, request.category)
        question = await update_question_use_case.execute(
            UpdateQuestionRequest(
                question_id=question_id,
                title=request.title,
                description=request.description,
                category=request.category,
            )
        )
    except ValidationError as e:
        logfire.warn("Question update rejected", error=e.message)
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)
    except NotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Question not found."
        )
    except StorageError:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Server could not update question because database connection.",
        )

    return UpdateQuestionAPIResponse(
        message="Successfully updated the question.", updated_question=question
    )


@router.delete("/{question_id}", response_model=MessageResponse)
async def delete_question(
    question_id: int,
    delete_question_use_case: FromDishka[DeleteQuestionUseCase],
) -> MessageResponse:
    """Delete a question together with its answers."""
    try:
        await delete_question_use_case.execute(
            DeleteQuestionRequest(question_id=question_id)
        )
    except NotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Question not found."
        )
    except StorageError:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Server could not delete question because database connection.",
        )

    return MessageResponse(message="Successfully deleted the question and answer.")
