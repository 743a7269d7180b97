"""Answer use cases."""

from .create_answer import CreateAnswerRequest, CreateAnswerUseCase
from .list_answers import ListAnswersRequest, ListAnswersResponse, ListAnswersUseCase

__all__ = [
    "CreateAnswerRequest",
    "CreateAnswerUseCase",
    "ListAnswersRequest",
    "ListAnswersResponse",
    "ListAnswersUseCase",
]
