"""Domain services."""

from .answer_service import AnswerService
from .base import Service, storage_errors
from .question_service import QuestionService
from .vote_service import VoteService

__all__ = [
    "AnswerService",
    "QuestionService",
    "Service",
    "VoteService",
    "storage_errors",
]
