"""In-memory repository implementations for testing."""

from .answer import InMemoryAnswerRepository
from .database import InMemoryDatabase
from .question import InMemoryQuestionRepository
from .vote import InMemoryVoteRepository

__all__ = [
    "InMemoryAnswerRepository",
    "InMemoryDatabase",
    "InMemoryQuestionRepository",
    "InMemoryVoteRepository",
]
