"""Domain value objects for the Q&A service."""

from qna.domain.value.identifiers import AnswerId, QuestionId, VoteId
from qna.domain.value.types import VoteDirection, VoteTally, VoteTarget

__all__ = [
    # Identifiers
    "QuestionId",
    "AnswerId",
    "VoteId",
    # Types
    "VoteDirection",
    "VoteTarget",
    "VoteTally",
]
