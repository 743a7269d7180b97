"""Domain model entities for the Q&A service."""

from qna.domain.model.answer import Answer
from qna.domain.model.question import Question
from qna.domain.model.vote import TalliedAnswer, TalliedQuestion, Vote

__all__ = [
    "Question",
    "Answer",
    "Vote",
    "TalliedQuestion",
    "TalliedAnswer",
]
