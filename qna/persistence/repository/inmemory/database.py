"""Shared in-memory storage for the in-memory repositories."""

from itertools import count

from qna.domain.model import Answer, Question, Vote
from qna.domain.value import AnswerId, QuestionId


class InMemoryDatabase:
    """Tables and ID sequences shared by in-memory repositories.

    One instance plays the role of the database for a whole test container,
    so every repository built on it sees the same rows.
    """

    def __init__(self) -> None:
        self.questions: dict[QuestionId, Question] = {}
        self.answers: dict[AnswerId, Answer] = {}
        self.votes: list[Vote] = []
        self.question_ids = count(1)
        self.answer_ids = count(1)
        self.vote_ids = count(1)
