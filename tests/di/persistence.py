"""Mock persistence providers for testing."""

from dishka import Scope, provide

from qna.domain.repository import AnswerRepository, QuestionRepository, VoteRepository
from qna.persistence.repository.inmemory import (
    InMemoryAnswerRepository,
    InMemoryDatabase,
    InMemoryQuestionRepository,
    InMemoryVoteRepository,
)
from qna.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    The in-memory database is APP-scoped so that every request served by one
    container sees the same rows, like a real database would. Each test builds
    its own container, so tests stay isolated.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_database(self) -> InMemoryDatabase:
        """Provide the shared in-memory database."""
        return InMemoryDatabase()

    @provide(scope=Scope.REQUEST)
    def get_question_repository(self, db: InMemoryDatabase) -> QuestionRepository:
        """Provide in-memory question repository."""
        return InMemoryQuestionRepository(db)

    @provide(scope=Scope.REQUEST)
    def get_answer_repository(self, db: InMemoryDatabase) -> AnswerRepository:
        """Provide in-memory answer repository."""
        return InMemoryAnswerRepository(db)

    @provide(scope=Scope.REQUEST)
    def get_vote_repository(self, db: InMemoryDatabase) -> VoteRepository:
        """Provide in-memory vote repository."""
        return InMemoryVoteRepository(db)
