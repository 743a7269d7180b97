"""PostgreSQL implementation of Answer repository."""

from typing import List, Optional

from sqlalchemy import insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from qna.domain.model import Answer
from qna.domain.repository import AnswerRepository
from qna.domain.value import AnswerId, QuestionId
from qna.persistence.mappers import answer_to_dict, row_to_answer
from qna.persistence.tables import answers_table


class PostgresAnswerRepository(AnswerRepository):
    """PostgreSQL implementation of AnswerRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, answer_id: AnswerId) -> Optional[Answer]:
        """Find an answer by ID."""
        stmt = select(answers_table).where(answers_table.c.id == answer_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_answer(row._asdict()) if row else None

    async def exists(self, answer_id: AnswerId) -> bool:
        """Check whether an answer exists."""
        stmt = select(answers_table.c.id).where(answers_table.c.id == answer_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none() is not None

    async def find_by_question(self, question_id: QuestionId) -> List[Answer]:
        """Find all answers to a question."""
        stmt = (
            select(answers_table)
            .where(answers_table.c.question_id == question_id)
            .order_by(answers_table.c.id)
        )
        result = await self.session.execute(stmt)
        return [row_to_answer(row._asdict()) for row in result.fetchall()]

    async def save(self, answer: Answer) -> Answer:
        """Insert a new answer."""
        stmt = (
            insert(answers_table)
            .values(**answer_to_dict(answer))
            .returning(answers_table)
        )
        result = await self.session.execute(stmt)
        return row_to_answer(result.one()._asdict())
