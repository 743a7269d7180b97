"""PostgreSQL implementation of Question repository."""

from typing import List, Optional

import logfire
from sqlalchemy import delete, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from qna.domain.model import Question
from qna.domain.repository import QuestionRepository
from qna.domain.value import QuestionId
from qna.persistence.mappers import question_to_dict, row_to_question
from qna.persistence.tables import questions_table


class PostgresQuestionRepository(QuestionRepository):
    """PostgreSQL implementation of QuestionRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, question_id: QuestionId) -> Optional[Question]:
        """Find a question by ID."""
        stmt = select(questions_table).where(questions_table.c.id == question_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_question(row._asdict()) if row else None

    async def exists(self, question_id: QuestionId) -> bool:
        """Check whether a question exists."""
        stmt = select(questions_table.c.id).where(questions_table.c.id == question_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none() is not None

    async def find_all(
        self,
        title: Optional[str] = None,
        category: Optional[str] = None,
    ) -> List[Question]:
        """Find questions matching exact title and/or category."""
        with logfire.span(
            "question_repository.find_all", title=title, category=category
        ):
            stmt = select(questions_table).order_by(questions_table.c.id)
            if title:
                stmt = stmt.where(questions_table.c.title == title)
            if category:
                stmt = stmt.where(questions_table.c.category == category)

            result = await self.session.execute(stmt)
            return [row_to_question(row._asdict()) for row in result.fetchall()]

    async def save(self, question: Question) -> Question:
        """Insert a new question."""
        stmt = (
            insert(questions_table)
            .values(**question_to_dict(question))
            .returning(questions_table)
        )
        result = await self.session.execute(stmt)
        return row_to_question(result.one()._asdict())

    async def update(self, question: Question) -> Optional[Question]:
        """Overwrite title, description, category and updated_at."""
        stmt = (
            update(questions_table)
            .where(questions_table.c.id == question.id)
            .values(
                title=question.title,
                description=question.description,
                category=question.category,
                updated_at=question.updated_at,
            )
            .returning(questions_table)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_question(row._asdict()) if row else None

    async def delete(self, question_id: QuestionId) -> bool:
        """Delete a question; answers go with it through ON DELETE CASCADE."""
        stmt = delete(questions_table).where(questions_table.c.id == question_id)
        result = await self.session.execute(stmt)
        return result.rowcount > 0  # type: ignore[attr-defined]
