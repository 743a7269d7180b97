"""SQLAlchemy table definitions for the Q&A service.

These tables are used with SQLAlchemy Core. They match the schema defined
in the Alembic migrations.
"""

from sqlalchemy import (
    BigInteger,
    CheckConstraint,
    Column,
    Enum,
    ForeignKey,
    Index,
    MetaData,
    SmallInteger,
    String,
    Table,
    Text,
    text,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# QUESTIONS TABLE
# ============================================================================
questions_table = Table(
    "questions",
    metadata,
    Column("id", BigInteger, primary_key=True, autoincrement=True),
    Column("title", Text, nullable=False),
    Column("description", Text, nullable=False),
    Column("category", String(255), nullable=False),
    Column(
        "created_at",
        TIMESTAMP(timezone=True),
        nullable=False,
        server_default=text("NOW()"),
    ),
    Column(
        "updated_at",
        TIMESTAMP(timezone=True),
        nullable=False,
        server_default=text("NOW()"),
    ),
)

Index("idx_questions_title", questions_table.c.title)
Index("idx_questions_category", questions_table.c.category)

# ============================================================================
# ANSWERS TABLE
# ============================================================================
answers_table = Table(
    "answers",
    metadata,
    Column("id", BigInteger, primary_key=True, autoincrement=True),
    Column(
        "question_id",
        BigInteger,
        ForeignKey("questions.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("content", String(300), nullable=False),
    Column(
        "created_at",
        TIMESTAMP(timezone=True),
        nullable=False,
        server_default=text("NOW()"),
    ),
    Column(
        "updated_at",
        TIMESTAMP(timezone=True),
        nullable=False,
        server_default=text("NOW()"),
    ),
)

Index("idx_answers_question_id", answers_table.c.question_id)

# ============================================================================
# VOTES TABLE (append-only ledger, no counter columns anywhere)
# ============================================================================
votes_table = Table(
    "votes",
    metadata,
    Column("id", BigInteger, primary_key=True, autoincrement=True),
    Column(
        "target_type",
        Enum("question", "answer", name="vote_target", create_type=False),
        nullable=False,
    ),
    # No foreign key: votes reference questions or answers polymorphically
    Column("target_id", BigInteger, nullable=False),
    Column("direction", SmallInteger, nullable=False),
    Column(
        "created_at",
        TIMESTAMP(timezone=True),
        nullable=False,
        server_default=text("NOW()"),
    ),
    Column(
        "updated_at",
        TIMESTAMP(timezone=True),
        nullable=False,
        server_default=text("NOW()"),
    ),
    CheckConstraint("direction IN (1, -1)", name="direction_up_or_down"),
)

Index("idx_votes_target", votes_table.c.target_type, votes_table.c.target_id)
