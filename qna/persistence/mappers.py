"""Mappers for converting between database rows and domain models.

Domain models are immutable Pydantic models, so rows are mapped by hand
instead of through an ORM.
"""

from typing import Any, Dict

from qna.domain.model import Answer, Question, Vote
from qna.domain.value import (
    AnswerId,
    QuestionId,
    VoteDirection,
    VoteId,
    VoteTally,
    VoteTarget,
)


def row_to_question(row: Dict[str, Any]) -> Question:
    """Convert database row to Question domain model.

    Args:
        row: Database row as dict

    Returns:
        Question domain model
    """
    return Question(
        id=QuestionId(row["id"]),
        title=row["title"],
        description=row["description"],
        category=row["category"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def question_to_dict(question: Question) -> Dict[str, Any]:
    """Convert Question domain model to database dict.

    The ID is left out; it is assigned by the database.

    Args:
        question: Question domain model

    Returns:
        Dict suitable for insert/update
    """
    return {
        "title": question.title,
        "description": question.description,
        "category": question.category,
        "created_at": question.created_at,
        "updated_at": question.updated_at,
    }


def row_to_answer(row: Dict[str, Any]) -> Answer:
    """Convert database row to Answer domain model."""
    return Answer(
        id=AnswerId(row["id"]),
        question_id=QuestionId(row["question_id"]),
        content=row["content"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def answer_to_dict(answer: Answer) -> Dict[str, Any]:
    """Convert Answer domain model to database dict."""
    return {
        "question_id": answer.question_id,
        "content": answer.content,
        "created_at": answer.created_at,
        "updated_at": answer.updated_at,
    }


def row_to_vote(row: Dict[str, Any]) -> Vote:
    """Convert database row to Vote domain model."""
    return Vote(
        id=VoteId(row["id"]),
        target_type=VoteTarget(row["target_type"]),
        target_id=row["target_id"],
        direction=VoteDirection(row["direction"]),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def vote_to_dict(vote: Vote) -> Dict[str, Any]:
    """Convert Vote domain model to database dict."""
    return {
        "target_type": vote.target_type.value,
        "target_id": vote.target_id,
        "direction": int(vote.direction),
        "created_at": vote.created_at,
        "updated_at": vote.updated_at,
    }


def row_to_tally(row: Dict[str, Any]) -> VoteTally:
    """Extract aggregated vote totals from a row."""
    return VoteTally(upvotes=row["upvotes"], downvotes=row["downvotes"])
