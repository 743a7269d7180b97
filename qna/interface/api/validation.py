"""Request validation gate.

Pure predicates run before any storage operation. Each returns normally on
accept and raises a ValidationError subclass on reject.
"""

from typing import Iterable, Optional

from qna.domain.model.answer import ANSWER_MAX_LENGTH
from qna.domain.value import VoteDirection
from qna.interface.error import (
    ContentTooLongError,
    InvalidDirectionError,
    MissingFieldError,
    UnsupportedQueryError,
)

MISSING_OR_INVALID = "Missing or invalid request data."

QUESTION_QUERY_PARAMS = frozenset({"title", "category"})


def validate_vote(direction: object, expected: VoteDirection) -> VoteDirection:
    """Check that a vote body confirms the direction of its endpoint.

    The endpoint decides the direction; the body must repeat it as the exact
    string ``"1"`` (upvote) or ``"-1"`` (downvote).

    Args:
        direction: Raw ``direction`` value from the request body
        expected: Direction bound to the endpoint

    Returns:
        The accepted direction

    Raises:
        MissingFieldError: If direction is absent or empty
        InvalidDirectionError: If direction is anything but the expected literal
    """
    if direction is None or direction == "":
        raise MissingFieldError(MISSING_OR_INVALID)
    if direction != str(expected.value):
        raise InvalidDirectionError(f"Please enter only {expected.value}.")
    return expected


def validate_question(
    title: Optional[str], description: Optional[str], category: Optional[str]
) -> None:
    """Require title, description and category to be non-empty.

    Raises:
        MissingFieldError: If any field is absent or empty
    """
    if not title or not description or not category:
        raise MissingFieldError(MISSING_OR_INVALID)


def validate_answer(content: Optional[str]) -> None:
    """Require non-empty answer content of at most 300 characters.

    Raises:
        MissingFieldError: If content is absent or empty
        ContentTooLongError: If content is longer than 300 characters
    """
    if not content:
        raise MissingFieldError(MISSING_OR_INVALID)
    if len(content) > ANSWER_MAX_LENGTH:
        raise ContentTooLongError(f"Textlength is over {ANSWER_MAX_LENGTH}.")


def validate_query(params: Iterable[str]) -> None:
    """Reject question-list queries with parameters other than title and category.

    Args:
        params: Query parameter names

    Raises:
        UnsupportedQueryError: If any name is outside the allow-list
    """
    for name in params:
        if name not in QUESTION_QUERY_PARAMS:
            raise UnsupportedQueryError("Please enter a correct query.")
