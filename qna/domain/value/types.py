"""Domain value objects for the Q&A service.

Value objects are immutable and defined by their values, not identity.
"""

from enum import Enum, IntEnum

from pydantic import Field

from qna.domain.value.common import ValueObject


class VoteDirection(IntEnum):
    """Direction of a single vote.

    Stored as the integer itself; no other value is ever persisted.
    """

    UP = 1
    DOWN = -1


class VoteTarget(str, Enum):
    """Type of item that can be voted on."""

    QUESTION = "question"
    ANSWER = "answer"


class VoteTally(ValueObject):
    """Upvote/downvote totals for one target.

    Derived from the vote ledger on every read that needs it, never stored.
    """

    upvotes: int = Field(default=0, ge=0)
    downvotes: int = Field(default=0, ge=0)
