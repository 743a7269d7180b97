"""Strongly typed identifiers for Q&A domain entities.

Identifiers are storage-assigned integers. NewType keeps question, answer
and vote ids from being mixed up.
"""

from typing import NewType

QuestionId = NewType("QuestionId", int)
AnswerId = NewType("AnswerId", int)
VoteId = NewType("VoteId", int)
