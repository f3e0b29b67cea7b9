"""Domain value objects for the forum."""

from forum.domain.value.cursor import Cursor
from forum.domain.value.identifiers import (
    CommentId,
    CredentialId,
    DiscussionId,
    UserId,
)
from forum.domain.value.types import (
    Anonymity,
    CommentOrder,
    CommentVote,
    OrderDirection,
)

__all__ = [
    # Identifiers
    "UserId",
    "DiscussionId",
    "CommentId",
    "CredentialId",
    # Types
    "Anonymity",
    "CommentOrder",
    "CommentVote",
    "OrderDirection",
    "Cursor",
]
