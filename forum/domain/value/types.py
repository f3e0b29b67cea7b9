"""Domain enums for discussions and comments."""

from enum import Enum


class CommentOrder(str, Enum):
    """Criterion used to order comments within a sibling list."""

    DATE = "DATE"
    VOTES = "VOTES"
    HOT = "HOT"


class OrderDirection(str, Enum):
    """Sort direction."""

    ASC = "ASC"
    DESC = "DESC"


class CommentVote(str, Enum):
    """Vote of the viewer on a comment, as presented to clients."""

    UP = "UP"
    DOWN = "DOWN"


class Anonymity(str, Enum):
    """Anonymity rule of a discussion.

    ENFORCED hides every author; ALLOWED and FORBIDDEN defer to the
    commenter's discussion preference.
    """

    ALLOWED = "ALLOWED"
    ENFORCED = "ENFORCED"
    FORBIDDEN = "FORBIDDEN"
