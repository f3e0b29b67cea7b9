"""Comment entity.

Comments form a forest inside one discussion: ``parent_id`` of None marks a
top-level comment, anything else points at another comment of the same
discussion. Rows are loaded flat and assembled into a tree per request.
"""

from datetime import datetime
from typing import Literal, Optional

from pydantic import Field

from forum.domain.model.common import DomainModel
from forum.domain.value import CommentId, DiscussionId, UserId


class Vote(DomainModel):
    """A single user's vote embedded in a comment row."""

    user_id: UserId
    vote: Literal[-1, 1]


class Comment(DomainModel):
    """Comment entity as stored.

    ``hotness`` is a ranking score computed upstream and consumed as an
    opaque float.
    """

    id: CommentId
    discussion_id: DiscussionId
    parent_id: Optional[CommentId] = None
    user_id: UserId
    content: str
    published: bool = True
    admin_unpublished: bool = False
    up_votes: int = Field(default=0, ge=0)
    down_votes: int = Field(default=0, ge=0)
    hotness: float = 0.0
    votes: tuple[Vote, ...] = ()
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    @property
    def score(self) -> int:
        """Net vote score."""
        return self.up_votes - self.down_votes

    @property
    def is_visible(self) -> bool:
        """Whether the content may be shown as written."""
        return self.published and not self.admin_unpublished
