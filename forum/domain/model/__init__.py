"""Domain model entities for the forum."""

from forum.domain.model.comment import Comment, Vote
from forum.domain.model.credential import Credential
from forum.domain.model.discussion import Discussion
from forum.domain.model.discussion_preference import DiscussionPreference
from forum.domain.model.thread import (
    AssembledTree,
    CommentConnection,
    CommentNode,
    CommentView,
    DisplayAuthor,
    PageInfo,
    Viewer,
)
from forum.domain.model.user import PublicUser

__all__ = [
    "Comment",
    "Vote",
    "Credential",
    "Discussion",
    "DiscussionPreference",
    "PublicUser",
    # Thread types
    "AssembledTree",
    "CommentConnection",
    "CommentNode",
    "CommentView",
    "DisplayAuthor",
    "PageInfo",
    "Viewer",
]
