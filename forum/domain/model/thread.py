"""Tree and result types for windowed comment threads.

Every type here is a frozen dataclass. Pipeline stages never modify a node;
they build and return a new tree.
"""

from dataclasses import dataclass, field
from typing import Optional

from forum.domain.model.comment import Comment
from forum.domain.model.credential import Credential
from forum.domain.model.user import PublicUser
from forum.domain.value import CommentId, CommentVote, UserId


@dataclass(frozen=True)
class PageInfo:
    """Continuation signal for one sibling list.

    has_next_page with no end_cursor: re-query with this node's id as
    parent_id. With an end_cursor: re-query with it as ``after``.
    """

    has_next_page: bool = False
    end_cursor: Optional[str] = None


@dataclass(frozen=True)
class CommentNode:
    """Node of an assembled comment tree.

    The synthetic root has no comment; its id is the queried parent id
    (None for the discussion root) and its depth is -1.
    """

    id: Optional[CommentId]
    depth: int
    comment: Optional[Comment] = None
    parent_ids: tuple[CommentId, ...] = ()
    children: tuple["CommentNode", ...] = ()
    total_count: int = 0
    direct_total_count: int = 0
    page_info: PageInfo = field(default_factory=PageInfo)


@dataclass(frozen=True)
class AssembledTree:
    """Result of assembly: the tree and every comment incorporated into it."""

    root: CommentNode
    covered: tuple[CommentNode, ...]


@dataclass(frozen=True)
class Viewer:
    """The user a response is rendered for. user_id is None when anonymous."""

    user_id: Optional[UserId] = None
    roles: frozenset[str] = frozenset()

    def has_any_role(self, roles: frozenset[str] | set[str]) -> bool:
        return bool(self.roles & set(roles))


@dataclass(frozen=True)
class DisplayAuthor:
    """Author identity as presented to the viewer."""

    name: str
    anonymity: bool
    profile_picture: Optional[str] = None
    credential: Optional[Credential] = None


@dataclass(frozen=True)
class CommentView:
    """A decorated comment together with its (windowed) replies."""

    comment: Comment
    content: str
    depth: int
    parent_ids: tuple[CommentId, ...]
    display_author: DisplayAuthor
    comments: "CommentConnection"
    author: Optional[PublicUser] = None
    user_vote: Optional[CommentVote] = None
    user_can_edit: bool = False


@dataclass(frozen=True)
class CommentConnection:
    """A page of comments under one parent."""

    total_count: int
    direct_total_count: int
    page_info: PageInfo
    nodes: tuple[CommentView, ...] = ()
    focus: Optional[CommentView] = None
