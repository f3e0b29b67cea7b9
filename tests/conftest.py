"""Test configuration and fixtures."""

from datetime import datetime, timedelta
from uuid import UUID, uuid4

from forum.domain.model import Comment, Discussion, PublicUser, Vote
from forum.domain.value import CommentId, DiscussionId, UserId

BASE_TIME = datetime(2024, 1, 1, 12, 0, 0)


def cid(n: int) -> CommentId:
    """Deterministic comment ID, so ID tie-breaks are predictable in tests."""
    return CommentId(UUID(int=n))


def make_comment(
    n: int,
    parent: int | None = None,
    discussion_id: DiscussionId | None = None,
    user_id: UserId | None = None,
    minutes: int | None = None,
    hotness: float = 0.0,
    up_votes: int = 0,
    down_votes: int = 0,
    votes: tuple[Vote, ...] = (),
    published: bool = True,
    admin_unpublished: bool = False,
) -> Comment:
    """Build comment ``n`` replying to comment ``parent``.

    ``created_at`` defaults to ``n`` minutes after BASE_TIME.
    """
    created_at = BASE_TIME + timedelta(minutes=n if minutes is None else minutes)
    return Comment(
        id=cid(n),
        discussion_id=discussion_id or DiscussionId(UUID(int=0)),
        parent_id=cid(parent) if parent is not None else None,
        user_id=user_id or UserId(uuid4()),
        content=f"Comment {n}",
        published=published,
        admin_unpublished=admin_unpublished,
        up_votes=up_votes,
        down_votes=down_votes,
        hotness=hotness,
        votes=votes,
        created_at=created_at,
        updated_at=created_at,
    )


def make_discussion(**kwargs) -> Discussion:
    """Build a discussion with a fresh ID."""
    kwargs.setdefault("id", DiscussionId(uuid4()))
    kwargs.setdefault("title", "Test discussion")
    return Discussion(**kwargs)


def make_user(first_name: str = "Ada", last_name: str = "Lovelace", **kwargs) -> PublicUser:
    """Build a public user with a fresh ID."""
    kwargs.setdefault("id", UserId(uuid4()))
    kwargs.setdefault("username", f"{first_name.lower()}{last_name.lower()}")
    return PublicUser(first_name=first_name, last_name=last_name, **kwargs)
