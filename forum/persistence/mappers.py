"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict
from uuid import UUID

from forum.domain.model import (
    Comment,
    Credential,
    Discussion,
    DiscussionPreference,
    PublicUser,
    Vote,
)
from forum.domain.value import (
    Anonymity,
    CommentId,
    CredentialId,
    DiscussionId,
    UserId,
)


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_discussion(row: Dict[str, Any]) -> Discussion:
    """Convert database row to Discussion domain model."""
    return Discussion(
        id=DiscussionId(_uuid(row["id"])),
        title=row.get("title"),
        document_path=row.get("document_path"),
        closed=row["closed"],
        anonymity=Anonymity(row["anonymity"]),
    )


def row_to_user(row: Dict[str, Any]) -> PublicUser:
    """Convert database row to PublicUser domain model."""
    return PublicUser(
        id=UserId(_uuid(row["id"])),
        first_name=row.get("first_name"),
        last_name=row.get("last_name"),
        username=row.get("username"),
        avatar_url=row.get("avatar_url"),
    )


def row_to_credential(row: Dict[str, Any]) -> Credential:
    """Convert database row to Credential domain model."""
    return Credential(
        id=CredentialId(_uuid(row["id"])),
        user_id=UserId(_uuid(row["user_id"])),
        description=row["description"],
        verified=row["verified"],
    )


def row_to_discussion_preference(row: Dict[str, Any]) -> DiscussionPreference:
    """Convert database row to DiscussionPreference domain model."""
    credential_id = row.get("credential_id")
    return DiscussionPreference(
        user_id=UserId(_uuid(row["user_id"])),
        discussion_id=DiscussionId(_uuid(row["discussion_id"])),
        anonymous=row.get("anonymous"),
        credential_id=CredentialId(_uuid(credential_id)) if credential_id else None,
    )


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model.

    The ``votes`` column holds a JSON list of ``{"user_id", "vote"}``.
    """
    parent_id = row.get("parent_id")
    return Comment(
        id=CommentId(_uuid(row["id"])),
        discussion_id=DiscussionId(_uuid(row["discussion_id"])),
        parent_id=CommentId(_uuid(parent_id)) if parent_id else None,
        user_id=UserId(_uuid(row["user_id"])),
        content=row["content"],
        published=row["published"],
        admin_unpublished=row["admin_unpublished"],
        up_votes=row["up_votes"],
        down_votes=row["down_votes"],
        hotness=row["hotness"],
        votes=tuple(
            Vote(user_id=UserId(_uuid(v["user_id"])), vote=v["vote"])
            for v in row.get("votes") or []
        ),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )
