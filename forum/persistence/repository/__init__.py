"""PostgreSQL repository implementations."""

from forum.persistence.repository.comment import PostgresCommentRepository
from forum.persistence.repository.credential import PostgresCredentialRepository
from forum.persistence.repository.discussion import PostgresDiscussionRepository
from forum.persistence.repository.discussion_preference import (
    PostgresDiscussionPreferenceRepository,
)
from forum.persistence.repository.user import PostgresUserRepository

__all__ = [
    "PostgresCommentRepository",
    "PostgresCredentialRepository",
    "PostgresDiscussionRepository",
    "PostgresDiscussionPreferenceRepository",
    "PostgresUserRepository",
]
