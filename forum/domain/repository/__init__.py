"""Repository interfaces for the forum domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from forum.domain.repository.comment import CommentRepository
from forum.domain.repository.credential import CredentialRepository
from forum.domain.repository.discussion import DiscussionRepository
from forum.domain.repository.discussion_preference import (
    DiscussionPreferenceRepository,
)
from forum.domain.repository.user import UserRepository

__all__ = [
    "CommentRepository",
    "CredentialRepository",
    "DiscussionRepository",
    "DiscussionPreferenceRepository",
    "UserRepository",
]
