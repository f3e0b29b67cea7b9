"""In-memory repository implementations for testing."""

from .comment import InMemoryCommentRepository
from .credential import InMemoryCredentialRepository
from .discussion import InMemoryDiscussionRepository
from .discussion_preference import InMemoryDiscussionPreferenceRepository
from .store import InMemoryStore
from .user import InMemoryUserRepository

__all__ = [
    "InMemoryCommentRepository",
    "InMemoryCredentialRepository",
    "InMemoryDiscussionRepository",
    "InMemoryDiscussionPreferenceRepository",
    "InMemoryStore",
    "InMemoryUserRepository",
]
