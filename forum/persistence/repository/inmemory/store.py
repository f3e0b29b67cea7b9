"""Shared state for in-memory repositories."""

from dataclasses import dataclass, field

from forum.domain.model import (
    Comment,
    Credential,
    Discussion,
    DiscussionPreference,
    PublicUser,
)
from forum.domain.value import CommentId, CredentialId, DiscussionId, UserId


@dataclass
class InMemoryStore:
    """Tables of the in-memory backend.

    One store backs all in-memory repositories of a container, so data
    seeded through it is visible to every request.
    """

    discussions: dict[DiscussionId, Discussion] = field(default_factory=dict)
    comments: dict[CommentId, Comment] = field(default_factory=dict)
    users: dict[UserId, PublicUser] = field(default_factory=dict)
    credentials: dict[CredentialId, Credential] = field(default_factory=dict)
    preferences: dict[tuple[UserId, DiscussionId], DiscussionPreference] = field(
        default_factory=dict
    )

    def add_discussion(self, discussion: Discussion) -> Discussion:
        self.discussions[discussion.id] = discussion
        return discussion

    def add_comment(self, comment: Comment) -> Comment:
        self.comments[comment.id] = comment
        return comment

    def add_user(self, user: PublicUser) -> PublicUser:
        self.users[user.id] = user
        return user

    def add_credential(self, credential: Credential) -> Credential:
        self.credentials[credential.id] = credential
        return credential

    def add_preference(self, preference: DiscussionPreference) -> DiscussionPreference:
        self.preferences[(preference.user_id, preference.discussion_id)] = preference
        return preference
