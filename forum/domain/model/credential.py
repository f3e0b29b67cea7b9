"""Credential shown as a badge next to an author's name."""

from forum.domain.model.common import DomainModel
from forum.domain.value import CredentialId, UserId


class Credential(DomainModel):
    """A self-declared or verified credential of a user."""

    id: CredentialId
    user_id: UserId
    description: str
    verified: bool = False
