"""Per-discussion presentation preferences of a commenter."""

from typing import Optional

from forum.domain.model.common import DomainModel
from forum.domain.value import CredentialId, DiscussionId, UserId


class DiscussionPreference(DomainModel):
    """How a user wants to appear in one discussion."""

    user_id: UserId
    discussion_id: DiscussionId
    anonymous: Optional[bool] = None
    credential_id: Optional[CredentialId] = None
