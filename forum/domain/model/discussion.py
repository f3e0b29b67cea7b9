"""Discussion aggregate root."""

from typing import Optional

from forum.domain.model.common import DomainModel
from forum.domain.value import Anonymity, DiscussionId


class Discussion(DomainModel):
    """Container scoping one comment tree."""

    id: DiscussionId
    title: Optional[str] = None
    document_path: Optional[str] = None
    closed: bool = False
    anonymity: Anonymity = Anonymity.ALLOWED
