"""Public user data used to present comment authors."""

from typing import Optional

from forum.domain.model.common import DomainModel
from forum.domain.value import UserId


class PublicUser(DomainModel):
    """Publicly displayable part of a user account."""

    id: UserId
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    username: Optional[str] = None
    avatar_url: Optional[str] = None

    @property
    def name(self) -> str:
        """Display name: full name, falling back to the username."""
        full_name = " ".join(n for n in (self.first_name, self.last_name) if n)
        return full_name or self.username or ""
