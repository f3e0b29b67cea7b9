"""Resolution of the requesting viewer from the auth cookie."""

from uuid import UUID

import logfire

from forum.config import AuthSettings
from forum.domain.model import Viewer
from forum.domain.value import UserId
from forum.util.jwt import JWTError, TokenPayload, decode_token, issue_token

from .base import Service


class JWTService(Service):
    """Verifies auth tokens and turns them into viewers."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize JWT service.

        Args:
            auth_settings: Secret, algorithm and lifetime of tokens
        """
        self.auth_settings = auth_settings

    def create_token(self, user_id: str, roles: list[str] | None = None) -> str:
        """Issue a token for a user.

        Args:
            user_id: User ID
            roles: Roles granted to the user, e.g. "admin" or "editor"

        Returns:
            Signed token
        """
        return issue_token(user_id, roles or [], self.auth_settings)

    def verify_token(self, token: str) -> TokenPayload:
        """Verify a token and return its claims.

        Raises:
            JWTError: If the token is invalid or expired
        """
        return decode_token(token, self.auth_settings)

    def get_viewer_from_token(self, token: str | None) -> Viewer:
        """Resolve the viewer a response is rendered for.

        Never raises: a missing, invalid or expired token, or one whose
        user id is not a UUID, yields an anonymous viewer.

        Args:
            token: Value of the auth cookie, if any

        Returns:
            Viewer with user ID and roles, or an anonymous viewer
        """
        if not token:
            return Viewer()

        try:
            payload = self.verify_token(token)
            user_id = UserId(UUID(payload.user_id))
        except (JWTError, ValueError) as e:
            logfire.debug("Treating request as anonymous", reason=str(e))
            return Viewer()

        return Viewer(user_id=user_id, roles=frozenset(payload.roles))
