"""Domain layer DI providers."""

from dishka import Scope, provide

from forum.config import AuthSettings, CommentSettings
from forum.domain.repository import (
    CommentRepository,
    CredentialRepository,
    DiscussionPreferenceRepository,
    DiscussionRepository,
    UserRepository,
)
from forum.domain.service import CommentDecorator, CommentService, JWTService
from forum.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_comment_decorator(
        self,
        user_repository: UserRepository,
        discussion_preference_repository: DiscussionPreferenceRepository,
        credential_repository: CredentialRepository,
        comment_settings: CommentSettings,
    ) -> CommentDecorator:
        """Provide comment decorator."""
        return CommentDecorator(
            user_repository=user_repository,
            discussion_preference_repository=discussion_preference_repository,
            credential_repository=credential_repository,
            comment_settings=comment_settings,
        )

    @provide
    def get_comment_service(
        self,
        comment_repository: CommentRepository,
        discussion_repository: DiscussionRepository,
        comment_decorator: CommentDecorator,
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(
            comment_repository=comment_repository,
            discussion_repository=discussion_repository,
            comment_decorator=comment_decorator,
        )
