"""Application layer DI providers."""

from dishka import Scope, provide

from forum.application.usecase.comment import GetCommentsUseCase
from forum.config import CommentSettings
from forum.domain.service import CommentService, JWTService
from forum.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    @provide(scope=Scope.REQUEST)
    def get_get_comments_use_case(
        self,
        comment_service: CommentService,
        jwt_service: JWTService,
        comment_settings: CommentSettings,
    ) -> GetCommentsUseCase:
        """Provide get comments use case."""
        return GetCommentsUseCase(
            comment_service=comment_service,
            jwt_service=jwt_service,
            comment_settings=comment_settings,
        )
