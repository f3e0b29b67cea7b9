"""Domain services."""

from .base import Service
from .comment_decorator import CommentDecorator, ReferenceData
from .comment_service import CommentQuery, CommentService
from .jwt_service import JWTService
from .ordering import CommentOrdering

__all__ = [
    "CommentDecorator",
    "CommentOrdering",
    "CommentQuery",
    "CommentService",
    "JWTService",
    "ReferenceData",
    "Service",
]
