"""Comment use cases."""

from .get_comments import (
    CommentConnectionResponse,
    CommentResponse,
    GetCommentsRequest,
    GetCommentsUseCase,
)

__all__ = [
    "CommentConnectionResponse",
    "CommentResponse",
    "GetCommentsRequest",
    "GetCommentsUseCase",
]
