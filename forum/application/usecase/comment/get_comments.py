"""Get comments use case."""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, Field

from forum.config import CommentSettings
from forum.domain.model import (
    CommentConnection,
    CommentView,
    DisplayAuthor,
    PageInfo,
    PublicUser,
)
from forum.domain.service import CommentQuery, CommentService, JWTService
from forum.domain.value import (
    CommentId,
    CommentOrder,
    CommentVote,
    DiscussionId,
    OrderDirection,
)

from ..base import BaseUseCase


class CredentialResponse(BaseModel):
    """Credential badge in response."""

    id: str
    description: str
    verified: bool


class DisplayAuthorResponse(BaseModel):
    """Author identity as shown to the viewer."""

    name: str
    anonymity: bool
    profile_picture: str | None
    credential: CredentialResponse | None

    @classmethod
    def from_domain(cls, author: DisplayAuthor) -> "DisplayAuthorResponse":
        credential = author.credential
        return cls(
            name=author.name,
            anonymity=author.anonymity,
            profile_picture=author.profile_picture,
            credential=(
                CredentialResponse(
                    id=str(credential.id),
                    description=credential.description,
                    verified=credential.verified,
                )
                if credential
                else None
            ),
        )


class AuthorResponse(BaseModel):
    """Real author, only returned to privileged viewers."""

    id: str
    name: str
    username: str | None

    @classmethod
    def from_domain(cls, user: PublicUser) -> "AuthorResponse":
        return cls(id=str(user.id), name=user.name, username=user.username)


class PageInfoResponse(BaseModel):
    """Continuation info of a comment list.

    If end_cursor is null and has_next_page is true, the parent has more
    replies: fetch them with the parent's id as parent_id. If end_cursor is
    set, fetch the next page with it as ``after``.
    """

    has_next_page: bool
    end_cursor: str | None

    @classmethod
    def from_domain(cls, page_info: PageInfo) -> "PageInfoResponse":
        return cls(
            has_next_page=page_info.has_next_page, end_cursor=page_info.end_cursor
        )


class CommentResponse(BaseModel):
    """Comment item in response, with its replies."""

    id: str
    discussion_id: str
    parent_id: str | None
    parent_ids: list[str]
    content: str
    published: bool
    admin_unpublished: bool
    up_votes: int
    down_votes: int
    score: int
    hotness: float
    depth: int
    display_author: DisplayAuthorResponse
    author: AuthorResponse | None
    user_vote: CommentVote | None
    user_can_edit: bool
    created_at: datetime
    updated_at: datetime
    comments: "CommentConnectionResponse"

    @classmethod
    def from_domain(cls, view: CommentView) -> "CommentResponse":
        """Convert a decorated domain comment to the response model.

        Args:
            view: Decorated comment

        Returns:
            API response model with replies recursively converted
        """
        comment = view.comment
        return cls(
            id=str(comment.id),
            discussion_id=str(comment.discussion_id),
            parent_id=str(comment.parent_id) if comment.parent_id else None,
            parent_ids=[str(pid) for pid in view.parent_ids],
            content=view.content,
            published=comment.published,
            admin_unpublished=comment.admin_unpublished,
            up_votes=comment.up_votes,
            down_votes=comment.down_votes,
            score=comment.score,
            hotness=comment.hotness,
            depth=view.depth,
            display_author=DisplayAuthorResponse.from_domain(view.display_author),
            author=AuthorResponse.from_domain(view.author) if view.author else None,
            user_vote=view.user_vote,
            user_can_edit=view.user_can_edit,
            created_at=comment.created_at,
            updated_at=comment.updated_at,
            comments=CommentConnectionResponse.from_domain(view.comments),
        )


class CommentConnectionResponse(BaseModel):
    """A page of comments under one parent.

    total_count counts the whole subtree; direct_total_count only the
    direct replies. Both are computed before windowing.
    """

    total_count: int
    direct_total_count: int
    page_info: PageInfoResponse
    nodes: list[CommentResponse]
    focus: CommentResponse | None = None

    @classmethod
    def from_domain(cls, connection: CommentConnection) -> "CommentConnectionResponse":
        return cls(
            total_count=connection.total_count,
            direct_total_count=connection.direct_total_count,
            page_info=PageInfoResponse.from_domain(connection.page_info),
            nodes=[CommentResponse.from_domain(node) for node in connection.nodes],
            focus=(
                CommentResponse.from_domain(connection.focus)
                if connection.focus
                else None
            ),
        )


CommentResponse.model_rebuild()
CommentConnectionResponse.model_rebuild()


class GetCommentsRequest(BaseModel):
    """Get comments request."""

    discussion_id: str  # UUID string
    order_by: Optional[CommentOrder] = None
    order_direction: Optional[OrderDirection] = None
    first: Optional[int] = Field(default=None, ge=0)
    after: Optional[str] = None
    focus_id: Optional[str] = None  # UUID string
    parent_id: Optional[str] = None  # UUID string
    flat_depth: Optional[int] = Field(default=None, ge=0)
    depth: Optional[int] = Field(default=None, ge=0)
    auth_token: str | None = None  # JWT token for authentication (optional)


class GetCommentsUseCase(
    BaseUseCase[GetCommentsRequest, CommentConnectionResponse]
):
    """Use case for reading one window of a discussion's comment tree."""

    def __init__(
        self,
        comment_service: CommentService,
        jwt_service: JWTService,
        comment_settings: CommentSettings,
    ) -> None:
        """Initialize get comments use case.

        Args:
            comment_service: Comment domain service
            jwt_service: JWT service for resolving the viewer
            comment_settings: Default ordering and page size limits
        """
        self.comment_service = comment_service
        self.jwt_service = jwt_service
        self.settings = comment_settings

    async def execute(self, request: GetCommentsRequest) -> CommentConnectionResponse:
        """Execute get comments flow.

        Ordering and page size fall back to the configured defaults, and
        ``first`` is capped at the configured maximum.

        Args:
            request: Discussion ID, window parameters and optional auth token

        Returns:
            Decorated comment connection

        Raises:
            NotFoundError: If the discussion does not exist
            ValueError: If an ID is not a valid UUID
        """
        viewer = self.jwt_service.get_viewer_from_token(request.auth_token)

        first = self.settings.default_first
        if request.first is not None:
            first = request.first
        query = CommentQuery(
            order_by=request.order_by or self.settings.default_order_by,
            order_direction=(
                request.order_direction or self.settings.default_order_direction
            ),
            first=min(first, self.settings.max_first),
            after=request.after,
            focus_id=CommentId(UUID(request.focus_id)) if request.focus_id else None,
            parent_id=CommentId(UUID(request.parent_id)) if request.parent_id else None,
            flat_depth=request.flat_depth,
            requested_depth=request.depth,
        )

        connection = await self.comment_service.get_comments(
            discussion_id=DiscussionId(UUID(request.discussion_id)),
            query=query,
            viewer=viewer,
        )
        return CommentConnectionResponse.from_domain(connection)
