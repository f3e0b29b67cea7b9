"""Comment routes."""

from typing import Optional

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, HTTPException, Query, status

from forum.application.usecase.comment import (
    CommentConnectionResponse,
    GetCommentsRequest,
    GetCommentsUseCase,
)
from forum.domain.error import NotFoundError
from forum.domain.value import CommentOrder, OrderDirection

router = APIRouter(prefix="/discussions", tags=["comments"], route_class=DishkaRoute)


@router.get(
    "/{discussion_id}/comments", response_model=CommentConnectionResponse
)
async def get_comments(
    discussion_id: str,
    get_comments_use_case: FromDishka[GetCommentsUseCase],
    order_by: Optional[CommentOrder] = Query(default=None),
    order_direction: Optional[OrderDirection] = Query(default=None),
    first: Optional[int] = Query(default=None, ge=0),
    after: Optional[str] = Query(default=None),
    focus_id: Optional[str] = Query(default=None),
    parent_id: Optional[str] = Query(default=None),
    flat_depth: Optional[int] = Query(default=None, ge=0),
    depth: Optional[int] = Query(default=None, ge=0),
    auth_token: str | None = Cookie(default=None),
) -> CommentConnectionResponse:
    """Get one window of a discussion's comment tree.

    Without ``after`` or ``focus_id`` the first page of top-level comments is
    returned with their replies nested below. ``after`` takes the
    ``end_cursor`` of a previous page; ``focus_id`` returns the thread around
    one comment. If authenticated, includes the viewer's vote on each comment.

    Args:
        discussion_id: Discussion UUID
        get_comments_use_case: Get comments use case from DI
        order_by: Sort key (DATE, VOTES or HOT)
        order_direction: ASC or DESC
        first: Maximum number of comments in the window
        after: Cursor from a previous page
        focus_id: Comment to center the window on
        parent_id: Only return replies below this comment
        flat_depth: Depth below which replies are not nested
        depth: Maximum depth of nested replies
        auth_token: JWT token from cookie (optional)

    Returns:
        Comment connection with nested replies

    Raises:
        HTTPException: If the discussion does not exist or an ID is malformed
    """
    try:
        request = GetCommentsRequest(
            discussion_id=discussion_id,
            order_by=order_by,
            order_direction=order_direction,
            first=first,
            after=after,
            focus_id=focus_id,
            parent_id=parent_id,
            flat_depth=flat_depth,
            depth=depth,
            auth_token=auth_token,
        )
        return await get_comments_use_case.execute(request)
    except NotFoundError as e:
        logfire.warn("Comments requested for unknown discussion", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
