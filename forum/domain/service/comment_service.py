"""Comment domain service."""

from dataclasses import dataclass
from typing import Optional

import logfire

from forum.domain.error import NotFoundError
from forum.domain.model import CommentConnection, Discussion, Viewer
from forum.domain.repository import CommentRepository, DiscussionRepository
from forum.domain.value import (
    CommentId,
    CommentOrder,
    Cursor,
    DiscussionId,
    OrderDirection,
)

from .base import Service
from .comment_decorator import CommentDecorator
from .comment_tree import assemble_tree, measure_tree, sort_tree
from .comment_window import cut_tree, prune_tree, select_focus, select_page
from .ordering import CommentOrdering


@dataclass(frozen=True)
class CommentQuery:
    """Shape of the window a client asks for.

    ``requested_depth`` is the number of reply levels the client renders
    below the top-level list; ``flat_depth`` caps nesting the same way.
    """

    order_by: CommentOrder = CommentOrder.HOT
    order_direction: OrderDirection = OrderDirection.DESC
    first: Optional[int] = 200
    after: Optional[str] = None
    focus_id: Optional[CommentId] = None
    parent_id: Optional[CommentId] = None
    flat_depth: Optional[int] = None
    requested_depth: Optional[int] = None

    @property
    def max_depth(self) -> Optional[int]:
        depths = [d for d in (self.flat_depth, self.requested_depth) if d is not None]
        return min(depths) if depths else None


class CommentService(Service):
    """Domain service for reading discussion threads."""

    def __init__(
        self,
        comment_repository: CommentRepository,
        discussion_repository: DiscussionRepository,
        comment_decorator: CommentDecorator,
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            discussion_repository: Discussion repository
            comment_decorator: Viewer-specific presentation of trees
        """
        self.comment_repository = comment_repository
        self.discussion_repository = discussion_repository
        self.comment_decorator = comment_decorator

    async def get_discussion(self, discussion_id: DiscussionId) -> Discussion:
        """Get a discussion by ID.

        Raises:
            NotFoundError: If the discussion does not exist
        """
        discussion = await self.discussion_repository.find_by_id(discussion_id)
        if discussion is None:
            logfire.warn("Discussion not found", discussion_id=str(discussion_id))
            raise NotFoundError("Discussion", str(discussion_id))
        return discussion

    async def get_comments(
        self, discussion_id: DiscussionId, query: CommentQuery, viewer: Viewer
    ) -> CommentConnection:
        """Get one window of a discussion's comment tree.

        Steps:
        1. Resolve ordering, parent scope and resume position (a valid
           ``after`` cursor overrides the query's own values)
        2. Assemble the tree under the parent scope, measure and sort it
        3. Select the visible comments (focus or first page) and prune
        4. Cut at the maximum depth
        5. Decorate for the viewer

        Args:
            discussion_id: Discussion to read
            query: Requested window
            viewer: Requesting user

        Returns:
            Connection of the scope's direct replies

        Raises:
            NotFoundError: If the discussion does not exist
        """
        with logfire.span(
            "comment_service.get_comments",
            discussion_id=str(discussion_id),
            order_by=query.order_by.value,
            order_direction=query.order_direction.value,
            first=query.first,
            has_cursor=query.after is not None,
            focus_id=str(query.focus_id) if query.focus_id else None,
            parent_id=str(query.parent_id) if query.parent_id else None,
        ):
            discussion = await self.get_discussion(discussion_id)

            cursor = Cursor.decode(query.after)
            if cursor is not None:
                ordering = CommentOrdering(cursor.order_by, cursor.order_direction)
                parent_id = cursor.parent_id
                after_id: Optional[CommentId] = cursor.after_id
                focus_id = None
            else:
                ordering = CommentOrdering(query.order_by, query.order_direction)
                parent_id = query.parent_id
                after_id = None
                focus_id = query.focus_id

            comments = await self.comment_repository.find_by_discussion(discussion.id)
            assembled = assemble_tree(
                comments, parent_id=parent_id, after_id=after_id, ordering=ordering
            )
            measured = sort_tree(measure_tree(assembled.root), ordering)
            root = measured

            max_depth = query.max_depth
            if focus_id is not None:
                visible = select_focus(assembled.covered, ordering, focus_id)
                root = prune_tree(root, visible, ordering)
            elif query.first is not None:
                visible = select_page(
                    assembled.covered, ordering, query.first, max_depth=max_depth
                )
                root = prune_tree(root, visible, ordering)

            if max_depth is not None:
                root = cut_tree(root, max_depth)

            result = await self.comment_decorator.decorate(
                root,
                assembled.covered,
                discussion,
                viewer,
                focus_id=focus_id,
                measured=measured,
            )
            logfire.info(
                "Comments retrieved for discussion",
                discussion_id=str(discussion.id),
                loaded=len(comments),
                covered=len(assembled.covered),
                total_count=result.total_count,
                returned=len(result.nodes),
                has_next_page=result.page_info.has_next_page,
            )
            return result
