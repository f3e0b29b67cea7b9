"""Total order over comments for a given ordering mode and direction."""

from dataclasses import dataclass
from typing import Any, Callable, Iterable, TypeVar

from forum.domain.model.comment import Comment
from forum.domain.model.thread import CommentNode
from forum.domain.value import CommentOrder, OrderDirection

T = TypeVar("T", Comment, CommentNode)

_PRIMARY_KEYS: dict[CommentOrder, Callable[[Comment], Any]] = {
    CommentOrder.DATE: lambda c: c.created_at,
    CommentOrder.VOTES: lambda c: c.up_votes - c.down_votes,
    CommentOrder.HOT: lambda c: c.hotness,
}


@dataclass(frozen=True)
class CommentOrdering:
    """Sort key plus direction.

    The comment id is appended to every key so that equal scores still
    order deterministically.
    """

    order_by: CommentOrder = CommentOrder.HOT
    order_direction: OrderDirection = OrderDirection.DESC

    @property
    def reverse(self) -> bool:
        return self.order_direction == OrderDirection.DESC

    def key(self, item: Comment | CommentNode) -> tuple[Any, Any]:
        comment = item.comment if isinstance(item, CommentNode) else item
        if comment is None:
            raise ValueError("The synthetic root node has no sort key")
        return _PRIMARY_KEYS[self.order_by](comment), comment.id

    def sorted(self, items: Iterable[T]) -> list[T]:
        """Return the items in this ordering."""
        return sorted(items, key=self.key, reverse=self.reverse)
