"""Windowing of an assembled comment tree.

Selection decides which comment ids are visible in a response; pruning
reduces the tree to those ids plus all of their ancestors; cutting stops
the tree at a requested nesting depth.
"""

from dataclasses import replace
from typing import Iterable, Optional

import logfire

from forum.domain.model.thread import CommentNode, PageInfo
from forum.domain.value import CommentId, Cursor

from .ordering import CommentOrdering

# Siblings shown on each side of a focused comment
FOCUS_SIBLING_CONTEXT = 1
# Replies shown below a focused comment
FOCUS_REPLY_CONTEXT = 1


def select_page(
    covered: Iterable[CommentNode],
    ordering: CommentOrdering,
    first: int,
    max_depth: Optional[int] = None,
) -> frozenset[CommentId]:
    """Pick the first ``first`` comments in ordering across all depths.

    Only comments at ``max_depth`` or above compete for a place.
    """
    eligible = [
        node for node in covered if max_depth is None or node.depth <= max_depth
    ]
    return frozenset(node.id for node in ordering.sorted(eligible)[:first])


def select_focus(
    covered: Iterable[CommentNode],
    ordering: CommentOrdering,
    focus_id: CommentId,
) -> frozenset[CommentId]:
    """Pick a focused comment with its neighbouring siblings and first reply.

    Returns an empty set when the focus is not part of the covered tree.
    """
    covered = list(covered)
    focus = next((node for node in covered if node.id == focus_id), None)
    if focus is None or focus.comment is None:
        logfire.info("Focus comment not in scope", focus_id=str(focus_id))
        return frozenset()

    siblings = ordering.sorted(
        node
        for node in covered
        if node.comment is not None
        and node.comment.parent_id == focus.comment.parent_id
        and node.depth == focus.depth
    )
    index = next(i for i, node in enumerate(siblings) if node.id == focus_id)
    window = siblings[
        max(index - FOCUS_SIBLING_CONTEXT, 0) : index + FOCUS_SIBLING_CONTEXT + 1
    ]

    replies = ordering.sorted(
        node
        for node in covered
        if node.comment is not None and node.comment.parent_id == focus_id
    )[:FOCUS_REPLY_CONTEXT]

    return frozenset(node.id for node in (*window, *replies))


def prune_tree(
    root: CommentNode, visible: frozenset[CommentId], ordering: CommentOrdering
) -> CommentNode:
    """Reduce the tree to visible comments and their ancestors.

    A sibling list that lost entries reports ``has_next_page``; if some of
    its entries survived, it also gets an ``end_cursor`` resuming after the
    last survivor under ``ordering``.

    Args:
        root: Measured and sorted tree
        visible: Comment ids that must appear in the response
        ordering: Ordering encoded into emitted cursors

    Returns:
        The pruned tree. With no visible ids every child of the root is gone.
    """
    pruned, _ = _prune(root, visible, ordering)
    return pruned


def _prune(
    node: CommentNode, visible: frozenset[CommentId], ordering: CommentOrdering
) -> tuple[CommentNode, bool]:
    kept = []
    for child in node.children:
        pruned_child, keep = _prune(child, visible, ordering)
        if keep:
            kept.append(pruned_child)

    page_info = node.page_info
    if len(kept) < len(node.children):
        end_cursor = None
        if kept:
            end_cursor = Cursor(
                order_by=ordering.order_by,
                order_direction=ordering.order_direction,
                parent_id=node.id,
                after_id=kept[-1].id,
            ).encode()
        page_info = PageInfo(has_next_page=True, end_cursor=end_cursor)

    pruned = replace(node, children=tuple(kept), page_info=page_info)
    return pruned, bool(kept) or node.id in visible


def cut_tree(node: CommentNode, max_depth: int) -> CommentNode:
    """Drop everything nested deeper than ``max_depth``.

    Nodes at ``max_depth`` lose their replies and instead signal
    ``has_next_page`` when they had any, to be fetched with the node's id
    as parent.
    """
    if node.depth >= max_depth:
        return replace(
            node,
            children=(),
            page_info=PageInfo(
                has_next_page=node.page_info.has_next_page or node.total_count > 0,
            ),
        )
    return replace(
        node, children=tuple(cut_tree(child, max_depth) for child in node.children)
    )
