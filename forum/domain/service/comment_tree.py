"""Comment tree assembly, measuring and sorting.

All functions are pure: they take a tree (or flat rows) and return a new
tree built from frozen CommentNode values.
"""

from collections import defaultdict
from dataclasses import replace
from typing import Iterable, Iterator, Optional

import logfire

from forum.domain.model.comment import Comment
from forum.domain.model.thread import AssembledTree, CommentNode, PageInfo
from forum.domain.value import CommentId

from .ordering import CommentOrdering


def _ancestor_ids(
    parent_id: Optional[CommentId], by_id: dict[CommentId, Comment]
) -> tuple[CommentId, ...]:
    """Ancestor chain of a comment id, outermost first, including itself."""
    chain: list[CommentId] = []
    seen: set[CommentId] = set()
    current = parent_id
    while current is not None and current not in seen:
        seen.add(current)
        chain.append(current)
        parent = by_id.get(current)
        current = parent.parent_id if parent else None
    return tuple(reversed(chain))


def assemble_tree(
    comments: Iterable[Comment],
    parent_id: Optional[CommentId] = None,
    after_id: Optional[CommentId] = None,
    ordering: Optional[CommentOrdering] = None,
) -> AssembledTree:
    """Build the tree rooted at ``parent_id`` from flat comment rows.

    When ``after_id`` is given, the root's own children are ordered and
    only those following ``after_id`` are kept; deeper levels are left
    untouched. An ``after_id`` that is not among the root's children
    yields an empty root.

    Args:
        comments: Every comment of the discussion, in any order
        parent_id: Comment whose replies form the tree; None for the
            discussion root
        after_id: Last sibling already delivered by a previous page
        ordering: Ordering the previous page used; required with after_id

    Returns:
        The tree plus every node incorporated into it, in visiting order
    """
    comments = list(comments)
    by_id = {c.id: c for c in comments}
    children_of: dict[Optional[CommentId], list[Comment]] = defaultdict(list)
    for comment in comments:
        children_of[comment.parent_id].append(comment)

    # Each comment is attached at most once, even if parent links form a cycle
    attached: set[Optional[CommentId]] = {parent_id}

    def build(
        comment: Optional[Comment],
        node_id: Optional[CommentId],
        depth: int,
        parent_ids: tuple[CommentId, ...],
    ) -> CommentNode:
        candidates = [c for c in children_of.get(node_id, []) if c.id not in attached]

        if depth == -1 and after_id is not None:
            if ordering is None:
                raise ValueError("An ordering is required to resume after a comment")
            candidates = ordering.sorted(candidates)
            index = next(
                (i for i, c in enumerate(candidates) if c.id == after_id), None
            )
            if index is None:
                logfire.info(
                    "Cursor position not found in sibling list",
                    parent_id=str(node_id) if node_id else None,
                    after_id=str(after_id),
                )
                candidates = []
            else:
                candidates = candidates[index + 1 :]

        attached.update(c.id for c in candidates)
        child_parent_ids = parent_ids + (node_id,) if node_id is not None else ()

        return CommentNode(
            id=node_id,
            depth=depth,
            comment=comment,
            parent_ids=parent_ids,
            children=tuple(
                build(child, child.id, depth + 1, child_parent_ids)
                for child in candidates
            ),
        )

    root_parent_ids = _ancestor_ids(parent_id, by_id)[:-1]
    root = build(None, parent_id, -1, root_parent_ids)
    covered = tuple(node for node in iter_tree(root) if node is not root)

    logfire.debug(
        "Assembled comment tree",
        parent_id=str(parent_id) if parent_id else None,
        covered=len(covered),
        total=len(comments),
    )
    return AssembledTree(root=root, covered=covered)


def iter_tree(node: CommentNode) -> Iterator[CommentNode]:
    """Yield a node and all its descendants in pre-order."""
    yield node
    for child in node.children:
        yield from iter_tree(child)


def measure_tree(node: CommentNode) -> CommentNode:
    """Compute descendant counts bottom-up.

    ``total_count`` of a node is the sum over its children of
    ``1 + child.total_count``. Page info is reset to "nothing more".
    """
    children = tuple(measure_tree(child) for child in node.children)
    return replace(
        node,
        children=children,
        total_count=sum(1 + child.total_count for child in children),
        direct_total_count=len(children),
        page_info=PageInfo(),
    )


def sort_tree(node: CommentNode, ordering: CommentOrdering) -> CommentNode:
    """Order every sibling list of the tree."""
    children = ordering.sorted(sort_tree(child, ordering) for child in node.children)
    return replace(node, children=tuple(children))
