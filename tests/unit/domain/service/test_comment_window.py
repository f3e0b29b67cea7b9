"""Unit tests for comment selection, pruning and cutting."""

from forum.domain.service import CommentOrdering
from forum.domain.service.comment_tree import (
    assemble_tree,
    iter_tree,
    measure_tree,
    sort_tree,
)
from forum.domain.service.comment_window import (
    cut_tree,
    prune_tree,
    select_focus,
    select_page,
)
from forum.domain.value import CommentOrder, Cursor, OrderDirection
from tests.conftest import cid, make_comment

DATE_ASC = CommentOrdering(CommentOrder.DATE, OrderDirection.ASC)


def _prepare(comments, ordering=DATE_ASC):
    assembled = assemble_tree(comments)
    root = sort_tree(measure_tree(assembled.root), ordering)
    return root, assembled.covered


def _child_ids(node):
    return [child.id for child in node.children]


def _simple_thread():
    return [make_comment(1), make_comment(2, parent=1), make_comment(3)]


class TestSelectPage:
    """Tests for select_page."""

    def test_picks_first_across_depths(self):
        _, covered = _prepare(_simple_thread())

        assert select_page(covered, DATE_ASC, first=2) == {cid(1), cid(2)}

    def test_respects_max_depth(self):
        _, covered = _prepare(_simple_thread())

        assert select_page(covered, DATE_ASC, first=2, max_depth=0) == {
            cid(1),
            cid(3),
        }

    def test_zero_first_selects_nothing(self):
        _, covered = _prepare(_simple_thread())

        assert select_page(covered, DATE_ASC, first=0) == frozenset()


class TestPruneTree:
    """Tests for prune_tree."""

    def test_full_page_keeps_everything(self):
        """Selecting every comment leaves the tree and its page info intact."""
        # Arrange
        root, covered = _prepare(_simple_thread())
        visible = select_page(covered, DATE_ASC, first=10)

        # Act
        pruned = prune_tree(root, visible, DATE_ASC)

        # Assert
        assert _child_ids(pruned) == [cid(1), cid(3)]
        assert _child_ids(pruned.children[0]) == [cid(2)]
        assert pruned.total_count == 3
        assert pruned.children[0].total_count == 1
        for node in iter_tree(pruned):
            assert node.page_info.has_next_page is False

    def test_partial_page_emits_cursor(self):
        """Root keeps one of two top-level comments and can resume after it."""
        # Arrange
        root, covered = _prepare(_simple_thread())
        visible = select_page(covered, DATE_ASC, first=1)

        # Act
        pruned = prune_tree(root, visible, DATE_ASC)

        # Assert
        assert _child_ids(pruned) == [cid(1)]
        assert pruned.page_info.has_next_page is True
        cursor = Cursor.decode(pruned.page_info.end_cursor)
        assert cursor is not None
        assert cursor.parent_id is None
        assert cursor.after_id == cid(1)
        assert cursor.order_by == CommentOrder.DATE
        assert cursor.order_direction == OrderDirection.ASC

    def test_node_that_lost_all_replies_has_no_cursor(self):
        """Fetch more by parent ID when none of the replies survived."""
        root, covered = _prepare(_simple_thread())
        visible = select_page(covered, DATE_ASC, first=1)

        pruned = prune_tree(root, visible, DATE_ASC)

        first = pruned.children[0]
        assert first.children == ()
        assert first.page_info.has_next_page is True
        assert first.page_info.end_cursor is None
        # Counts still describe the unpruned tree
        assert first.total_count == 1

    def test_ancestors_of_visible_comments_are_kept(self):
        comments = [
            make_comment(1),
            make_comment(2, parent=1),
            make_comment(3, parent=2),
            make_comment(4),
        ]
        root, _ = _prepare(comments)

        pruned = prune_tree(root, frozenset({cid(3)}), DATE_ASC)

        assert _child_ids(pruned) == [cid(1)]
        assert _child_ids(pruned.children[0]) == [cid(2)]
        assert _child_ids(pruned.children[0].children[0]) == [cid(3)]

    def test_empty_selection_prunes_everything(self):
        root, _ = _prepare(_simple_thread())

        pruned = prune_tree(root, frozenset(), DATE_ASC)

        assert pruned.children == ()
        assert pruned.page_info.has_next_page is True
        assert pruned.page_info.end_cursor is None
        assert pruned.total_count == 3

    def test_cursor_scoped_to_nested_parent(self):
        comments = [
            make_comment(1),
            make_comment(2, parent=1),
            make_comment(3, parent=1),
        ]
        root, _ = _prepare(comments)

        pruned = prune_tree(root, frozenset({cid(2)}), DATE_ASC)

        first = pruned.children[0]
        cursor = Cursor.decode(first.page_info.end_cursor)
        assert cursor is not None
        assert cursor.parent_id == cid(1)
        assert cursor.after_id == cid(2)
        # The root did not lose any children
        assert pruned.page_info.has_next_page is False


class TestSelectFocus:
    """Tests for select_focus."""

    def test_focus_on_reply(self):
        """Focus window contains the focus; pruning adds its ancestors."""
        # Arrange
        comments = _simple_thread() + [make_comment(4)]
        root, covered = _prepare(comments)

        # Act
        visible = select_focus(covered, DATE_ASC, cid(2))
        pruned = prune_tree(root, visible, DATE_ASC)

        # Assert
        assert visible == {cid(2)}
        assert _child_ids(pruned) == [cid(1)]
        assert _child_ids(pruned.children[0]) == [cid(2)]

    def test_neighbouring_siblings_and_first_reply(self):
        comments = [make_comment(n) for n in (1, 2, 3, 4, 5)] + [
            make_comment(6, parent=3),
            make_comment(7, parent=3),
        ]
        _, covered = _prepare(comments)

        visible = select_focus(covered, DATE_ASC, cid(3))

        assert visible == {cid(2), cid(3), cid(4), cid(6)}

    def test_first_sibling_window_is_clamped(self):
        comments = [make_comment(n) for n in (1, 2, 3)]
        _, covered = _prepare(comments)

        visible = select_focus(covered, DATE_ASC, cid(1))

        assert visible == {cid(1), cid(2)}

    def test_last_sibling_window_is_clamped(self):
        comments = [make_comment(n) for n in (1, 2, 3)]
        _, covered = _prepare(comments)

        visible = select_focus(covered, DATE_ASC, cid(3))

        assert visible == {cid(2), cid(3)}

    def test_unknown_focus_selects_nothing(self):
        _, covered = _prepare(_simple_thread())

        assert select_focus(covered, DATE_ASC, cid(99)) == frozenset()


class TestCutTree:
    """Tests for cut_tree."""

    def test_flat_depth_zero_hides_replies(self):
        """Top-level nodes lose their replies but report more to fetch."""
        # Arrange
        root, _ = _prepare(_simple_thread())

        # Act
        cut = cut_tree(root, max_depth=0)

        # Assert
        first = next(c for c in cut.children if c.id == cid(1))
        third = next(c for c in cut.children if c.id == cid(3))
        assert first.children == ()
        assert first.page_info.has_next_page is True
        assert first.page_info.end_cursor is None
        assert third.page_info.has_next_page is False

    def test_keeps_levels_above_cut(self):
        comments = [
            make_comment(1),
            make_comment(2, parent=1),
            make_comment(3, parent=2),
        ]
        root, _ = _prepare(comments)

        cut = cut_tree(root, max_depth=1)

        reply = cut.children[0].children[0]
        assert reply.id == cid(2)
        assert reply.children == ()
        assert reply.page_info.has_next_page is True

    def test_no_node_deeper_than_cut(self):
        comments = [make_comment(1)] + [
            make_comment(n, parent=n - 1) for n in range(2, 8)
        ]
        root, _ = _prepare(comments)

        cut = cut_tree(root, max_depth=3)

        assert max(node.depth for node in iter_tree(cut)) == 3
