"""Unit tests for comment tree assembly."""

from portal.domain.service import build_comment_tree
from portal.domain.service.comment_tree import ANONYMOUS_READER_NAME
from tests.conftest import make_comment


def _shape(nodes):
    """Reduce a forest to nested (id, replies) tuples."""
    return [(node.id, _shape(node.replies)) for node in nodes]


class TestBuildCommentTree:
    """Tests for build_comment_tree."""

    def test_empty_input_gives_empty_forest(self):
        """No comments should produce no roots."""
        assert build_comment_tree([]) == []

    def test_nested_replies_and_root_order(self):
        """Roots and chained replies should nest under their parents."""
        # Arrange: R1(t=1), R2(t=2), C1 -> R1 (t=3), C2 -> C1 (t=4)
        comments = [
            make_comment(1, article_id=10, minutes=1),
            make_comment(2, article_id=10, minutes=2),
            make_comment(3, article_id=10, parent_id=1, minutes=3),
            make_comment(4, article_id=10, parent_id=3, minutes=4),
        ]

        # Act
        forest = build_comment_tree(comments)

        # Assert
        assert _shape(forest) == [
            (1, [(3, [(4, [])])]),
            (2, []),
        ]

    def test_input_order_does_not_matter(self):
        """Siblings should be ordered by creation time, not input order."""
        comments = [
            make_comment(5, article_id=10, parent_id=1, minutes=9),
            make_comment(2, article_id=10, minutes=5),
            make_comment(4, article_id=10, parent_id=1, minutes=3),
            make_comment(1, article_id=10, minutes=1),
        ]

        forest = build_comment_tree(comments)

        assert _shape(forest) == [(1, [(4, []), (5, [])]), (2, [])]

    def test_same_timestamp_siblings_ordered_by_id(self):
        """Siblings created in the same minute should keep ID order."""
        comments = [
            make_comment(8, article_id=10, minutes=1),
            make_comment(3, article_id=10, minutes=1),
        ]

        forest = build_comment_tree(comments)

        assert [node.id for node in forest] == [3, 8]

    def test_every_comment_appears_once(self):
        """Node count should equal input count for a well-formed set."""
        comments = [make_comment(1, article_id=10, minutes=0)]
        comments += [
            make_comment(i, article_id=10, parent_id=i - 1, minutes=i)
            for i in range(2, 30)
        ]
        comments += [make_comment(100, article_id=10, parent_id=1, minutes=50)]

        forest = build_comment_tree(comments)

        assert sum(node.count() for node in forest) == len(comments)

    def test_sibling_timestamps_are_non_decreasing(self):
        """Every sibling list should be sorted by creation time."""
        comments = [
            make_comment(1, article_id=10, minutes=0),
            make_comment(2, article_id=10, parent_id=1, minutes=30),
            make_comment(3, article_id=10, parent_id=1, minutes=10),
            make_comment(4, article_id=10, parent_id=1, minutes=20),
            make_comment(5, article_id=10, parent_id=3, minutes=40),
            make_comment(6, article_id=10, parent_id=3, minutes=35),
        ]

        def check(nodes):
            stamps = [node.created_at for node in nodes]
            assert stamps == sorted(stamps)
            for node in nodes:
                check(node.replies)

        check(build_comment_tree(comments))

    def test_orphaned_reply_is_left_out(self):
        """A reply whose parent is missing from the input is not rendered."""
        # Comment 2 replied to comment 1, which is no longer approved
        comments = [
            make_comment(2, article_id=10, parent_id=1, minutes=2),
            make_comment(3, article_id=10, parent_id=2, minutes=3),
            make_comment(4, article_id=10, minutes=4),
        ]

        forest = build_comment_tree(comments)

        assert _shape(forest) == [(4, [])]

    def test_self_referencing_comment_does_not_loop(self):
        """A comment listing itself as parent is never reached."""
        comments = [
            make_comment(1, article_id=10, minutes=1),
            make_comment(2, article_id=10, parent_id=2, minutes=2),
        ]

        forest = build_comment_tree(comments)

        assert _shape(forest) == [(1, [])]

    def test_duplicate_id_is_emitted_once(self):
        """A row repeating an already placed ID is skipped."""
        comments = [
            make_comment(1, article_id=10, minutes=1),
            make_comment(1, article_id=10, parent_id=1, minutes=2),
        ]

        forest = build_comment_tree(comments)

        assert _shape(forest) == [(1, [])]

    def test_node_display_fields(self):
        """Nodes should carry formatted date and author fallback."""
        comments = [
            make_comment(1, article_id=10, minutes=75, author_name=""),
            make_comment(2, article_id=10, minutes=80, author_name="Joana"),
        ]

        first, second = build_comment_tree(comments)

        assert first.date == "01/03/2024 10:15"
        assert first.author_name == ANONYMOUS_READER_NAME
        assert first.content == "Comment 1"
        assert second.author_name == "Joana"
