"""
Tests for the depth-first tree visitor.
"""

from src.mdast.nodes import EMPHASIS, PARAGRAPH, ROOT, TABLE, TEXT, Node, text
from src.mdast.visit import EXIT, SKIP, find_all, visit


def sample_tree():
    """root > [paragraph > [text a, emphasis > [text b]], table, paragraph > [text c]]"""
    return Node(ROOT, children=[
        Node(PARAGRAPH, children=[text("a"), Node(EMPHASIS, children=[text("b")])]),
        Node(TABLE),
        Node(PARAGRAPH, children=[text("c")]),
    ])


class TestVisit:
    """Tests for visit()."""

    def test_preorder_all_nodes(self):
        """With no test every node is visited in pre-order."""
        seen = []
        visit(sample_tree(), None, lambda node, index, parent: seen.append(node.value or node.type))
        assert seen == [ROOT, PARAGRAPH, "a", EMPHASIS, "b", TABLE, PARAGRAPH, "c"]

    def test_type_string_test(self):
        seen = []
        visit(sample_tree(), TEXT, lambda node, index, parent: seen.append(node.value))
        assert seen == ["a", "b", "c"]

    def test_type_list_test(self):
        seen = []
        visit(sample_tree(), [TABLE, EMPHASIS], lambda node, index, parent: seen.append(node.type))
        assert seen == [EMPHASIS, TABLE]

    def test_predicate_test(self):
        seen = []
        visit(
            sample_tree(),
            lambda node: node.value in ("a", "c"),
            lambda node, index, parent: seen.append(node.value),
        )
        assert seen == ["a", "c"]

    def test_index_and_parent(self):
        """The visitor receives the child index and parent node."""
        tree = sample_tree()
        calls = []
        visit(tree, TEXT, lambda node, index, parent: calls.append((node.value, index, parent)))
        assert calls[0] == ("a", 0, tree.children[0])
        assert calls[1] == ("b", 0, tree.children[0].children[1])
        assert calls[2] == ("c", 0, tree.children[2])

    def test_root_has_no_index_or_parent(self):
        calls = []
        visit(sample_tree(), ROOT, lambda node, index, parent: calls.append((index, parent)))
        assert calls == [(None, None)]

    def test_skip_children(self):
        """SKIP leaves the node's subtree unvisited."""
        seen = []

        def visitor(node, index, parent):
            seen.append(node.value or node.type)
            if node.type == PARAGRAPH:
                return SKIP

        visit(sample_tree(), None, visitor)
        assert seen == [ROOT, PARAGRAPH, TABLE, PARAGRAPH]

    def test_exit_stops_walk(self):
        """EXIT stops the whole traversal."""
        seen = []

        def visitor(node, index, parent):
            seen.append(node.value)
            if node.value == "b":
                return EXIT

        visit(sample_tree(), TEXT, visitor)
        assert seen == ["a", "b"]


class TestFindAll:
    def test_find_all(self):
        assert [node.value for node in find_all(sample_tree(), TEXT)] == ["a", "b", "c"]

    def test_find_all_no_match(self):
        assert find_all(sample_tree(), "image") == []
