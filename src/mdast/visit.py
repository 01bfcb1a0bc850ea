"""
Depth-first tree visitor.

Walks a node tree in pre-order and calls a visitor for every node matching a
test. The visitor controls the walk through its return value.
"""

from typing import Callable, Iterable, List, Optional, Union

from .nodes import Node

CONTINUE = None
SKIP = "skip"
EXIT = "exit"

Test = Union[None, str, Iterable[str], Callable[[Node], bool]]
Visitor = Callable[[Node, Optional[int], Optional[Node]], Optional[str]]


def _compile_test(test: Test) -> Callable[[Node], bool]:
    if test is None:
        return lambda node: True
    if isinstance(test, str):
        return lambda node: node.type == test
    if callable(test):
        return test
    types = frozenset(test)
    return lambda node: node.type in types


def visit(tree: Node, test: Test, visitor: Visitor) -> None:
    """
    Visit every node in ``tree`` that passes ``test``, depth-first.

    Args:
        tree: Root of the walk (visited itself)
        test: ``None`` for every node, a type string, several type strings,
            or a predicate taking a node
        visitor: Called as ``visitor(node, index, parent)``. Return
            ``SKIP`` to leave the node's children unvisited, ``EXIT`` to
            stop the walk, anything else to continue.
    """
    matches = _compile_test(test)

    def walk(node: Node, index: Optional[int], parent: Optional[Node]) -> bool:
        if matches(node):
            action = visitor(node, index, parent)
            if action == EXIT:
                return False
            if action == SKIP:
                return True
        # Iterate over a snapshot so visitors may edit the child list
        for child_index, child in enumerate(list(node.children)):
            if not walk(child, child_index, node):
                return False
        return True

    walk(tree, None, None)


def find_all(tree: Node, test: Test) -> List[Node]:
    """Return every node passing ``test`` in depth-first order."""
    found: List[Node] = []
    visit(tree, test, lambda node, index, parent: found.append(node))
    return found
