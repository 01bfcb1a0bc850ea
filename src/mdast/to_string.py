"""Plain-text flattening of syntax tree nodes."""

from typing import Iterable, Optional, Union

from .nodes import IMAGE, Node


def to_string(
    node: Union[Node, Iterable[Node], None],
    include_image_alt: bool = True
) -> str:
    """
    Get the text content of a node or a list of nodes.

    Markup is discarded and its text kept: a link yields its label, strong
    and emphasis yield their inner text, an image yields its alt text.

    Args:
        node: Node, iterable of nodes, or None
        include_image_alt: Whether images contribute their alt text

    Returns:
        Concatenated plain text ("" for None)
    """
    if node is None:
        return ""
    if isinstance(node, Node):
        return _node_to_string(node, include_image_alt)
    return "".join(_node_to_string(child, include_image_alt) for child in node)


def _node_to_string(node: Node, include_image_alt: bool) -> str:
    if node.value is not None:
        return node.value
    if node.type == IMAGE:
        if not include_image_alt:
            return ""
        alt: Optional[str] = node.props.get("alt")
        return alt or ""
    return "".join(_node_to_string(child, include_image_alt) for child in node.children)
