"""
Markdown syntax tree nodes.

A small, generic node model for parsed markdown documents. Every node has a
type string, ordered children, an optional literal value, type-specific
properties and an optional metadata container (``data``).

The metadata container is created lazily. Its ``hProperties`` map holds
key -> string pairs that the HTML renderer emits as element attributes.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

# Node types
ROOT = "root"
PARAGRAPH = "paragraph"
HEADING = "heading"
BLOCKQUOTE = "blockquote"
LIST = "list"
LIST_ITEM = "listItem"
CODE = "code"
HTML = "html"
THEMATIC_BREAK = "thematicBreak"
TABLE = "table"
TABLE_ROW = "tableRow"
TABLE_CELL = "tableCell"
TEXT = "text"
EMPHASIS = "emphasis"
STRONG = "strong"
DELETE = "delete"
INLINE_CODE = "inlineCode"
BREAK = "break"
LINK = "link"
IMAGE = "image"

# Key of the renderer properties map inside ``Node.data``
RENDERER_PROPERTIES = "hProperties"

_RESERVED_KEYS = ("type", "children", "value", "data")


@dataclass
class Node:
    """
    A node in a markdown syntax tree.

    Attributes:
        type: Node type (see the module constants)
        children: Ordered child nodes
        value: Literal content for leaf nodes (text, code, html)
        props: Type-specific fields (depth, url, title, alt, align, ...)
        data: Optional metadata container, ``None`` until first needed
    """
    type: str
    children: List["Node"] = field(default_factory=list)
    value: Optional[str] = None
    props: Dict[str, Any] = field(default_factory=dict)
    data: Optional[Dict[str, Any]] = None

    def ensure_data(self) -> Dict[str, Any]:
        """Return the metadata container, creating it if absent."""
        if self.data is None:
            self.data = {}
        return self.data

    def renderer_properties(self) -> Dict[str, str]:
        """
        Return the renderer properties map, creating it if absent.

        Existing entries are preserved.
        """
        data = self.ensure_data()
        properties = data.get(RENDERER_PROPERTIES)
        if properties is None:
            properties = {}
            data[RENDERER_PROPERTIES] = properties
        return properties

    def get_renderer_properties(self) -> Dict[str, str]:
        """Return the renderer properties without creating anything."""
        if not self.data:
            return {}
        return self.data.get(RENDERER_PROPERTIES) or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert the subtree to plain JSON-compatible dictionaries."""
        result: Dict[str, Any] = {"type": self.type}
        if self.value is not None:
            result["value"] = self.value
        result.update({key: val for key, val in self.props.items() if key not in _RESERVED_KEYS})
        if self.children:
            result["children"] = [child.to_dict() for child in self.children]
        if self.data is not None:
            result["data"] = self.data
        return result

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> "Node":
        """
        Build a subtree from dictionaries shaped like ``to_dict`` output.

        Raises:
            ValueError: If a dictionary has no ``type``
        """
        if "type" not in payload:
            raise ValueError(f"Node dictionary is missing 'type': {payload!r}")
        props = {key: value for key, value in payload.items() if key not in _RESERVED_KEYS}
        return cls(
            type=payload["type"],
            children=[cls.from_dict(child) for child in payload.get("children", [])],
            value=payload.get("value"),
            props=props,
            data=payload.get("data"),
        )


def text(value: str) -> Node:
    """Create a text node."""
    return Node(TEXT, value=value)
