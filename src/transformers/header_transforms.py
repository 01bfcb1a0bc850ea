"""
Header text derivation strategies.

Each strategy takes a header cell node and returns the string used to
annotate the cells of that column.
"""

import re

from ..mdast.nodes import Node
from ..mdast.to_string import to_string

WHITESPACE_PATTERN = re.compile(r'\s+')


def default_header_transform(cell: Node) -> str:
    """
    Flatten the header cell's inline content to plain text.

    Example:
        ``**Bold Header**`` -> ``Bold Header``
        ``[Link Header](https://example.com)`` -> ``Link Header``
    """
    return to_string(cell)


def slugify_header(cell: Node) -> str:
    """
    Lower-case the header text and replace whitespace runs with dashes.

    Example:
        ``Header 1`` -> ``header-1``
    """
    return WHITESPACE_PATTERN.sub("-", to_string(cell).lower())
