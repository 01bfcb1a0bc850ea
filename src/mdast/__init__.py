"""
Markdown syntax tree support.

Node model, depth-first visitor, plain-text flattening, and the
markdown-it-py parser and HTML renderer the table transforms plug into.
"""

from .nodes import Node, RENDERER_PROPERTIES
from .visit import visit, find_all, CONTINUE, SKIP, EXIT
from .to_string import to_string
from .parser import MarkdownParser, parse_markdown
from .html_renderer import HtmlRenderer, render_html

__all__ = [
    "Node",
    "RENDERER_PROPERTIES",
    "visit",
    "find_all",
    "CONTINUE",
    "SKIP",
    "EXIT",
    "to_string",
    "MarkdownParser",
    "parse_markdown",
    "HtmlRenderer",
    "render_html",
]
