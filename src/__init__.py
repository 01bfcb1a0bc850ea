"""
Table Cell Titles

Annotates every body cell of a markdown table with its column header text,
so rendered ``<td>`` elements carry a ``data-title`` (or custom) attribute
for responsive table layouts.
"""

__version__ = "1.0.0"

# Main classes available for library use
from .mdast.nodes import Node
from .mdast.parser import MarkdownParser, parse_markdown
from .mdast.html_renderer import HtmlRenderer, render_html
from .transformers.table_cell_titles import annotate, table_cell_titles
from .transformers.data_models import TableCellTitlesOptions
from .transformers.header_transforms import default_header_transform, slugify_header
from .transformers.processor import MarkdownProcessor

__all__ = [
    "Node",
    "MarkdownParser",
    "parse_markdown",
    "HtmlRenderer",
    "render_html",
    "annotate",
    "table_cell_titles",
    "TableCellTitlesOptions",
    "default_header_transform",
    "slugify_header",
    "MarkdownProcessor",
]
