"""
Table Cell Titles

Annotates markdown table body cells with their column header text.
"""

from .table_cell_titles import annotate, annotate_table, table_cell_titles
from .data_models import TableCellTitlesOptions, DEFAULT_ATTRIBUTE_NAME
from .header_transforms import default_header_transform, slugify_header
from .processor import MarkdownProcessor

__all__ = [
    "annotate",
    "annotate_table",
    "table_cell_titles",
    "TableCellTitlesOptions",
    "DEFAULT_ATTRIBUTE_NAME",
    "default_header_transform",
    "slugify_header",
    "MarkdownProcessor",
]
