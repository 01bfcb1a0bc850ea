#!/usr/bin/env python3
"""
Table cell titles.

Copies each table column's header text onto every body cell of that column
as a renderer property (``data-title`` by default), so the rendered
``<td>`` elements carry their header for responsive table layouts.
"""

import logging
from typing import Any, Callable, List, Mapping, Union

from ..mdast.nodes import TABLE, TABLE_ROW, Node
from ..mdast.visit import visit
from .data_models import TableCellTitlesOptions

logger = logging.getLogger(__name__)

OptionsLike = Union[TableCellTitlesOptions, Mapping[str, Any], None]


def _resolve_options(options: OptionsLike, overrides: Mapping[str, Any]) -> TableCellTitlesOptions:
    if isinstance(options, TableCellTitlesOptions):
        if not overrides:
            return options
        base = {
            "attribute_name": options.attribute_name,
            "skip_empty_headers": options.skip_empty_headers,
            "header_transform": options.header_transform,
        }
    else:
        base = dict(options or {})
    base.update(overrides)
    return TableCellTitlesOptions.from_mapping(base)


def annotate(tree: Node, options: OptionsLike = None, **overrides: Any) -> None:
    """
    Annotate the body cells of every table in ``tree`` with header text.

    The first row of each table is its header row. Tables that are empty or
    do not start with a row are left untouched. The tree is mutated in
    place; exceptions from a custom ``header_transform`` propagate.

    Args:
        tree: Document tree
        options: ``TableCellTitlesOptions`` or a mapping of option names
        **overrides: Individual options overriding ``options``
    """
    resolved = _resolve_options(options, overrides)

    def visitor(node: Node, index, parent) -> None:
        annotate_table(node, resolved)

    visit(tree, TABLE, visitor)


def annotate_table(table: Node, options: TableCellTitlesOptions) -> int:
    """
    Annotate the body cells of a single table.

    Args:
        table: Table node
        options: Resolved options

    Returns:
        Number of cells annotated
    """
    if not table.children:
        logger.debug("Skipping table without rows")
        return 0

    header_row = table.children[0]
    if header_row.type != TABLE_ROW:
        logger.debug(f"Skipping table whose first child is '{header_row.type}'")
        return 0

    headers: List[Any] = [options.header_transform(cell) for cell in header_row.children]

    annotated = 0
    for row in table.children[1:]:
        if row.type != TABLE_ROW:
            continue
        for column, cell in enumerate(row.children):
            header_text = (headers[column] if column < len(headers) else None) or ""
            if options.skip_empty_headers and not header_text:
                continue
            cell.renderer_properties()[options.attribute_name] = header_text
            annotated += 1

    logger.debug(
        f"Annotated {annotated} cells across {len(table.children) - 1} body rows "
        f"with {len(headers)} headers"
    )
    return annotated


def table_cell_titles(options: OptionsLike = None, **overrides: Any) -> Callable[[Node], None]:
    """
    Plugin factory for ``MarkdownProcessor.use``.

    Options are validated here, once, at registration time.

    Example:
        >>> processor = MarkdownProcessor().use(table_cell_titles, attribute_name="data-header")

    Returns:
        Transformer that annotates a tree in place
    """
    resolved = _resolve_options(options, overrides)

    def transformer(tree: Node) -> None:
        annotate(tree, resolved)

    return transformer
