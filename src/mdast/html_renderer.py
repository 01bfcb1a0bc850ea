"""
HTML renderer for markdown syntax trees.

Serializes a ``Node`` tree to HTML. Renderer properties stored on a node
(``node.data["hProperties"]``) become attributes of the node's element,
after the element's own attributes.
"""

import logging
from html import escape
from typing import Callable, Dict, List, Optional

from .nodes import (
    BLOCKQUOTE,
    BREAK,
    CODE,
    DELETE,
    EMPHASIS,
    HEADING,
    HTML,
    IMAGE,
    INLINE_CODE,
    LINK,
    LIST,
    LIST_ITEM,
    PARAGRAPH,
    ROOT,
    STRONG,
    TABLE,
    TABLE_CELL,
    TABLE_ROW,
    TEXT,
    THEMATIC_BREAK,
    Node,
)

logger = logging.getLogger(__name__)


class HtmlRenderer:
    """
    Renders a ``Node`` tree to an HTML string.

    Block elements are separated by newlines. Raw HTML nodes are passed
    through unless ``allow_html`` is False, in which case they are escaped.
    """

    def __init__(self, allow_html: bool = True):
        self.allow_html = allow_html
        self._renderers: Dict[str, Callable[[Node], str]] = {
            ROOT: self._render_root,
            PARAGRAPH: lambda node: self._element("p", node, self._inline(node)),
            HEADING: self._render_heading,
            BLOCKQUOTE: self._render_blockquote,
            LIST: self._render_list,
            LIST_ITEM: self._render_list_item,
            CODE: self._render_code,
            HTML: self._render_html,
            THEMATIC_BREAK: lambda node: f"<hr{self._attributes(node)}>",
            TABLE: self._render_table,
            TEXT: lambda node: escape(node.value or "", quote=False),
            EMPHASIS: lambda node: self._element("em", node, self._inline(node)),
            STRONG: lambda node: self._element("strong", node, self._inline(node)),
            DELETE: lambda node: self._element("del", node, self._inline(node)),
            INLINE_CODE: lambda node: self._element(
                "code", node, escape(node.value or "", quote=False)
            ),
            BREAK: lambda node: f"<br{self._attributes(node)}>\n",
            LINK: self._render_link,
            IMAGE: self._render_image,
        }

    def render(self, tree: Node) -> str:
        """
        Render a tree to HTML.

        Args:
            tree: Root (or any) node

        Returns:
            HTML string
        """
        return self._render(tree)

    def _render(self, node: Node) -> str:
        renderer = self._renderers.get(node.type)
        if renderer is None:
            logger.debug(f"No renderer for node type '{node.type}', rendering children")
            return self._inline(node)
        return renderer(node)

    def _inline(self, node: Node) -> str:
        return "".join(self._render(child) for child in node.children)

    def _blocks(self, children: List[Node]) -> str:
        return "\n".join(self._render(child) for child in children)

    def _attributes(self, node: Node, base: Optional[Dict[str, Optional[str]]] = None) -> str:
        attributes: Dict[str, Optional[str]] = dict(base or {})
        attributes.update(node.get_renderer_properties())
        return "".join(
            f' {name}="{escape(str(value), quote=True)}"'
            for name, value in attributes.items()
            if value is not None
        )

    def _element(
        self,
        tag: str,
        node: Node,
        content: str,
        base: Optional[Dict[str, Optional[str]]] = None
    ) -> str:
        return f"<{tag}{self._attributes(node, base)}>{content}</{tag}>"

    def _render_root(self, node: Node) -> str:
        content = self._blocks(node.children)
        return f"{content}\n" if content else ""

    def _render_heading(self, node: Node) -> str:
        depth = min(max(int(node.props.get("depth", 1)), 1), 6)
        return self._element(f"h{depth}", node, self._inline(node))

    def _render_blockquote(self, node: Node) -> str:
        return self._element("blockquote", node, f"\n{self._blocks(node.children)}\n")

    def _render_list(self, node: Node) -> str:
        ordered = node.props.get("ordered", False)
        base: Dict[str, Optional[str]] = {}
        start = node.props.get("start")
        if ordered and start is not None and start != 1:
            base["start"] = str(start)
        tight = not node.props.get("spread", False)
        items = "\n".join(self._render_list_item(item, tight) for item in node.children)
        return self._element("ol" if ordered else "ul", node, f"\n{items}\n", base)

    def _render_list_item(self, node: Node, tight: bool = False) -> str:
        if tight:
            # Paragraphs of tight lists render without <p>
            parts = [
                self._inline(child) if child.type == PARAGRAPH else self._render(child)
                for child in node.children
            ]
            return self._element("li", node, "\n".join(parts))
        return self._element("li", node, f"\n{self._blocks(node.children)}\n")

    def _render_code(self, node: Node) -> str:
        lang = node.props.get("lang")
        code_class = {"class": f"language-{lang}"} if lang else None
        value = node.value or ""
        content = escape(f"{value}\n" if value else "", quote=False)
        return f"<pre><code{self._attributes(node, code_class)}>{content}</code></pre>"

    def _render_html(self, node: Node) -> str:
        value = node.value or ""
        if self.allow_html:
            return value
        return escape(value, quote=False)

    def _render_link(self, node: Node) -> str:
        base = {"href": node.props.get("url", ""), "title": node.props.get("title")}
        return self._element("a", node, self._inline(node), base)

    def _render_image(self, node: Node) -> str:
        base = {
            "src": node.props.get("url", ""),
            "alt": node.props.get("alt") or "",
            "title": node.props.get("title"),
        }
        return f"<img{self._attributes(node, base)}>"

    def _render_table(self, node: Node) -> str:
        align = node.props.get("align") or []
        rows = [row for row in node.children if row.type == TABLE_ROW]
        sections = []
        if rows:
            sections.append(f"<thead>\n{self._render_row(rows[0], 'th', align)}\n</thead>")
        if len(rows) > 1:
            body = "\n".join(self._render_row(row, "td", align) for row in rows[1:])
            sections.append(f"<tbody>\n{body}\n</tbody>")
        content = "\n".join(sections)
        return self._element("table", node, f"\n{content}\n" if content else "\n")

    def _render_row(self, row: Node, cell_tag: str, align: List[Optional[str]]) -> str:
        cells = []
        for index, cell in enumerate(row.children):
            if cell.type != TABLE_CELL:
                continue
            base = {"align": align[index] if index < len(align) else None}
            cells.append(self._element(cell_tag, cell, self._inline(cell), base))
        content = "\n".join(cells)
        return self._element("tr", row, f"\n{content}\n" if content else "\n")


def render_html(tree: Node, allow_html: bool = True) -> str:
    """Convenience function to render a tree to HTML."""
    return HtmlRenderer(allow_html=allow_html).render(tree)
