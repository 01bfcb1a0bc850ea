"""
Markdown parser.

Parses markdown (CommonMark plus GFM tables and strikethrough) with
markdown-it-py and converts the token stream into a ``Node`` tree.
"""

import logging
from typing import Callable, Dict, List, Optional

from markdown_it import MarkdownIt
from markdown_it.tree import SyntaxTreeNode

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

# markdown-it container types mapped one-to-one onto node types
_CONTAINER_TYPES = {
    "blockquote": BLOCKQUOTE,
    "list_item": LIST_ITEM,
    "em": EMPHASIS,
    "strong": STRONG,
    "s": DELETE,
}

_ALIGN_PREFIX = "text-align:"


class MarkdownParser:
    """Converts markdown text into a ``Node`` tree."""

    def __init__(self, allow_html: bool = True):
        """
        Initialize parser.

        Args:
            allow_html: Whether raw HTML is recognised as html nodes
        """
        self.allow_html = allow_html
        self._markdown: Optional[MarkdownIt] = None
        self._converters: Dict[str, Callable[[SyntaxTreeNode], List[Node]]] = {
            "paragraph": self._convert_paragraph,
            "heading": self._convert_heading,
            "bullet_list": self._convert_list,
            "ordered_list": self._convert_list,
            "fence": self._convert_code,
            "code_block": self._convert_code,
            "html_block": self._convert_html,
            "html_inline": self._convert_html,
            "hr": lambda node: [Node(THEMATIC_BREAK)],
            "table": self._convert_table,
            "inline": self._convert_children,
            "text": self._convert_text,
            "text_special": self._convert_text,
            "softbreak": lambda node: [Node(TEXT, value="\n")],
            "hardbreak": lambda node: [Node(BREAK)],
            "code_inline": lambda node: [Node(INLINE_CODE, value=node.content)],
            "link": self._convert_link,
            "image": self._convert_image,
        }

    def _markdown_parser(self) -> MarkdownIt:
        if self._markdown is None:
            parser = MarkdownIt("commonmark", {"html": self.allow_html})
            parser.enable(["table", "strikethrough"])
            self._markdown = parser
        return self._markdown

    def parse(self, markdown: str) -> Node:
        """
        Parse markdown text.

        Args:
            markdown: Markdown source

        Returns:
            Root node of the parsed document
        """
        tokens = self._markdown_parser().parse(markdown)
        root = Node(ROOT, children=self._convert_children(SyntaxTreeNode(tokens)))
        logger.debug(f"Parsed {len(tokens)} tokens into {len(root.children)} top-level nodes")
        return root

    def _convert(self, node: SyntaxTreeNode) -> List[Node]:
        converter = self._converters.get(node.type)
        if converter is not None:
            return converter(node)
        if node.type in _CONTAINER_TYPES:
            return [Node(_CONTAINER_TYPES[node.type], children=self._convert_children(node))]
        logger.debug(f"Unsupported token type '{node.type}', keeping its children")
        return self._convert_children(node)

    def _convert_children(self, node: SyntaxTreeNode) -> List[Node]:
        converted: List[Node] = []
        for child in node.children:
            for new_node in self._convert(child):
                # Merge adjacent text so soft breaks stay inside one text node
                if (
                    new_node.type == TEXT
                    and converted
                    and converted[-1].type == TEXT
                ):
                    converted[-1].value += new_node.value
                else:
                    converted.append(new_node)
        return converted

    def _convert_text(self, node: SyntaxTreeNode) -> List[Node]:
        # markdown-it-py 4 emits empty text tokens around delimiter runs
        if not node.content:
            return []
        return [Node(TEXT, value=node.content)]

    def _convert_paragraph(self, node: SyntaxTreeNode) -> List[Node]:
        return [Node(PARAGRAPH, children=self._convert_children(node))]

    def _convert_heading(self, node: SyntaxTreeNode) -> List[Node]:
        depth = int(node.tag[1:]) if node.tag.startswith("h") else 1
        return [Node(HEADING, children=self._convert_children(node), props={"depth": depth})]

    def _convert_list(self, node: SyntaxTreeNode) -> List[Node]:
        ordered = node.type == "ordered_list"
        props = {"ordered": ordered, "spread": not self._is_tight(node)}
        if ordered:
            start = node.attrs.get("start")
            props["start"] = int(start) if start is not None else 1
        return [Node(LIST, children=self._convert_children(node), props=props)]

    @staticmethod
    def _is_tight(node: SyntaxTreeNode) -> bool:
        # markdown-it hides paragraphs of tight lists
        paragraphs = [
            grandchild
            for item in node.children
            for grandchild in item.children
            if grandchild.type == "paragraph"
        ]
        return all(paragraph.hidden for paragraph in paragraphs)

    def _convert_code(self, node: SyntaxTreeNode) -> List[Node]:
        info = (node.info or "").strip()
        lang = info.split()[0] if info else None
        return [Node(CODE, value=node.content.rstrip("\n"), props={"lang": lang})]

    def _convert_html(self, node: SyntaxTreeNode) -> List[Node]:
        return [Node(HTML, value=node.content.rstrip("\n"))]

    def _convert_link(self, node: SyntaxTreeNode) -> List[Node]:
        props = {"url": node.attrs.get("href", ""), "title": node.attrs.get("title")}
        return [Node(LINK, children=self._convert_children(node), props=props)]

    def _convert_image(self, node: SyntaxTreeNode) -> List[Node]:
        props = {
            "url": node.attrs.get("src", ""),
            "alt": node.content,
            "title": node.attrs.get("title"),
        }
        return [Node(IMAGE, props=props)]

    def _convert_table(self, node: SyntaxTreeNode) -> List[Node]:
        """Flatten thead/tbody so the table's children are its rows."""
        rows: List[Node] = []
        align: List[Optional[str]] = []
        for section in node.children:
            for row in section.children:
                cells = []
                for cell in row.children:
                    cells.append(Node(TABLE_CELL, children=self._convert_children(cell)))
                    if not rows:
                        align.append(self._cell_alignment(cell))
                rows.append(Node(TABLE_ROW, children=cells))
        return [Node(TABLE, children=rows, props={"align": align})]

    @staticmethod
    def _cell_alignment(cell: SyntaxTreeNode) -> Optional[str]:
        style = cell.attrs.get("style")
        if isinstance(style, str) and style.startswith(_ALIGN_PREFIX):
            return style[len(_ALIGN_PREFIX):]
        return None


def parse_markdown(markdown: str, allow_html: bool = True) -> Node:
    """Convenience function to parse markdown into a ``Node`` tree."""
    return MarkdownParser(allow_html=allow_html).parse(markdown)
