"""
MarkdownProcessor - parse, transform and render pipeline.

Coordinates the markdown parser, registered tree transformers and the HTML
renderer.
"""

import logging
from typing import Any, Callable, List

from ..mdast.html_renderer import HtmlRenderer
from ..mdast.nodes import Node
from ..mdast.parser import MarkdownParser

logger = logging.getLogger(__name__)

Transformer = Callable[[Node], None]
Plugin = Callable[..., Transformer]


class MarkdownProcessor:
    """
    Pipeline of markdown parsing, tree transformers and HTML rendering.

    Plugins are factories returning a transformer. Transformers run in
    registration order and mutate the tree in place.

    Example:
        >>> processor = MarkdownProcessor().use(table_cell_titles)
        >>> processor.process("| A |\\n| - |\\n| 1 |")
    """

    def __init__(self, allow_html: bool = True):
        """
        Initialize processor.

        Args:
            allow_html: Whether raw HTML in the markdown is passed through
        """
        self.parser = MarkdownParser(allow_html=allow_html)
        self.renderer = HtmlRenderer(allow_html=allow_html)
        self.transformers: List[Transformer] = []

    def use(self, plugin: Plugin, *args: Any, **kwargs: Any) -> "MarkdownProcessor":
        """
        Register a plugin.

        Args:
            plugin: Factory called with ``*args`` and ``**kwargs``
                that returns a transformer

        Returns:
            This processor, for chaining
        """
        transformer = plugin(*args, **kwargs)
        if not callable(transformer):
            raise ValueError(
                f"Plugin {getattr(plugin, '__name__', plugin)!r} did not return a transformer"
            )
        self.transformers.append(transformer)
        logger.debug(f"Registered plugin {getattr(plugin, '__name__', plugin)!r}")
        return self

    def parse(self, markdown: str) -> Node:
        """Parse markdown into a tree."""
        return self.parser.parse(markdown)

    def run(self, tree: Node) -> Node:
        """
        Apply every registered transformer to ``tree``.

        Returns:
            The same tree, transformed in place
        """
        for transformer in self.transformers:
            transformer(tree)
        return tree

    def stringify(self, tree: Node) -> str:
        """Render a tree to HTML."""
        return self.renderer.render(tree)

    def process(self, markdown: str) -> str:
        """
        Parse, transform and render markdown.

        Args:
            markdown: Markdown source

        Returns:
            Rendered HTML
        """
        return self.stringify(self.run(self.parse(markdown)))
