"""
Data models for table cell titles.

This module defines the options that configure the table annotation
transform.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Mapping

from ..mdast.nodes import Node
from .header_transforms import default_header_transform

DEFAULT_ATTRIBUTE_NAME = "data-title"

# Option names as accepted by from_mapping, camelCase aliases included
_OPTION_ALIASES = {
    "attribute_name": "attribute_name",
    "attributeName": "attribute_name",
    "skip_empty_headers": "skip_empty_headers",
    "skipEmptyHeaders": "skip_empty_headers",
    "header_transform": "header_transform",
    "headerTransform": "header_transform",
}


@dataclass
class TableCellTitlesOptions:
    """
    Configuration for the table cell titles transform.

    Attributes:
        attribute_name: Renderer property written to every annotated cell
        skip_empty_headers: Leave cells unannotated when their column's
            header text is empty
        header_transform: Derives the annotation string from a header cell
    """
    attribute_name: str = DEFAULT_ATTRIBUTE_NAME
    skip_empty_headers: bool = False
    header_transform: Callable[[Node], str] = field(default=default_header_transform)

    def __post_init__(self):
        """Validate options."""
        if not isinstance(self.attribute_name, str) or not self.attribute_name:
            raise ValueError(
                f"attribute_name must be a non-empty string, got {self.attribute_name!r}"
            )
        if not callable(self.header_transform):
            raise ValueError(
                f"header_transform must be callable, got {type(self.header_transform).__name__}"
            )
        self.skip_empty_headers = bool(self.skip_empty_headers)

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> "TableCellTitlesOptions":
        """
        Build options from a mapping of option names.

        Both snake_case and camelCase names are accepted.

        Args:
            mapping: Option name -> value

        Returns:
            Validated options

        Raises:
            ValueError: If an option name is unknown or a value is invalid
        """
        kwargs: Dict[str, Any] = {}
        for key, value in mapping.items():
            name = _OPTION_ALIASES.get(key)
            if name is None:
                raise ValueError(f"Unknown table cell titles option: {key}")
            kwargs[name] = value
        return cls(**kwargs)
