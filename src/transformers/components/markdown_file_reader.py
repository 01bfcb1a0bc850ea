"""
MarkdownFileReader Component

Reads markdown source files for the render pipeline.
"""

from pathlib import Path
from typing import List


class MarkdownFileReader:
    """Reads a markdown file as UTF-8 text."""

    def __init__(self, file_path: str | Path):
        """
        Initialize reader with a markdown file path.

        Args:
            file_path: Path to the markdown file to read

        Raises:
            FileNotFoundError: If the file does not exist
        """
        self.file_path = Path(file_path)
        if not self.file_path.exists():
            raise FileNotFoundError(f"File not found: {self.file_path}")
        self._content: str | None = None

    def read_file(self) -> str:
        """
        Read the entire file contents.

        A leading byte order mark is dropped. The result is cached.

        Returns:
            The complete file contents as a string

        Raises:
            IOError: If the file cannot be read
        """
        if self._content is None:
            try:
                with open(self.file_path, "r", encoding="utf-8") as f:
                    self._content = f.read().lstrip("\ufeff")
            except IOError as e:
                raise IOError(f"Failed to read file {self.file_path}: {e}")
        return self._content

    def read_lines(self) -> List[str]:
        """Return the file contents split into lines, without newlines."""
        return self.read_file().splitlines()

    def get_line_count(self) -> int:
        """Get the total number of lines in the file."""
        return len(self.read_lines())
