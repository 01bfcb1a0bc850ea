"""
Components for the table cell titles command line pipeline.

File input and output used around the markdown processor.
"""

from .markdown_file_reader import MarkdownFileReader
from .file_writer import FileWriter

__all__ = [
    "MarkdownFileReader",
    "FileWriter",
]
