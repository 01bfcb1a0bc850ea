#!/usr/bin/env python3
"""
FileWriter component for rendered HTML output.

Writes rendered documents, backing up any output file it would overwrite.
"""

import logging
import shutil
from pathlib import Path
from datetime import datetime

logger = logging.getLogger(__name__)


class FileWriter:
    """
    Writes rendered HTML next to (or away from) its markdown source.

    Features:
    - UTF-8 encoding for all files
    - Timestamped backup of an existing output file
    - Output filename generation (``<stem>.html``)
    - Directory creation as needed
    """

    OUTPUT_SUFFIX = ".html"

    def __init__(self, output_dir: Path):
        """
        Initialize file writer.

        Args:
            output_dir: Directory where rendered files will be written
        """
        self.output_dir = Path(output_dir)
        self.backup_dir = self.output_dir / "backups"

    def write_rendered_file(
        self,
        source_path: Path,
        content: str,
        create_backup: bool = True
    ) -> Path:
        """
        Write rendered HTML for a markdown source file.

        Args:
            source_path: Path to the markdown source
            content: Rendered HTML
            create_backup: Whether to back up an existing output file first

        Returns:
            Path to written output file

        Raises:
            OSError: If file writing fails
        """
        output_path = self.generate_output_filename(Path(source_path))
        return self.write(output_path, content, create_backup=create_backup)

    def write(self, output_path: Path, content: str, create_backup: bool = True) -> Path:
        """
        Write content to an explicit output path.

        Raises:
            OSError: If file writing fails
        """
        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)

        if create_backup and output_path.exists():
            self.create_backup(output_path)

        output_path.write_text(content, encoding='utf-8')
        logger.info(f"Wrote rendered file: {output_path}")
        return output_path

    def create_backup(self, path: Path) -> Path:
        """
        Create timestamped backup of a file.

        Args:
            path: Path to file to back up

        Returns:
            Path to created backup file

        Raises:
            OSError: If backup creation fails
        """
        self.backup_dir.mkdir(parents=True, exist_ok=True)
        backup_path = self.get_backup_path(path)
        shutil.copyfile(path, backup_path)
        logger.info(f"Created backup: {backup_path}")
        return backup_path

    def generate_output_filename(self, source_path: Path) -> Path:
        """
        Generate output filename from the markdown source path.

        Example: 'document.md' -> '<output_dir>/document.html'
        """
        return self.output_dir / f"{source_path.stem}{self.OUTPUT_SUFFIX}"

    def get_backup_path(self, path: Path) -> Path:
        """
        Get the backup path for a file, stamped with the current time.

        Args:
            path: File to back up

        Returns:
            Path inside the backup directory
        """
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        return self.backup_dir / f"{path.stem}_{timestamp}{path.suffix}"
