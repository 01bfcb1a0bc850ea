#!/usr/bin/env python3
"""
Shared configuration utility for table cell titles.

Provides flexible .env file discovery and the environment-driven defaults
for the table annotation options.
"""

import logging
import os
from pathlib import Path
from dotenv import load_dotenv
from typing import Optional

from ..transformers.data_models import DEFAULT_ATTRIBUTE_NAME, TableCellTitlesOptions

logger = logging.getLogger(__name__)

ENV_FILE_NAME = ".env.tablecelltitles"
ATTRIBUTE_NAME_KEY = "table_cell_titles_attribute_name"
SKIP_EMPTY_HEADERS_KEY = "table_cell_titles_skip_empty_headers"


class ConfigManager:
    """
    Centralized configuration management for table cell titles.

    Features:
    - Flexible .env file discovery (current dir + up to 2 parent dirs)
    - String and boolean environment variable helpers
    - Default annotation options from the environment
    """

    def __init__(self, search_root: Optional[Path] = None):
        """
        Initialize configuration and load the .env file if one is found.

        Args:
            search_root: Directory to start the .env search from (default: cwd)
        """
        self._env_loaded = False
        self._env_path: Optional[Path] = None
        self._search_root = Path(search_root) if search_root else None
        self.load_environment()

    def load_environment(self) -> bool:
        """
        Search for and load the .env file.

        Search order:
        1. Search root (current working directory by default)
        2. One level up
        3. Two levels up

        Returns:
            bool: True if .env file was found and loaded, False otherwise
        """
        if self._env_loaded:
            return True

        root = self._search_root or Path.cwd()
        for search_path in (root, root.parent, root.parent.parent):
            env_file = search_path / ENV_FILE_NAME
            if env_file.is_file():
                logger.info(f"Loading {ENV_FILE_NAME} from: {env_file}")
                load_dotenv(env_file, override=True)
                self._env_path = env_file
                self._env_loaded = True
                return True

        logger.debug(f"No {ENV_FILE_NAME} found in {root} or up to 2 parent directories")
        return False

    @property
    def env_path(self) -> Optional[Path]:
        """Path of the loaded .env file, if any."""
        return self._env_path

    def get_default_options(self) -> TableCellTitlesOptions:
        """
        Build annotation options from the environment.

        Uses:
        - table_cell_titles_attribute_name (default: "data-title")
        - table_cell_titles_skip_empty_headers (default: false)

        Returns:
            TableCellTitlesOptions with the default header transform
        """
        return TableCellTitlesOptions(
            attribute_name=self.get_env_string(ATTRIBUTE_NAME_KEY, DEFAULT_ATTRIBUTE_NAME),
            skip_empty_headers=self.get_env_bool(SKIP_EMPTY_HEADERS_KEY, False),
        )

    def get_env_string(self, key: str, default: str = None) -> str:
        """
        Get string environment variable.

        Args:
            key: Environment variable name
            default: Default value if not found

        Returns:
            str: Environment variable value or default
        """
        return os.getenv(key, default)

    def get_env_bool(self, key: str, default: bool) -> bool:
        """
        Get boolean environment variable.

        Returns:
            bool: True if value is 'true', '1', 'yes', 'on' (case-insensitive)
        """
        value = os.getenv(key)
        if value is None:
            return default
        return value.lower() in ('true', '1', 'yes', 'on')


# Global singleton instance for easy import
config = ConfigManager()


def get_default_options() -> TableCellTitlesOptions:
    """Convenience function to get annotation options from the environment."""
    return config.get_default_options()

