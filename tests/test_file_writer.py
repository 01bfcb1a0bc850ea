#!/usr/bin/env python3
"""
Tests for FileWriter component.

Tests file writing, backup creation, and filename generation.
"""

import pytest
from pathlib import Path
from src.transformers.components.file_writer import FileWriter


@pytest.fixture
def temp_output_dir(tmp_path):
    """Create temporary output directory."""
    return tmp_path / "output"


@pytest.fixture
def source_file(tmp_path):
    """Create temporary markdown source."""
    source = tmp_path / "pricing.md"
    source.write_text("| Plan |\n| - |\n| Free |\n", encoding='utf-8')
    return source


SAMPLE_HTML = '<table>\n<tr>\n<td data-title="Plan">Free</td>\n</tr>\n</table>\n'


class TestFileWriterInitialization:
    """Test initialization and setup."""

    def test_initialization(self, temp_output_dir):
        writer = FileWriter(temp_output_dir)
        assert writer.output_dir == temp_output_dir
        assert writer.backup_dir == temp_output_dir / "backups"

    def test_initialization_with_string_path(self, tmp_path):
        writer = FileWriter(str(tmp_path / "output"))
        assert isinstance(writer.output_dir, Path)


class TestFileWriterOutput:
    """Test writing rendered files."""

    def test_generate_output_filename(self, temp_output_dir):
        writer = FileWriter(temp_output_dir)
        assert writer.generate_output_filename(Path("docs/pricing.md")) == temp_output_dir / "pricing.html"

    def test_write_rendered_file(self, temp_output_dir, source_file):
        writer = FileWriter(temp_output_dir)
        output_path = writer.write_rendered_file(source_file, SAMPLE_HTML)
        assert output_path == temp_output_dir / "pricing.html"
        assert output_path.read_text(encoding='utf-8') == SAMPLE_HTML

    def test_creates_output_directory(self, temp_output_dir, source_file):
        assert not temp_output_dir.exists()
        FileWriter(temp_output_dir).write_rendered_file(source_file, SAMPLE_HTML)
        assert temp_output_dir.is_dir()

    def test_no_backup_for_new_file(self, temp_output_dir, source_file):
        writer = FileWriter(temp_output_dir)
        writer.write_rendered_file(source_file, SAMPLE_HTML)
        assert not writer.backup_dir.exists()

    def test_backup_of_existing_output(self, temp_output_dir, source_file):
        writer = FileWriter(temp_output_dir)
        writer.write_rendered_file(source_file, "old")
        writer.write_rendered_file(source_file, SAMPLE_HTML)

        backups = list(writer.backup_dir.glob("pricing_*.html"))
        assert len(backups) == 1
        assert backups[0].read_text(encoding='utf-8') == "old"

    def test_backup_disabled(self, temp_output_dir, source_file):
        writer = FileWriter(temp_output_dir)
        writer.write_rendered_file(source_file, "old")
        writer.write_rendered_file(source_file, SAMPLE_HTML, create_backup=False)
        assert not writer.backup_dir.exists()

    def test_write_explicit_path(self, temp_output_dir):
        writer = FileWriter(temp_output_dir)
        target = temp_output_dir / "nested" / "page.html"
        assert writer.write(target, SAMPLE_HTML) == target
        assert target.read_text(encoding='utf-8') == SAMPLE_HTML

    def test_backup_path_format(self, temp_output_dir):
        backup = FileWriter(temp_output_dir).get_backup_path(Path("pricing.html"))
        assert backup.parent == temp_output_dir / "backups"
        assert backup.name.startswith("pricing_")
        assert backup.suffix == ".html"
