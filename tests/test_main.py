"""
Tests for the command line entry point.
"""

import json
from pathlib import Path

import pytest

import main
from src.utils.config import ATTRIBUTE_NAME_KEY, SKIP_EMPTY_HEADERS_KEY

FIXTURES_DIR = Path(__file__).parent / "fixtures" / "table_cell_titles"
PRICING_FILE = FIXTURES_DIR / "pricing.md"


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    monkeypatch.delenv(ATTRIBUTE_NAME_KEY, raising=False)
    monkeypatch.delenv(SKIP_EMPTY_HEADERS_KEY, raising=False)


class TestRenderCommand:
    """Test the render command."""

    def test_render_to_stdout(self, capsys):
        main.main(["render", str(PRICING_FILE)])
        output = capsys.readouterr().out
        assert '<td align="left" data-title="Plan">Free</td>' in output

    def test_render_custom_attribute(self, capsys):
        main.main(["render", str(PRICING_FILE), "--attribute-name", "data-header", "--slugify"])
        output = capsys.readouterr().out
        assert '<td align="right" data-header="monthly">$0</td>' in output
        assert "data-title" not in output

    def test_render_to_output_dir(self, tmp_path, capsys):
        main.main(["render", str(PRICING_FILE), "--output-dir", str(tmp_path)])
        output_path = tmp_path / "pricing.html"
        assert output_path.exists()
        assert 'data-title="Support"' in output_path.read_text(encoding="utf-8")
        assert "Rendered" in capsys.readouterr().out

    def test_render_to_output_file(self, tmp_path):
        target = tmp_path / "site" / "index.html"
        main.main(["render", str(PRICING_FILE), "--output", str(target), "--no-backup"])
        assert target.exists()

    def test_missing_file_exits_with_error(self, tmp_path, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main.main(["render", str(tmp_path / "missing.md")])
        assert exc_info.value.code == 1
        assert "File not found" in capsys.readouterr().out

    def test_empty_attribute_name_rejected(self, capsys, monkeypatch):
        monkeypatch.setenv(ATTRIBUTE_NAME_KEY, "data-header")
        with pytest.raises(SystemExit) as exc_info:
            main.main(["render", str(PRICING_FILE), "--attribute-name", ""])
        assert exc_info.value.code == 1
        assert "attribute_name must be a non-empty string" in capsys.readouterr().out

    def test_no_command_prints_help(self):
        with pytest.raises(SystemExit) as exc_info:
            main.main([])
        assert exc_info.value.code == 1


class TestTreeCommand:
    """Test the tree command."""

    def test_tree_json(self, capsys):
        main.main(["tree", str(PRICING_FILE)])
        tree = json.loads(capsys.readouterr().out)
        table = next(node for node in tree["children"] if node["type"] == "table")
        body_cell = table["children"][1]["children"][0]
        assert body_cell["data"] == {"hProperties": {"data-title": "Plan"}}

    def test_tree_environment_defaults(self, capsys, monkeypatch):
        monkeypatch.setenv(ATTRIBUTE_NAME_KEY, "data-label")
        main.main(["tree", str(PRICING_FILE)])
        tree = json.loads(capsys.readouterr().out)
        table = next(node for node in tree["children"] if node["type"] == "table")
        assert table["children"][2]["children"][1]["data"] == {"hProperties": {"data-label": "Monthly"}}
