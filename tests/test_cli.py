"""Tests for the command-line interface."""

import json

import pytest
from click.testing import CliRunner

from gst_tool.cli.main import cli


@pytest.fixture
def documents(tmp_path):
    source = tmp_path / "source.txt"
    target = tmp_path / "target.txt"
    source.write_text("one two three four five six seven", encoding="utf-8")
    target.write_text("five six seven x one two three four", encoding="utf-8")
    return source, target


class TestCli:
    """Test cases for the click commands."""

    def test_quick_compare(self):
        result = CliRunner().invoke(cli, [
            "quick-compare", "the quick brown fox", "a quick brown fox jumps",
            "-m", "2", "-g", "word", "-t", "0.5"
        ])

        assert result.exit_code == 0
        assert "Similarity: 66.67%" in result.output
        assert "Tiles: (1,1,3)" in result.output
        assert "Suspected plagiarism: yes" in result.output

    def test_compare_json(self, documents):
        source, target = documents
        result = CliRunner().invoke(cli, [
            "compare", str(source), str(target), "-m", "2", "-g", "word", "-f", "json"
        ])

        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["total_tiles"] == 2
        assert data["matches"][0]["source_text"] == "one two three four"

    def test_compare_rich(self, documents):
        source, target = documents
        result = CliRunner().invoke(cli, ["compare", str(source), str(target), "-m", "2", "-g", "word"])

        assert result.exit_code == 0
        assert "Analysis complete!" in result.output

    def test_compare_writes_output(self, documents, tmp_path):
        source, target = documents
        output = tmp_path / "report.txt"
        result = CliRunner().invoke(cli, [
            "compare", str(source), str(target), "-m", "2", "-g", "word", "-f", "text", "-o", str(output)
        ])

        assert result.exit_code == 0
        assert "GREEDY STRING TILING REPORT" in output.read_text(encoding="utf-8")

    def test_compare_rejects_invalid_min_match(self, documents):
        source, target = documents
        result = CliRunner().invoke(cli, ["compare", str(source), str(target), "-m", "0"])

        assert result.exit_code == 1
        assert "Error" in result.output

    def test_tiles(self, documents):
        source, target = documents
        result = CliRunner().invoke(cli, ["tiles", str(source), str(target), "-m", "2", "-g", "word"])

        assert result.exit_code == 0
        assert result.output.splitlines() == ["Tiles:", "one two three four", "five six seven"]

    def test_tokenize(self, documents):
        source, _ = documents
        result = CliRunner().invoke(cli, ["tokenize", str(source), "-g", "word"])

        assert result.exit_code == 0
        assert "Total tokens: 7" in result.output
        assert "First tokens: one | two" in result.output
