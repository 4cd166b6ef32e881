"""Tests for report generation."""

import json

import pytest

from gst_tool.core.config import Config
from gst_tool.core.detector import TilingDetector
from gst_tool.core.report import ReportGenerator


@pytest.fixture
def detector():
    return TilingDetector(Config(
        minimal_matching_length=2,
        initial_search_length=20,
        similarity_threshold=0.5,
        granularity="word",
        lowercase=False,
    ))


class TestReportGenerator:
    """Test cases for ReportGenerator."""

    def test_json_report(self, detector):
        report = detector.compare_texts("the quick brown fox", "a quick brown fox jumps")
        data = json.loads(ReportGenerator().generate_json(report))

        assert data["total_tiles"] == 1
        assert data["matches"][0]["source_text"] == "quick brown fox"
        assert data["granularity"] == "word"

    def test_text_report(self, detector):
        report = detector.compare_texts("the quick brown fox", "a quick brown fox jumps")
        text = ReportGenerator().generate_text(report)

        assert "GREEDY STRING TILING REPORT" in text
        assert "Tile #1 (3 tokens)" in text
        assert "Source[4:19] -> Target[2:17]" in text
        assert "Suspected Plagiarism: yes" in text

    def test_text_report_without_tiles(self, detector):
        report = detector.compare_texts("alpha beta", "gamma delta")
        assert "No common substructure found." in ReportGenerator().generate_text(report)

    def test_unsupported_format(self, detector):
        report = detector.compare_texts("alpha beta", "gamma delta")
        with pytest.raises(ValueError, match="Unsupported format"):
            ReportGenerator().render(report, "html")

    def test_save_report(self, detector, tmp_path):
        report = detector.compare_texts("the quick brown fox", "a quick brown fox jumps")
        output = tmp_path / "report.json"
        ReportGenerator().save_report(report, str(output), "json")

        assert json.loads(output.read_text(encoding="utf-8"))["total_tiles"] == 1
