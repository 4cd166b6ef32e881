"""Tests for similarity scoring and the analyze entry point."""

import math

import pytest

from gst_tool.core.errors import InvalidParameterError
from gst_tool.core.hashing import sequence_digest
from gst_tool.core.similarity import CoverageScorer, analyze
from gst_tool.core.types import SimilarityResult, Tile


class InflatedScorer:
    """Scorer that overshoots the unit interval."""

    def score(self, pattern, text, tiles, threshold):
        return SimilarityResult(similarity=1.7, suspected_plagiarism=True)


class TestCoverageScorer:
    """Test cases for CoverageScorer."""

    def test_coverage_ratio(self):
        result = CoverageScorer().score("abcd", "abcxyz", [Tile(pattern_start=0, text_start=0, length=2)], 0.3)
        assert result.similarity == pytest.approx(0.4)
        assert result.suspected_plagiarism

    def test_threshold_is_strict(self):
        result = CoverageScorer().score("abcd", "abcxyz", [Tile(pattern_start=0, text_start=0, length=2)], 0.4)
        assert not result.suspected_plagiarism


class TestAnalyze:
    """Test cases for analyze."""

    def test_identical_sequences(self):
        result = analyze("AAAAA", "AAAAA", minimal_matching_length=1)

        assert [t.as_tuple() for t in result.tiles] == [(0, 0, 5)]
        assert result.similarity == 1.0
        assert result.suspected_plagiarism
        assert result.coverage == 5
        assert result.pattern_id == sequence_digest("AAAAA")
        assert result.search_lengths[-1] == 1

    def test_rotated_sequences(self):
        result = analyze("abcxyz", "xyzabc", minimal_matching_length=3, threshold=0.9)
        assert result.similarity == 1.0
        assert result.suspected_plagiarism

    def test_disjoint_sequences(self):
        result = analyze("abc", "xyz", minimal_matching_length=1)
        assert result.tiles == []
        assert result.similarity == 0.0
        assert not result.suspected_plagiarism

    def test_partial_overlap(self):
        result = analyze(
            "the quick brown fox".split(),
            "a quick brown fox jumps".split(),
            minimal_matching_length=2,
            threshold=0.7
        )
        assert result.similarity == pytest.approx(6 / 9)
        assert not result.suspected_plagiarism
        assert result.pattern_length == 4
        assert result.text_length == 5

    def test_similarity_is_clamped(self):
        result = analyze("abc", "abc", minimal_matching_length=1, scorer=InflatedScorer())
        assert result.similarity == 1.0

    @pytest.mark.parametrize("threshold", [1.5, -0.1, math.nan])
    def test_invalid_threshold(self, threshold):
        with pytest.raises(InvalidParameterError, match="threshold"):
            analyze("abc", "abc", threshold=threshold)

    def test_invalid_minimal_matching_length(self):
        with pytest.raises(InvalidParameterError):
            analyze("abc", "abc", minimal_matching_length=0)

    def test_score_bounded(self):
        pairs = [("abcabcabc", "abc"), ("a", "aaaaaaa"), ("hello world", "world hello")]
        for pattern, text in pairs:
            result = analyze(pattern, text, minimal_matching_length=1)
            assert 0.0 <= result.similarity <= 1.0
