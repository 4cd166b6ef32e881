"""Similarity scoring on top of a tiling."""

import math
from typing import Hashable, Iterable, Optional, Protocol, Sequence

from .errors import EmptyInputError, InvalidParameterError
from .hashing import sequence_digest
from .tiling import (
    DEFAULT_INITIAL_SEARCH_LENGTH,
    DEFAULT_MAX_PASSES,
    DEFAULT_MINIMAL_MATCHING_LENGTH,
    GreedyStringTiler,
)
from .types import AnalysisResult, SimilarityResult, Tile
from .log import base_logger

logger = base_logger.getChild('similarity')

DEFAULT_THRESHOLD = 0.5


class SimilarityScorer(Protocol):
    """Anything that turns two sequences and their tiles into a similarity."""

    def score(
        self,
        pattern: Sequence[Hashable],
        text: Sequence[Hashable],
        tiles: Iterable[Tile],
        threshold: float
    ) -> SimilarityResult:
        ...


def validate_threshold(threshold: float) -> float:
    if math.isnan(threshold) or not 0.0 <= threshold <= 1.0:
        raise InvalidParameterError(f"threshold must be within [0, 1], got {threshold}")
    return threshold


def clamp_similarity(value: float) -> float:
    return min(max(value, 0.0), 1.0)


class CoverageScorer:
    """Dice-style coverage: twice the tiled tokens over the combined length."""

    def score(
        self,
        pattern: Sequence[Hashable],
        text: Sequence[Hashable],
        tiles: Iterable[Tile],
        threshold: float
    ) -> SimilarityResult:
        total = len(pattern) + len(text)
        if total == 0:
            raise EmptyInputError("Cannot score two empty sequences")

        coverage = sum(tile.length for tile in tiles)
        similarity = 2 * coverage / total
        return SimilarityResult(
            similarity=similarity,
            suspected_plagiarism=similarity > threshold
        )


def analyze(
    pattern: Sequence[Hashable],
    text: Sequence[Hashable],
    minimal_matching_length: int = DEFAULT_MINIMAL_MATCHING_LENGTH,
    threshold: float = DEFAULT_THRESHOLD,
    initial_search_length: int = DEFAULT_INITIAL_SEARCH_LENGTH,
    scorer: Optional[SimilarityScorer] = None,
    max_passes: int = DEFAULT_MAX_PASSES
) -> AnalysisResult:
    """
    Tile two token sequences and score the result.

    Args:
        pattern: Pattern tokens
        text: Text tokens
        minimal_matching_length: Shortest tile worth reporting
        threshold: Similarity above which plagiarism is suspected
        initial_search_length: Window size of the first scan pass
        scorer: Similarity function (coverage-based by default)
        max_passes: Scan passes allowed before the run is abandoned

    Returns:
        AnalysisResult with tiles, similarity and the suspicion flag
    """
    validate_threshold(threshold)
    tiler = GreedyStringTiler(minimal_matching_length, initial_search_length, max_passes)
    run = tiler.run(pattern, text)

    scorer = scorer or CoverageScorer()
    tiles = list(run.tiles)
    scored = scorer.score(run.pattern, run.text, tiles, threshold)
    similarity = clamp_similarity(scored.similarity)
    if similarity != scored.similarity:
        logger.debug(f"Clamped similarity {scored.similarity} to {similarity}")

    return AnalysisResult(
        tiles=tiles,
        similarity=similarity,
        suspected_plagiarism=scored.suspected_plagiarism,
        pattern_id=sequence_digest(run.pattern),
        text_id=sequence_digest(run.text),
        pattern_length=len(run.pattern),
        text_length=len(run.text),
        minimal_matching_length=tiler.minimal_matching_length,
        threshold=threshold,
        search_lengths=run.search_lengths,
        restarts=run.restarts
    )
