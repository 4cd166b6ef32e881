"""Core modules for greedy string tiling."""

from .config import Config
from .errors import GSTError, InvalidParameterError, EmptyInputError, TilingError
from .types import Tile, TileSet, SimilarityResult, AnalysisResult, TileMatch, ComparisonReport
from .hashing import HashIndex, WindowHasher, window_hash, sequence_digest
from .marking import MarkState, SequenceMarks, Side
from .scanner import ScanPass, ScanResult
from .tiling import GreedyStringTiler, TileCommitter, TilingRun, tile
from .similarity import CoverageScorer, SimilarityScorer, analyze
from .tokenizer import TextTokenizer, TokenSpan
from .detector import TilingDetector
from .report import ReportGenerator

__all__ = [
    "Config",
    "GSTError",
    "InvalidParameterError",
    "EmptyInputError",
    "TilingError",
    "Tile",
    "TileSet",
    "SimilarityResult",
    "AnalysisResult",
    "TileMatch",
    "ComparisonReport",
    "HashIndex",
    "WindowHasher",
    "window_hash",
    "sequence_digest",
    "MarkState",
    "SequenceMarks",
    "Side",
    "ScanPass",
    "ScanResult",
    "GreedyStringTiler",
    "TileCommitter",
    "TilingRun",
    "tile",
    "CoverageScorer",
    "SimilarityScorer",
    "analyze",
    "TextTokenizer",
    "TokenSpan",
    "TilingDetector",
    "ReportGenerator",
]
