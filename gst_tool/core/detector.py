"""Document comparison built on greedy string tiling."""

import chardet
from pathlib import Path
from typing import List, Optional, Tuple

from .config import Config
from .similarity import analyze
from .tokenizer import TextTokenizer, TokenSpan
from .types import AnalysisResult, ComparisonReport, Tile, TileMatch
from .log import base_logger

logger = base_logger.getChild('detector')


class TilingDetector:
    """Compares two documents by tiling their token sequences."""

    def __init__(self, config: Optional[Config] = None):
        """
        Initialize the detector.

        Args:
            config: Configuration object (uses defaults if not provided)
        """
        self.config = config or Config()
        self.tokenizer = TextTokenizer(
            granularity=self.config.granularity,
            lowercase=self.config.lowercase
        )

    def read_file(self, file_path: str) -> str:
        """
        Read a file with automatic encoding detection.

        Args:
            file_path: Path to the file

        Returns:
            File contents as string
        """
        path = Path(file_path)
        if not path.exists():
            raise FileNotFoundError(f"File not found: {file_path}")

        raw_data = path.read_bytes()
        result = chardet.detect(raw_data)
        encoding = result['encoding'] or 'utf-8'
        confidence = result['confidence'] or 0

        logger.debug(f"Detected encoding for {file_path}: {encoding} (confidence: {confidence:.2f})")

        # Try detected encoding first, then common fallbacks
        encodings_to_try = [encoding, 'utf-8', 'gb18030', 'latin-1']

        for enc in encodings_to_try:
            try:
                text = raw_data.decode(enc)
                logger.info(f"Read {file_path} with encoding: {enc}")
                return text
            except (UnicodeDecodeError, LookupError):
                continue

        raise ValueError(f"Could not decode file {file_path} with any known encoding")

    def analyze_texts(self, source_text: str, target_text: str) -> Tuple[List[TokenSpan], List[TokenSpan], AnalysisResult]:
        """Tokenize both texts with the same granularity and tile them."""
        source_spans = self.tokenizer.tokenize(source_text)
        target_spans = self.tokenizer.tokenize(target_text)
        logger.info(
            f"Tokenized at {self.config.granularity} level: "
            f"{len(source_spans)} source tokens, {len(target_spans)} target tokens"
        )

        result = analyze(
            [span.text for span in source_spans],
            [span.text for span in target_spans],
            minimal_matching_length=self.config.minimal_matching_length,
            threshold=self.config.similarity_threshold,
            initial_search_length=self.config.initial_search_length,
            max_passes=self.config.max_passes
        )
        return source_spans, target_spans, result

    def compare_texts(
        self,
        source_text: str,
        target_text: str,
        source_name: str = "source",
        target_name: str = "target"
    ) -> ComparisonReport:
        """
        Compare two texts.

        Args:
            source_text: Text used as the tiling pattern
            target_text: Text used as the tiling text
            source_name: Label for the source in the report
            target_name: Label for the target in the report

        Returns:
            ComparisonReport with tiles ordered longest first
        """
        source_spans, target_spans, result = self.analyze_texts(source_text, target_text)

        ordered = sorted(result.tiles, key=lambda t: (-t.length, t.pattern_start, t.text_start))
        matches = [
            self._resolve_tile(tile, source_text, target_text, source_spans, target_spans)
            for tile in ordered
        ]

        report = ComparisonReport(
            source_file=source_name,
            target_file=target_name,
            granularity=self.config.granularity,
            source_tokens=result.pattern_length,
            target_tokens=result.text_length,
            source_id=result.pattern_id,
            target_id=result.text_id,
            similarity=result.similarity,
            suspected_plagiarism=result.suspected_plagiarism,
            threshold=result.threshold,
            minimal_matching_length=result.minimal_matching_length,
            total_tiles=len(result.tiles),
            matches=matches,
            metadata={
                "coverage": result.coverage,
                "search_lengths": result.search_lengths,
                "restarts": result.restarts,
                "initial_search_length": self.config.initial_search_length,
                "lowercase": self.config.lowercase,
            }
        )

        logger.info(
            f"Comparison complete: {report.total_tiles} tiles, "
            f"{report.similarity_percentage:.1f}% similar"
        )
        return report

    def compare_documents(self, source_file: str, target_file: str) -> ComparisonReport:
        """
        Compare two files.

        Args:
            source_file: Path to source document
            target_file: Path to target document

        Returns:
            ComparisonReport with detection results
        """
        logger.info(f"Comparing {source_file} with {target_file}")
        source_text = self.read_file(source_file)
        target_text = self.read_file(target_file)
        return self.compare_texts(source_text, target_text, source_file, target_file)

    def sorted_tile_texts(self, source_text: str, target_text: str) -> List[str]:
        """Source text of every tile, longest tile first."""
        report = self.compare_texts(source_text, target_text)
        return [match.source_text for match in report.matches]

    def _resolve_tile(
        self,
        tile: Tile,
        source_text: str,
        target_text: str,
        source_spans: List[TokenSpan],
        target_spans: List[TokenSpan]
    ) -> TileMatch:
        """Map a tile's token positions back to character offsets."""
        source_start = source_spans[tile.pattern_start].start_pos
        source_end = source_spans[tile.pattern_end - 1].end_pos
        target_start = target_spans[tile.text_start].start_pos
        target_end = target_spans[tile.text_end - 1].end_pos

        return TileMatch(
            pattern_start=tile.pattern_start,
            text_start=tile.text_start,
            length=tile.length,
            source_start=source_start,
            source_end=source_end,
            target_start=target_start,
            target_end=target_end,
            source_text=source_text[source_start:source_end],
            target_text=target_text[target_start:target_end]
        )
