"""Shared data types for tiling, scoring and reporting."""

from typing import Any, Dict, Iterator, List, Optional
from pydantic import BaseModel, ConfigDict, Field


class Tile(BaseModel):
    """A common run of tokens between the pattern and the text."""

    pattern_start: int = Field(ge=0, description="Start position in the pattern sequence")
    text_start: int = Field(ge=0, description="Start position in the text sequence")
    length: int = Field(ge=1, description="Number of tokens covered")

    model_config = ConfigDict(frozen=True)

    @property
    def pattern_end(self) -> int:
        return self.pattern_start + self.length

    @property
    def text_end(self) -> int:
        return self.text_start + self.length

    def as_tuple(self) -> tuple:
        """Return the tile as (pattern_start, text_start, length)."""
        return (self.pattern_start, self.text_start, self.length)


class TileSet:
    """Committed tiles of one tiling run, kept in commit order."""

    def __init__(self, tiles: Optional[List[Tile]] = None):
        self._tiles: List[Tile] = list(tiles or [])

    def add(self, tile: Tile):
        self._tiles.append(tile)

    def coverage(self) -> int:
        """Total number of tokens covered in either sequence."""
        return sum(tile.length for tile in self._tiles)

    def by_length(self) -> List[Tile]:
        """Tiles ordered longest first, ties by pattern position."""
        return sorted(self._tiles, key=lambda t: (-t.length, t.pattern_start, t.text_start))

    def as_tuples(self) -> List[tuple]:
        return [tile.as_tuple() for tile in self._tiles]

    def __iter__(self) -> Iterator[Tile]:
        return iter(self._tiles)

    def __len__(self) -> int:
        return len(self._tiles)

    def __contains__(self, tile: object) -> bool:
        return tile in self._tiles

    def __repr__(self):
        return f"TileSet({self.as_tuples()})"


class SimilarityResult(BaseModel):
    """Outcome of scoring a tiling."""

    similarity: float = Field(description="Similarity as reported by the scorer")
    suspected_plagiarism: bool = Field(description="Whether similarity exceeds the threshold")


class AnalysisResult(BaseModel):
    """Tiles plus similarity for one pattern/text pair."""

    tiles: List[Tile] = Field(default_factory=list, description="Committed tiles in commit order")
    similarity: float = Field(ge=0.0, le=1.0, description="Normalized similarity (0-1)")
    suspected_plagiarism: bool = Field(description="Whether similarity exceeds the threshold")
    pattern_id: int = Field(description="Digest of the whole pattern sequence")
    text_id: int = Field(description="Digest of the whole text sequence")
    pattern_length: int = Field(description="Number of pattern tokens")
    text_length: int = Field(description="Number of text tokens")
    minimal_matching_length: int = Field(description="Minimum tile length used")
    threshold: float = Field(description="Threshold used for the suspicion flag")
    search_lengths: List[int] = Field(default_factory=list, description="Search length of every committed pass")
    restarts: List[int] = Field(default_factory=list, description="Lengths that triggered a restart")

    @property
    def coverage(self) -> int:
        return sum(tile.length for tile in self.tiles)


class TileMatch(BaseModel):
    """A committed tile resolved back to the source and target documents."""

    pattern_start: int = Field(description="First token index in the source")
    text_start: int = Field(description="First token index in the target")
    length: int = Field(description="Tile length in tokens")
    source_start: int = Field(description="Character offset where the tile starts in the source")
    source_end: int = Field(description="Character offset where the tile ends in the source")
    target_start: int = Field(description="Character offset where the tile starts in the target")
    target_end: int = Field(description="Character offset where the tile ends in the target")
    source_text: str = Field(description="Source text covered by the tile")
    target_text: str = Field(description="Target text covered by the tile")


class ComparisonReport(BaseModel):
    """Complete report for a comparison of two documents."""

    source_file: str = Field(description="Path or name of the source document")
    target_file: str = Field(description="Path or name of the target document")
    granularity: str = Field(description="Token unit used for the comparison")
    source_tokens: int = Field(description="Number of source tokens")
    target_tokens: int = Field(description="Number of target tokens")
    source_id: int = Field(description="Digest of the source token sequence")
    target_id: int = Field(description="Digest of the target token sequence")
    similarity: float = Field(description="Similarity score (0-1)")
    suspected_plagiarism: bool = Field(description="Whether similarity exceeds the threshold")
    threshold: float = Field(description="Threshold used for detection")
    minimal_matching_length: int = Field(description="Minimum tile length in tokens")
    total_tiles: int = Field(description="Number of committed tiles")
    matches: List[TileMatch] = Field(default_factory=list, description="Tiles ordered longest first")
    metadata: Dict[str, Any] = Field(default_factory=dict, description="Additional run metadata")

    @property
    def similarity_percentage(self) -> float:
        return self.similarity * 100
