"""
Running-Karp-Rabin Greedy String Tiling.

The controller scans at a decreasing sequence of search lengths. Each pass
either asks for a restart at a larger length (a match far longer than the
window was seen) or hands its candidates to the committer, which keeps the
non-occluded ones and marks them so later passes cannot reuse those tokens.
"""

from enum import Enum
from typing import Hashable, Iterable, List, Optional, Sequence

from .errors import EmptyInputError, InvalidParameterError, TilingError
from .marking import MarkState
from .scanner import ScanPass, ScanResult
from .types import Tile, TileSet
from .log import base_logger

logger = base_logger.getChild('tiling')

DEFAULT_MINIMAL_MATCHING_LENGTH = 3
DEFAULT_INITIAL_SEARCH_LENGTH = 20
MIN_INITIAL_SEARCH_LENGTH = 5
DEFAULT_MAX_PASSES = 10000


class TilingState(Enum):
    SCANNING = "scanning"
    COMMITTING = "committing"
    DONE = "done"


def validate_minimal_matching_length(value: int) -> int:
    if value < 1:
        raise InvalidParameterError(
            f"minimal_matching_length must be at least 1, got {value}"
        )
    return value


def resolve_initial_search_length(value: int, minimal_matching_length: int) -> int:
    """
    Search length of the first pass.

    Values below 5 fall back to 20. The result is never smaller than the
    minimal matching length, so the last pass always runs at exactly that
    length.
    """
    if value < MIN_INITIAL_SEARCH_LENGTH:
        logger.debug(f"initial_search_length={value} below {MIN_INITIAL_SEARCH_LENGTH}, using {DEFAULT_INITIAL_SEARCH_LENGTH}")
        value = DEFAULT_INITIAL_SEARCH_LENGTH
    return max(value, minimal_matching_length)


def next_search_length(search_length: int, minimal_matching_length: int) -> Optional[int]:
    """Search length after a committed pass, or None when tiling is finished."""
    if search_length > 2 * minimal_matching_length:
        return search_length // 2
    if search_length > minimal_matching_length:
        return minimal_matching_length
    return None


class TileCommitter:
    """
    Moves non-occluded candidates into the tile set and marks them.

    Batches must arrive in non-increasing search-length order. Under that
    order a candidate that overlaps an earlier tile either shares its end
    positions or touches a token the earlier tile already marked; both are
    discarded.
    """

    def __init__(self, tiles: TileSet, marks: MarkState):
        self.tiles = tiles
        self.marks = marks
        self.last_search_length: Optional[int] = None

    def is_occluded(self, candidate: Tile) -> bool:
        """Whether a committed tile ends where the candidate ends in both sequences."""
        for tile in self.tiles:
            if (tile.pattern_end == candidate.pattern_end and
                    tile.text_end == candidate.text_end):
                return True
        return False

    def commit(self, candidates: Iterable[Tile], search_length: int) -> List[Tile]:
        """
        Commit a batch produced at ``search_length``.

        Returns:
            The tiles actually added, in scan order
        """
        if self.last_search_length is not None and search_length > self.last_search_length:
            raise TilingError(
                f"Batch at search length {search_length} committed after "
                f"a batch at {self.last_search_length}"
            )
        self.last_search_length = search_length

        committed = []
        for candidate in candidates:
            if self.is_occluded(candidate) or self.marks.any_marked(candidate):
                continue
            self.tiles.add(candidate)
            self.marks.mark_tile(candidate)
            committed.append(candidate)
        return committed


class TilingRun:
    """State owned by a single tiling run; never shared between runs."""

    def __init__(self, pattern: Sequence[Hashable], text: Sequence[Hashable]):
        self.pattern = list(pattern)
        self.text = list(text)
        self.marks = MarkState(len(self.pattern), len(self.text))
        self.tiles = TileSet()
        self.scanner = ScanPass(self.pattern, self.text, self.marks)
        self.committer = TileCommitter(self.tiles, self.marks)
        self.search_lengths: List[int] = []
        self.restarts: List[int] = []
        self.passes = 0


class GreedyStringTiler:
    """Drives scan and commit passes until the search length reaches its minimum."""

    def __init__(
        self,
        minimal_matching_length: int = DEFAULT_MINIMAL_MATCHING_LENGTH,
        initial_search_length: int = DEFAULT_INITIAL_SEARCH_LENGTH,
        max_passes: int = DEFAULT_MAX_PASSES
    ):
        """
        Initialize the tiler.

        Args:
            minimal_matching_length: Shortest tile worth reporting
            initial_search_length: Window size of the first pass
            max_passes: Scan passes allowed before the run is abandoned
        """
        self.minimal_matching_length = validate_minimal_matching_length(minimal_matching_length)
        if max_passes < 1:
            raise InvalidParameterError(f"max_passes must be at least 1, got {max_passes}")
        self.initial_search_length = resolve_initial_search_length(
            initial_search_length, self.minimal_matching_length
        )
        self.max_passes = max_passes

    @staticmethod
    def restart_search_length(run: TilingRun, match_length: int) -> int:
        """
        Search length for the pass that replaces an aborted one.

        Capped at the last committed search length: every unmarked match was
        at most twice that length when it was committed, so the re-run cannot
        restart again and commits never go back to a larger length.
        """
        if run.search_lengths:
            return min(match_length, run.search_lengths[-1])
        return match_length

    def run(self, pattern: Sequence[Hashable], text: Sequence[Hashable]) -> TilingRun:
        """
        Tile ``pattern`` against ``text``.

        Returns:
            The finished run, holding the tile set, the marks and the pass history
        """
        if len(pattern) == 0 or len(text) == 0:
            raise EmptyInputError(
                f"Cannot tile empty input (pattern={len(pattern)} tokens, text={len(text)} tokens)"
            )

        run = TilingRun(pattern, text)
        mml = self.minimal_matching_length
        search_length = self.initial_search_length
        state = TilingState.SCANNING
        scan: Optional[ScanResult] = None

        while state is not TilingState.DONE:
            if state is TilingState.SCANNING:
                if run.passes >= self.max_passes:
                    raise TilingError(f"Tiling did not converge within {self.max_passes} passes")
                run.passes += 1
                scan = run.scanner.run(search_length)
                if scan.restart:
                    run.restarts.append(scan.restart_length)
                    search_length = self.restart_search_length(run, scan.restart_length)
                    logger.debug(f"Restarting pass at s={search_length} (match of length {scan.restart_length})")
                    continue
                state = TilingState.COMMITTING
            else:
                committed = run.committer.commit(scan.candidates, search_length)
                run.search_lengths.append(search_length)
                logger.debug(
                    f"Pass at s={search_length}: {len(scan.candidates)} candidates, "
                    f"{len(committed)} committed"
                )
                following = next_search_length(search_length, mml)
                if following is None:
                    state = TilingState.DONE
                else:
                    search_length = following
                    state = TilingState.SCANNING

        logger.info(
            f"Tiling complete: {len(run.tiles)} tiles, coverage {run.tiles.coverage()} "
            f"after {run.passes} passes"
        )
        return run

    def tile(self, pattern: Sequence[Hashable], text: Sequence[Hashable]) -> TileSet:
        return self.run(pattern, text).tiles


def tile(
    pattern: Sequence[Hashable],
    text: Sequence[Hashable],
    minimal_matching_length: int = DEFAULT_MINIMAL_MATCHING_LENGTH,
    initial_search_length: int = DEFAULT_INITIAL_SEARCH_LENGTH,
    max_passes: int = DEFAULT_MAX_PASSES
) -> TileSet:
    """Compute the greedy string tiling of ``pattern`` against ``text``."""
    tiler = GreedyStringTiler(minimal_matching_length, initial_search_length, max_passes)
    return tiler.tile(pattern, text)
