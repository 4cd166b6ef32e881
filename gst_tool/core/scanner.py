"""Single search-length scan of the pattern against the text."""

from typing import Hashable, Iterator, List, Optional, Sequence
from pydantic import BaseModel, Field

from .hashing import HashIndex, WindowHasher
from .marking import MarkState, SequenceMarks
from .types import Tile
from .log import base_logger

logger = base_logger.getChild('scanner')


class ScanResult(BaseModel):
    """Outcome of one scan pass: a restart request or a batch of candidates."""

    search_length: int = Field(description="Search length the pass ran at")
    candidates: List[Tile] = Field(default_factory=list, description="Maximal matches in scan order")
    longest_search_length: int = Field(default=0, description="Largest search length that yielded a candidate")
    restart_length: Optional[int] = Field(default=None, description="Match length that aborted the pass")

    @property
    def restart(self) -> bool:
        return self.restart_length is not None


class ScanPass:
    """
    Proposes candidate tiles for a given search length.

    One instance serves a whole tiling run: the token codes are computed
    once, while the hash index is rebuilt on every call to ``run``. The
    marks are read but never modified here.
    """

    def __init__(self, pattern: Sequence[Hashable], text: Sequence[Hashable], marks: MarkState):
        # Slices of both sides are compared directly, so they must share a type
        self.pattern = list(pattern)
        self.text = list(text)
        self.marks = marks
        self.pattern_hasher = WindowHasher(self.pattern)
        self.text_hasher = WindowHasher(self.text)

    def windows(self, marks: SequenceMarks, search_length: int) -> Iterator[int]:
        """
        Start positions of every window of ``search_length`` unmarked tokens.

        Marked tokens are stepped over one at a time; unmarked runs shorter
        than the window are jumped past in a single move.
        """
        n = len(marks)
        pos = 0
        while pos < n:
            if marks.is_marked(pos):
                pos += 1
                continue

            dist = marks.distance_to_next_marked(pos)
            if dist is None:
                # Unmarked to the end of the sequence
                if n - pos < search_length:
                    return
            elif dist < search_length:
                pos = marks.skip_past_marked_run(pos, dist)
                continue

            yield pos
            pos += 1

    def index_text(self, search_length: int) -> HashIndex:
        """Hash every unmarked text window of ``search_length`` tokens."""
        index = HashIndex(search_length)
        for t in self.windows(self.marks.text, search_length):
            index.add(self.text_hasher.digest(t, search_length), t)
        return index

    def extend(self, p: int, t: int, search_length: int) -> int:
        """Grow a verified seed at (p, t) while tokens agree and stay unmarked."""
        k = search_length
        pattern, text = self.pattern, self.text
        pattern_marks, text_marks = self.marks.pattern, self.marks.text
        while (p + k < len(pattern) and t + k < len(text)
               and pattern[p + k] == text[t + k]
               and pattern_marks.is_unmarked(p + k)
               and text_marks.is_unmarked(t + k)):
            k += 1
        return k

    def run(self, search_length: int) -> ScanResult:
        """
        Scan once at ``search_length``.

        Returns a restart request as soon as a match longer than twice the
        search length is found; nothing from the aborted pass is kept.
        """
        if search_length < 1:
            raise ValueError("search_length must be positive")

        index = self.index_text(search_length)
        logger.debug(f"Indexed {len(index)} text windows at s={search_length}")

        candidates: List[Tile] = []
        longest = 0
        for p in self.windows(self.marks.pattern, search_length):
            positions = index.get(self.pattern_hasher.digest(p, search_length))
            if not positions:
                continue

            window = self.pattern[p:p + search_length]
            for t in positions:
                # Digest collisions are filtered here
                if self.text[t:t + search_length] != window:
                    continue

                k = self.extend(p, t, search_length)
                if k > 2 * search_length:
                    logger.debug(f"Match of length {k} at ({p}, {t}) exceeds 2*s={2 * search_length}")
                    return ScanResult(search_length=search_length, restart_length=k)

                longest = max(longest, search_length)
                candidates.append(Tile(pattern_start=p, text_start=t, length=k))

        return ScanResult(
            search_length=search_length,
            candidates=candidates,
            longest_search_length=longest
        )
