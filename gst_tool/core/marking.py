"""Position marking for the pattern and text sequences."""

from enum import Enum
from typing import Optional

import numpy as np

from .types import Tile


class Side(str, Enum):
    """Which sequence of a tiling run a query refers to."""

    PATTERN = "pattern"
    TEXT = "text"


class SequenceMarks:
    """Boolean marks over one sequence; ``True`` means covered by a tile."""

    def __init__(self, length: int):
        self.marks = np.zeros(length, dtype=bool)

    def __len__(self) -> int:
        return len(self.marks)

    def is_marked(self, pos: int) -> bool:
        return bool(self.marks[pos])

    def is_unmarked(self, pos: int) -> bool:
        return not self.marks[pos]

    def mark(self, pos: int):
        self.marks[pos] = True

    def mark_range(self, start: int, length: int):
        self.marks[start:start + length] = True

    def any_marked(self, start: int, length: int) -> bool:
        return bool(self.marks[start:start + length].any())

    def marked_count(self) -> int:
        return int(self.marks.sum())

    def distance_to_next_marked(self, pos: int) -> Optional[int]:
        """
        Distance from ``pos`` to the first marked position after it.

        A marked token right after ``pos`` gives 1. Returns None when
        everything after ``pos`` is unmarked or ``pos`` is the sequence end.
        """
        if pos >= len(self.marks):
            return None
        rest = self.marks[pos + 1:]
        if not rest.size:
            return None
        first = int(np.argmax(rest))
        if not rest[first]:
            return None
        return first + 1

    def skip_past_marked_run(self, pos: int, distance: int) -> int:
        """
        Index of the first unmarked token after the run reached from ``pos``.

        Moves ``distance`` forward onto the marked run, then past it. Returns
        the sequence length when no unmarked token remains.
        """
        pos += distance
        if pos > len(self.marks) - 1:
            return pos
        unmarked = np.flatnonzero(~self.marks[pos + 1:])
        if not unmarked.size:
            return len(self.marks)
        return pos + 1 + int(unmarked[0])


class MarkState:
    """Marks of both sequences of a single tiling run."""

    def __init__(self, pattern_length: int, text_length: int):
        self.pattern = SequenceMarks(pattern_length)
        self.text = SequenceMarks(text_length)

    def of(self, side: Side) -> SequenceMarks:
        return self.pattern if side is Side.PATTERN else self.text

    def is_marked(self, side: Side, pos: int) -> bool:
        return self.of(side).is_marked(pos)

    def is_unmarked(self, side: Side, pos: int) -> bool:
        return self.of(side).is_unmarked(pos)

    def mark(self, side: Side, pos: int):
        self.of(side).mark(pos)

    def distance_to_next_marked(self, side: Side, pos: int) -> Optional[int]:
        return self.of(side).distance_to_next_marked(pos)

    def skip_past_marked_run(self, side: Side, pos: int, distance: int) -> int:
        return self.of(side).skip_past_marked_run(pos, distance)

    def mark_tile(self, tile: Tile):
        """Mark every position the tile covers in both sequences."""
        self.pattern.mark_range(tile.pattern_start, tile.length)
        self.text.mark_range(tile.text_start, tile.length)

    def any_marked(self, tile: Tile) -> bool:
        """Whether the tile touches a position already covered in either sequence."""
        return (self.pattern.any_marked(tile.pattern_start, tile.length) or
                self.text.any_marked(tile.text_start, tile.length))
