"""Karp-Rabin style window digests and the per-pass hash index."""

import zlib
from collections import defaultdict
from typing import Dict, Hashable, List, Sequence

DIGEST_MASK = 0xFFFFFFFF


def token_code(token: Hashable) -> int:
    """
    Map a token to the integer fed into the window digest.

    Single characters use their code point so character-level digests match
    the classic Karp-Rabin formulation. Longer strings use CRC-32 and tuples
    fold their items' codes, so both are stable across processes. Other
    tokens fall back to ``hash()``, which may differ between processes.
    """
    if isinstance(token, str):
        if len(token) == 1:
            return ord(token)
        return zlib.crc32(token.encode('utf-8'))
    if isinstance(token, int):
        return token & DIGEST_MASK
    if isinstance(token, tuple):
        value = 0
        for item in token:
            value = (value * 31 + token_code(item)) & DIGEST_MASK
        return value
    return hash(token) & DIGEST_MASK


class WindowHasher:
    """Computes digests of fixed-length windows over one token sequence."""

    def __init__(self, tokens: Sequence[Hashable], mask: int = DIGEST_MASK):
        """
        Initialize the hasher.

        Args:
            tokens: The sequence whose windows will be hashed
            mask: Bit mask applied to the accumulator
        """
        self.mask = mask
        self.codes: List[int] = [token_code(token) for token in tokens]

    def digest(self, start: int, length: int) -> int:
        """
        Digest of the window ``[start, start + length)``.

        Recomputed from scratch on every call; equal windows always produce
        equal digests, unequal ones may collide.
        """
        value = 0
        for code in self.codes[start:start + length]:
            value = ((value << 1) + code) & self.mask
        return value

    def __len__(self) -> int:
        return len(self.codes)


def window_hash(tokens: Sequence[Hashable], start: int, length: int) -> int:
    """Digest of a single window without building a hasher."""
    value = 0
    for token in tokens[start:start + length]:
        value = ((value << 1) + token_code(token)) & DIGEST_MASK
    return value


def sequence_digest(tokens: Sequence[Hashable]) -> int:
    """Digest of a whole sequence, used as a document identifier."""
    return window_hash(tokens, 0, len(tokens))


class HashIndex:
    """Multimap from window digest to text start positions for one window length."""

    def __init__(self, window_length: int):
        self.window_length = window_length
        self._buckets: Dict[int, List[int]] = defaultdict(list)
        self.size = 0

    def add(self, digest: int, position: int):
        """Record that the window starting at ``position`` has ``digest``."""
        self._buckets[digest].append(position)
        self.size += 1

    def get(self, digest: int) -> List[int]:
        """Positions sharing ``digest`` in insertion order (empty if none)."""
        return self._buckets.get(digest, [])

    def __contains__(self, digest: int) -> bool:
        return digest in self._buckets

    def __len__(self) -> int:
        return self.size
