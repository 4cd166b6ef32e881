"""Tests for the window hasher and hash index."""

import zlib

from gst_tool.core.hashing import (
    DIGEST_MASK,
    HashIndex,
    WindowHasher,
    sequence_digest,
    token_code,
    window_hash,
)


class TestTokenCode:
    """Test cases for token_code."""

    def test_single_character_uses_code_point(self):
        assert token_code("a") == 97
        assert token_code("中") == ord("中")

    def test_longer_string_uses_crc32(self):
        assert token_code("hello") == zlib.crc32(b"hello")

    def test_integer_token(self):
        assert token_code(42) == 42

    def test_equal_tuples_share_code(self):
        assert token_code(("NAME", "x")) == token_code(("NAME", "x"))

    def test_tuple_code_folds_item_codes(self):
        # Same value in every process, unlike the salted hash() of a tuple
        assert token_code(("a", "b")) == 97 * 31 + 98
        assert token_code(("NAME", "x")) == (zlib.crc32(b"NAME") * 31 + ord("x")) & 0xFFFFFFFF


class TestWindowHasher:
    """Test cases for WindowHasher."""

    def test_shift_and_add_formula(self):
        """Digest follows acc = (acc << 1) + code."""
        # ((97 << 1) + 98) << 1) + 99
        assert window_hash("abc", 0, 3) == 683
        assert WindowHasher("xabc").digest(1, 3) == 683

    def test_equal_windows_equal_digest(self):
        hasher = WindowHasher(["foo", "bar", "foo", "bar"])
        assert hasher.digest(0, 2) == hasher.digest(2, 2)

    def test_digest_fits_in_32_bits(self):
        hasher = WindowHasher(["token%d" % i for i in range(200)])
        digest = hasher.digest(0, 200)
        assert 0 <= digest <= DIGEST_MASK

    def test_sequence_digest_is_full_window(self):
        assert sequence_digest("abc") == 683
        assert sequence_digest(list("abc")) == sequence_digest("abc")


class TestHashIndex:
    """Test cases for HashIndex."""

    def test_positions_kept_in_insertion_order(self):
        index = HashIndex(window_length=3)
        index.add(5, 0)
        index.add(7, 1)
        index.add(5, 3)

        assert index.get(5) == [0, 3]
        assert index.get(7) == [1]
        assert len(index) == 3
        assert 5 in index
        assert index.window_length == 3

    def test_missing_digest_returns_empty(self):
        index = HashIndex(window_length=2)
        assert index.get(123) == []
        assert 123 not in index
