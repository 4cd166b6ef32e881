"""Tests for the tokenizer module."""

import pytest

from gst_tool.core.tokenizer import TextTokenizer


class TestTextTokenizer:
    """Test cases for TextTokenizer."""

    def test_word_tokens_with_offsets(self):
        spans = TextTokenizer("word").tokenize("Hello, world! Hello.")

        assert [s.text for s in spans] == ["Hello", "world", "Hello"]
        assert (spans[0].start_pos, spans[0].end_pos) == (0, 5)
        assert (spans[1].start_pos, spans[1].end_pos) == (7, 12)
        assert [s.index for s in spans] == [0, 1, 2]

    def test_lexeme_keeps_punctuation(self):
        assert TextTokenizer("lexeme").tokens("a+b; c") == ["a", "+", "b", ";", "c"]

    def test_char_tokens(self):
        assert TextTokenizer("char").tokens("ab c") == ["a", "b", " ", "c"]

    def test_chinese_words(self):
        tokens = TextTokenizer("word").tokens("人工智能，深度学习")
        assert tokens == ["人工智能", "深度学习"]

    def test_lowercase(self):
        spans = TextTokenizer("word", lowercase=True).tokenize("Hello World")
        assert [s.text for s in spans] == ["hello", "world"]
        assert spans[1].start_pos == 6

    def test_empty_text(self):
        assert TextTokenizer().tokenize("") == []

    def test_invalid_granularity(self):
        with pytest.raises(ValueError, match="granularity must be one of"):
            TextTokenizer("sentence")
