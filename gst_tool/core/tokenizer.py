"""Tokenization of raw text into sequences for tiling."""

import re
from typing import List
from pydantic import BaseModel, Field

GRANULARITIES = ("char", "word", "lexeme")

_PATTERNS = {
    # Runs of word characters; whitespace and punctuation separate tokens
    "word": re.compile(r"\w+"),
    # Words plus every punctuation mark as a token of its own
    "lexeme": re.compile(r"\w+|[^\w\s]"),
}


class TokenSpan(BaseModel):
    """A token together with its location in the original text."""

    text: str = Field(description="Token value used for comparison")
    start_pos: int = Field(description="Starting character offset in the original text")
    end_pos: int = Field(description="Ending character offset in the original text")
    index: int = Field(description="Position of this token in the sequence")


class TextTokenizer:
    """Splits text into tokens at one granularity."""

    def __init__(self, granularity: str = "word", lowercase: bool = False):
        """
        Initialize the tokenizer.

        Args:
            granularity: One of "char", "word" or "lexeme"
            lowercase: Fold token values to lower case
        """
        if granularity not in GRANULARITIES:
            raise ValueError(
                f"granularity must be one of {', '.join(GRANULARITIES)}, got {granularity!r}"
            )
        self.granularity = granularity
        self.lowercase = lowercase

    def tokenize(self, text: str) -> List[TokenSpan]:
        """
        Split text into tokens with their character offsets.

        Args:
            text: The text to tokenize

        Returns:
            List of TokenSpan objects in text order
        """
        if not text:
            return []

        if self.granularity == "char":
            pieces = ((ch, pos, pos + 1) for pos, ch in enumerate(text))
        else:
            pieces = ((m.group(), m.start(), m.end()) for m in _PATTERNS[self.granularity].finditer(text))

        spans = []
        for index, (value, start, end) in enumerate(pieces):
            if self.lowercase:
                value = value.lower()
            spans.append(TokenSpan(text=value, start_pos=start, end_pos=end, index=index))
        return spans

    def tokens(self, text: str) -> List[str]:
        """Token values only."""
        return [span.text for span in self.tokenize(text)]
