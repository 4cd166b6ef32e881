"""Configuration module for gst-tool."""

import os
from typing import Literal
from pydantic import BaseModel, Field, ConfigDict
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


class Config(BaseModel):
    """Configuration for the tiling and scoring pipeline."""

    # Tiling settings
    minimal_matching_length: int = Field(
        default_factory=lambda: int(os.getenv("GST_MIN_MATCH_LENGTH", "3")),
        ge=1,
        description="Shortest tile, in tokens, that counts as a match"
    )
    initial_search_length: int = Field(
        default_factory=lambda: int(os.getenv("GST_INITIAL_SEARCH_LENGTH", "20")),
        description="Search length of the first scan pass (values below 5 fall back to 20)"
    )
    max_passes: int = Field(
        default_factory=lambda: int(os.getenv("GST_MAX_PASSES", "10000")),
        ge=1,
        description="Upper bound on scan passes per run"
    )

    # Detection settings
    similarity_threshold: float = Field(
        default_factory=lambda: float(os.getenv("GST_THRESHOLD", "0.5")),
        ge=0.0,
        le=1.0,
        description="Similarity above which plagiarism is suspected"
    )

    # Tokenization settings
    granularity: Literal["char", "word", "lexeme"] = Field(
        default_factory=lambda: os.getenv("GST_GRANULARITY", "word"),
        description="Token unit used for both tiling and scoring"
    )
    lowercase: bool = Field(
        default_factory=lambda: _env_bool("GST_LOWERCASE", False),
        description="Fold tokens to lower case before comparison"
    )

    model_config = ConfigDict(
        validate_assignment=True,
        extra="forbid"
    )
