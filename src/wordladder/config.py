"""Word ladder configuration."""

from dotenv import find_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from wordladder.word import MAX_WORD_BYTES

# Determine the environment file path, or None if not found
ENV_FILE = find_dotenv(usecwd=True) or None


class LadderConfig(BaseSettings):
    """Configuration settings for ladder searches and the command line tool."""

    deterministic: bool = True
    """Enumerate adjacent words in sorted order, so ladders are reproducible. Default: True."""

    use_pattern_index: bool = False
    """Answer adjacency queries from a wildcard pattern index instead of scanning every word.

    Ladders are the same either way.  Default: False.
    """

    verbose: bool = False
    """Print progress messages to stderr from the command line tool. Default: False."""

    max_word_length: int = Field(default=MAX_WORD_BYTES, ge=1, le=MAX_WORD_BYTES)
    """Longest word accepted when loading a dictionary (at most 8). Default: 8."""

    model_config = SettingsConfigDict(
        env_prefix="WORDLADDER_",
        env_file=ENV_FILE,
        env_file_encoding="utf-8",
        extra="ignore",
    )


config = LadderConfig()
