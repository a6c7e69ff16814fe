"""
configuration for the passphrase generator.

defaults reproduce the classic five-words-with-dots password.
"""

from dataclasses import dataclass
from pathlib import Path

# well-known system dictionary location on most unix-likes
DEFAULT_WORDLIST_PATH = Path("/usr/share/dict/words")


@dataclass
class Config:
    """generator configuration; defaults give five dot-separated words."""

    # how many words go into the passphrase
    word_count: int = 5

    # literal string placed between words
    delimiter: str = "."

    # one word per line, read once per run
    wordlist_path: Path = DEFAULT_WORDLIST_PATH

    # the same word may appear in more than one position
    allow_duplicates: bool = True

    # 0 disables the length gate
    min_length: int = 0

    # memorability gate via wordfreq; None disables it
    min_zipf: float | None = None
    zipf_lang: str = "en"
    zipf_wordlist: str = "small"

    def __post_init__(self):
        """ensure paths are Path objects and values make sense."""
        self.wordlist_path = Path(self.wordlist_path)
        if self.word_count < 1:
            raise ValueError(f"word_count must be at least 1, got: {self.word_count}")
        if not self.delimiter:
            raise ValueError("delimiter must not be empty")
        if self.min_length < 0:
            raise ValueError(f"min_length must be >= 0, got: {self.min_length}")


# default config instance
DEFAULT_CONFIG = Config()
