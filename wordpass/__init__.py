"""
random-words passphrase generator

picks several uniformly random dictionary words with a cryptographically
secure source and joins them into a memorable password.
"""

from .config import Config, DEFAULT_CONFIG
from .errors import (
    PassphraseError,
    SourceUnavailableError,
    EmptyWordListError,
    InvalidRangeError,
)
from .wordlist import FileWordSource, StaticWordSource, filter_words, load_wordlist
from .sampler import (
    BytesRandomSource,
    SequenceRandomSource,
    SystemRandomSource,
    sample_indices,
)
from .passphrase import assemble, pick_words, generate_passphrase

__all__ = [
    "Config",
    "DEFAULT_CONFIG",
    "PassphraseError",
    "SourceUnavailableError",
    "EmptyWordListError",
    "InvalidRangeError",
    "FileWordSource",
    "StaticWordSource",
    "filter_words",
    "load_wordlist",
    "BytesRandomSource",
    "SequenceRandomSource",
    "SystemRandomSource",
    "sample_indices",
    "assemble",
    "pick_words",
    "generate_passphrase",
]
