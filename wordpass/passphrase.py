"""
passphrase assembly and the top-level generation flow.

load & filter → validate → sample → map to words → join once.
"""

from typing import Sequence

from .config import Config, DEFAULT_CONFIG
from .sampler import RandomSource, SystemRandomSource, sample_indices
from .wordlist import FileWordSource, WordSource, load_wordlist


def assemble(words: Sequence[str], delimiter: str = ".") -> str:
    """join words with the delimiter; never a leading or trailing one."""
    return delimiter.join(words)


def pick_words(
    wordlist: Sequence[str],
    count: int,
    rng: RandomSource | None = None,
    *,
    allow_duplicates: bool = True,
) -> list[str]:
    """map count sampled indices onto the word list."""
    indices = sample_indices(len(wordlist), count, rng, allow_duplicates=allow_duplicates)
    return [wordlist[i] for i in indices]


def generate_passphrase(
    config: Config = DEFAULT_CONFIG,
    source: WordSource | None = None,
    rng: RandomSource | None = None,
    *,
    progress: bool = False,
    verbose: bool = False,
) -> str:
    """
    build one passphrase end to end.

    args:
        config: word count, delimiter, filters
        source: raw line provider (default: FileWordSource(config.wordlist_path))
        rng: random provider (default: SystemRandomSource)
        progress: print the word count and per-word generation notices
        verbose: print filtering stats

    returns:
        the delimited passphrase

    raises:
        SourceUnavailableError, EmptyWordListError, InvalidRangeError
    """
    source = source or FileWordSource(config.wordlist_path)
    rng = rng or SystemRandomSource()

    wordlist, _stats = load_wordlist(
        source,
        min_length=config.min_length,
        min_zipf=config.min_zipf,
        zipf_lang=config.zipf_lang,
        zipf_wordlist=config.zipf_wordlist,
        verbose=verbose,
    )

    if progress:
        print(f"We are working with {len(wordlist):,} words!")

    indices = sample_indices(
        len(wordlist),
        config.word_count,
        rng,
        allow_duplicates=config.allow_duplicates,
    )

    words: list[str] = []
    for number, index in enumerate(indices, 1):
        if progress:
            print(f"Generating word number {number}...")
        words.append(wordlist[index])

    return assemble(words, config.delimiter)
