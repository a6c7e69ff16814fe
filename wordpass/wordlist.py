"""
word list loading and filtering.

filters out:
- lines containing an apostrophe (possessives, contractions)
- lines whose word starts with an uppercase letter (proper names)
- lines that are blank once surrounding whitespace is removed
- optionally, words shorter than min_length or too rare to remember
"""

from pathlib import Path
from typing import Iterable, Protocol

from .errors import EmptyWordListError, SourceUnavailableError

APOSTROPHE = "'"


class WordSource(Protocol):
    """anything that hands back the raw lines of a word list."""

    def read_lines(self) -> list[str]:
        ...


class FileWordSource:
    """plain-text dictionary file, one word per line."""

    def __init__(self, path: Path | str):
        self.path = Path(path)

    def read_lines(self) -> list[str]:
        """read every line, newlines included. the file is closed on return."""
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                return f.readlines()
        except UnicodeDecodeError as e:
            raise SourceUnavailableError(self.path, "not valid utf-8") from e
        except OSError as e:
            raise SourceUnavailableError(self.path, e.strerror or str(e)) from e

    def __repr__(self) -> str:
        return f"FileWordSource({str(self.path)!r})"


class StaticWordSource:
    """in-memory lines, handy for tests or embedding a word list."""

    def __init__(self, lines: Iterable[str]):
        self._lines = list(lines)

    def read_lines(self) -> list[str]:
        return list(self._lines)


def reject_reason(line: str, *, min_length: int = 0) -> str | None:
    """name of the stats counter a raw line falls under, or None to keep it."""
    if APOSTROPHE in line:
        return "apostrophe"

    word = line.strip()
    if not word:
        return "blank"

    # checked after stripping so " Apple" counts as a proper name too
    if word[0].isupper():
        return "capitalized"

    if len(word) < min_length:
        return "too_short"

    return None


def is_valid_word(line: str, *, min_length: int = 0) -> bool:
    """check if a raw line passes all filters."""
    return reject_reason(line, min_length=min_length) is None


def filter_words(
    lines: Iterable[str],
    *,
    min_length: int = 0,
    verbose: bool = False,
) -> tuple[list[str], dict[str, int]]:
    """filter raw lines into clean candidate words.

    returns:
        words: cleaned word list, input order preserved
        stats: dict with filtering statistics
    """
    words: list[str] = []

    stats = {
        "total": 0,
        "kept": 0,
        "apostrophe": 0,
        "capitalized": 0,
        "blank": 0,
        "too_short": 0,
    }

    for line in lines:
        stats["total"] += 1

        reason = reject_reason(line, min_length=min_length)
        if reason is not None:
            stats[reason] += 1
            continue

        words.append(line.strip())
        stats["kept"] += 1

    if verbose:
        print_stats(stats, min_length=min_length)

    return words, stats


def print_stats(stats: dict[str, int], *, min_length: int = 0) -> None:
    print("  filtering stats:")
    print(f"    total input:             {stats['total']:,}")
    print(f"    kept:                    {stats['kept']:,}")
    print(f"    apostrophe:              {stats['apostrophe']:,}")
    print(f"    capitalized:             {stats['capitalized']:,}")
    print(f"    blank:                   {stats['blank']:,}")
    if min_length:
        print(f"    too short (<{min_length}):        {stats['too_short']:,}")
    if "too_rare" in stats:
        print(f"    too rare (zipf):         {stats['too_rare']:,}")


def load_wordlist(
    source: WordSource,
    *,
    min_length: int = 0,
    min_zipf: float | None = None,
    zipf_lang: str = "en",
    zipf_wordlist: str = "small",
    verbose: bool = False,
) -> tuple[list[str], dict[str, int]]:
    """
    read a word source once and return the filtered word list.

    args:
        source: where the raw lines come from
        min_length: drop words shorter than this (0 = keep all)
        min_zipf: if set, drop words wordfreq rates below this zipf score
        zipf_lang: wordfreq language code
        zipf_wordlist: wordfreq list name ("small", "large", "best")
        verbose: print filtering stats

    returns:
        (words, stats)

    raises:
        SourceUnavailableError: the source could not be read
        EmptyWordListError: nothing survived filtering
    """
    lines = source.read_lines()
    words, stats = filter_words(lines, min_length=min_length)

    if min_zipf is not None:
        from .wordfreq_utils import filter_common

        before = len(words)
        words = filter_common(words, min_zipf=min_zipf, lang=zipf_lang, wordlist=zipf_wordlist)
        stats["too_rare"] = before - len(words)
        stats["kept"] = len(words)

    if verbose:
        print_stats(stats, min_length=min_length)

    if not words:
        raise EmptyWordListError(stats["total"])

    return words, stats
