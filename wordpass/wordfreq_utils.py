"""helpers for using wordfreq to keep passphrase words memorable.

rare dictionary words ("zymurgy", "quinquennium") are hard to recall.
checking zipf frequency lets the generator restrict itself to words
people actually use.
"""

from __future__ import annotations

from typing import Iterable

from wordfreq import zipf_frequency


def filter_common(
  words: Iterable[str],
  *,
  min_zipf: float,
  lang: str = "en",
  wordlist: str = "small",
) -> list[str]:
  """words with zipf frequency >= min_zipf, input order preserved.

  zipf is log10 of occurrences per billion words: 3.0 is roughly
  "seen once per million words", 6.0 is everyday vocabulary.
  """
  return [
    w for w in words
    if zipf_frequency(w, lang, wordlist=wordlist) >= min_zipf
  ]
