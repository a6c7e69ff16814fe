"""
command line entry point.

usage:
    wordpass
    wordpass --words 6 --delimiter - --wordlist /usr/share/dict/american-english
"""

import argparse
import sys
from pathlib import Path

from .config import DEFAULT_CONFIG, Config
from .errors import PassphraseError
from .passphrase import generate_passphrase


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wordpass",
        description="generate a passphrase of random dictionary words"
    )
    parser.add_argument(
        "--words", "-n",
        type=int,
        default=DEFAULT_CONFIG.word_count,
        help=f"number of words (default: {DEFAULT_CONFIG.word_count})"
    )
    parser.add_argument(
        "--delimiter", "-d",
        type=str,
        default=DEFAULT_CONFIG.delimiter,
        help=f"string placed between words (default: {DEFAULT_CONFIG.delimiter!r})"
    )
    parser.add_argument(
        "--wordlist",
        type=Path,
        default=DEFAULT_CONFIG.wordlist_path,
        help=f"word file, one word per line (default: {DEFAULT_CONFIG.wordlist_path})"
    )
    parser.add_argument(
        "--unique",
        action="store_true",
        help="never repeat a word within one passphrase"
    )
    parser.add_argument(
        "--min-length",
        type=int,
        default=DEFAULT_CONFIG.min_length,
        help="drop words shorter than this (default: no limit)"
    )
    parser.add_argument(
        "--min-zipf",
        type=float,
        default=None,
        help="only use words at least this common per wordfreq (e.g. 3.0)"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="print filtering stats"
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = Config(
            word_count=args.words,
            delimiter=args.delimiter,
            wordlist_path=args.wordlist,
            allow_duplicates=not args.unique,
            min_length=args.min_length,
            min_zipf=args.min_zipf,
        )
    except ValueError as e:
        parser.error(str(e))

    try:
        password = generate_passphrase(config, progress=True, verbose=args.verbose)
    except PassphraseError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    print("Your new password has been generated; if you don't like it, you may")
    print("change the order, but that will reduce the entropy slightly.")
    print()
    print(f"Your new password is: {password}")
    print("Keep it safe.")
    return 0
