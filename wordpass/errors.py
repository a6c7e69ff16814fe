"""
error types raised while building a passphrase.

everything derives from PassphraseError so the command line can report
any failure with a single except clause.
"""

from pathlib import Path


class PassphraseError(Exception):
    """base class for generator failures."""


class SourceUnavailableError(PassphraseError):
    """the word source could not be opened or read."""

    def __init__(self, path: Path | str, reason: str = ""):
        self.path = Path(path)
        self.reason = reason
        message = f"word source not readable: {self.path}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class EmptyWordListError(PassphraseError):
    """filtering left no usable words."""

    def __init__(self, total: int = 0):
        self.total = total
        super().__init__(
            f"no usable words after filtering ({total:,} lines read)"
        )


class InvalidRangeError(PassphraseError):
    """sampler called with a range it cannot draw from."""
