"""
uniform random index selection.

every word in the list must be equally likely, and the draw has to come
from a cryptographically secure source: the passphrase is only as strong
as the randomness behind it.
"""

import secrets
from typing import Callable, Iterable, Protocol

from .errors import InvalidRangeError


class RandomSource(Protocol):
    """provider of uniform integers in [0, n)."""

    def randbelow(self, n: int) -> int:
        ...


class SystemRandomSource:
    """OS CSPRNG via the secrets module (default)."""

    def randbelow(self, n: int) -> int:
        if n <= 0:
            raise InvalidRangeError(f"upper bound must be positive, got: {n}")
        return secrets.randbelow(n)


class BytesRandomSource:
    """
    uniform integers on top of a raw random-bytes provider.

    reads just enough bytes to cover n - 1, masks off the excess high bits,
    and rejects anything >= n. reducing with % n instead would favour the
    low indices whenever n is not a power of two.
    """

    def __init__(self, read_bytes: Callable[[int], bytes] = secrets.token_bytes):
        self.read_bytes = read_bytes

    def randbelow(self, n: int) -> int:
        if n <= 0:
            raise InvalidRangeError(f"upper bound must be positive, got: {n}")

        bits = (n - 1).bit_length()
        if bits == 0:
            return 0

        num_bytes = (bits + 7) // 8
        mask = (1 << bits) - 1

        # each attempt succeeds with probability > 1/2
        while True:
            value = int.from_bytes(self.read_bytes(num_bytes), byteorder="little") & mask
            if value < n:
                return value


class SequenceRandomSource:
    """replays a fixed list of indices. for deterministic tests only."""

    def __init__(self, indices: Iterable[int]):
        self._indices = iter(list(indices))

    def randbelow(self, n: int) -> int:
        try:
            value = next(self._indices)
        except StopIteration:
            raise InvalidRangeError("scripted index sequence exhausted") from None
        if not 0 <= value < n:
            raise InvalidRangeError(f"scripted index {value} outside [0, {n})")
        return value


def sample_indices(
    length: int,
    count: int,
    rng: RandomSource | None = None,
    *,
    allow_duplicates: bool = True,
) -> list[int]:
    """
    draw count indices into a list of the given length.

    args:
        length: size of the word list L (must be > 0)
        count: number of indices N (must be > 0)
        rng: random provider (default: SystemRandomSource)
        allow_duplicates: if True, draws are independent and may repeat;
            if False, each index is used at most once

    returns:
        list of N indices in [0, L)
    """
    if length <= 0:
        raise InvalidRangeError(f"cannot sample from a list of length {length}")
    if count <= 0:
        raise InvalidRangeError(f"count must be positive, got: {count}")

    rng = rng or SystemRandomSource()

    if allow_duplicates:
        return [rng.randbelow(length) for _ in range(count)]

    if count > length:
        raise InvalidRangeError(
            f"cannot pick {count} distinct indices from {length} words"
        )

    # pop from the shrinking pool so later picks stay uniform over what's left
    pool = list(range(length))
    return [pool.pop(rng.randbelow(len(pool))) for _ in range(count)]
