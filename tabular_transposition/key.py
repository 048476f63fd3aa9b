"""
Transposition Key
=================
A key is a permutation of the ranks 1..N, one rank per grid column.
Rank 1 is the column read first on encryption and filled first on
decryption.

Two textual forms are accepted:

    "3 1 2"     whitespace-separated ranks (multi-digit ranks allowed)
    "312"       contiguous digits, one rank per digit (ranks 1-9 only)

Both forms, and direct construction from integers, go through the same
permutation check.
"""

import re
from typing import Iterable, List

from .errors import InvalidKeyFormat, InvalidKeyPermutation

_KEY_TEXT = re.compile(r"[0-9\s]+")


def _check_permutation(ranks: tuple) -> None:
    """Raise InvalidKeyPermutation unless `ranks` is exactly 1..N in some order."""
    n = len(ranks)
    if n == 0:
        raise InvalidKeyPermutation("Key must have at least one column.", ranks)
    seen = set()
    for rank in ranks:
        if rank < 1 or rank > n:
            raise InvalidKeyPermutation(
                f"Rank {rank} is outside 1..{n}; the key must be a "
                f"permutation of 1..{n}.", ranks, rank,
            )
        if rank in seen:
            raise InvalidKeyPermutation(
                f"Rank {rank} appears more than once; the key must be a "
                f"permutation of 1..{n}.", ranks, rank,
            )
        seen.add(rank)


class Key(tuple):
    """
    Validated column permutation.

    Immutable; compares equal to the plain tuple of its ranks, so
    Key([3, 1, 2]) == (3, 1, 2).
    """

    def __new__(cls, ranks: Iterable[int]):
        if isinstance(ranks, str):
            return cls.parse(ranks)
        values = tuple(ranks)
        for rank in values:
            # bool is an int subclass; True is not a rank
            if not isinstance(rank, int) or isinstance(rank, bool):
                raise InvalidKeyFormat(f"Key ranks must be integers, got {rank!r}.")
        _check_permutation(values)
        return super().__new__(cls, values)

    @classmethod
    def parse(cls, raw: str) -> "Key":
        """
        Parse user-supplied key text.

        Whitespace anywhere inside the text selects the spaced form;
        otherwise every digit is a rank of its own.
        Raises InvalidKeyFormat or InvalidKeyPermutation.
        """
        text = raw.strip()
        if not text or not _KEY_TEXT.fullmatch(text):
            raise InvalidKeyFormat(
                "Invalid key! Use digits and optional spaces (e.g. 3 1 2 or 312)."
            )
        if any(ch.isspace() for ch in text):
            tokens = text.split()
        else:
            tokens = list(text)
        return cls(int(token) for token in tokens)

    @property
    def columns(self) -> int:
        return len(self)

    def column_order(self) -> List[int]:
        """Column indices sorted by ascending rank."""
        return [self.index(rank) for rank in range(1, len(self) + 1)]

    def __repr__(self):
        return f"Key({list(self)})"


def parse_key(raw: str) -> Key:
    return Key.parse(raw)
