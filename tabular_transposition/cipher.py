"""
Tabular (Columnar) Transposition Cipher
=======================================
Write the message into a grid row by row, read it back column by column
in the order given by a numeric key. Letters keep their identity; only
their positions move.

Historical note: used in various forms from the 19th century through
both World Wars, often stacked twice (double transposition). Broken by
anagramming and column-pair statistics. Not secure; educational only.

Padding: the last grid row is completed with a filler letter ('X').
Decryption strips the trailing run of filler letters, which also strips
any genuine trailing 'X' of the original message. Pass strip=False to
get the padded text back untouched.
"""

import re
from typing import List, NamedTuple, Sequence, Union

from .errors import LengthMismatch, NonAlphabeticInput
from .grid import Grid
from .key import Key

KeyLike = Union[Key, Sequence[int], str]

_LETTERS = re.compile(r"[A-Za-z]+")


class CipherResult(NamedTuple):
    """Output text plus the working grid rendered row by row."""
    text: str
    rows: List[str]


def normalize_text(text: str, label: str = "plaintext") -> str:
    """Drop all whitespace and uppercase; only ASCII letters may remain."""
    compact = "".join(text.split())
    if not _LETTERS.fullmatch(compact):
        raise NonAlphabeticInput(
            f"Invalid {label}! Only letters are allowed.", label
        )
    return compact.upper()


def strip_padding(text: str, filler: str = "X") -> str:
    """Remove the trailing run of filler letters, nothing else."""
    return text.rstrip(filler)


class TranspositionCipher:
    """
    Columnar transposition under a fixed key.

    The key may be a Key, a sequence of ranks, or key text such as
    "3 1 2" / "312". Instances hold no per-message state.
    """

    ALPHA  = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
    FILLER = "X"

    def __init__(self, key: KeyLike, filler: str = None):
        if filler is None:
            filler = self.FILLER
        if len(filler) != 1 or filler not in self.ALPHA:
            raise ValueError("Filler must be a single uppercase letter A-Z.")
        self._key    = key if isinstance(key, Key) else Key(key)
        self._filler = filler

    @property
    def key(self) -> Key:
        return self._key

    @property
    def filler(self) -> str:
        return self._filler

    def encrypt(self, plaintext: str) -> CipherResult:
        """
        Encrypt letters-only plaintext (whitespace is ignored).
        Returns (ciphertext, rows); len(ciphertext) is a multiple of the
        key length.
        """
        text = normalize_text(plaintext, "plaintext")
        grid = Grid.fill_rows(text, len(self._key), self._filler)
        return CipherResult(grid.read_columns(self._key), grid.render())

    def decrypt(self, ciphertext: str, strip: bool = True) -> CipherResult:
        """
        Decrypt ciphertext produced under the same key.
        Raises LengthMismatch before building anything if the length is
        not a multiple of the key length.
        """
        text = normalize_text(ciphertext, "ciphertext")
        if len(text) % len(self._key):
            raise LengthMismatch(len(text), len(self._key))
        grid  = Grid.fill_columns(text, self._key)
        plain = grid.flatten()
        if strip:
            plain = strip_padding(plain, self._filler)
        return CipherResult(plain, grid.render())

    def __repr__(self):
        return f"TranspositionCipher({list(self._key)}, filler={self._filler!r})"


def encrypt(plaintext: str, key: KeyLike, filler: str = None) -> CipherResult:
    return TranspositionCipher(key, filler).encrypt(plaintext)


def decrypt(ciphertext: str, key: KeyLike, filler: str = None,
            strip: bool = True) -> CipherResult:
    return TranspositionCipher(key, filler).decrypt(ciphertext, strip=strip)
