"""
tabular_transposition
=====================
Columnar (tabular) transposition cipher with a numeric key.

    >>> from tabular_transposition import encrypt, decrypt
    >>> encrypt("HELLO", [3, 1, 2]).text
    'EOLXHL'
    >>> decrypt("EOLXHL", "312").text
    'HELLO'

Modules:
    key       Key permutation type and key-text parsing
    grid      Row-major working grid, column reads and writes
    cipher    encrypt / decrypt / strip_padding, TranspositionCipher
    session   Interactive console loop
    errors    Exception hierarchy (all ValueError subclasses)

License: Apache 2.0
"""

__version__ = "1.0.0"

from .errors  import (
    TranspositionError,
    InvalidKeyFormat,
    InvalidKeyPermutation,
    NonAlphabeticInput,
    LengthMismatch,
)
from .key     import Key, parse_key
from .grid    import Grid
from .cipher  import (
    CipherResult,
    TranspositionCipher,
    encrypt,
    decrypt,
    strip_padding,
    normalize_text,
)
from .session import InteractiveSession

__all__ = [
    "TranspositionError",
    "InvalidKeyFormat",
    "InvalidKeyPermutation",
    "NonAlphabeticInput",
    "LengthMismatch",
    "Key",
    "parse_key",
    "Grid",
    "CipherResult",
    "TranspositionCipher",
    "encrypt",
    "decrypt",
    "strip_padding",
    "normalize_text",
    "InteractiveSession",
]
