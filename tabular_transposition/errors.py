"""
Exceptions raised by the transposition core.

Every error is a ValueError: the caller fixed the input once, it can fix it
again. The interactive session re-prompts on any of these; the CLI turns
them into an exit message.
"""


class TranspositionError(ValueError):
    """Base class for all tabular transposition errors."""


class InvalidKeyFormat(TranspositionError):
    """Key text is not made of digits and whitespace."""


class InvalidKeyPermutation(TranspositionError):
    """Key ranks are not an exact permutation of 1..N."""

    def __init__(self, message: str, ranks=(), rank: int = None):
        super().__init__(message)
        self.ranks = tuple(ranks)
        self.rank  = rank


class NonAlphabeticInput(TranspositionError):
    """Plaintext or ciphertext holds something other than letters."""

    def __init__(self, message: str, label: str = "text"):
        super().__init__(message)
        self.label = label


class LengthMismatch(TranspositionError):
    """Ciphertext length is not a multiple of the key length."""

    def __init__(self, length: int, columns: int):
        super().__init__(
            f"Ciphertext length {length} must be divisible by "
            f"key length {columns} for decryption."
        )
        self.length  = length
        self.columns = columns
