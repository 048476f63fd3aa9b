"""
Working Grid
============
The rectangular, row-major character matrix the cipher operates on.

Encryption writes the plaintext in by rows and reads it out by columns
(in key-rank order). Decryption does the reverse: ciphertext goes in by
columns (in key-rank order) and comes out by rows.

    key      3 1 2
             -----
             H E L        plaintext  HELLO  (padded with X)
             L O X        ciphertext EO LX HL
"""

from typing import List, Sequence

from .errors import LengthMismatch
from .key import Key


class Grid:
    """R x C matrix of single characters, every cell filled."""

    def __init__(self, cells: Sequence[Sequence[str]]):
        self._cells = [list(row) for row in cells]

    # ── construction ─────────────────────────────────────────────────────────

    @classmethod
    def fill_rows(cls, text: str, columns: int, filler: str) -> "Grid":
        """
        Lay `text` out left to right, top to bottom.
        The last row is completed with `filler`.
        """
        rows   = -(-len(text) // columns)   # ceil
        padded = text + filler * (rows * columns - len(text))
        return cls(
            padded[r * columns:(r + 1) * columns] for r in range(rows)
        )

    @classmethod
    def fill_columns(cls, text: str, key: Key) -> "Grid":
        """
        Split `text` into len(key) equal blocks and write block k
        top to bottom into the column ranked k.
        """
        columns = len(key)
        if len(text) % columns:
            raise LengthMismatch(len(text), columns)
        rows  = len(text) // columns
        cells = [[""] * columns for _ in range(rows)]
        for block, col in enumerate(key.column_order()):
            chunk = text[block * rows:(block + 1) * rows]
            for r, ch in enumerate(chunk):
                cells[r][col] = ch
        return cls(cells)

    # ── access ───────────────────────────────────────────────────────────────

    @property
    def rows(self) -> int:
        return len(self._cells)

    @property
    def columns(self) -> int:
        return len(self._cells[0]) if self._cells else 0

    def column(self, index: int) -> str:
        return "".join(row[index] for row in self._cells)

    def read_columns(self, key: Key) -> str:
        """Concatenate the columns top to bottom in ascending key rank."""
        return "".join(self.column(col) for col in key.column_order())

    def flatten(self) -> str:
        return "".join("".join(row) for row in self._cells)

    def render(self) -> List[str]:
        """Display rows: the characters of each row separated by one space."""
        return [" ".join(row) for row in self._cells]

    def __repr__(self):
        return f"Grid({self.rows}x{self.columns})"
