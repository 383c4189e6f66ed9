"""
A position (cell coordinate) on the board

(placed in its own module as multiple other modules need to import it)
"""

from __future__ import annotations

import re
from dataclasses import dataclass

# column letter followed by a 1-based row number
ALGEBRAIC_PATTERN = r"[a-zA-Z][1-9][0-9]*"
# one letter a-z per column
MAX_COLS = 26


@dataclass(frozen=True, order=True)
class Position:
    col: int
    row: int

    @classmethod
    def from_algebraic(cls, name: str) -> Position:
        """Algebraic notation: 'a1' is column 0, row 0. 'b3' is column 1, row 2."""
        if not re.fullmatch(ALGEBRAIC_PATTERN, name):
            raise ValueError(f"{name!r} is not a square in algebraic notation")
        col = ord(name[0].lower()) - ord("a")
        row = int(name[1:]) - 1
        return cls(col, row)

    def to_algebraic(self) -> str:
        return f"{chr(self.col + ord('a'))}{self.row + 1}"

    def is_within_bounds(self, rows: int, cols: int) -> bool:
        return (0 <= self.col < cols) and (0 <= self.row < rows)

    def to_index(self, cols: int) -> int:
        """Row-major index into the cell list"""
        return self.row * cols + self.col

    def distance(self, other: Position) -> int:
        """Manhattan distance: number of orthogonal steps between the two positions"""
        return abs(self.col - other.col) + abs(self.row - other.row)


ORIGIN = Position(0, 0)
