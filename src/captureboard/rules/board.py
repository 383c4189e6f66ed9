"""The Board owns the grid of cells. It implements every rule that only concerns the placement of pieces (bounds, adjacency, swapping)."""

from dataclasses import dataclass
from typing import Callable, Self

from captureboard.core.exceptions import InvalidLayoutError
from captureboard.rules.pieces import LAYOUT_TO_PIECE, PIECE_TO_LAYOUT, PieceType
from captureboard.rules.position import MAX_COLS, Position

ROW_SEPARATOR = "/"
DIGITS = "0123456789"


@dataclass
class Board:
    """
    Fixed-size grid, stored row-major: the cell of Position(col, row) lives at index row * cols + col.
    The number of cells never changes after construction.
    """

    cells: list[PieceType]
    rows: int
    cols: int

    def __post_init__(self) -> None:
        if self.rows <= 0 or self.cols <= 0:
            raise InvalidLayoutError(
                f"Board dimensions must be positive, got {self.rows} x {self.cols}."
            )
        if self.cols > MAX_COLS:
            raise InvalidLayoutError(
                f"Columns are named a-z, so a board has at most {MAX_COLS} columns, got {self.cols}."
            )
        if len(self.cells) != self.rows * self.cols:
            raise InvalidLayoutError(
                f"Expected {self.rows * self.cols} cells for a {self.rows} x {self.cols} board, got {len(self.cells)}."
            )

    @classmethod
    def from_cells(cls, cells: list[PieceType], rows: int, cols: int) -> Self:
        """Copy an externally supplied layout, so the caller cannot mutate the board afterwards."""
        return cls(list(cells), rows, cols)

    @classmethod
    def from_layout(cls, layout: str) -> Self:
        """Construct a board from a layout string.

        Works like the piece placement part of a FEN string:
        wwww/4/4/bbbb
        means:
        * rows are separated by slashes, the first row in the string is row 0
        * 'w' is a white piece, 'b' a black piece
        * a digit denotes that amount of empty cells after each other
        """
        layout_rows = layout.strip().split(ROW_SEPARATOR)
        cells: list[PieceType] = []
        cols: int | None = None
        for row_idx, layout_row in enumerate(layout_rows):
            row_cells = cls._parse_row(layout_row)
            if cols is None:
                cols = len(row_cells)
            elif len(row_cells) != cols:
                raise InvalidLayoutError(
                    f"Row {row_idx} of layout {layout!r} has {len(row_cells)} cells, expected {cols}."
                )
            cells.extend(row_cells)
        return cls(cells, len(layout_rows), cols or 0)

    @staticmethod
    def _parse_row(layout_row: str) -> list[PieceType]:
        row_cells: list[PieceType] = []
        for character in layout_row:
            if character in DIGITS:
                row_cells.extend([PieceType.NONE] * int(character))
            elif character.lower() in LAYOUT_TO_PIECE:
                row_cells.append(LAYOUT_TO_PIECE[character.lower()])
            else:
                raise InvalidLayoutError(
                    f"Unknown character {character!r} in layout row {layout_row!r}."
                )
        return row_cells

    def to_layout(self) -> str:
        """Rows are separated by slashes in the layout string."""
        return ROW_SEPARATOR.join(self._row_to_layout(row) for row in range(self.rows))

    def _row_to_layout(self, row: int) -> str:
        characters: list[str] = []
        empty_count = 0
        for col in range(self.cols):
            piece = self.piece(Position(col, row))
            if piece == PieceType.NONE:
                empty_count += 1
                continue
            # digits only go up to 9, so long empty stretches get split
            while empty_count > 0:
                characters.append(str(min(empty_count, 9)))
                empty_count -= min(empty_count, 9)
            characters.append(PIECE_TO_LAYOUT[piece])

        while empty_count > 0:
            characters.append(str(min(empty_count, 9)))
            empty_count -= min(empty_count, 9)
        return "".join(characters)

    # --- QUERIES ---
    def is_in_bounds(self, pos: Position) -> bool:
        return pos.is_within_bounds(self.rows, self.cols)

    def piece(self, pos: Position) -> PieceType:
        """Out of bounds reads as an empty cell, never as an error."""
        if not self.is_in_bounds(pos):
            return PieceType.NONE
        return self.cells[pos.to_index(self.cols)]

    def has_piece(self, pos: Position) -> bool:
        return self.piece(pos) != PieceType.NONE

    def is_adjacent(self, a: Position, b: Position) -> bool:
        """One orthogonal step apart. Diagonal neighbours are not adjacent."""
        return self.is_in_bounds(a) and self.is_in_bounds(b) and a.distance(b) == 1

    def row_positions(self, row: int) -> list[Position]:
        return [Position(col, row) for col in range(self.cols)]

    def col_positions(self, col: int) -> list[Position]:
        return [Position(col, row) for row in range(self.rows)]

    def positions(self) -> list[Position]:
        """All positions in row-major order"""
        return [Position(col, row) for row in range(self.rows) for col in range(self.cols)]

    def snapshot(self) -> list[PieceType]:
        """Copy of the cells. Consumers never get a handle on the board's own storage."""
        return list(self.cells)

    def visit(self, callback: Callable[[Position, PieceType], None]) -> None:
        for pos in self.positions():
            callback(pos, self.piece(pos))

    # --- MUTATIONS (only called by the rule engine) ---
    def swap(self, a: Position, b: Position) -> None:
        idx_a = a.to_index(self.cols)
        idx_b = b.to_index(self.cols)
        self.cells[idx_a], self.cells[idx_b] = self.cells[idx_b], self.cells[idx_a]

    def remove_piece(self, pos: Position) -> None:
        self.cells[pos.to_index(self.cols)] = PieceType.NONE
