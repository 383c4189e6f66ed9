"""Defines the cell values of the board: two player colors plus empty"""

from enum import Enum, auto


class PieceType(Enum):
    NONE = auto()
    BLACK = auto()
    WHITE = auto()


LAYOUT_TO_PIECE: dict[str, PieceType] = {
    "b": PieceType.BLACK,
    "w": PieceType.WHITE,
}

PIECE_TO_LAYOUT: dict[PieceType, str] = {
    value: key for key, value in LAYOUT_TO_PIECE.items()
}

PLAYER_PIECES: tuple[PieceType, ...] = (PieceType.BLACK, PieceType.WHITE)

