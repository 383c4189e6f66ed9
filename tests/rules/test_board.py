"""Unit tests for /src/captureboard/rules/board.py"""

from itertools import product
from unittest.mock import Mock, call

import pytest

from captureboard.core.exceptions import InvalidLayoutError
from captureboard.rules.board import Board
from captureboard.rules.pieces import PieceType
from captureboard.rules.position import Position

B = PieceType.BLACK
W = PieceType.WHITE
_ = PieceType.NONE

STARTING_LAYOUT = "wwww/4/4/bbbb"


# -- CREATION LOGIC ---
def test_creating_board_from_layout() -> None:
    """First row in the string is row 0, digits are runs of empty cells"""
    board = Board.from_layout(STARTING_LAYOUT)
    assert board.rows == 4
    assert board.cols == 4
    assert board.cells == [W] * 4 + [_] * 8 + [B] * 4


def test_creating_board_with_mixed_rows() -> None:
    board = Board.from_layout("w1b/3/1w1")
    assert board.piece(Position(0, 0)) == W
    assert board.piece(Position(1, 0)) == _
    assert board.piece(Position(2, 0)) == B
    assert board.piece(Position(1, 2)) == W


def test_non_square_board() -> None:
    board = Board.from_layout("wb1bw/5")
    assert board.rows == 2
    assert board.cols == 5
    assert board.piece(Position(4, 0)) == W
    assert board.piece(Position(0, 1)) == _


@pytest.mark.parametrize(
    "layout",
    [
        STARTING_LAYOUT,
        "w1b/3/1w1",
        "wb1bw/5",
        "b2/3/3",
        "93",  # long empty rows need more than one digit
    ],
)
def test_layout_roundtrip(layout: str) -> None:
    assert Board.from_layout(layout).to_layout() == layout


@pytest.mark.parametrize(
    "layout",
    [
        "ww/www",  # rows of different length
        "wx/bb",  # unknown piece
        "",  # no cells at all
        "w\u00b2",  # only ASCII digits count as empty runs
        "996b1w/997b1",  # 27 columns: more than the letters a-z
    ],
)
def test_invalid_layout(layout: str) -> None:
    with pytest.raises(InvalidLayoutError):
        Board.from_layout(layout)


def test_cells_must_match_dimensions() -> None:
    with pytest.raises(InvalidLayoutError):
        Board.from_cells([B, W, _], rows=2, cols=2)


def test_from_cells_copies_the_layout() -> None:
    """Later changes to the caller's list must not reach the board"""
    cells = [B, _, _, W]
    board = Board.from_cells(cells, rows=2, cols=2)
    cells[0] = W
    assert board.piece(Position(0, 0)) == B


# -- QUERIES ---
def test_piece_out_of_bounds_is_empty() -> None:
    board = Board.from_layout("bb/ww")
    for pos in [Position(-1, 0), Position(0, -1), Position(2, 0), Position(0, 2)]:
        assert board.piece(pos) == _
        assert not board.has_piece(pos)


POSITIONS_3X3 = [Position(col, row) for row in range(-1, 4) for col in range(-1, 4)]


@pytest.mark.parametrize("a, b", list(product(POSITIONS_3X3, repeat=2)))
def test_adjacency_is_symmetric_and_orthogonal(a: Position, b: Position) -> None:
    """Adjacent iff both are on the board and exactly one orthogonal step apart"""
    board = Board.from_layout("3/3/3")
    expected = (
        board.is_in_bounds(a)
        and board.is_in_bounds(b)
        and abs(a.col - b.col) + abs(a.row - b.row) == 1
    )
    assert board.is_adjacent(a, b) == expected
    assert board.is_adjacent(a, b) == board.is_adjacent(b, a)


def test_diagonal_is_not_adjacent() -> None:
    board = Board.from_layout("3/3/3")
    assert not board.is_adjacent(Position(1, 1), Position(2, 2))
    assert not board.is_adjacent(Position(1, 1), Position(0, 0))


def test_line_positions() -> None:
    board = Board.from_layout("4/4")
    assert board.row_positions(1) == [Position(col, 1) for col in range(4)]
    assert board.col_positions(3) == [Position(3, 0), Position(3, 1)]


def test_snapshot_is_a_copy() -> None:
    board = Board.from_layout("b1/1w")
    snapshot = board.snapshot()
    snapshot[0] = _
    assert board.piece(Position(0, 0)) == B


def test_visit_goes_row_major() -> None:
    board = Board.from_layout("b1/1w")
    callback = Mock()
    board.visit(callback)
    assert callback.call_args_list == [
        call(Position(0, 0), B),
        call(Position(1, 0), _),
        call(Position(0, 1), _),
        call(Position(1, 1), W),
    ]


# -- MUTATIONS ---
def test_swap_changes_exactly_two_cells() -> None:
    board = Board.from_layout("wb1/3/b1w")
    before = board.snapshot()
    board.swap(Position(1, 0), Position(2, 0))
    after = board.snapshot()

    assert board.piece(Position(1, 0)) == _
    assert board.piece(Position(2, 0)) == B
    changed = [idx for idx in range(len(before)) if before[idx] != after[idx]]
    assert changed == [1, 2]


def test_remove_piece() -> None:
    board = Board.from_layout("wb/bw")
    board.remove_piece(Position(1, 1))
    assert board.to_layout() == "wb/b1"


def test_widest_board_has_26_columns() -> None:
    """Every column needs a letter for the algebraic name of its cells"""
    board = Board.from_layout("997w/99b7")
    assert board.cols == 26
    assert Position(25, 0).to_algebraic() == "z1"


def test_too_many_columns_from_cells() -> None:
    with pytest.raises(InvalidLayoutError):
        Board.from_cells([_] * 27, rows=1, cols=27)
