"""
Kill-pattern detection

After a piece lands on a cell, the row and the column through that cell are checked independently.
A line can produce a kill only when it holds a run of exactly three neighbouring pieces:
two of them of the mover's type and one of the opponent's sitting at an end of the run.
The opponent's piece at the end gets removed. A piece in the middle of the run is never removed.
"""

import logging
from typing import Protocol

from captureboard.rules.pieces import PieceType
from captureboard.rules.position import Position

logger = logging.getLogger(__name__)

RUN_LENGTH = 3
MIDDLE_INDEX = 1
MATCHES_FOR_KILL = 2


class Board(Protocol):
    """Just the parts the kill detection needs"""

    def piece(self, pos: Position) -> PieceType: ...
    def row_positions(self, row: int) -> list[Position]: ...
    def col_positions(self, col: int) -> list[Position]: ...


def scan_line(board: Board, line: list[Position]) -> list[Position]:
    """
    Find the candidate run of a single line (a row or a column).
    ---

    Walk the line counting consecutive occupied cells.
    * An empty cell right after a run of exactly 3 ends the scan: that run is the candidate.
    * An empty cell after any other run length discards the run and starts counting again.
    * A run still open at the end of the line only counts when it is exactly 3 long.

    NOTE: runs of 4 or more are never split into overlapping windows of 3.
    """
    run: list[Position] = []
    for pos in line:
        if board.piece(pos) != PieceType.NONE:
            run.append(pos)
            continue

        if len(run) == RUN_LENGTH:
            break
        run = []

    if len(run) != RUN_LENGTH:
        return []
    return run


def classify_and_select(
    board: Board, key_type: PieceType, candidates: list[Position]
) -> set[Position]:
    """
    Decide which of the 3 candidates get killed
    ---

    * Count the candidates of key_type (the type that just moved). Exactly 2 are needed, otherwise nothing happens.
    * The end cells (index 0 and 2) that are not key_type are killed.
    * The middle cell (index 1) is skipped unconditionally, even if it differs from key_type.
    """
    if len(candidates) != RUN_LENGTH:
        return set()

    matches = sum(1 for pos in candidates if board.piece(pos) == key_type)
    if matches != MATCHES_FOR_KILL:
        return set()

    return {
        pos
        for idx, pos in enumerate(candidates)
        if idx != MIDDLE_INDEX and board.piece(pos) != key_type
    }


def horizontal_candidates(board: Board, pos: Position) -> list[Position]:
    return scan_line(board, board.row_positions(pos.row))


def vertical_candidates(board: Board, pos: Position) -> list[Position]:
    return scan_line(board, board.col_positions(pos.col))


def detect_kills(board: Board, pos: Position) -> set[Position]:
    """Union of the kills along the row and along the column through pos (the triggering position)."""
    key_type = board.piece(pos)
    killed = classify_and_select(board, key_type, horizontal_candidates(board, pos))
    killed |= classify_and_select(board, key_type, vertical_candidates(board, pos))
    if killed:
        logger.debug(
            "Move to %s kills %s",
            pos.to_algebraic(),
            ", ".join(sorted(p.to_algebraic() for p in killed)),
        )
    return killed
