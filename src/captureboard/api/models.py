"""Requests and Response models"""

import re
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, field_validator

from captureboard.core.exceptions import InvalidRequestError
from captureboard.core.shared_types import ActionName, Color

LAYOUT_ROW_PATTERN = re.compile(r"[bwBW0-9]+")
SQUARE_PATTERN = r"[a-zA-Z][1-9][0-9]*"
# columns are named by a single letter a-z
MAX_LAYOUT_COLS = 26
MOVE_PATTERN = re.compile(rf"{SQUARE_PATTERN}{SQUARE_PATTERN}")


def _row_width(layout_row: str) -> int:
    """Number of cells in a layout row: digits count as that many empty cells"""
    return sum(int(char) if char.isdecimal() else 1 for char in layout_row)


# --- REQUEST MODELS ---
class CreateGameRequest(BaseModel):
    layout: Optional[str] = None

    @field_validator("layout")
    @classmethod
    def validate_layout(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return value

        rows = value.strip().split("/")
        if not all(LAYOUT_ROW_PATTERN.fullmatch(row) for row in rows):
            raise InvalidRequestError(
                f"Layout {value!r} may only contain 'b', 'w', digits and '/' between rows."
            )
        widest_row = max(_row_width(row) for row in rows)
        if widest_row > MAX_LAYOUT_COLS:
            raise InvalidRequestError(
                f"Layout {value!r} is {widest_row} columns wide, at most {MAX_LAYOUT_COLS} are supported."
            )
        return value.strip()


class MoveRequest(BaseModel):
    """
    One or more moves, submitted together and applied in order during a single update tick.
    Every move is written as two squares glued together, ex. "a1a2".
    """

    game_id: UUID
    moves: list[str]

    @field_validator("moves")
    @classmethod
    def validate_moves(cls, value: list[str]) -> list[str]:
        if not value:
            raise InvalidRequestError("A move request needs at least one move.")
        for move in value:
            if not MOVE_PATTERN.fullmatch(move):
                raise InvalidRequestError(
                    f"Cannot interpret {move!r} as a move between two squares."
                )
        return [move.lower() for move in value]


class GetGameRequest(BaseModel):
    game_id: UUID


class ActionsRequest(BaseModel):
    """The consumer tracks its own read position and asks for everything from `start` onwards."""

    game_id: UUID
    start: int = 0

    @field_validator("start")
    @classmethod
    def validate_start(cls, value: int) -> int:
        if value < 0:
            raise InvalidRequestError(f"start must not be negative, got {value}.")
        return value


class DeleteGameRequest(BaseModel):
    game_id: UUID


# --- RESPONSE MODELS ---
class GameResponse(BaseModel):
    game_id: UUID
    layout: str
    standby: Color
    action_count: int


class ActionResponse(BaseModel):
    index: int
    kind: ActionName
    chess_type: Color
    source: str
    target: str


class ActionsResponse(BaseModel):
    game_id: UUID
    actions: list[ActionResponse]


class MoveResponse(BaseModel):
    game: GameResponse
    new_actions: list[ActionResponse]
