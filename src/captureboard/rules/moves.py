"""A move request as submitted by the consumer. Nothing here is validated against the board: the engine does that when it drains its queue."""

import re
from dataclasses import dataclass
from typing import Self

from captureboard.core.exceptions import InvalidRequestError
from captureboard.rules.position import ALGEBRAIC_PATTERN, Position

MOVE_PATTERN = re.compile(rf"({ALGEBRAIC_PATTERN})({ALGEBRAIC_PATTERN})")


@dataclass(frozen=True)
class Move:
    """basic definition of a move to be made"""

    source: Position
    target: Position

    @classmethod
    def from_notation(cls, notation: str) -> Self:
        """
        Two algebraic squares glued together, ex. "a1a2": move the piece on a1 to a2.
        """
        match = MOVE_PATTERN.fullmatch(notation.strip())
        if match is None:
            raise InvalidRequestError(f"Cannot interpret {notation!r} as a move.")
        source = Position.from_algebraic(match.group(1))
        target = Position.from_algebraic(match.group(2))
        return cls(source, target)

    def to_notation(self) -> str:
        return f"{self.source.to_algebraic()}{self.target.to_algebraic()}"
