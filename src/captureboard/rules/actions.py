"""
The action log: the ordered stream of semantic events (moved / killed / standby) the engine produces for a presentation layer.

The log is append-only. Every append synchronously notifies the registered callbacks, in registration order,
on the same call stack as the move that caused it.
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Callable, Self

from captureboard.core.exceptions import GameStateError
from captureboard.rules.pieces import PieceType
from captureboard.rules.position import ORIGIN, Position

UpdateCallback = Callable[[], None]


class ActionKind(Enum):
    NONE = auto()
    MOVED = auto()
    KILLED = auto()
    STANDBY = auto()


@dataclass(frozen=True)
class Action:
    """
    * MOVED: chess_type is the piece that ended up on target.
    * KILLED: source is the triggering position (where the killer landed), target the position that got cleared.
    * STANDBY: chess_type is whose turn it is now. source/target are unused (origin).
    """

    kind: ActionKind
    chess_type: PieceType
    source: Position = ORIGIN
    target: Position = ORIGIN

    def to_record(self) -> dict[str, str]:
        """Plain strings only, so the record can be stored as JSON."""
        return {
            "kind": self.kind.name.lower(),
            "chess_type": self.chess_type.name.lower(),
            "source": self.source.to_algebraic(),
            "target": self.target.to_algebraic(),
        }

    @classmethod
    def from_record(cls, record: dict[str, str]) -> Self:
        kind_name = record.get("kind", "").upper()
        type_name = record.get("chess_type", "").upper()
        if kind_name not in ActionKind.__members__:
            raise GameStateError(f"Invalid action kind in record: {record!r}")
        if type_name not in PieceType.__members__:
            raise GameStateError(f"Invalid piece type in record: {record!r}")
        try:
            source = Position.from_algebraic(record["source"])
            target = Position.from_algebraic(record["target"])
        except (KeyError, IndexError, ValueError) as err:
            raise GameStateError(f"Invalid positions in record: {record!r}") from err
        return cls(ActionKind[kind_name], PieceType[type_name], source, target)


# Returned for any index past the end of the log
NONE_ACTION = Action(ActionKind.NONE, PieceType.NONE)


class ActionLog:
    """Append-only list of actions plus the observers that get poked on every append."""

    def __init__(self, actions: list[Action] | None = None) -> None:
        self._actions: list[Action] = list(actions or [])
        self._callbacks: list[UpdateCallback] = []

    def __len__(self) -> int:
        return len(self._actions)

    def record(
        self,
        kind: ActionKind,
        chess_type: PieceType,
        source: Position = ORIGIN,
        target: Position = ORIGIN,
    ) -> Action:
        action = Action(kind, chess_type, source, target)
        self._actions.append(action)
        # iterate over a copy: a callback is allowed to register another callback
        for callback in list(self._callbacks):
            callback()
        return action

    def get(self, index: int) -> Action:
        """Never raises: anything outside of the log reads as the NONE action."""
        if 0 <= index < len(self._actions):
            return self._actions[index]
        return NONE_ACTION

    def since(self, start: int) -> list[Action]:
        return self._actions[max(start, 0) :]

    def add_callback(self, callback: UpdateCallback) -> None:
        self._callbacks.append(callback)

    @property
    def callback_count(self) -> int:
        return len(self._callbacks)

    def clear(self) -> None:
        self._actions.clear()
        self._callbacks.clear()
