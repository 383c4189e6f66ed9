"""
The RuleEngine is the entrypoint into the domain layer.

It owns the board and whose turn it is ("standby"), takes move requests from a consumer, applies them on its own update tick
and describes everything that happened as an ordered log of actions.
Nothing in here raises on noisy consumer input: invalid moves are dropped, out of range reads return sentinels.
"""

import logging
from collections import deque
from typing import Callable, Self

from captureboard.core.exceptions import GameStateError
from captureboard.core.models import GameModel
from captureboard.rules.actions import Action, ActionKind, ActionLog, UpdateCallback
from captureboard.rules.board import Board
from captureboard.rules.kills import detect_kills
from captureboard.rules.moves import Move
from captureboard.rules.pieces import PLAYER_PIECES, PieceType
from captureboard.rules.position import ORIGIN, Position

logger = logging.getLogger(__name__)

# Black is expected to make the first move
INITIAL_STANDBY = PieceType.BLACK


class RuleEngine:
    # --- DOMAIN LAYER API CALLED BY THE PRESENTATION LAYER / SERVICE ---

    def __init__(
        self,
        board: Board,
        standby: PieceType = INITIAL_STANDBY,
        actions: list[Action] | None = None,
    ) -> None:
        self.board = board
        self.standby = standby
        self._log = ActionLog(actions)
        self._move_queue: deque[Move] = deque()

    @classmethod
    def from_layout(cls, layout: str) -> Self:
        return cls(Board.from_layout(layout))

    @classmethod
    def from_cells(cls, cells: list[PieceType], rows: int, cols: int) -> Self:
        return cls(Board.from_cells(cells, rows, cols))

    @classmethod
    def from_model(cls, model: GameModel) -> Self:
        """Restore a game. No callbacks exist yet, so none fire, and no STANDBY action is added."""
        standby_name = model.standby.upper()
        if standby_name not in PieceType.__members__:
            raise GameStateError(f"Invalid standby type: {model.standby!r}")
        standby = PieceType[standby_name]
        if standby not in PLAYER_PIECES:
            raise GameStateError(
                f"Standby must be one of {', '.join(p.name.lower() for p in PLAYER_PIECES)}, got {model.standby!r}"
            )

        board = Board.from_layout(model.layout)
        actions = [Action.from_record(record) for record in model.actions]
        return cls(board, standby, actions)

    def to_model(self) -> GameModel:
        """Encode back into the format the Service layer uses"""
        return GameModel(
            layout=self.board.to_layout(),
            standby=self.standby.name.lower(),
            actions=[action.to_record() for action in self._log.since(0)],
        )

    # -- board queries --
    def is_in_bounds(self, pos: Position) -> bool:
        return self.board.is_in_bounds(pos)

    def get_piece(self, pos: Position) -> PieceType:
        return self.board.piece(pos)

    def has_piece(self, pos: Position) -> bool:
        return self.board.has_piece(pos)

    def is_adjacent(self, a: Position, b: Position) -> bool:
        return self.board.is_adjacent(a, b)

    def get_board_snapshot(self) -> list[PieceType]:
        return self.board.snapshot()

    def visit_board(self, callback: Callable[[Position, PieceType], None]) -> None:
        self.board.visit(callback)

    # -- moves --
    def submit_move(self, source: Position, target: Position) -> None:
        """Only queues the request. It gets validated (against the board at that time) in update()."""
        self._move_queue.append(Move(source, target))

    @property
    def pending_moves(self) -> int:
        return len(self._move_queue)

    def update(self) -> None:
        """
        Simulation tick: drain the whole move queue in arrival order.
        ----

        Every request is validated against the board as left behind by the requests before it in this same pass.
        Requests that fail validation are dropped for good.
        """
        while self._move_queue:
            move = self._move_queue.popleft()
            if self._is_valid_move(move):
                self._apply_move(move)

    # -- action log --
    def record(
        self,
        kind: ActionKind,
        chess_type: PieceType,
        source: Position = ORIGIN,
        target: Position = ORIGIN,
    ) -> Action:
        return self._log.record(kind, chess_type, source, target)

    def get_action(self, index: int) -> Action:
        return self._log.get(index)

    def actions_since(self, start: int) -> list[Action]:
        return self._log.since(start)

    @property
    def action_count(self) -> int:
        return len(self._log)

    def register_update_callback(self, callback: UpdateCallback) -> None:
        """
        Subscribe to "new action in the log" notifications.

        A STANDBY for the current turn is recorded straight away, so a consumer that attaches late still learns whose turn it is.
        """
        self._log.add_callback(callback)
        self.record(ActionKind.STANDBY, self.standby)

    def reset(self) -> None:
        """Forget all actions and all callbacks (new game on the same engine). The board is left as it is."""
        self._log.clear()

    # -- PRIVATE HELPERS ---
    def _is_valid_move(self, move: Move) -> bool:
        """
        All must hold:
        1. source and target differ
        2. there is a piece on source
        3. target is empty
        4. source and target are adjacent
        5. the cell on target (read before the swap) is not of the standby type
        """
        source, target = move.source, move.target
        if source == target:
            logger.debug("Dropped %s: source equals target", move.to_notation())
            return False
        if not self.board.has_piece(source):
            logger.debug("Dropped %s: no piece on source", move.to_notation())
            return False
        if self.board.has_piece(target):
            logger.debug("Dropped %s: target is occupied", move.to_notation())
            return False
        if not self.board.is_adjacent(source, target):
            logger.debug("Dropped %s: cells are not adjacent", move.to_notation())
            return False
        if self.board.piece(target) == self.standby:
            logger.debug("Dropped %s: target holds the standby type", move.to_notation())
            return False
        return True

    def _apply_move(self, move: Move) -> None:
        """
        1. swap source and target
        2. MOVED action
        3. kill check around the target: clear every killed cell, one KILLED action each
        4. the mover's type becomes the standby type, STANDBY action
        """
        source, target = move.source, move.target
        self.board.swap(source, target)
        moved_type = self.board.piece(target)
        self.record(ActionKind.MOVED, moved_type, source, target)

        for killed in sorted(detect_kills(self.board, target)):
            assert self.board.has_piece(killed), "kill detection returned an empty cell"
            self.board.remove_piece(killed)
            logger.info(
                "%s on %s killed the piece on %s",
                moved_type.name.lower(),
                target.to_algebraic(),
                killed.to_algebraic(),
            )
            self.record(ActionKind.KILLED, PieceType.NONE, target, killed)

        self.standby = self.board.piece(target)
        self.record(ActionKind.STANDBY, self.standby)
