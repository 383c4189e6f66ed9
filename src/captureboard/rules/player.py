"""
Consumer side of the action log: plays the actions back one at a time.

The engine never waits for a consumer. It keeps appending actions while an earlier one is still being animated,
so the consumer keeps its own read index and a two-state machine:

IDLE --(take a MOVED/KILLED action, start animating it)--> ANIMATING --(finished_action())--> IDLE, re-poll the log

STANDBY actions are taken off the log without animating. Nothing in here blocks.
"""

import logging
from enum import Enum, auto
from typing import Callable, Optional

from captureboard.rules.actions import Action, ActionKind
from captureboard.rules.engine import RuleEngine
from captureboard.rules.pieces import PieceType

logger = logging.getLogger(__name__)

AnimateFn = Callable[[Action], None]


class PlayerState(Enum):
    IDLE = auto()
    ANIMATING = auto()


class ActionPlayer:
    """
    Reads the engine's action log in order and hands animated actions to `animate`.

    `animate` starts an animation and must arrange for finished_action() to be called once it completes
    (it may also call it right away, ex. in a headless client).
    `skip_moves_of`: MOVED actions of that piece type are not animated. The local player's own drags are already shown in place.
    """

    def __init__(
        self,
        engine: RuleEngine,
        animate: AnimateFn,
        skip_moves_of: Optional[PieceType] = None,
    ) -> None:
        self.engine = engine
        self.animate = animate
        self.skip_moves_of = skip_moves_of
        self.state = PlayerState.IDLE
        self.next_index = 0
        self.standby = PieceType.NONE
        self.current: Optional[Action] = None
        # True while the drain loop of perform_action() is running
        self._dispatching = False

    def attach(self) -> None:
        """Subscribe to the engine. Registering makes the engine announce the current turn right away."""
        self.engine.register_update_callback(self.perform_action)

    def perform_action(self) -> None:
        """Take actions off the log until one needs animating, or the log runs dry."""
        if self._dispatching:
            # the loop further up the stack picks up whatever was just added
            return
        self._dispatching = True
        try:
            self._drain()
        finally:
            self._dispatching = False

    def _drain(self) -> None:
        while self.state == PlayerState.IDLE:
            action = self.engine.get_action(self.next_index)
            if action.kind == ActionKind.NONE:
                return
            self.next_index += 1

            if action.kind == ActionKind.STANDBY:
                self.standby = action.chess_type
                continue

            if self._is_skipped(action):
                logger.debug(
                    "Skipping animation of own move to %s", action.target.to_algebraic()
                )
                continue

            self.state = PlayerState.ANIMATING
            self.current = action
            self.animate(action)

    def finished_action(self) -> None:
        """Animation of the current action completed: release the lock and continue with the log."""
        assert self.state == PlayerState.ANIMATING, "finished_action() without a running action"
        self.state = PlayerState.IDLE
        self.current = None
        if self._dispatching:
            return
        self.perform_action()

    @property
    def is_busy(self) -> bool:
        return self.state == PlayerState.ANIMATING

    def _is_skipped(self, action: Action) -> bool:
        return (
            action.kind == ActionKind.MOVED
            and self.skip_moves_of is not None
            and action.chess_type == self.skip_moves_of
        )
