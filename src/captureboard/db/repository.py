"""Persistence boundary for stored boards. The service only talks to this Protocol, never to a concrete backend."""

from typing import Protocol
from uuid import UUID

from captureboard.core.models import GameModel


class GameRepository(Protocol):
    """
    Stores one record per game: the board layout, whose turn it is and the full action log.
    Every call returns transport models, so nothing backend-specific leaks into the service.
    """

    def get_game(self, game_id: UUID) -> GameModel | None:
        """Load a stored board, or None for an unknown ID."""
        ...

    def create_game(self, game: GameModel) -> tuple[GameModel, UUID]:
        """Persist a freshly set up board. Returns what was stored and the new ID."""
        ...

    def update_game(self, game_id: UUID, game: GameModel) -> GameModel | None:
        """Overwrite layout, standby and action log after an update tick. None for an unknown ID."""
        ...

    def delete_game(self, game_id: UUID) -> GameModel | None:
        """Drop the record. Returns the removed game, or None if there was nothing to remove."""
        ...
