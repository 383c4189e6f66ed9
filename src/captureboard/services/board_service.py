"""Orchestration of communication from API router to business logic and persistence layers (and the reverse direction)."""

import logging
from uuid import UUID

from captureboard.api.models import (
    ActionResponse,
    ActionsRequest,
    ActionsResponse,
    CreateGameRequest,
    DeleteGameRequest,
    GameResponse,
    GetGameRequest,
    MoveRequest,
    MoveResponse,
)
from captureboard.core.config import DEFAULT_LAYOUT, Settings
from captureboard.core.exceptions import RepositoryError
from captureboard.core.models import GameModel
from captureboard.db.repository import GameRepository
from captureboard.rules.engine import RuleEngine
from captureboard.rules.moves import Move

logger = logging.getLogger(__name__)


class BoardService:
    """Orchestration of layers for the board game."""

    def __init__(
        self, repository: GameRepository, default_layout: str = DEFAULT_LAYOUT
    ) -> None:
        self.repo = repository
        self.default_layout = default_layout

    @classmethod
    def from_settings(
        cls, repository: GameRepository, settings: Settings
    ) -> "BoardService":
        return cls(repository, default_layout=settings.default_layout)

    # -- API routes logic ---
    def create_new_game(self, request: CreateGameRequest) -> GameResponse:
        """Set up a board (the requested one or the default one) and persist it."""

        # Constructing the engine validates the layout (raises InvalidLayoutError)
        engine = RuleEngine.from_layout(request.layout or self.default_layout)
        stored_game, game_id = self.repo.create_game(engine.to_model())
        logger.info("New game %s with layout %s", game_id, stored_game.layout)
        return self._create_game_response(game_id, stored_game)

    def get_game_state(self, request: GetGameRequest) -> GameResponse:
        """
        Retrieve current game state.
        ----
        Used in "polling" loop by a frontend to render the board / check whose turn it is.
        """
        game_model = self._fetch_game(request.game_id)
        return self._create_game_response(request.game_id, game_model)

    def make_moves(self, request: MoveRequest) -> MoveResponse:
        """
        Submit the requested moves and run one update tick.
        ----

        Moves that turn out invalid are dropped by the engine without an error.
        The caller sees that as "no new MOVED action".
        """
        stored_model = self._fetch_game(request.game_id)
        engine = RuleEngine.from_model(stored_model)
        first_new_index = engine.action_count

        for notation in request.moves:
            move = Move.from_notation(notation)
            engine.submit_move(move.source, move.target)
        engine.update()

        after_moves = engine.to_model()
        self.repo.update_game(request.game_id, after_moves)

        return MoveResponse(
            game=self._create_game_response(request.game_id, after_moves),
            new_actions=self._action_responses(after_moves, first_new_index),
        )

    def get_actions(self, request: ActionsRequest) -> ActionsResponse:
        """Everything in the action log from request.start onwards."""
        game_model = self._fetch_game(request.game_id)
        return ActionsResponse(
            game_id=request.game_id,
            actions=self._action_responses(game_model, request.start),
        )

    def delete_game(self, request: DeleteGameRequest) -> None:
        """Handle a request to delete a Game record."""
        self.repo.delete_game(request.game_id)

    # -- Internal helpers --
    def _create_game_response(self, game_id: UUID, model: GameModel) -> GameResponse:
        """Convert info in GameModel to a GameResponse (for game with given ID.)"""
        return GameResponse(
            game_id=game_id,
            layout=model.layout,
            standby=model.standby,
            action_count=len(model.actions),
        )

    def _action_responses(self, model: GameModel, start: int) -> list[ActionResponse]:
        return [
            ActionResponse(index=index, **record)
            for index, record in enumerate(model.actions)
            if index >= start
        ]

    def _fetch_game(self, game_id: UUID) -> GameModel:
        """Attempt to find the game in the repository and raise error if it fails."""
        game_model = self.repo.get_game(game_id)
        if game_model is None:
            raise RepositoryError(f"Game with {game_id=} not found.")
        return game_model
