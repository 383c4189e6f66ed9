from uuid import UUID, uuid4

import pytest

from captureboard.api.models import (
    ActionResponse,
    ActionsRequest,
    CreateGameRequest,
    GameResponse,
    MoveRequest,
)
from captureboard.core.exceptions import InvalidRequestError
from captureboard.core.shared_types import ActionName, Color


@pytest.fixture
def mock_id() -> UUID:
    return uuid4()


# -- Validation - CreateGameRequest --
def test_valid_layout() -> None:
    request = CreateGameRequest(layout=" wwww/4/4/bbbb ")
    assert request.layout == "wwww/4/4/bbbb"


def test_layout_is_optional() -> None:
    """Should be able to not supply a layout, and validator just returns None."""
    assert CreateGameRequest().layout is None
    assert CreateGameRequest(layout=None).layout is None


@pytest.mark.parametrize(
    "invalid_layout",
    [
        "wwww/4//bbbb",  # empty row
        "wwxw/4/4/bbbb",  # unknown piece
        "wwww 4 4 bbbb",  # wrong separator
        "996b1w/997b1",  # 27 columns
    ],
)
def test_invalid_layout(invalid_layout: str) -> None:
    with pytest.raises(InvalidRequestError):
        _ = CreateGameRequest(layout=invalid_layout)


# -- Validation - MoveRequest --
def test_valid_moves(mock_id: UUID) -> None:
    request = MoveRequest(game_id=mock_id, moves=["a1a2", "B3C3", "a10a11"])
    assert request.moves == ["a1a2", "b3c3", "a10a11"]


@pytest.mark.parametrize("invalid_move", ["a1", "a1-a2", "11a2", "a0a1", "abcd"])
def test_invalid_moves(mock_id: UUID, invalid_move: str) -> None:
    with pytest.raises(InvalidRequestError):
        _ = MoveRequest(game_id=mock_id, moves=["a1a2", invalid_move])


def test_move_request_needs_a_move(mock_id: UUID) -> None:
    with pytest.raises(InvalidRequestError):
        _ = MoveRequest(game_id=mock_id, moves=[])


# -- Validation - ActionsRequest --
def test_actions_request_defaults_to_start(mock_id: UUID) -> None:
    assert ActionsRequest(game_id=mock_id).start == 0


def test_actions_request_negative_start(mock_id: UUID) -> None:
    with pytest.raises(InvalidRequestError):
        _ = ActionsRequest(game_id=mock_id, start=-1)


# -- Responses --
def test_responses_accept_stored_names(mock_id: UUID) -> None:
    """Stored strings convert into the shared enums"""
    game = GameResponse(game_id=mock_id, layout="3/3/3", standby="white", action_count=0)
    assert game.standby == Color.WHITE

    action = ActionResponse(
        index=0, kind="killed", chess_type="none", source="c1", target="a1"
    )
    assert action.kind == ActionName.KILLED
    assert action.chess_type == Color.NONE
