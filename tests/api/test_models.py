"""Unit tests for src/api/models.py"""

import pytest

from src.api.models import (
    AutomatedOpponentRequest,
    GameResponse,
    LegalMovesRequest,
    MoveRequest,
    PieceResponse,
)
from src.core.exceptions import InvalidRequestError
from src.core.shared_types import Color, PieceType, Status


# -- Validation - MoveRequest --
def test_valid_square_names() -> None:
    """Test that MoveRequest accepts correctly written squares in algebraic notation."""
    request = MoveRequest(from_square="e2", to_square="e4")
    assert request.from_square == "e2"
    assert request.to_square == "e4"


def test_off_board_square_name_is_well_formed() -> None:
    """Notation is fine, it is up to the game to reject a square that is not on the board."""
    request = MoveRequest(from_square="z9", to_square="e4")
    assert request.from_square == "z9"


@pytest.mark.parametrize(
    "square",
    [
        "nonsense",  # anything more than two characters.
        "11",  # First character is not a letter
        "aa",  # second character is not a number
        "",  # nothing at all
        "e²",  # superscript two is a digit, but not a decimal
        "é4",  # not an ASCII letter
    ],
)
def test_invalid_from_square(square: str) -> None:
    """Test that an exception is raised when using invalid square name."""
    with pytest.raises(InvalidRequestError):
        _ = MoveRequest(from_square=square, to_square="e2")


@pytest.mark.parametrize("square", ["nonsense", "11", "aa", "", "e²"])
def test_invalid_to_square(square: str) -> None:
    with pytest.raises(InvalidRequestError):
        _ = MoveRequest(from_square="e2", to_square=square)


# -- Validation - LegalMovesRequest --
def test_legal_moves_square_is_optional() -> None:
    assert LegalMovesRequest().square is None
    assert LegalMovesRequest(square="g1").square == "g1"


def test_legal_moves_invalid_square() -> None:
    with pytest.raises(InvalidRequestError):
        _ = LegalMovesRequest(square="g")


# -- Other models --
def test_automated_opponent_request() -> None:
    assert AutomatedOpponentRequest(enabled=True).enabled


def test_game_response_serialises_enums_as_strings() -> None:
    response = GameResponse(
        color_to_move=Color.BLACK,
        status=Status.CHECKMATE,
        winner=Color.WHITE,
        in_check=True,
        automated_opponent=False,
        board={"e8": PieceResponse(type=PieceType.KING, color=Color.BLACK)},
        captured={Color.WHITE: [PieceType.PAWN], Color.BLACK: []},
        move_history=["e2e4"],
    )
    dumped = response.model_dump(mode="json")
    assert dumped["color_to_move"] == "black"
    assert dumped["status"] == "checkmate"
    assert dumped["board"] == {"e8": {"type": "king", "color": "black"}}
    assert dumped["captured"] == {"white": ["pawn"], "black": []}
