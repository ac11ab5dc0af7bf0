"""Requests and Response models"""

from typing import Optional

from pydantic import BaseModel, field_validator

from src.core.exceptions import InvalidRequestError
from src.core.shared_types import Color, PieceType, Status

SquareName = str


def _is_algebraic_notation(value: str) -> bool:
    if len(value) != 2:
        return False

    first_character = value[0]
    second_character = value[1]
    if not value.isascii():
        return False
    if not (first_character.isalpha() and second_character.isdecimal()):
        return False
    return True


# --- REQUEST MODELS ---
class MoveRequest(BaseModel):
    """
    NOTE: Only the notation gets validated here. A square like 'z9' is well-formed but lies off the board,
    so the game rejects that move (rather than the request)
    """

    from_square: SquareName
    to_square: SquareName

    @field_validator(*["from_square", "to_square"])
    @classmethod
    def validate_square(cls, value: str) -> str:
        if not _is_algebraic_notation(value):
            raise InvalidRequestError(
                f"Cannot interpret {value!r} as a valid square name."
            )
        return value


class LegalMovesRequest(BaseModel):
    square: Optional[SquareName] = None

    @field_validator("square")
    @classmethod
    def validate_square(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return value
        if not _is_algebraic_notation(value):
            raise InvalidRequestError(
                f"Cannot interpret {value!r} as a valid square name."
            )
        return value


class AutomatedOpponentRequest(BaseModel):
    enabled: bool


# --- RESPONSE MODELS ---
class PieceResponse(BaseModel):
    type: PieceType
    color: Color


class GameResponse(BaseModel):
    color_to_move: Color
    status: Status
    winner: Optional[Color]
    in_check: bool
    automated_opponent: bool
    # occupied squares only, keyed by algebraic name
    board: dict[SquareName, PieceResponse]
    captured: dict[Color, list[PieceType]]
    move_history: list[str]


class MoveResponse(BaseModel):
    accepted: bool
    game: GameResponse


class LegalMovesResponse(BaseModel):
    color: Color
    legal_moves: list[str]
