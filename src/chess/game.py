"""
The Game class will be the entrypoint into the domain layer for the service layer.
It owns the live board, the move history, the captured pieces and whose turn it is, and it is the only place where these get mutated.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Optional, Self

from src.chess.board import Board
from src.chess.moves import HistoryEntry, Move
from src.chess.pieces import Color, PieceType
from src.chess.rules import generate_legal_moves, is_legal_move, legal_moves_from
from src.chess.square import Square
from src.core.exceptions import GameStateError

logger = logging.getLogger(__name__)


class Status(Enum):
    IN_PROGRESS = auto()
    CHECKMATE = auto()
    STALEMATE = auto()


def empty_captures() -> dict[Color, list[PieceType]]:
    return {Color.WHITE: [], Color.BLACK: []}


@dataclass
class Game:
    # --- DOMAIN LAYER API CALLED BY SERVICE---

    board: Board
    color_to_move: Color = Color.WHITE
    history: list[HistoryEntry] = field(default_factory=list)
    # piece types captured BY each color, in the order they were taken
    captured: dict[Color, list[PieceType]] = field(default_factory=empty_captures)
    status: Status = Status.IN_PROGRESS

    @classmethod
    def new_game(cls) -> Self:
        """Standard starting position, white to move."""
        return cls(board=Board.starting_position())

    @classmethod
    def from_fen(cls, position: str, color_to_move: Color = Color.WHITE) -> Self:
        """Start from an arbitrary piece placement (only the first part of a FEN string)"""
        return cls(board=Board.from_fen(position), color_to_move=color_to_move)

    @property
    def is_over(self) -> bool:
        return self.status != Status.IN_PROGRESS

    @property
    def loser(self) -> Optional[Color]:
        """Only defined for checkmate: the side that has to move is the side that got mated."""
        if self.status != Status.CHECKMATE:
            return None
        return self.color_to_move

    @property
    def winner(self) -> Optional[Color]:
        loser = self.loser
        return loser.opponent if loser else None

    def is_check(self) -> bool:
        return self.board.is_check(self.color_to_move)

    def legal_moves(self, square: Optional[Square] = None) -> list[Move]:
        """Legal moves of the player to move (optionally only those of the piece on the given square)"""
        if square is None:
            return generate_legal_moves(self.board, self.color_to_move)
        piece = self.board.piece(square)
        if piece is None or piece.color != self.color_to_move:
            return []
        return legal_moves_from(self.board, square)

    def is_legal(self, move: Move) -> bool:
        return is_legal_move(self.board, move, self.color_to_move)

    def attempt_move(self, move: Move) -> bool:
        """
        Attempt to make a move
        -----

        Returns False (and leaves everything untouched) if
        * the game already ended
        * one of the squares is off the board
        * the move is not legal for the player to move
        """
        if self.is_over:
            logger.debug("Rejected %s: game is over (%s)", move, self.status.name)
            return False

        if not self.is_legal(move):
            logger.debug("Rejected %s for %s", move, self.color_to_move.name.lower())
            return False

        self.make_move(move)
        return True

    def make_move(self, move: Move) -> None:
        """
        Apply a move that is already known to be legal
        -----

        1. record the history entry (incl. the captured piece, if any)
        2. register the capture for the player making the move
        3. update the board (promote a pawn that reached the final rank)
        4. hand the turn to the opponent
        5. update game status (if needed)
        """
        moving_piece = self.board.piece(move.from_square)
        if moving_piece is None:
            raise GameStateError(
                f"No piece on {move.from_square.to_algebraic()} to make the move {move.to_uci()}"
            )

        mover = self.color_to_move
        captured_piece = self.board.piece(move.to_square)
        self.history.append(HistoryEntry(move=move, captured=captured_piece, mover=mover))

        if captured_piece is not None:
            self.captured[mover].append(captured_piece.type)

        self.board.move_piece(move)
        if self.board.promote_if_needed(move.to_square):
            logger.debug("Pawn promoted to queen on %s", move.to_square.to_algebraic())

        self.color_to_move = mover.opponent
        logger.debug("%s played %s", mover.name.lower(), move.to_uci())

        self.evaluate_status()

    def undo(self) -> bool:
        """
        Take back the last move
        -----

        NOTE: A promotion is not reversed. The queen walks back to the square the pawn came from.
        NOTE: The status is reset to in progress without looking at the position. Call `evaluate_status()` if that matters.

        Returns False if there was nothing to undo.
        """
        if not self.history:
            return False

        last = self.history.pop()
        self.board.move_piece(Move(last.move.to_square, last.move.from_square))

        if last.captured is not None:
            self.board.place_piece(last.captured, last.move.to_square)
            captures = self.captured[last.mover]
            if captures:
                captures.pop()

        self.color_to_move = last.mover
        self.status = Status.IN_PROGRESS
        logger.debug("Took back %s", last.move.to_uci())
        return True

    def evaluate_status(self) -> Status:
        """
        Performs checks to see if game has ended and changes status accordingly.

        No legal move for the player to move?
        * in check --> checkmate
        * otherwise --> stalemate
        """
        if generate_legal_moves(self.board, self.color_to_move):
            self.status = Status.IN_PROGRESS
        elif self.is_check():
            self.status = Status.CHECKMATE
        else:
            self.status = Status.STALEMATE

        if self.is_over:
            logger.info(
                "Game over: %s (%s to move)",
                self.status.name.lower(),
                self.color_to_move.name.lower(),
            )
        return self.status
