"""Orchestration of communication from the presentation layer to the business logic (and the reverse direction)."""

import logging
from typing import Callable, Optional

from src.api.models import (
    AutomatedOpponentRequest,
    GameResponse,
    LegalMovesRequest,
    LegalMovesResponse,
    MoveRequest,
    MoveResponse,
    PieceResponse,
)
from src.chess.game import Game
from src.chess.moves import Move
from src.chess.pieces import Color as DomainColor
from src.chess.search import best_move
from src.chess.square import Square
from src.core.config import Settings, configure_logging, load_settings
from src.core.shared_types import Color, PieceType, Status

logger = logging.getLogger(__name__)

# The automated opponent always plays the second color to move
AUTOMATED_COLOR = DomainColor.BLACK

Task = Callable[[], None]
Scheduler = Callable[[Task], None]


def run_immediately(task: Task) -> None:
    """Default scheduler: no deferral at all"""
    task()


class ChessService:
    """
    Orchestration of layers for chess game.
    ----

    Owns exactly one Game. Callers only submit requests and read back responses, they never touch the Game itself.

    The computer's move is handed to the `scheduler` instead of being played right away.
    That way the presentation layer can repaint after the human move (ex. pass `lambda task: root.after(220, task)`).
    Not thread-safe: all calls (incl. the scheduled task) must come from the same thread.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        scheduler: Optional[Scheduler] = None,
    ) -> None:
        self.settings = settings or load_settings()
        configure_logging(self.settings)
        self.scheduler = scheduler or run_immediately
        self.automated_opponent = self.settings.automated_opponent
        self.game = Game.new_game()

    # -- Presentation layer logic ---
    def new_game(self) -> GameResponse:
        """Reset everything: starting position, white to move, no history/captures"""
        self.game = Game.new_game()
        logger.info("New game started")
        return self._create_game_response()

    def get_game_state(self) -> GameResponse:
        """
        Retrieve current game state.
        ----
        Polled by the presentation layer after every call that changes something.
        """
        return self._create_game_response()

    def attempt_move(self, request: MoveRequest) -> MoveResponse:
        """Make a move attempt. A rejected move leaves the game untouched (caller shows a generic 'invalid move')"""
        move = Move(
            Square.from_algebraic(request.from_square),
            Square.from_algebraic(request.to_square),
        )

        accepted = self.game.attempt_move(move)

        if accepted:
            self._schedule_automated_move()
        return MoveResponse(accepted=accepted, game=self._create_game_response())

    def undo(self) -> GameResponse:
        """Take back the last move (a single ply)."""
        self.game.undo()
        return self._create_game_response()

    def set_automated_opponent(self, request: AutomatedOpponentRequest) -> GameResponse:
        """Toggle whether Black's moves are produced by the computer"""
        self.automated_opponent = request.enabled
        logger.info(
            "Automated opponent %s", "enabled" if request.enabled else "disabled"
        )
        # If it is already the computer's turn, it should not wait for anything
        self._schedule_automated_move()
        return self._create_game_response()

    def legal_moves(self, request: LegalMovesRequest) -> LegalMovesResponse:
        """retrieve set of legal moves (of a single piece if a square is given)."""
        square = Square.from_algebraic(request.square) if request.square else None
        legal_moves = self.game.legal_moves(square)
        return LegalMovesResponse(
            color=Color[self.game.color_to_move.name],
            legal_moves=[move.to_uci() for move in legal_moves],
        )

    # -- Automated opponent --
    def play_automated_move(self) -> Optional[Move]:
        """
        Let the computer play its move, if it is (still) its turn.
        ---
        NOTE: Conditions are checked again: the game might have been reset/undone/toggled since the task got scheduled.
        """
        if not self._is_automated_turn():
            return None

        move = best_move(self.game.board, AUTOMATED_COLOR)
        if move is None:
            return None

        self.game.make_move(move)
        logger.info("Automated opponent played %s", move.to_uci())
        return move

    def _is_automated_turn(self) -> bool:
        return (
            self.automated_opponent
            and not self.game.is_over
            and self.game.color_to_move == AUTOMATED_COLOR
        )

    def _schedule_automated_move(self) -> None:
        if self._is_automated_turn():
            self.scheduler(self.play_automated_move)

    # -- Internal helpers --
    def _create_game_response(self) -> GameResponse:
        """Convert the state of the Game into a GameResponse."""
        game = self.game
        winner = game.winner
        return GameResponse(
            color_to_move=Color[game.color_to_move.name],
            status=Status[game.status.name],
            winner=Color[winner.name] if winner else None,
            in_check=game.is_check(),
            automated_opponent=self.automated_opponent,
            board={
                square.to_algebraic(): PieceResponse(
                    type=PieceType[piece.type.name], color=Color[piece.color.name]
                )
                for square, piece in sorted(
                    game.board.position.items(),
                    key=lambda item: (item[0].rank, item[0].file),
                )
            },
            captured={
                Color[color.name]: [PieceType[t.name] for t in captures]
                for color, captures in game.captured.items()
            },
            move_history=[entry.move.to_uci() for entry in game.history],
        )
