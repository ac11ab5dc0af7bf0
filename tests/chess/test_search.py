"""Unit tests for /src/chess/search.py"""

from unittest.mock import patch

import pytest

from src.chess.board import Board
from src.chess.moves import Move
from src.chess.pieces import Color
from src.chess.rules import generate_legal_moves
from src.chess.search import best_move, best_reply_score, evaluate_material
from src.chess.square import Square


# -- EVALUATION --
def test_material_in_starting_position() -> None:
    board = Board.starting_position()
    assert evaluate_material(board) == 0
    assert evaluate_material(board, Color.BLACK) == 0


def test_material_depends_on_perspective() -> None:
    """Black lost the queen"""
    board = Board.from_fen("rnb1kbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR")
    assert evaluate_material(board, Color.WHITE) == 900
    assert evaluate_material(board, Color.BLACK) == -900


def test_checkmated_position_scored_by_material_only() -> None:
    """No bonus for delivering mate: without replies the position is just counted"""
    board = Board.from_fen("rnb1kbnr/pppp1ppp/4p3/8/5PPq/8/PPPPP2P/RNBQKBNR")
    assert generate_legal_moves(board, Color.WHITE) == []
    assert best_reply_score(board, Color.WHITE) == 0


def test_best_reply_score_takes_the_best_capture() -> None:
    """White to move can take the black rook on a8 with the queen"""
    board = Board.from_fen("r3k3/8/8/8/8/8/8/Q3K3")
    assert best_reply_score(board, Color.WHITE) == 900 + 20000 - 20000


# -- MOVE SELECTION --
def test_takes_hanging_queen() -> None:
    board = Board.from_fen("4k3/8/8/3p4/2Q5/8/8/4K3")
    assert best_move(board, Color.BLACK) == Move.from_uci("d5c4")


def test_avoids_losing_the_queen() -> None:
    """The black queen on d4 is attacked by the pawn on e3. Every queen move that is safe beats leaving it there."""
    board = Board.from_fen("4k3/8/8/8/3q4/4P3/8/4K3")
    move = best_move(board, Color.BLACK)
    assert move is not None
    assert move.from_square == Square.from_algebraic("d4")


def test_search_is_deterministic() -> None:
    board = Board.from_fen("rnbqkbnr/pppppppp/8/8/4P3/8/PPPP1PPP/RNBQKBNR")
    first = best_move(board, Color.BLACK)
    assert first is not None
    for _ in range(3):
        assert best_move(board, Color.BLACK) == first


def test_king_ties_go_to_first_king_step() -> None:
    """Only kings on the board: every move scores the same. The king steps towards the a-file and the 8th rank first."""
    board = Board.from_fen("8/8/8/3k4/8/8/8/7K")
    assert best_move(board, Color.BLACK) == Move.from_uci("d5c6")


def test_knight_ties_go_to_first_knight_jump() -> None:
    """The knight sits on a higher rank than the king, so it is scanned first. No move changes the material."""
    board = Board.from_fen("8/8/8/3n4/8/8/8/k6K")
    assert best_move(board, Color.BLACK) == Move.from_uci("d5e3")


def test_no_legal_move() -> None:
    board = Board.from_fen("k7/8/1Q6/8/8/8/8/7K")
    assert best_move(board, Color.BLACK) is None


def test_search_does_not_touch_the_board() -> None:
    board = Board.starting_position()
    best_move(board, Color.WHITE)
    assert board == Board.starting_position()


@pytest.mark.parametrize("color", [Color.WHITE, Color.BLACK])
def test_search_for_either_color(color: Color) -> None:
    board = Board.starting_position()
    move = best_move(board, color)
    assert move is not None
    assert board.piece(move.from_square).color == color


def test_every_own_move_is_searched() -> None:
    """Depth 2: one reply enumeration per candidate move of the searching side"""
    board = Board.from_fen("k7/8/8/8/8/8/8/7K")
    own_moves = generate_legal_moves(board, Color.BLACK)
    with patch(
        "src.chess.search.best_reply_score", return_value=0
    ) as mock_best_reply:
        best_move(board, Color.BLACK)
    assert mock_best_reply.call_count == len(own_moves)
