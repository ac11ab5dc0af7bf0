"""
Legality filter
----

A candidate (pseudo-legal) move is legal if, after playing it on a copy of the board, your own king is not attacked.
Works on any Board, so the automated opponent can use it on simulated positions too.
"""

from src.chess.board import Board
from src.chess.moves import Move, candidate_moves
from src.chess.pieces import Color
from src.chess.square import Square


def is_legal_move(board: Board, move: Move, mover: Color) -> bool:
    """
    1. both squares on the board
    2. a piece of the mover's color stands on the starting square
    3. the move follows the movement rules of that piece
    4. the move does not put (or leave) the mover in check
    """
    if not (move.from_square.is_within_bounds() and move.to_square.is_within_bounds()):
        return False

    piece = board.piece(move.from_square)
    if piece is None or piece.color != mover:
        return False

    if move not in candidate_moves(move.from_square, board):
        return False

    return not board.simulate(move).is_check(mover)


def generate_legal_moves(board: Board, color: Color) -> list[Move]:
    """All legal moves for the player with the 'color' pieces, in board scanning order"""
    return [
        move
        for square in board.locate_color(color)
        for move in candidate_moves(square, board)
        if not board.simulate(move).is_check(color)
    ]


def legal_moves_from(board: Board, square: Square) -> list[Move]:
    """Legal moves for the piece on a single square (used to highlight the options of a selected piece)"""
    piece = board.piece(square)
    if piece is None:
        return []
    return [
        move
        for move in candidate_moves(square, board)
        if not board.simulate(move).is_check(piece.color)
    ]
