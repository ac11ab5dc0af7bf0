"""
The automated opponent
----

Depth-2 minimax over material, no pruning:
1. play each of your legal moves on a copy of the board
2. let the opponent answer with the reply that is best for them (material only, no checkmate bonus)
3. pick your move whose best opponent answer scores lowest for the opponent

Ties go to the move found first (board scanning order, then generation order), so the result is deterministic.
"""

import logging
from typing import Optional

from src.chess.board import Board
from src.chess.moves import Move
from src.chess.pieces import Color
from src.chess.rules import generate_legal_moves

logger = logging.getLogger(__name__)


def evaluate_material(board: Board, perspective: Color = Color.WHITE) -> int:
    """Material balance seen from one side: positive means that side is ahead"""
    score = board.count_material()
    return score if perspective == Color.WHITE else -score


def best_reply_score(board: Board, color: Color) -> int:
    """Score (from `color`'s own perspective) of the best reply `color` has in this position.

    NOTE: Without any legal reply (checkmate or stalemate) the position is scored as it stands.
    """
    replies = generate_legal_moves(board, color)
    if not replies:
        return evaluate_material(board, color)
    return max(evaluate_material(board.simulate(reply), color) for reply in replies)


def best_move(board: Board, color: Color) -> Optional[Move]:
    """Move for `color` that minimises the opponent's best material outcome. None if there is no legal move."""
    opponent = color.opponent
    chosen: Optional[Move] = None
    chosen_score: Optional[int] = None
    for move in generate_legal_moves(board, color):
        score = best_reply_score(board.simulate(move), opponent)
        # strictly lower: on a tie the earlier move is kept
        if chosen_score is None or score < chosen_score:
            chosen, chosen_score = move, score

    if chosen is not None:
        logger.debug(
            "Search for %s picked %s (opponent's best score: %s)",
            color.name.lower(),
            chosen.to_uci(),
            chosen_score,
        )
    return chosen
