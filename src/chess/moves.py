"""
Geometry/Base movement and capturing rules

Key idea: Use strategy pattern to define the pseudo-legal move set for each piece type.

Every rule accepts an `attack_probe` flag. In that mode a square occupied by your own color is not filtered out:
check detection only asks "can this piece reach that square?", not "can it legally land there?".

Legality (not leaving your own king in check) is checked later in rules.py
"""

from dataclasses import dataclass
from typing import Callable, Optional, Protocol, Self

from src.chess.pieces import PAWN_DIRECTION, PAWN_HOME_RANK, Color, Piece, PieceType
from src.chess.square import Square


class Board(Protocol):
    """Just the parts the movement strategies need"""

    def piece(self, square: Square) -> Optional[Piece]: ...


Vector = tuple[int, int]

# NOTE: The order of the deltas/directions below is the order in which moves get generated,
# and the automated opponent breaks ties by that order. Do not reorder them.
KNIGHT_DELTAS: list[Vector] = [
    (1, -2),
    (2, -1),
    (-1, -2),
    (-2, -1),
    (1, 2),
    (2, 1),
    (-1, 2),
    (-2, 1),
]
KING_DELTAS: list[Vector] = [
    (-1, 1),
    (-1, 0),
    (-1, -1),
    (0, 1),
    (0, -1),
    (1, 1),
    (1, 0),
    (1, -1),
]
DIAGONALS: list[Vector] = [(1, -1), (1, 1), (-1, -1), (-1, 1)]
STRAIGHTS: list[Vector] = [(1, 0), (-1, 0), (0, -1), (0, 1)]


@dataclass(frozen=True)
class Move:
    """basic definition of a move to be made: capture and promotion are derived from the board when it gets applied"""

    from_square: Square
    to_square: Square

    @classmethod
    def from_uci(cls, uci: str) -> Self:
        """
        Universal Chess Interface:
        ---
        One of the standard chess notations for moves

        examples:
        * "e2e4": move the piece that was on e2 to e4
        * "g1f3": (knight) jumps from g1 to f3

        NOTE: no promotion suffix. A pawn always promotes into a queen.
        """
        from_sq = Square.from_algebraic(uci[:2])
        to_sq = Square.from_algebraic(uci[2:4])
        return cls(from_sq, to_sq)

    def to_uci(self) -> str:
        """Convert into UCI notation"""
        return f"{self.from_square.to_algebraic()}{self.to_square.to_algebraic()}"


@dataclass(frozen=True)
class HistoryEntry:
    """Everything needed to take back a move that was applied to the live board"""

    move: Move
    captured: Optional[Piece]
    mover: Color


# --- MOVEMENT RULES ---
def raycasting_move(
    square: Square, board: Board, directions: list[Vector], attack_probe: bool = False
) -> list[Move]:
    """
    Raycasting algorithm
    -----

    ---
    The main trick we use to check the 'line of sight of a piece'.
    We define move directions and move along them until we hit another piece or
    the edge of the board.

    * own piece found: stop before it (unless probing attacks, then it is included)
    * opponent's piece found: include it (capture) and stop
    """
    player_color = board.piece(square).color

    moves: list[Move] = []
    for df, dr in directions:
        file = square.file
        rank = square.rank
        while True:
            file += df
            rank += dr
            target_square = Square(file, rank)
            if not target_square.is_within_bounds():
                break

            piece_found = board.piece(target_square)
            if piece_found is not None:
                # only need to add the first occupied square found if it is the opponent's: then it can be captured.
                if attack_probe or piece_found.color != player_color:
                    moves.append(Move(from_square=square, to_square=target_square))
                break

            moves.append(Move(from_square=square, to_square=target_square))
    return moves


def single_step_move(
    square: Square, board: Board, deltas: list[Vector], attack_probe: bool = False
) -> list[Move]:
    """Raycasting is for sliding pieces. This is the equivalent for kings and knights that just can move a single step along a direction"""
    player_color = board.piece(square).color

    moves: list[Move] = []
    for df, dr in deltas:
        target_square = Square(square.file + df, square.rank + dr)
        if not target_square.is_within_bounds():
            continue

        piece_found = board.piece(target_square)
        square_available = piece_found is None or piece_found.color != player_color
        if attack_probe or square_available:
            moves.append(Move(from_square=square, to_square=target_square))

    return moves


def candidate_pawn_moves(
    square: Square, board: Board, attack_probe: bool = False
) -> list[Move]:
    """
    A pawn:
    - moves by a single square forward, onto an empty square.
    - It can move by two in their first move (so when on their home rank), if both squares are empty
    - takes diagonally, but only onto a square occupied by the opponent

    NOTE: No en passant. Promotion is taken care of when the move gets applied.
    """
    player_color = board.piece(square).color
    direction = PAWN_DIRECTION[player_color]

    moves: list[Move] = []

    # Pawn pushes
    one_step = Square(square.file, square.rank + direction)
    if one_step.is_within_bounds() and board.piece(one_step) is None:
        moves.append(Move(from_square=square, to_square=one_step))

        two_steps = Square(square.file, square.rank + 2 * direction)
        on_home_rank = square.rank == PAWN_HOME_RANK[player_color]
        if on_home_rank and two_steps.is_within_bounds() and board.piece(two_steps) is None:
            moves.append(Move(from_square=square, to_square=two_steps))

    # pawns take diagonally:
    for df in [-1, 1]:
        target_square = Square(square.file + df, square.rank + direction)
        if not target_square.is_within_bounds():
            continue
        piece_found = board.piece(target_square)
        if piece_found is None:
            continue
        if attack_probe or piece_found.color != player_color:
            moves.append(Move(from_square=square, to_square=target_square))
    return moves


def candidate_knight_moves(
    square: Square, board: Board, attack_probe: bool = False
) -> list[Move]:
    """Knights always move such that |delta_rank| + |delta_file| = 3"""
    return single_step_move(square, board, KNIGHT_DELTAS, attack_probe)


def candidate_bishop_moves(
    square: Square, board: Board, attack_probe: bool = False
) -> list[Move]:
    """Bishops move diagonally: |delta_rank| = |delta_file|"""
    return raycasting_move(square, board, DIAGONALS, attack_probe)


def candidate_rook_moves(
    square: Square, board: Board, attack_probe: bool = False
) -> list[Move]:
    """Rooks move either horizontally or vertically"""
    return raycasting_move(square, board, STRAIGHTS, attack_probe)


def candidate_queen_moves(
    square: Square, board: Board, attack_probe: bool = False
) -> list[Move]:
    """
    The Queen combines the rook moves (horizontal + vertical movements) and bishop moves (diagonal movement)
    """
    return raycasting_move(square, board, STRAIGHTS + DIAGONALS, attack_probe)


def candidate_king_moves(
    square: Square, board: Board, attack_probe: bool = False
) -> list[Move]:
    """
    The king can move by a single square at the time. No castling.
    """
    return single_step_move(square, board, KING_DELTAS, attack_probe)


# -- STRATEGY PATTERN: MOVEMENT RULES ---
CandidateMovesFn = Callable[[Square, Board, bool], list[Move]]
MOVEMENT_RULES: dict[PieceType, CandidateMovesFn] = {
    PieceType.PAWN: candidate_pawn_moves,
    PieceType.KNIGHT: candidate_knight_moves,
    PieceType.BISHOP: candidate_bishop_moves,
    PieceType.ROOK: candidate_rook_moves,
    PieceType.QUEEN: candidate_queen_moves,
    PieceType.KING: candidate_king_moves,
}


def candidate_moves(square: Square, board: Board, attack_probe: bool = False) -> list[Move]:
    """Pseudo-legal moves for whatever piece stands on the square (none for an empty square)"""
    piece = board.piece(square)
    if piece is None:
        return []
    movement_rule = MOVEMENT_RULES[piece.type]
    return movement_rule(square, board, attack_probe)
