"""The Game board implements all rules that effect the `position` (in chess: the configuration of pieces on the board)"""

from copy import deepcopy
from dataclasses import dataclass, field
from typing import Optional, Self

from src.chess.moves import Move, candidate_moves
from src.chess.pieces import FEN_TO_PIECE, PROMOTION_RANK, Color, Piece, PieceType
from src.chess.square import ALL_SQUARES, BOARD_DIMENSIONS, Square
from src.core.exceptions import InvalidFENError

STARTING_POSITION_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR"


@dataclass
class Board:
    # NOTE: Only occupied squares are stored. A square that is missing is empty.
    position: dict[Square, Piece] = field(default_factory=dict)

    @classmethod
    def starting_position(cls) -> Self:
        return cls.from_fen(STARTING_POSITION_FEN)

    @classmethod
    def from_fen(cls, fen_str: str) -> Self:
        """Construct a board using the first part of a FEN string (the piece placement).

        ex. standard starting position:
        rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR
        means:
        * black pieces are on the 8th rank, starting with rook on a8, knight on b8, etc.
        * pawns cover 7th rank entirely
        * ranks 6 through 3 have 8 consecutive empty squares
        * rank 2 are the white pawns (capital letters)
        * 1st rank are the white pieces.
        """
        fen_by_ranks = fen_str.strip().split("/")
        if len(fen_by_ranks) != BOARD_DIMENSIONS[1]:
            raise InvalidFENError(
                f"Expected {BOARD_DIMENSIONS[1]} ranks separated by '/', got {len(fen_by_ranks)}: {fen_str!r}"
            )

        position: dict[Square, Piece] = {}
        for rank_idx, fen_one_rank in enumerate(fen_by_ranks):
            # FEN string is read from top rank (8th) to bottom rank (1st)
            rank = BOARD_DIMENSIONS[1] - 1 - rank_idx
            # ... but the first character is the a-file, so reads in normal direction
            file = 0
            for character in fen_one_rank:
                if character.lower() in FEN_TO_PIECE:
                    # simple case: a letter directly denotes the piece that should be created
                    position[Square(file, rank)] = Piece.from_fen(character)
                    file += 1
                elif character.isascii() and character.isdecimal():
                    # A number denotes the amount of empty squares after each other
                    file += int(character)
                else:
                    raise InvalidFENError(
                        f"Cannot interpret {character!r} in FEN string {fen_str!r}"
                    )
            if file != BOARD_DIMENSIONS[0]:
                raise InvalidFENError(
                    f"Rank {rank + 1} does not describe exactly {BOARD_DIMENSIONS[0]} squares: {fen_one_rank!r}"
                )
        return cls(position)

    def to_fen(self) -> str:
        """Ranks are separated by slashes in FEN string."""
        return "/".join(
            self._rank_to_fen(rank) for rank in range(BOARD_DIMENSIONS[1] - 1, -1, -1)
        )

    def _rank_to_fen(self, rank: int) -> str:
        """FEN string of a single rank"""
        fen_characters: list[str] = []
        empty_count = 0
        for file in range(BOARD_DIMENSIONS[0]):
            piece = self.piece(Square(file, rank))

            if piece is not None:
                if empty_count > 0:
                    fen_characters.append(str(empty_count))
                    empty_count = 0
                fen_characters.append(piece.to_fen())
            else:
                empty_count += 1

        # if the entire rank is empty, then we still place this number in the string
        if empty_count > 0:
            fen_characters.append(str(empty_count))
        return "".join(fen_characters)

    # --- READ / WRITE SQUARES ---
    def piece(self, square: Square) -> Optional[Piece]:
        return self.position.get(square)

    def place_piece(self, piece: Piece, square: Square) -> None:
        self.position[square] = piece

    def remove_piece(self, square: Square) -> Optional[Piece]:
        return self.position.pop(square, None)

    def move_piece(self, move: Move) -> None:
        """Update the position on the board (the piece keeps its type, no promotion here)"""
        piece_that_moved = self.position.pop(move.from_square)
        self.position[move.to_square] = piece_that_moved

    def copy(self) -> Self:
        """Value copy: never aliases the position of the original board"""
        return deepcopy(self)

    # --- LOOKUPS ---
    def locate_color(self, color: Color) -> list[Square]:
        """Squares occupied by the given color, in board scanning order"""
        return [
            square
            for square in ALL_SQUARES
            if (piece := self.piece(square)) is not None and piece.color == color
        ]

    def locate_king(self, color: Color) -> Optional[Square]:
        king = Piece(PieceType.KING, color)
        return next(
            (square for square, piece in self.position.items() if piece == king),
            None,
        )

    def count_material(self) -> int:
        """Material balance: White's pieces count positive, Black's pieces negative"""
        return sum(
            piece.value if piece.color == Color.WHITE else -piece.value
            for piece in self.position.values()
        )

    # --- CHECK DETECTION / SIMULATION ---
    def is_check(self, color: Color) -> bool:
        """
        Is the king of the given color attacked?
        ----

        For every opposing piece: can it reach the king's square? (the movement rules are run in attack-probe mode)

        NOTE: A board without a king of this color is malformed. We treat it as 'in check' rather than crashing.
        """
        king_square = self.locate_king(color)
        if king_square is None:
            return True

        for square in self.locate_color(color.opponent):
            probe_moves = candidate_moves(square, self, attack_probe=True)
            if any(move.to_square == king_square for move in probe_moves):
                return True
        return False

    def simulate(self, move: Move) -> Self:
        """Copy of the board with the move applied, including the pawn promotion, so check detection sees the promoted piece"""
        board = self.copy()
        board.move_piece(move)
        board.promote_if_needed(move.to_square)
        return board

    def promote_if_needed(self, square: Square) -> bool:
        """A pawn standing on the final rank for its color turns into a queen"""
        piece = self.piece(square)
        if piece is None or piece.type != PieceType.PAWN:
            return False
        if square.rank != PROMOTION_RANK[piece.color]:
            return False
        self.place_piece(piece.promoted(), square)
        return True
