"""
A square on the board

(placed in its own module as multiple other modules need to import it)
"""

from __future__ import annotations

from dataclasses import dataclass

# Chess board is always 8x8. Just in case we want to try some funky stuff, make it adjustable
BOARD_DIMENSIONS = (8, 8)


@dataclass(frozen=True)
class Square:
    file: int
    rank: int

    @classmethod
    def from_algebraic(cls, sq: str) -> Square:
        """
        Algebraic notation: 'a1' - 'h8' get converted to (0,0) - (7,7)

        Never raises: text that is not a letter followed by a number ends up as a square off the board.
        """
        if len(sq) < 2 or not (sq.isascii() and sq[1:].isdecimal()):
            return cls(-1, -1)
        file = ord(sq[0].lower()) - ord("a")
        rank = int(sq[1:]) - 1
        return cls(file, rank)

    def to_algebraic(self) -> str:
        return f"{chr(self.file + ord('a'))}{self.rank + 1}"

    def is_within_bounds(self) -> bool:
        return (0 <= self.file < BOARD_DIMENSIONS[0]) and (
            0 <= self.rank < BOARD_DIMENSIONS[1]
        )


# Order in which the board gets scanned: top rank first, a-file to h-file (same as reading a FEN string).
# NOTE: The automated opponent breaks ties using this order, so do not change it lightly.
ALL_SQUARES: tuple[Square, ...] = tuple(
    Square(file, rank)
    for rank in range(BOARD_DIMENSIONS[1] - 1, -1, -1)
    for file in range(BOARD_DIMENSIONS[0])
)
