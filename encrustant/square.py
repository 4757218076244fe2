"""Board squares, indexed from a1 = 0 to h8 = 63."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from encrustant.bitboard import BitBoard

UP_OFFSET = 8
DOWN_OFFSET = -8
LEFT_OFFSET = -1
RIGHT_OFFSET = 1

DIRECTIONS = (
    RIGHT_OFFSET,
    UP_OFFSET,
    LEFT_OFFSET,
    DOWN_OFFSET,
    UP_OFFSET + LEFT_OFFSET,
    UP_OFFSET + RIGHT_OFFSET,
    DOWN_OFFSET + LEFT_OFFSET,
    DOWN_OFFSET + RIGHT_OFFSET,
)


@dataclass(frozen=True, order=True)
class Square:
    """A square by index; indices outside 0..63 are allowed as sentinels."""

    index: int

    @classmethod
    def from_index(cls, index: int) -> Square:
        return cls(index)

    @classmethod
    def from_coords(cls, rank: int, file: int) -> Square:
        return cls(rank * 8 + file)

    @classmethod
    def from_notation(cls, notation: str) -> Square:
        """Parse coordinate notation such as ``e4``; extra characters are ignored."""
        if not notation or notation[0] not in "abcdefgh":
            raise ValueError("Invalid file")
        if len(notation) < 2 or notation[1] not in "12345678":
            raise ValueError("Invalid rank")
        file = ord(notation[0]) - ord("a")
        rank = ord(notation[1]) - ord("1")
        return cls.from_coords(rank, file)

    def up(self, number: int) -> Square:
        """Ranks up from white's point of view."""
        return self.offset(UP_OFFSET * number)

    def down(self, number: int) -> Square:
        """Ranks down from white's point of view."""
        return self.offset(DOWN_OFFSET * number)

    def left(self, number: int) -> Square:
        """Files left from white's point of view."""
        return self.offset(LEFT_OFFSET * number)

    def right(self, number: int) -> Square:
        """Files right from white's point of view."""
        return self.offset(RIGHT_OFFSET * number)

    def offset(self, offset: int) -> Square:
        return Square(self.index + offset)

    def within_bounds(self) -> bool:
        return 0 <= self.index < 64

    def flip(self) -> Square:
        """The same square seen from the other side of the board."""
        return Square(self.index ^ 56)

    def file(self) -> int:
        return self.index & 0b111

    def rank(self) -> int:
        return self.index >> 3

    def to_notation(self) -> str:
        return f"{chr(ord('a') + self.file())}{self.rank() + 1}"

    def bit_board(self) -> BitBoard:
        """Bit board holding only this square."""
        from encrustant.bitboard import BitBoard

        return BitBoard.from_square(self)

    def __str__(self) -> str:
        return self.to_notation()