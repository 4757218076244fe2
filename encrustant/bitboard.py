"""Sets of board squares packed into a 64-bit integer."""

from __future__ import annotations

from typing import Iterator

from encrustant.square import Square

_MASK = (1 << 64) - 1
_A_FILE = 0x0101_0101_0101_0101


class BitBoard:
    """A set of squares, one bit per square, a1 being the lowest bit.

    Operators always build new bit boards. Only ``set``, ``unset``,
    ``toggle``, ``toggle_two`` and ``pop_square`` change a bit board in
    place, so the shared constants must be copied before calling those.
    """

    __slots__ = ("bits",)

    NOT_A_FILE: BitBoard
    NOT_H_FILE: BitBoard
    RANK_1: BitBoard
    RANK_2: BitBoard
    RANK_3: BitBoard
    RANK_4: BitBoard
    RANK_5: BitBoard
    RANK_6: BitBoard
    RANK_7: BitBoard
    RANK_8: BitBoard
    EMPTY: BitBoard
    FULL: BitBoard
    LIGHT_SQUARES: BitBoard
    DARK_SQUARES: BitBoard

    def __init__(self, bits: int) -> None:
        self.bits = bits & _MASK

    @classmethod
    def from_square(cls, square: Square) -> BitBoard:
        """Bit board holding only ``square``."""
        return cls(1 << square.index)

    def set(self, square: Square) -> None:
        """Add a square."""
        self.bits |= 1 << square.index
        self.bits &= _MASK

    def unset(self, square: Square) -> None:
        """Remove a square."""
        self.bits &= ~(1 << square.index) & _MASK

    def toggle(self, square: Square) -> None:
        """Flip a square."""
        self.bits = (self.bits ^ (1 << square.index)) & _MASK

    def toggle_two(self, a: Square, b: Square) -> None:
        """Flip two squares at once."""
        self.bits = (self.bits ^ ((1 << a.index) | (1 << b.index))) & _MASK

    def is_empty(self) -> bool:
        return self.bits == 0

    def is_not_empty(self) -> bool:
        return self.bits != 0

    def more_than_one_bit_set(self) -> bool:
        return (self.bits & ((self.bits - 1) & _MASK)) != 0

    def overlaps(self, other: BitBoard) -> bool:
        """Whether any square is in both bit boards."""
        return (self.bits & other.bits) != 0

    def get(self, square: Square) -> bool:
        """Whether ``square`` is in the set."""
        return 0 <= square.index < 64 and bool(self.bits >> square.index & 1)

    def last_square(self) -> Square:
        """Highest square; index -1 when empty."""
        return Square(self.bits.bit_length() - 1)

    def first_square(self) -> Square:
        """Lowest square; index 64 when empty."""
        if self.bits == 0:
            return Square(64)
        return Square((self.bits & -self.bits).bit_length() - 1)

    def pop_square(self) -> Square:
        """Remove and return the lowest square."""
        if self.bits == 0:
            raise ValueError("pop from an empty bit board")
        square = self.first_square()
        self.bits &= self.bits - 1
        return square

    def count(self) -> int:
        """Number of squares in the set."""
        return bin(self.bits).count("1")

    def carry_rippler(self, d: BitBoard) -> BitBoard:
        """The subset of ``d`` that follows this one in counting order."""
        return BitBoard(((self.bits - d.bits) & _MASK) & d.bits)

    def magic_index(self, magic: int, shift: int) -> int:
        """Multiply by ``magic`` modulo 2**64, then shift right by ``shift``."""
        return ((self.bits * magic) & _MASK) >> shift

    def squares(self) -> Iterator[Square]:
        """Yield the squares from lowest to highest without changing the set."""
        bits = self.bits
        while bits:
            low = bits & -bits
            yield Square(low.bit_length() - 1)
            bits ^= low

    def copy(self) -> BitBoard:
        return BitBoard(self.bits)

    def __iter__(self) -> Iterator[Square]:
        return self.squares()

    def __bool__(self) -> bool:
        return self.bits != 0

    def __int__(self) -> int:
        return self.bits

    def __or__(self, other: BitBoard) -> BitBoard:
        return BitBoard(self.bits | other.bits)

    def __and__(self, other: BitBoard) -> BitBoard:
        return BitBoard(self.bits & other.bits)

    def __xor__(self, other: BitBoard) -> BitBoard:
        return BitBoard(self.bits ^ other.bits)

    def __invert__(self) -> BitBoard:
        return BitBoard(~self.bits)

    def __lshift__(self, amount: int) -> BitBoard:
        return BitBoard(self.bits << amount)

    def __rshift__(self, amount: int) -> BitBoard:
        return BitBoard(self.bits >> amount)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BitBoard):
            return NotImplemented
        return self.bits == other.bits

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"BitBoard(0x{self.bits:016x})"

    def __str__(self) -> str:
        rows = []
        for rank in range(7, -1, -1):
            row = " ".join(
                "1" if self.bits >> (rank * 8 + file) & 1 else "0" for file in range(8)
            )
            rows.append(row + "\n")
        return "".join(rows)


BitBoard.NOT_A_FILE = BitBoard(~_A_FILE)
BitBoard.NOT_H_FILE = BitBoard(~(_A_FILE << 7))
BitBoard.RANK_1 = BitBoard(0xFF)
BitBoard.RANK_2 = BitBoard(0xFF << 8)
BitBoard.RANK_3 = BitBoard(0xFF << 16)
BitBoard.RANK_4 = BitBoard(0xFF << 24)
BitBoard.RANK_5 = BitBoard(0xFF << 32)
BitBoard.RANK_6 = BitBoard(0xFF << 40)
BitBoard.RANK_7 = BitBoard(0xFF << 48)
BitBoard.RANK_8 = BitBoard(0xFF << 56)
BitBoard.EMPTY = BitBoard(0)
BitBoard.FULL = BitBoard(_MASK)
BitBoard.LIGHT_SQUARES = BitBoard(0x55AA55AA55AA55AA)
BitBoard.DARK_SQUARES = BitBoard(0xAA55AA55AA55AA55)