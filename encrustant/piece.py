"""Chess pieces of both colours."""

from __future__ import annotations

from enum import IntEnum


class Piece(IntEnum):
    """A piece; its value indexes per-piece tables."""

    WHITE_PAWN = 0
    WHITE_KNIGHT = 1
    WHITE_BISHOP = 2
    WHITE_ROOK = 3
    WHITE_QUEEN = 4
    WHITE_KING = 5
    BLACK_PAWN = 6
    BLACK_KNIGHT = 7
    BLACK_BISHOP = 8
    BLACK_ROOK = 9
    BLACK_QUEEN = 10
    BLACK_KING = 11

    def to_fen_char(self) -> str:
        return _FEN_CHARS[self.value]

    @classmethod
    def from_fen_char(cls, character: str) -> Piece | None:
        """The piece for a FEN letter, or ``None`` if it is not one."""
        return _PIECES_BY_CHAR.get(character)

    def is_white(self) -> bool:
        return self.value < Piece.BLACK_PAWN.value


_FEN_CHARS = "PNBRQKpnbrqk"

ALL_PIECES: tuple[Piece, ...] = tuple(Piece)
WHITE_PIECES: tuple[Piece, ...] = ALL_PIECES[:6]
BLACK_PIECES: tuple[Piece, ...] = ALL_PIECES[6:]

_PIECES_BY_CHAR = {char: piece for char, piece in zip(_FEN_CHARS, ALL_PIECES)}