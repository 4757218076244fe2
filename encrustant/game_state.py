"""Castling rights and the reversible part of a position's state."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntFlag

from encrustant.piece import Piece
from encrustant.square import Square


class CastlingRights(IntFlag):
    """Which castling moves are still allowed, one bit per side."""

    NONE = 0
    WHITE_KING_SIDE = 1
    WHITE_QUEEN_SIDE = 2
    BLACK_KING_SIDE = 4
    BLACK_QUEEN_SIDE = 8

    @classmethod
    def from_fen_section(cls, section: str) -> CastlingRights:
        """Parse the castling field of a FEN string; unknown letters are ignored."""
        rights = cls.NONE
        if section == "-":
            return rights
        for letter, flag in _FEN_LETTERS:
            if letter in section:
                rights |= flag
        return rights

    def to_fen_section(self) -> str:
        """The castling field of a FEN string, ``-`` when no side can castle."""
        letters = "".join(letter for letter, flag in _FEN_LETTERS if flag in self)
        return letters or "-"


_FEN_LETTERS = (
    ("K", CastlingRights.WHITE_KING_SIDE),
    ("Q", CastlingRights.WHITE_QUEEN_SIDE),
    ("k", CastlingRights.BLACK_KING_SIDE),
    ("q", CastlingRights.BLACK_QUEEN_SIDE),
)


@dataclass
class GameState:
    """State that a move changes and that is restored when it is taken back."""

    en_passant_square: Square | None = None
    castling_rights: CastlingRights = CastlingRights.NONE
    half_move_clock: int = 0
    captured: Piece | None = None