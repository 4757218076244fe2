"""Moves and their special-move flags."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from encrustant.piece import Piece
from encrustant.square import Square


class Flag(Enum):
    """Kind of move; the value is the flag's display name."""

    NONE = "None"
    QUEEN_PROMOTION = "QueenPromotion"
    ROOK_PROMOTION = "RookPromotion"
    BISHOP_PROMOTION = "BishopPromotion"
    KNIGHT_PROMOTION = "KnightPromotion"
    EN_PASSANT = "EnPassant"
    PAWN_TWO_UP = "PawnTwoUp"
    CASTLE = "Castle"

    def promotion_piece(self, white: bool) -> Piece | None:
        """The piece promoted into, or ``None`` for non-promotions."""
        pieces = _PROMOTION_PIECES.get(self)
        if pieces is None:
            return None
        return pieces[0] if white else pieces[1]


_PROMOTION_PIECES = {
    Flag.QUEEN_PROMOTION: (Piece.WHITE_QUEEN, Piece.BLACK_QUEEN),
    Flag.ROOK_PROMOTION: (Piece.WHITE_ROOK, Piece.BLACK_ROOK),
    Flag.BISHOP_PROMOTION: (Piece.WHITE_BISHOP, Piece.BLACK_BISHOP),
    Flag.KNIGHT_PROMOTION: (Piece.WHITE_KNIGHT, Piece.BLACK_KNIGHT),
}

ALL_FLAGS: tuple[Flag, ...] = tuple(Flag)
PROMOTIONS: tuple[Flag, ...] = (
    Flag.QUEEN_PROMOTION,
    Flag.ROOK_PROMOTION,
    Flag.BISHOP_PROMOTION,
    Flag.KNIGHT_PROMOTION,
)


@dataclass(frozen=True)
class Move:
    """A piece moving from one square to another."""

    from_square: Square
    to_square: Square
    flag: Flag = Flag.NONE

    def __str__(self) -> str:
        text = f"Move from {self.from_square} to {self.to_square}"
        if self.flag is Flag.NONE:
            return text
        return f"{text}, flag = {self.flag.value}"