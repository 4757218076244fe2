"""Chess positions and their Forsyth-Edwards Notation."""

from __future__ import annotations

import re
from dataclasses import dataclass, replace
from enum import Enum
from typing import ClassVar

from encrustant.bitboard import BitBoard
from encrustant.game_state import CastlingRights, GameState
from encrustant.piece import ALL_PIECES, BLACK_PIECES, WHITE_PIECES, Piece
from encrustant.square import Square

_U32_MAX = (1 << 32) - 1
_UNSIGNED = re.compile(r"\+?[0-9]+")
_DIGITS = "0123456789"


class FenError(Enum):
    """What went wrong while reading a FEN string."""

    MISSING_POSITION = "the position section is missing"
    INVALID_PIECE = "invalid piece character in the position section"
    INVALID_DIGIT = "invalid digit in the position section"
    MISSING_SIDE_TO_MOVE = "the side to move is missing"
    INVALID_SIDE_TO_MOVE = "the side to move is not 'w' or 'b'"
    MISSING_HALF_MOVE_CLOCK = "the half move clock is missing"
    INVALID_HALF_MOVE_CLOCK = "the half move clock is not a valid number"
    MISSING_FULL_MOVE_COUNTER = "the full move counter is missing"
    INVALID_FULL_MOVE_COUNTER = "the full move counter is not a valid number"
    MISSING_EN_PASSANT = "the en passant square is missing"
    INVALID_EN_PASSANT = "the en passant square is not a square or '-'"
    MISSING_CASTLING = "the castling rights are missing"


class FenParseError(ValueError):
    """Raised when a FEN string cannot be read."""

    def __init__(self, kind: FenError) -> None:
        super().__init__(kind.value)
        self.kind = kind


def _parse_unsigned(component: str | None, missing: FenError, invalid: FenError) -> int:
    if component is None:
        raise FenParseError(missing)
    if not _UNSIGNED.fullmatch(component):
        raise FenParseError(invalid)
    value = int(component)
    if value > _U32_MAX:
        raise FenParseError(invalid)
    return value


@dataclass
class Board:
    """A chess position: one bit board per piece plus the game state."""

    white_to_move: bool
    bit_boards: list[BitBoard]
    full_move_counter: int
    game_state: GameState

    START_POSITION_FEN: ClassVar[str] = (
        "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"
    )

    @classmethod
    def from_fen(cls, fen: str) -> Board:
        """Read a position from Forsyth-Edwards Notation."""
        components = iter(fen.split())

        position = next(components, None)
        if position is None:
            raise FenParseError(FenError.MISSING_POSITION)

        bit_boards = [BitBoard(0) for _ in ALL_PIECES]
        rank, file = 7, 0
        for character in position:
            if character == "/":
                continue
            if character in _DIGITS:
                digit = int(character)
                if digit > 8:
                    raise FenParseError(FenError.INVALID_DIGIT)
                file += digit
                if file > 8:
                    raise FenParseError(FenError.INVALID_DIGIT)
            else:
                piece = Piece.from_fen_char(character)
                if piece is None:
                    raise FenParseError(FenError.INVALID_PIECE)
                bit_boards[piece].set(Square.from_coords(rank, file))
                file += 1

            if file == 8:
                if rank == 0:
                    break
                rank -= 1
                file = 0

        side = next(components, None)
        if side is None:
            raise FenParseError(FenError.MISSING_SIDE_TO_MOVE)
        if side not in ("w", "b"):
            raise FenParseError(FenError.INVALID_SIDE_TO_MOVE)
        white_to_move = side == "w"

        castling = next(components, None)
        if castling is None:
            raise FenParseError(FenError.MISSING_CASTLING)
        castling_rights = CastlingRights.from_fen_section(castling)

        en_passant = next(components, None)
        if en_passant is None:
            raise FenParseError(FenError.MISSING_EN_PASSANT)
        if en_passant == "-":
            en_passant_square = None
        else:
            try:
                en_passant_square = Square.from_notation(en_passant)
            except ValueError:
                raise FenParseError(FenError.INVALID_EN_PASSANT) from None

        half_move_clock = _parse_unsigned(
            next(components, None),
            FenError.MISSING_HALF_MOVE_CLOCK,
            FenError.INVALID_HALF_MOVE_CLOCK,
        )
        full_move_counter = _parse_unsigned(
            next(components, None),
            FenError.MISSING_FULL_MOVE_COUNTER,
            FenError.INVALID_FULL_MOVE_COUNTER,
        )

        return cls(
            white_to_move=white_to_move,
            bit_boards=bit_boards,
            full_move_counter=full_move_counter,
            game_state=GameState(
                en_passant_square=en_passant_square,
                castling_rights=castling_rights,
                half_move_clock=half_move_clock,
                captured=None,
            ),
        )

    def to_fen(self) -> str:
        """Write the position in Forsyth-Edwards Notation."""
        rows = []
        for rank in range(7, -1, -1):
            row = []
            empty = 0
            for file in range(8):
                piece = self.piece_at(Square.from_coords(rank, file))
                if piece is None:
                    empty += 1
                    continue
                if empty:
                    row.append(str(empty))
                    empty = 0
                row.append(piece.to_fen_char())
            if empty:
                row.append(str(empty))
            rows.append("".join(row))

        state = self.game_state
        en_passant = (
            "-" if state.en_passant_square is None else state.en_passant_square.to_notation()
        )
        return " ".join(
            (
                "/".join(rows),
                "w" if self.white_to_move else "b",
                state.castling_rights.to_fen_section(),
                en_passant,
                str(state.half_move_clock),
                str(self.full_move_counter),
            )
        )

    def bit_board(self, piece: Piece) -> BitBoard:
        """The bit board of a piece type; changing it changes the board."""
        return self.bit_boards[piece]

    def _first_piece_at(self, square: Square, pieces: tuple[Piece, ...]) -> Piece | None:
        return next((piece for piece in pieces if self.bit_boards[piece].get(square)), None)

    def piece_at(self, square: Square) -> Piece | None:
        return self._first_piece_at(square, ALL_PIECES)

    def white_piece_at(self, square: Square) -> Piece | None:
        return self._first_piece_at(square, WHITE_PIECES)

    def black_piece_at(self, square: Square) -> Piece | None:
        return self._first_piece_at(square, BLACK_PIECES)

    def friendly_piece_at(self, square: Square) -> Piece | None:
        """A piece of the side to move at ``square``."""
        if self.white_to_move:
            return self.white_piece_at(square)
        return self.black_piece_at(square)

    def enemy_piece_at(self, square: Square) -> Piece | None:
        """A piece of the side not to move at ``square``."""
        if self.white_to_move:
            return self.black_piece_at(square)
        return self.white_piece_at(square)

    def is_insufficient_material(self) -> bool:
        """Bare kings, king and one minor piece against a king, or
        same-coloured bishops only."""
        boards = self.bit_boards
        white_nonking = (
            boards[Piece.WHITE_PAWN]
            | boards[Piece.WHITE_KNIGHT]
            | boards[Piece.WHITE_BISHOP]
            | boards[Piece.WHITE_ROOK]
            | boards[Piece.WHITE_QUEEN]
        )
        black_nonking = (
            boards[Piece.BLACK_PAWN]
            | boards[Piece.BLACK_KNIGHT]
            | boards[Piece.BLACK_BISHOP]
            | boards[Piece.BLACK_ROOK]
            | boards[Piece.BLACK_QUEEN]
        )
        if white_nonking.is_empty() and black_nonking.is_empty():
            return True

        kings = boards[Piece.WHITE_KING] | boards[Piece.BLACK_KING]
        bishops = boards[Piece.WHITE_BISHOP] | boards[Piece.BLACK_BISHOP]
        all_pieces = white_nonking | black_nonking | kings

        minor_pieces = boards[Piece.BLACK_KNIGHT] | boards[Piece.WHITE_KNIGHT] | bishops
        if all_pieces == (kings | minor_pieces) and minor_pieces.count() == 1:
            return True

        return all_pieces == (kings | (bishops & BitBoard.LIGHT_SQUARES)) or all_pieces == (
            kings | (bishops & BitBoard.DARK_SQUARES)
        )

    def copy(self) -> Board:
        """An independent copy of the position."""
        return Board(
            white_to_move=self.white_to_move,
            bit_boards=[bit_board.copy() for bit_board in self.bit_boards],
            full_move_counter=self.full_move_counter,
            game_state=replace(self.game_state),
        )

    def __str__(self) -> str:
        return self.to_fen()