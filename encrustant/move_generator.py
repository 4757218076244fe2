"""Legal move generation."""

from __future__ import annotations

from typing import Iterator

from encrustant import pawn_moves
from encrustant.bitboard import BitBoard
from encrustant.board import Board
from encrustant.move_data import Flag, Move
from encrustant.piece import BLACK_PIECES, WHITE_PIECES
from encrustant.precomputed import get_between_rays, king_attacks, knight_attacks
from encrustant.slider_lookup import (
    get_bishop_moves,
    get_rook_moves,
    relevant_bishop_blockers,
    relevant_rook_blockers,
)
from encrustant.square import Square

_WHITE_KING_SIDE_PATH = 0b0110_0000
_WHITE_QUEEN_SIDE_BLOCKERS = 0b0000_1110
_WHITE_QUEEN_SIDE_PATH = 0b0000_1100


def _side_pieces(board: Board):
    if board.white_to_move:
        return WHITE_PIECES, BLACK_PIECES
    return BLACK_PIECES, WHITE_PIECES


def _bishop_attacks(square: Square, occupied: BitBoard) -> BitBoard:
    return get_bishop_moves(square, occupied & relevant_bishop_blockers(square))


def _rook_attacks(square: Square, occupied: BitBoard) -> BitBoard:
    return get_rook_moves(square, occupied & relevant_rook_blockers(square))


class MoveGenerator:
    """Works out the masks of a position once and yields its legal moves."""

    def __init__(self, board: Board) -> None:
        white = board.white_to_move
        self.white_to_move = white
        self.en_passant_square = board.game_state.en_passant_square

        friendly, enemy = _side_pieces(board)

        rights = board.game_state.castling_rights
        if white:
            self.king_side = bool(rights & rights.WHITE_KING_SIDE)
            self.queen_side = bool(rights & rights.WHITE_QUEEN_SIDE)
        else:
            self.king_side = bool(rights & rights.BLACK_KING_SIDE)
            self.queen_side = bool(rights & rights.BLACK_QUEEN_SIDE)

        (
            friendly_pawns,
            friendly_knights,
            friendly_bishops,
            friendly_rooks,
            friendly_queens,
            friendly_king,
        ) = (board.bit_board(piece).copy() for piece in friendly)
        (
            enemy_pawns,
            enemy_knights,
            enemy_bishops,
            enemy_rooks,
            enemy_queens,
            enemy_king,
        ) = (board.bit_board(piece).copy() for piece in enemy)

        self.friendly_pawns = friendly_pawns
        self.friendly_knights = friendly_knights
        self.friendly_diagonal = friendly_bishops | friendly_queens
        self.friendly_orthogonal = friendly_rooks | friendly_queens
        self.friendly_piece_bit_board = (
            friendly_pawns
            | friendly_knights
            | friendly_bishops
            | friendly_rooks
            | friendly_queens
            | friendly_king
        )

        enemy_diagonal = enemy_bishops | enemy_queens
        enemy_orthogonal = enemy_rooks | enemy_queens
        self.enemy_orthogonal = enemy_orthogonal
        self.enemy_piece_bit_board = (
            enemy_pawns | enemy_knights | enemy_diagonal | enemy_orthogonal | enemy_king
        )

        occupied = self.friendly_piece_bit_board | self.enemy_piece_bit_board
        self.occupied_squares = occupied
        self.empty_squares = ~occupied

        king_square = friendly_king.first_square()
        self.friendly_king_square = king_square

        check_mask = (
            (_bishop_attacks(king_square, occupied) & enemy_diagonal)
            | (_rook_attacks(king_square, occupied) & enemy_orthogonal)
            | (pawn_moves.attack_bit_board(king_square, white) & enemy_pawns)
            | (knight_attacks(king_square) & enemy_knights)
        )
        self.is_in_check = check_mask.is_not_empty()
        self.is_in_double_check = check_mask.more_than_one_bit_set()

        if white:
            danger = ((enemy_pawns & BitBoard.NOT_A_FILE) >> 9) | (
                (enemy_pawns & BitBoard.NOT_H_FILE) >> 7
            )
        else:
            danger = ((enemy_pawns & BitBoard.NOT_H_FILE) << 9) | (
                (enemy_pawns & BitBoard.NOT_A_FILE) << 7
            )

        for square in enemy_knights.squares():
            danger = danger | knight_attacks(square)

        without_king = occupied ^ friendly_king
        for square in enemy_diagonal.squares():
            attacks = _bishop_attacks(square, without_king)
            if attacks.overlaps(friendly_king):
                ray = (
                    _bishop_attacks(square, occupied)
                    & ~friendly_king
                    & _bishop_attacks(king_square, square.bit_board())
                )
                check_mask = check_mask | ray
            danger = danger | attacks

        for square in enemy_orthogonal.squares():
            attacks = _rook_attacks(square, without_king)
            if attacks.overlaps(friendly_king):
                ray = (
                    _rook_attacks(square, occupied)
                    & ~friendly_king
                    & _rook_attacks(king_square, square.bit_board())
                )
                check_mask = check_mask | ray
            danger = danger | attacks

        for square in enemy_king.squares():
            danger = danger | king_attacks(square)

        self.king_danger_bit_board = danger
        self.check_mask = check_mask if self.is_in_check else BitBoard.FULL.copy()

        self.orthogonal_pin_rays, self.diagonal_pin_rays = self._pin_rays(
            enemy_orthogonal, enemy_diagonal
        )

    def _pin_rays(
        self, enemy_orthogonal: BitBoard, enemy_diagonal: BitBoard
    ) -> tuple[BitBoard, BitBoard]:
        king_square = self.friendly_king_square
        enemy_pieces = self.enemy_piece_bit_board
        friendly_pieces = self.friendly_piece_bit_board

        def pins(attackers: BitBoard) -> BitBoard:
            result = BitBoard(0)
            for attacker in attackers.squares():
                ray = get_between_rays(king_square, attacker)
                if (ray & friendly_pieces).count() == 1:
                    result = result | ray
            return result

        diagonal = pins(enemy_diagonal & _bishop_attacks(king_square, enemy_pieces))
        orthogonal = pins(enemy_orthogonal & _rook_attacks(king_square, enemy_pieces))
        return orthogonal, diagonal

    @property
    def friendly_pieces(self) -> BitBoard:
        """Every piece of the side to move."""
        return self.friendly_piece_bit_board

    def _king_moves(self, captures_only: bool) -> Iterator[Move]:
        king_square = self.friendly_king_square
        targets = (
            king_attacks(king_square)
            & ~self.friendly_piece_bit_board
            & ~self.king_danger_bit_board
        )
        if captures_only:
            targets = targets & self.enemy_piece_bit_board
        for to_square in targets.squares():
            yield Move(king_square, to_square, Flag.NONE)

        if self.is_in_check or captures_only:
            return

        shift = 0 if self.white_to_move else 56
        cannot_castle_into = self.occupied_squares | self.king_danger_bit_board
        if self.king_side:
            path = BitBoard(_WHITE_KING_SIDE_PATH << shift)
            if not path.overlaps(cannot_castle_into):
                yield Move(king_square, king_square.right(2), Flag.CASTLE)
        if self.queen_side:
            blockers = BitBoard(_WHITE_QUEEN_SIDE_BLOCKERS << shift)
            if not blockers.overlaps(self.occupied_squares):
                path = BitBoard(_WHITE_QUEEN_SIDE_PATH << shift)
                if not path.overlaps(cannot_castle_into):
                    yield Move(king_square, king_square.left(2), Flag.CASTLE)

    def _knight_moves(self, captures_only: bool) -> Iterator[Move]:
        unpinned = self.friendly_knights & ~(
            self.diagonal_pin_rays | self.orthogonal_pin_rays
        )
        mask = (self.empty_squares | self.enemy_piece_bit_board) & self.check_mask
        if captures_only:
            mask = mask & self.enemy_piece_bit_board
        for from_square in unpinned.squares():
            for to_square in (knight_attacks(from_square) & mask).squares():
                yield Move(from_square, to_square, Flag.NONE)

    def _slider_moves(
        self, from_square: Square, attacks: BitBoard, pins: BitBoard, captures_only: bool
    ) -> Iterator[Move]:
        legal = attacks & (
            (self.enemy_piece_bit_board | self.empty_squares) & self.check_mask
        )
        if captures_only:
            legal = legal & self.enemy_piece_bit_board
        if pins.get(from_square):
            legal = legal & pins
        for to_square in legal.squares():
            yield Move(from_square, to_square, Flag.NONE)

    def generate(self, captures_only: bool = False) -> Iterator[Move]:
        """Yield every legal move, or only captures when ``captures_only``."""
        yield from self._king_moves(captures_only)
        if self.is_in_double_check:
            # Only the king can move out of a double check.
            return

        yield from pawn_moves.generate(self, captures_only)
        yield from self._knight_moves(captures_only)

        for from_square in (self.friendly_diagonal & ~self.orthogonal_pin_rays).squares():
            yield from self._slider_moves(
                from_square,
                _bishop_attacks(from_square, self.occupied_squares),
                self.diagonal_pin_rays,
                captures_only,
            )
        for from_square in (self.friendly_orthogonal & ~self.diagonal_pin_rays).squares():
            yield from self._slider_moves(
                from_square,
                _rook_attacks(from_square, self.occupied_squares),
                self.orthogonal_pin_rays,
                captures_only,
            )

    def moves(self, captures_only: bool = False) -> list[Move]:
        """All legal moves as a list."""
        return list(self.generate(captures_only))


def calculate_is_in_check(board: Board) -> bool:
    """Whether the side to move is in check."""
    friendly, enemy = _side_pieces(board)
    king_square = board.bit_board(friendly[5]).first_square()

    enemy_pawns = board.bit_board(enemy[0])
    if (pawn_moves.attack_bit_board(king_square, board.white_to_move) & enemy_pawns):
        return True
    enemy_knights = board.bit_board(enemy[1])
    if knight_attacks(king_square) & enemy_knights:
        return True

    occupied = BitBoard(0)
    for piece in friendly + enemy:
        occupied = occupied | board.bit_board(piece)

    enemy_diagonal = board.bit_board(enemy[2]) | board.bit_board(enemy[4])
    if _bishop_attacks(king_square, occupied) & enemy_diagonal:
        return True
    enemy_orthogonal = board.bit_board(enemy[3]) | board.bit_board(enemy[4])
    return bool(_rook_attacks(king_square, occupied) & enemy_orthogonal)