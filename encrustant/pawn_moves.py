"""Pawn attacks and pawn move generation."""

from __future__ import annotations

from typing import Any, Iterator

from encrustant.bitboard import BitBoard
from encrustant.move_data import PROMOTIONS, Flag, Move
from encrustant.slider_lookup import get_rook_moves, relevant_rook_blockers
from encrustant.square import Square

_NOT_A_FILE = 0xFEFE_FEFE_FEFE_FEFE
_NOT_H_FILE = 0x7F7F_7F7F_7F7F_7F7F
_NOT_RANK_8 = 0x00FF_FFFF_FFFF_FFFF
_NOT_RANK_1 = 0xFFFF_FFFF_FFFF_FF00


def _attacks(index: int) -> tuple[int, int]:
    bit = 1 << index
    white = 0
    black = 0
    if bit & _NOT_A_FILE:
        if bit & _NOT_RANK_8:
            white |= 1 << (index + 7)
        if bit & _NOT_RANK_1:
            black |= 1 << (index - 9)
    if bit & _NOT_H_FILE:
        if bit & _NOT_RANK_8:
            white |= 1 << (index + 9)
        if bit & _NOT_RANK_1:
            black |= 1 << (index - 7)
    return white, black


_PAWN_ATTACKS = tuple(_attacks(index) for index in range(64))


def attack_bit_board(square: Square, white: bool) -> BitBoard:
    """Squares a pawn of the given colour on ``square`` attacks."""
    white_attacks, black_attacks = _PAWN_ATTACKS[square.index]
    return BitBoard(white_attacks if white else black_attacks)


def _promotions(from_square: Square, to_square: Square) -> Iterator[Move]:
    for flag in PROMOTIONS:
        yield Move(from_square, to_square, flag)


def generate(move_generator: Any, captures_only: bool) -> Iterator[Move]:
    """Yield the legal pawn moves.

    ``move_generator`` supplies the position's masks as attributes:
    ``white_to_move``, ``en_passant_square``, ``friendly_pawns``,
    ``friendly_king_square``, ``enemy_piece_bit_board``, ``enemy_orthogonal``,
    ``occupied_squares``, ``empty_squares``, ``check_mask``,
    ``diagonal_pin_rays`` and ``orthogonal_pin_rays``.
    """
    gen = move_generator
    white = gen.white_to_move
    diagonal_pins: BitBoard = gen.diagonal_pin_rays
    orthogonal_pins: BitBoard = gen.orthogonal_pin_rays

    promotion_rank = BitBoard.RANK_8 if white else BitBoard.RANK_1

    # Captures
    unpinned_orthogonally = gen.friendly_pawns & ~orthogonal_pins
    not_on_right_edge = BitBoard.NOT_H_FILE if white else BitBoard.NOT_A_FILE
    not_on_left_edge = BitBoard.NOT_A_FILE if white else BitBoard.NOT_H_FILE
    right_offset = -9 if white else 9
    left_offset = -7 if white else 7

    can_capture = gen.enemy_piece_bit_board & gen.check_mask
    right_sources = unpinned_orthogonally & not_on_right_edge
    left_sources = unpinned_orthogonally & not_on_left_edge
    capture_right = (right_sources << 9 if white else right_sources >> 9) & can_capture
    capture_left = (left_sources << 7 if white else left_sources >> 7) & can_capture

    for captures, offset in ((capture_right, right_offset), (capture_left, left_offset)):
        promoting = captures & promotion_rank
        plain = captures & ~promoting
        for targets, promotes in ((promoting, True), (plain, False)):
            for capture in targets.squares():
                from_square = capture.offset(offset)
                if diagonal_pins.get(from_square) and not diagonal_pins.get(capture):
                    continue
                if promotes:
                    yield from _promotions(from_square, capture)
                else:
                    yield Move(from_square, capture, Flag.NONE)

    # En passant
    en_passant_square = gen.en_passant_square
    if en_passant_square is not None:
        capture_position = en_passant_square.down(1 if white else -1)
        if gen.check_mask.get(capture_position):
            candidates = (
                gen.friendly_pawns
                & attack_bit_board(en_passant_square, not white)
                & ~orthogonal_pins
            )
            king_square = gen.friendly_king_square
            for from_square in candidates.squares():
                if diagonal_pins.get(from_square) and not diagonal_pins.get(
                    en_passant_square
                ):
                    continue
                if king_square.rank() == from_square.rank():
                    # Removing both pawns may open the rank to an enemy rook or queen.
                    occupancy = (
                        gen.occupied_squares
                        ^ from_square.bit_board()
                        ^ capture_position.bit_board()
                    )
                    unblocked = get_rook_moves(
                        king_square, occupancy & relevant_rook_blockers(king_square)
                    )
                    if unblocked.overlaps(gen.enemy_orthogonal):
                        continue
                yield Move(from_square, en_passant_square, Flag.EN_PASSANT)

    if captures_only:
        return

    one_up = 8 if white else -8
    empty: BitBoard = gen.empty_squares
    check_mask: BitBoard = gen.check_mask

    single_base = (gen.friendly_pawns & ~diagonal_pins) & (empty >> 8 if white else empty << 8)
    empty_in_mask = empty & check_mask
    double_base = (
        single_base
        & (BitBoard.RANK_2 if white else BitBoard.RANK_7)
        & (empty_in_mask >> 16 if white else empty_in_mask << 16)
    )

    single = single_base & (check_mask >> 8 if white else check_mask << 8)
    single_pinned = single & (orthogonal_pins >> 8 if white else orthogonal_pins << 8)
    single_unpinned = single & ~orthogonal_pins
    can_single_push = single_pinned | single_unpinned

    last_rank_before_promotion = BitBoard.RANK_7 if white else BitBoard.RANK_2
    push_promotions = can_single_push & last_rank_before_promotion
    plain_pushes = can_single_push & ~last_rank_before_promotion

    for from_square in plain_pushes.squares():
        yield Move(from_square, from_square.offset(one_up), Flag.NONE)
    for from_square in push_promotions.squares():
        yield from _promotions(from_square, from_square.offset(one_up))

    double_pinned = double_base & (orthogonal_pins >> 16 if white else orthogonal_pins << 16)
    double_unpinned = double_base & ~orthogonal_pins
    for from_square in (double_pinned | double_unpinned).squares():
        yield Move(from_square, from_square.offset(2 * one_up), Flag.PAWN_TWO_UP)