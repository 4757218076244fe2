"""Precomputed attack and ray tables."""

from __future__ import annotations

from encrustant.bitboard import BitBoard
from encrustant.square import Square

_MASK = (1 << 64) - 1
_NOT_H_FILE = 0x7F7F_7F7F_7F7F_7F7F
_NOT_A_FILE = 0xFEFE_FEFE_FEFE_FEFE
_NOT_GH_FILES = 0x3F3F_3F3F_3F3F_3F3F
_NOT_AB_FILES = 0xFCFC_FCFC_FCFC_FCFC


def _squares_from_edge(index: int) -> tuple[int, ...]:
    rank, file = index >> 3, index & 7
    return (
        7 - file,
        7 - rank,
        file,
        rank,
        min(7 - rank, file),
        min(7 - rank, 7 - file),
        min(rank, file),
        min(rank, 7 - file),
    )


def _knight_bits(index: int) -> int:
    knight = 1 << index
    left_1 = (knight >> 1) & _NOT_H_FILE
    left_2 = (knight >> 2) & _NOT_GH_FILES
    right_1 = (knight << 1) & _NOT_A_FILE
    right_2 = (knight << 2) & _NOT_AB_FILES
    one = left_1 | right_1
    two = left_2 | right_2
    return ((one << 16) | (one >> 16) | (two << 8) | (two >> 8)) & _MASK


def _king_bits(index: int) -> int:
    bit = 1 << index
    left = (bit & _NOT_H_FILE) << 1
    right = (bit & _NOT_A_FILE) >> 1
    sideways = left | right
    row = sideways | bit
    return (sideways | (row >> 8) | (row << 8)) & _MASK


def _ray_between(source: int, target: int) -> int:
    a2a7 = 0x0001010101010100
    b2g7 = 0x0040201008040200
    h1b7 = 0x0002040810204080

    between = ((_MASK << source) ^ (_MASK << target)) & _MASK
    file = (target & 7) - (source & 7)
    rank = (((target | 7) - source) & _MASK) >> 3
    line = (((file & 7) - 1) & _MASK) & a2a7
    line += 2 * ((((rank & 7) - 1) & _MASK) >> 58)
    line += (((rank - file) & 15) - 1) & _MASK & b2g7
    line += (((rank + file) & 15) - 1) & _MASK & h1b7
    line = (line * (between & -between)) & _MASK
    return (line & between) | (1 << target)


SQUARES_FROM_EDGE: tuple[tuple[int, ...], ...] = tuple(
    _squares_from_edge(index) for index in range(64)
)
_KNIGHT_MOVES = tuple(_knight_bits(index) for index in range(64))
_KING_MOVES = tuple(_king_bits(index) for index in range(64))
_BETWEEN_RAYS = tuple(
    tuple(_ray_between(source, target) for target in range(64)) for source in range(64)
)


def squares_from_edge(square: Square) -> tuple[int, ...]:
    """Distance to the edge in each of the eight directions, in ``DIRECTIONS`` order."""
    return SQUARES_FROM_EDGE[square.index]


def knight_attacks(square: Square) -> BitBoard:
    """Squares a knight on ``square`` attacks."""
    return BitBoard(_KNIGHT_MOVES[square.index])


def king_attacks(square: Square) -> BitBoard:
    """Squares a king on ``square`` attacks."""
    return BitBoard(_KING_MOVES[square.index])


def get_between_rays(from_square: Square, to_square: Square) -> BitBoard:
    """Squares strictly between the two, plus ``to_square``; just ``to_square``
    when they share no line."""
    return BitBoard(_BETWEEN_RAYS[from_square.index][to_square.index])