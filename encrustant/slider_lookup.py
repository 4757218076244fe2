"""Rook and bishop move lookup."""

from __future__ import annotations

from functools import lru_cache
from typing import Iterator

from encrustant.bitboard import BitBoard
from encrustant.precomputed import SQUARES_FROM_EDGE
from encrustant.square import DIRECTIONS, Square

ROOK_DIRECTIONS = 0
BISHOP_DIRECTIONS = 4


def _rays(index: int) -> tuple[int, ...]:
    rays = []
    for direction, distance in zip(DIRECTIONS, SQUARES_FROM_EDGE[index]):
        bits = 0
        for step in range(1, distance + 1):
            bits |= 1 << (index + direction * step)
        rays.append(bits)
    return tuple(rays)


# Index 64 holds empty rays; it is reached when a ray has no blocker.
_ALL_RAYS: tuple[tuple[int, ...], ...] = tuple(_rays(index) for index in range(64)) + (
    (0,) * len(DIRECTIONS),
)


def _check_offset(direction_offset: int) -> None:
    if direction_offset not in (ROOK_DIRECTIONS, BISHOP_DIRECTIONS):
        raise ValueError("direction offset must be 0 (rook) or 4 (bishop)")


def iterate_combinations(squares: BitBoard) -> Iterator[BitBoard]:
    """Yield every subset of ``squares``, starting with the empty set."""
    subset = BitBoard(0)
    while True:
        yield subset
        subset = subset.carry_rippler(squares)
        if subset.is_empty():
            return


def _blocker_bits(index: int, direction_offset: int) -> int:
    edges = SQUARES_FROM_EDGE[index]
    rays = _ALL_RAYS[index]
    bits = 0
    for direction in range(direction_offset, direction_offset + 4):
        edge_square = index + DIRECTIONS[direction] * edges[direction]
        bits |= rays[direction] & ~(1 << edge_square)
    return bits


def rook_or_bishop_blockers(square: Square, direction_offset: int) -> BitBoard:
    """Squares that can block a rook (offset 0) or bishop (offset 4), edges excluded."""
    _check_offset(direction_offset)
    return BitBoard(_blocker_bits(square.index, direction_offset))


def _slide(index: int, blockers: int, direction_offset: int) -> int:
    rays = _ALL_RAYS[index]
    moves = 0
    for direction in (direction_offset, direction_offset + 1):
        ray = rays[direction]
        blocker = ray & blockers
        first = (blocker & -blocker).bit_length() - 1 if blocker else 64
        moves |= ray ^ _ALL_RAYS[first][direction]
    for direction in (direction_offset + 2, direction_offset + 3):
        ray = rays[direction]
        blocker = (ray & blockers) | 1
        last = blocker.bit_length() - 1
        moves |= ray ^ _ALL_RAYS[last][direction]
    return moves


def gen_rook_or_bishop(square: Square, blockers: BitBoard, direction_offset: int) -> BitBoard:
    """Rook (offset 0) or bishop (offset 4) moves worked out ray by ray."""
    _check_offset(direction_offset)
    return BitBoard(_slide(square.index, blockers.bits, direction_offset))


_RELEVANT_ROOK_BLOCKERS = tuple(_blocker_bits(index, ROOK_DIRECTIONS) for index in range(64))
_RELEVANT_BISHOP_BLOCKERS = tuple(
    _blocker_bits(index, BISHOP_DIRECTIONS) for index in range(64)
)


def relevant_rook_blockers(square: Square) -> BitBoard:
    """Squares that matter for rook moves from ``square``."""
    return BitBoard(_RELEVANT_ROOK_BLOCKERS[square.index])


def relevant_bishop_blockers(square: Square) -> BitBoard:
    """Squares that matter for bishop moves from ``square``."""
    return BitBoard(_RELEVANT_BISHOP_BLOCKERS[square.index])


@lru_cache(maxsize=None)
def _lookup(index: int, blockers: int, direction_offset: int) -> int:
    return _slide(index, blockers, direction_offset)


def get_rook_moves(square: Square, relevant_blockers: BitBoard) -> BitBoard:
    """Rook moves from ``square`` given the relevant blockers."""
    index = square.index
    bits = relevant_blockers.bits & _RELEVANT_ROOK_BLOCKERS[index]
    return BitBoard(_lookup(index, bits, ROOK_DIRECTIONS))


def get_bishop_moves(square: Square, relevant_blockers: BitBoard) -> BitBoard:
    """Bishop moves from ``square`` given the relevant blockers."""
    index = square.index
    bits = relevant_blockers.bits & _RELEVANT_BISHOP_BLOCKERS[index]
    return BitBoard(_lookup(index, bits, BISHOP_DIRECTIONS))