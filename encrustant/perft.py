"""Perft: counting the leaf nodes of the legal move tree."""

from __future__ import annotations

from typing import Callable

from encrustant.board import Board
from encrustant.maker import make_move, unmake_move
from encrustant.move_data import Flag, Move
from encrustant.move_generator import MoveGenerator

_PROMOTION_LETTERS = {
    Flag.QUEEN_PROMOTION: "q",
    Flag.ROOK_PROMOTION: "r",
    Flag.BISHOP_PROMOTION: "b",
    Flag.KNIGHT_PROMOTION: "n",
}


def _encode_move(move: Move) -> str:
    return (
        move.from_square.to_notation()
        + move.to_square.to_notation()
        + _PROMOTION_LETTERS.get(move.flag, "")
    )


def perft(board: Board, depth: int) -> int:
    """Number of move sequences of length ``depth`` from ``board``."""
    if depth < 0:
        raise ValueError("depth must not be negative")
    if depth == 0:
        return 1

    moves = MoveGenerator(board).moves()
    if depth == 1:
        return len(moves)

    total = 0
    for move in moves:
        old_state = make_move(board, move)
        total += perft(board, depth - 1)
        unmake_move(board, move, old_state)
    return total


def perft_root(
    board: Board, depth: int, log: Callable[[str], None] | None = None
) -> int:
    """Count leaf nodes at ``depth``, reporting each root move's count to ``log``."""
    if depth < 1:
        raise ValueError("depth must be at least 1")

    total = 0
    for move in MoveGenerator(board).moves():
        if depth == 1:
            inner = 1
        else:
            old_state = make_move(board, move)
            inner = perft(board, depth - 1)
            unmake_move(board, move, old_state)
        total += inner
        if log is not None:
            log(f"{_encode_move(move)}: {inner}")
    return total