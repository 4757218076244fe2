import random

import pytest

from encrustant.bitboard import BitBoard
from encrustant.slider_lookup import (
    gen_rook_or_bishop,
    get_bishop_moves,
    get_rook_moves,
    iterate_combinations,
    relevant_bishop_blockers,
    relevant_rook_blockers,
    rook_or_bishop_blockers,
)
from encrustant.square import Square


def sq(name):
    return Square.from_notation(name)


def board_of(*names):
    result = BitBoard(0)
    for name in names:
        result.set(sq(name))
    return result


def test_blocker_combinations():
    d4 = sq("d4")
    blockers = rook_or_bishop_blockers(d4, 0) | rook_or_bishop_blockers(d4, 4)
    combinations = list(iterate_combinations(blockers))
    assert len(combinations) == 1 << blockers.count()


def test_combinations_are_distinct_subsets():
    squares = board_of("a1", "c3", "h8")
    combinations = list(iterate_combinations(squares))
    assert combinations[0] == BitBoard(0)
    assert len({c.bits for c in combinations}) == 8
    assert all((c & squares) == c for c in combinations)


def test_move_lookup_slow_edge_blocker_changes_nothing():
    d4 = sq("d4")
    moves = gen_rook_or_bishop(d4, board_of("h8"), 4)
    assert moves == gen_rook_or_bishop(d4, BitBoard(0), 4)
    assert moves.count() == 13


def test_move_lookup():
    d4 = sq("d4")
    blockers = board_of("f4")
    rook_moves = get_rook_moves(d4, blockers & relevant_rook_blockers(d4))
    bishop_moves = get_bishop_moves(d4, blockers & relevant_bishop_blockers(d4))
    assert (rook_moves | bishop_moves).count() == 25


def test_rook_with_blockers_stops_on_them():
    moves = gen_rook_or_bishop(sq("a1"), board_of("a3", "c1"), 0)
    assert moves == board_of("a2", "a3", "b1", "c1")


def test_relevant_blockers_exclude_edges():
    assert relevant_rook_blockers(sq("a1")).count() == 12
    assert relevant_bishop_blockers(sq("d4")).count() == 9
    assert not relevant_rook_blockers(sq("a1")).get(sq("a8"))
    assert not relevant_rook_blockers(sq("a1")).get(sq("h1"))


def test_empty_board_rook_moves_everywhere():
    for index in range(64):
        assert get_rook_moves(Square(index), BitBoard(0)).count() == 14


@pytest.mark.parametrize("offset", [0, 4])
def test_lookup_matches_ray_generation(offset):
    rng = random.Random(1234)
    lookup = get_rook_moves if offset == 0 else get_bishop_moves
    relevant = relevant_rook_blockers if offset == 0 else relevant_bishop_blockers
    for _ in range(300):
        square = Square(rng.randrange(64))
        occupancy = BitBoard(rng.getrandbits(64))
        expected = gen_rook_or_bishop(square, occupancy, offset)
        assert lookup(square, occupancy & relevant(square)) == expected


def test_moves_never_include_own_square():
    for index in range(64):
        square = Square(index)
        assert not get_rook_moves(square, BitBoard(0)).get(square)
        assert not get_bishop_moves(square, BitBoard(0)).get(square)


def test_bad_direction_offset():
    with pytest.raises(ValueError):
        rook_or_bishop_blockers(sq("d4"), 2)
    with pytest.raises(ValueError):
        gen_rook_or_bishop(sq("d4"), BitBoard(0), 1)