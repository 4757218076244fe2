import pytest

from encrustant.board import Board
from encrustant.perft import perft, perft_root

CASES = [
    (1, 21, "2k4r/pppb3p/5q2/n7/2Pp4/K2PrNP1/PP3nBP/RQb4R w - - 0 1"),
    (1, 8, "r6r/1b2k1bq/8/8/7B/8/8/R3K2R b KQ - 3 2"),
    (1, 8, "8/8/8/2k5/2pP4/8/B7/4K3 b - d3 0 3"),
    (1, 19, "r1bqkbnr/pppppppp/n7/8/8/P7/1PPPPPPP/RNBQKBNR w KQkq - 2 2"),
    (1, 5, "r3k2r/p1pp1pb1/bn2Qnp1/2qPN3/1p2P3/2N5/PPPBBPPP/R3K2R b KQkq - 3 2"),
    (1, 44, "2kr3r/p1ppqpb1/bn2Qnp1/3PN3/1p2P3/2N5/PPPBBPPP/R3K2R b KQ - 3 2"),
    (1, 39, "rnb2k1r/pp1Pbppp/2p5/q7/2B5/8/PPPQNnPP/RNB1K2R w KQ - 3 9"),
    (1, 9, "2r5/3pk3/8/2P5/8/2K5/8/8 w - - 5 4"),
    (3, 62379, "rnbq1k1r/pp1Pbppp/2p5/8/2B5/8/PPP1NnPP/RNBQK2R w KQ - 1 8"),
    (
        3,
        89890,
        "r4rk1/1pp1qppp/p1np1n2/2b1p1B1/2B1P1b1/P1NP1N2/1PP1QPPP/R4RK1 w - - 0 10",
    ),
    (6, 2217, "K1k5/8/P7/8/8/8/8/8 w - - 0 1"),
    (4, 23527, "8/8/2k5/5q2/5n2/8/5K2/8 b - - 0 1"),
]


@pytest.mark.parametrize("depth, expected, fen", CASES)
def test_perft_root_counts(depth, expected, fen):
    board = Board.from_fen(fen)
    lines = []
    assert perft_root(board, depth, lines.append) == expected
    assert sum(int(line.rsplit(": ", 1)[1]) for line in lines) == expected
    assert board.to_fen() == fen


@pytest.mark.parametrize("depth, expected, fen", CASES[:8])
def test_perft_matches_root(depth, expected, fen):
    board = Board.from_fen(fen)
    assert perft(board, depth) == expected


def test_perft_root_logs_one_line_per_move():
    fen = "2r5/3pk3/8/2P5/8/2K5/8/8 w - - 5 4"
    lines = []
    perft_root(Board.from_fen(fen), 1, lines.append)
    assert len(lines) == 9
    assert all(line.endswith(": 1") for line in lines)
    assert len(set(lines)) == 9


def test_perft_depth_zero_is_one():
    assert perft(Board.from_fen(Board.START_POSITION_FEN), 0) == 1


def test_perft_root_without_log():
    board = Board.from_fen("8/8/8/2k5/2pP4/8/B7/4K3 b - d3 0 3")
    assert perft_root(board, 1) == 8


def test_perft_root_rejects_depth_zero():
    with pytest.raises(ValueError):
        perft_root(Board.from_fen(Board.START_POSITION_FEN), 0)


def test_perft_rejects_negative_depth():
    with pytest.raises(ValueError):
        perft(Board.from_fen(Board.START_POSITION_FEN), -1)