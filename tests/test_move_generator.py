import pytest

from encrustant.board import Board
from encrustant.move_data import Flag, Move
from encrustant.move_generator import MoveGenerator, calculate_is_in_check
from encrustant.square import Square

DEPTH_ONE = [
    (21, "2k4r/pppb3p/5q2/n7/2Pp4/K2PrNP1/PP3nBP/RQb4R w - - 0 1"),
    (8, "r6r/1b2k1bq/8/8/7B/8/8/R3K2R b KQ - 3 2"),
    (8, "8/8/8/2k5/2pP4/8/B7/4K3 b - d3 0 3"),
    (19, "r1bqkbnr/pppppppp/n7/8/8/P7/1PPPPPPP/RNBQKBNR w KQkq - 2 2"),
    (5, "r3k2r/p1pp1pb1/bn2Qnp1/2qPN3/1p2P3/2N5/PPPBBPPP/R3K2R b KQkq - 3 2"),
    (44, "2kr3r/p1ppqpb1/bn2Qnp1/3PN3/1p2P3/2N5/PPPBBPPP/R3K2R b KQ - 3 2"),
    (39, "rnb2k1r/pp1Pbppp/2p5/q7/2B5/8/PPPQNnPP/RNB1K2R w KQ - 3 9"),
    (9, "2r5/3pk3/8/2P5/8/2K5/8/8 w - - 5 4"),
]

ALL_FENS = [fen for _, fen in DEPTH_ONE] + [
    Board.START_POSITION_FEN,
    "r3k2r/1b4bq/8/8/8/8/7B/R3K2R w KQkq - 0 1",
    "r3k2r/8/3Q4/8/8/5q2/8/R3K2R b KQkq - 0 1",
    "8/8/1k6/2b5/2pP4/8/5K2/8 b - d3 0 1",
]


def sq(notation):
    return Square.from_notation(notation)


@pytest.mark.parametrize("expected, fen", DEPTH_ONE)
def test_depth_one_move_counts(expected, fen):
    assert len(MoveGenerator(Board.from_fen(fen)).moves()) == expected


@pytest.mark.parametrize("fen", ALL_FENS)
def test_moves_are_unique(fen):
    moves = MoveGenerator(Board.from_fen(fen)).moves()
    assert len(set(moves)) == len(moves)


@pytest.mark.parametrize("fen", ALL_FENS)
def test_captures_are_subset_of_all_moves(fen):
    board = Board.from_fen(fen)
    generator = MoveGenerator(board)
    all_moves = set(generator.moves(False))
    captures = generator.moves(True)
    assert set(captures) <= all_moves
    for move in captures:
        assert (
            board.enemy_piece_at(move.to_square) is not None
            or move.flag is Flag.EN_PASSANT
        )


@pytest.mark.parametrize("fen", ALL_FENS)
def test_moves_start_on_friendly_pieces(fen):
    board = Board.from_fen(fen)
    for move in MoveGenerator(board).generate():
        assert board.friendly_piece_at(move.from_square) is not None
        assert board.friendly_piece_at(move.to_square) is None


@pytest.mark.parametrize("fen", ALL_FENS)
def test_check_function_agrees_with_generator(fen):
    board = Board.from_fen(fen)
    assert calculate_is_in_check(board) == MoveGenerator(board).is_in_check


def test_start_position_has_no_captures_and_no_check():
    board = Board.from_fen(Board.START_POSITION_FEN)
    generator = MoveGenerator(board)
    assert generator.moves(True) == []
    assert calculate_is_in_check(board) is False


def test_castling_both_sides():
    board = Board.from_fen("r3k2r/8/8/8/8/8/8/R3K2R w KQkq - 0 1")
    castles = {m for m in MoveGenerator(board).moves() if m.flag is Flag.CASTLE}
    assert castles == {
        Move(sq("e1"), sq("g1"), Flag.CASTLE),
        Move(sq("e1"), sq("c1"), Flag.CASTLE),
    }


def test_no_castling_in_check():
    board = Board.from_fen("r6r/1b2k1bq/8/8/7B/8/8/R3K2R b KQ - 3 2")
    generator = MoveGenerator(board)
    assert generator.is_in_check is True
    assert all(m.flag is not Flag.CASTLE for m in generator.moves())


def test_en_passant_captures_checking_pawn():
    board = Board.from_fen("8/8/8/2k5/2pP4/8/B7/4K3 b - d3 0 3")
    moves = MoveGenerator(board).moves()
    assert Move(sq("c4"), sq("d3"), Flag.EN_PASSANT) in moves


def test_double_check_only_king_moves():
    board = Board.from_fen("4k3/8/8/8/8/8/4r3/4K2r w - - 0 1")
    generator = MoveGenerator(board)
    assert generator.is_in_check is True
    moves = generator.moves()
    assert moves
    assert all(m.from_square == sq("e1") for m in moves)


def test_pinned_rook_stays_on_file():
    board = Board.from_fen("4k3/4r3/8/8/8/8/4R3/4K3 w - - 0 1")
    rook_moves = [m for m in MoveGenerator(board).moves() if m.from_square == sq("e2")]
    assert rook_moves
    assert all(m.to_square.file() == sq("e2").file() for m in rook_moves)
    assert Move(sq("e2"), sq("e7"), Flag.NONE) in rook_moves


def test_friendly_pieces_matches_board():
    board = Board.from_fen(Board.START_POSITION_FEN)
    generator = MoveGenerator(board)
    assert generator.friendly_pieces.count() == 16
    assert generator.enemy_piece_bit_board.count() == 16
    assert not generator.friendly_pieces.overlaps(generator.enemy_piece_bit_board)


def test_generate_does_not_change_board():
    board = Board.from_fen(DEPTH_ONE[0][1])
    before = board.to_fen()
    MoveGenerator(board).moves()
    assert board.to_fen() == before