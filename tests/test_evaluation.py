import pytest

from encrustant.board import Board
from encrustant.evaluation import (
    END_GAME_PIECE_SQUARE_TABLES,
    MIDDLE_GAME_PIECE_SQUARE_TABLES,
    PHASES,
    calculate_score,
    evaluate,
    evaluate_with_parameters,
    get_phase,
    get_piece_value,
    raw_evaluate,
    raw_evaluate_with_parameters,
)


def test_advanced_pawn_worth_more():
    starting_rank_pawn = Board.from_fen("7k/8/8/8/8/8/4P3/K7 w - - 0 1")
    one_step_from_promoting = Board.from_fen("7k/4P3/8/8/8/8/8/K7 w - - 0 1")
    assert evaluate(one_step_from_promoting) > evaluate(starting_rank_pawn)


def test_centralised_knight_worth_more():
    centralised = Board.from_fen("7k/8/8/4n3/8/8/8/K7 b - - 0 1")
    on_the_edge = Board.from_fen("7k/8/8/8/7n/8/8/K7 b - - 0 1")
    assert evaluate(centralised) > evaluate(on_the_edge)


def test_tables_have_six_pieces_of_64_squares():
    assert get_piece_value(
        MIDDLE_GAME_PIECE_SQUARE_TABLES, END_GAME_PIECE_SQUARE_TABLES, 0, 0
    ) == (67, 49)
    assert get_piece_value(
        MIDDLE_GAME_PIECE_SQUARE_TABLES, END_GAME_PIECE_SQUARE_TABLES, 5, 63
    ) == (42, -54)
    with pytest.raises(IndexError):
        get_piece_value(
            MIDDLE_GAME_PIECE_SQUARE_TABLES, END_GAME_PIECE_SQUARE_TABLES, 6, 0
        )


def test_start_position_is_balanced():
    board = Board.from_fen(Board.START_POSITION_FEN)
    assert raw_evaluate(board) == (0, 0)
    assert evaluate(board) == 0


def test_mirrored_position_has_same_score_for_side_to_move():
    board = Board.from_fen("7k/8/8/4n3/8/8/8/K7 b - - 0 1")
    mirrored = Board.from_fen("k7/8/8/8/4N3/8/8/7K w - - 0 1")
    assert evaluate(board) == evaluate(mirrored)
    middle, end = raw_evaluate(board)
    assert raw_evaluate(mirrored) == (-middle, -end)


def test_side_to_move_flips_sign():
    white = Board.from_fen("7k/4P3/8/8/8/8/8/K7 w - - 0 1")
    black = Board.from_fen("7k/4P3/8/8/8/8/8/K7 b - - 0 1")
    assert evaluate(white) == -evaluate(black)


def test_get_piece_value_reads_both_tables():
    assert get_piece_value(
        MIDDLE_GAME_PIECE_SQUARE_TABLES, END_GAME_PIECE_SQUARE_TABLES, 0, 8
    ) == (178, 236)
    assert get_piece_value(
        MIDDLE_GAME_PIECE_SQUARE_TABLES, END_GAME_PIECE_SQUARE_TABLES, 5, 63
    ) == (42, -54)


def test_phase_of_bare_kings_is_zero():
    board = Board.from_fen("8/8/8/6k1/1K6/8/8/8 w - - 0 1")
    assert get_phase(board, PHASES) == 0


def test_start_phase_is_full_phase():
    board = Board.from_fen(Board.START_POSITION_FEN)
    full = PHASES[0] * 16 + PHASES[1] * 4 + PHASES[2] * 4 + PHASES[3] * 4 + PHASES[4] * 2
    assert get_phase(board, PHASES) == full


@pytest.mark.parametrize(
    ("phase", "total", "middle", "end", "expected"),
    [
        (0, 100, 50, 30, 30),
        (100, 100, 50, 30, 50),
        (500, 100, 50, 30, 50),
        (1, 2, -3, 0, -1),
    ],
)
def test_calculate_score(phase, total, middle, end, expected):
    assert calculate_score(phase, total, middle, end) == expected


def test_with_parameters_matches_defaults():
    board = Board.from_fen("r3k2r/8/3Q4/8/8/5q2/8/R3K2R b KQkq - 0 1")
    assert evaluate_with_parameters(
        MIDDLE_GAME_PIECE_SQUARE_TABLES, END_GAME_PIECE_SQUARE_TABLES, PHASES, board
    ) == evaluate(board)
    assert raw_evaluate_with_parameters(
        MIDDLE_GAME_PIECE_SQUARE_TABLES, END_GAME_PIECE_SQUARE_TABLES, board
    ) == raw_evaluate(board)


def test_zero_tables_give_zero_score():
    board = Board.from_fen("2k4r/pppb3p/5q2/n7/2Pp4/K2PrNP1/PP3nBP/RQb4R w - - 0 1")
    zeros = (0,) * 384
    assert raw_evaluate_with_parameters(zeros, zeros, board) == (0, 0)
    assert evaluate_with_parameters(zeros, zeros, PHASES, board) == 0