"""Static evaluation from tapered piece-square tables."""

from __future__ import annotations

from typing import Sequence

from encrustant.board import Board
from encrustant.piece import BLACK_PIECES, WHITE_PIECES, Piece

# (middle game, end game) value pairs, laid out per piece type (pawn, knight,
# bishop, rook, queen, king), 64 squares each, from black's point of view:
# index 0 is a8, index 63 is h1.
# fmt: off
_PIECE_SQUARE_PAIRS: tuple[tuple[int, int], ...] = (
    # Pawn
    (67, 49), (15, 16), (-2, 6), (0, 12), (-3, 3), (1, -3), (4, 13), (-4, -3),
    (178, 236), (196, 228), (170, 231), (188, 190), (177, 185), (163, 193), (93, 236), (68, 248),
    (78, 195), (93, 200), (121, 171), (127, 150), (127, 145), (151, 130), (130, 173), (91, 170),
    (59, 133), (81, 124), (83, 106), (85, 97), (107, 88), (98, 92), (104, 108), (81, 109),
    (48, 109), (73, 108), (71, 92), (87, 90), (87, 87), (80, 88), (90, 98), (68, 91),
    (46, 104), (69, 106), (67, 91), (68, 102), (84, 95), (73, 92), (105, 96), (75, 88),
    (46, 110), (69, 111), (64, 98), (52, 106), (73, 110), (89, 97), (114, 95), (67, 90),
    (53, 43), (24, 12), (17, 4), (-10, 7), (0, 12), (7, -5), (10, 2), (-2, 2),
    # Knight
    (141, 222), (206, 262), (255, 278), (286, 269), (309, 274), (253, 255), (223, 265), (186, 205),
    (282, 261), (303, 278), (332, 281), (352, 279), (339, 271), (392, 263), (306, 272), (324, 245),
    (301, 274), (340, 283), (359, 297), (372, 296), (406, 284), (411, 277), (363, 274), (333, 259),
    (300, 281), (314, 299), (340, 309), (361, 310), (343, 312), (370, 304), (326, 297), (335, 272),
    (286, 282), (302, 291), (318, 311), (319, 312), (329, 314), (324, 305), (324, 290), (298, 272),
    (266, 269), (290, 283), (303, 294), (309, 305), (321, 302), (308, 291), (313, 279), (284, 268),
    (254, 260), (266, 275), (283, 280), (295, 284), (296, 285), (300, 278), (285, 266), (283, 269),
    (212, 252), (263, 241), (251, 268), (266, 271), (271, 271), (285, 259), (265, 249), (242, 243),
    # Bishop
    (285, 298), (285, 300), (304, 296), (262, 310), (265, 306), (277, 297), (311, 289), (269, 291),
    (320, 280), (349, 295), (343, 298), (331, 298), (358, 290), (355, 291), (348, 297), (335, 275),
    (334, 304), (360, 297), (362, 306), (386, 294), (375, 299), (403, 301), (380, 295), (366, 295),
    (325, 301), (342, 313), (364, 307), (377, 317), (374, 310), (369, 309), (343, 311), (328, 299),
    (322, 295), (335, 310), (342, 317), (363, 311), (360, 312), (343, 313), (337, 307), (330, 285),
    (332, 295), (340, 302), (340, 310), (342, 311), (343, 315), (339, 309), (341, 296), (346, 283),
    (335, 289), (334, 293), (347, 287), (324, 302), (332, 304), (347, 290), (352, 295), (339, 271),
    (314, 272), (335, 285), (314, 275), (309, 291), (313, 287), (310, 290), (338, 274), (324, 261),
    # Rook
    (496, 513), (491, 518), (496, 527), (502, 524), (520, 514), (533, 506), (521, 507), (539, 501),
    (484, 511), (485, 521), (503, 524), (525, 514), (508, 517), (536, 505), (521, 503), (554, 488),
    (463, 513), (482, 516), (486, 516), (489, 514), (517, 502), (517, 498), (549, 492), (530, 487),
    (446, 516), (459, 515), (465, 520), (472, 516), (476, 504), (476, 500), (482, 498), (486, 493),
    (429, 507), (429, 514), (441, 513), (452, 513), (452, 508), (437, 507), (459, 496), (451, 492),
    (421, 503), (431, 502), (438, 503), (440, 505), (445, 500), (441, 494), (476, 473), (453, 477),
    (419, 498), (431, 500), (447, 499), (443, 501), (448, 493), (450, 488), (465, 482), (431, 491),
    (440, 486), (442, 496), (452, 502), (457, 501), (460, 494), (449, 491), (462, 489), (433, 486),
    # Queen
    (868, 958), (883, 967), (918, 975), (951, 964), (953, 962), (958, 953), (967, 920), (919, 944),
    (907, 923), (891, 958), (901, 988), (900, 1000), (910, 1012), (940, 981), (920, 967), (964, 940),
    (912, 930), (910, 946), (911, 986), (927, 987), (937, 993), (975, 979), (975, 943), (973, 932),
    (898, 935), (902, 959), (909, 969), (906, 995), (914, 1000), (926, 987), (924, 975), (929, 952),
    (902, 926), (898, 960), (899, 967), (909, 983), (908, 978), (906, 974), (919, 951), (921, 941),
    (898, 920), (907, 931), (903, 953), (901, 951), (905, 953), (912, 943), (924, 926), (917, 917),
    (897, 918), (903, 915), (914, 909), (913, 919), (912, 921), (922, 897), (925, 876), (936, 851),
    (901, 904), (886, 912), (893, 914), (908, 900), (900, 912), (890, 909), (905, 892), (901, 891),
    # King
    (-15, -66), (-6, -32), (16, -21), (-49, 13), (-12, -2), (25, 1), (58, 1), (47, -72),
    (-58, 0), (-23, 27), (-50, 36), (26, 23), (1, 39), (1, 50), (37, 42), (11, 16),
    (-75, 17), (13, 32), (-37, 48), (-34, 54), (-19, 58), (32, 55), (20, 54), (-8, 26),
    (-69, 10), (-55, 37), (-73, 54), (-96, 63), (-79, 62), (-64, 61), (-69, 54), (-102, 33),
    (-67, -1), (-59, 24), (-93, 48), (-112, 60), (-106, 59), (-80, 48), (-86, 39), (-113, 24),
    (-28, -10), (-13, 11), (-68, 30), (-75, 41), (-67, 39), (-70, 33), (-35, 18), (-52, 8),
    (48, -26), (8, -2), (-4, 8), (-38, 18), (-39, 22), (-24, 15), (20, 0), (27, -16),
    (39, -54), (66, -39), (39, -22), (-61, -5), (2, -27), (-36, -6), (40, -26), (42, -54),
)
# fmt: on

MIDDLE_GAME_PIECE_SQUARE_TABLES: tuple[int, ...] = tuple(
    middle for middle, _ in _PIECE_SQUARE_PAIRS
)
END_GAME_PIECE_SQUARE_TABLES: tuple[int, ...] = tuple(
    end for _, end in _PIECE_SQUARE_PAIRS
)

PHASES: tuple[int, ...] = (0, 100, 100, 200, 400)

_PHASE_PAIRS = (
    (Piece.WHITE_PAWN, Piece.BLACK_PAWN),
    (Piece.WHITE_KNIGHT, Piece.BLACK_KNIGHT),
    (Piece.WHITE_BISHOP, Piece.BLACK_BISHOP),
    (Piece.WHITE_ROOK, Piece.BLACK_ROOK),
    (Piece.WHITE_QUEEN, Piece.BLACK_QUEEN),
)

# Starting number of each piece type, matching the order of the phases.
_STARTING_COUNTS = (16, 4, 4, 4, 2)


def _truncating_div(numerator: int, denominator: int) -> int:
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator < 0) == (denominator < 0) else -quotient


def get_phase(board: Board, phases: Sequence[int]) -> int:
    """Weighted count of the non-king material on the board."""
    return sum(
        weight * (board.bit_board(white) | board.bit_board(black)).count()
        for weight, (white, black) in zip(phases, _PHASE_PAIRS)
    )


def get_piece_value(
    middle_game_tables: Sequence[int],
    end_game_tables: Sequence[int],
    piece_index: int,
    square_index: int,
) -> tuple[int, int]:
    """Middle game and end game value of a piece type on a table square."""
    index = piece_index * 64 + square_index
    return middle_game_tables[index], end_game_tables[index]


def calculate_score(
    phase: int, total_phase: int, middle_game_score: int, end_game_score: int
) -> int:
    """Blend the two scores by how much material is left."""
    middle_game_phase = min(phase, total_phase)
    end_game_phase = total_phase - middle_game_phase
    return _truncating_div(
        middle_game_score * middle_game_phase + end_game_score * end_game_phase,
        total_phase,
    )


def raw_evaluate_with_parameters(
    middle_game_tables: Sequence[int], end_game_tables: Sequence[int], board: Board
) -> tuple[int, int]:
    """Middle game and end game material and placement totals, from white's view."""
    middle_game_total = 0
    end_game_total = 0

    for piece in WHITE_PIECES:
        for square in board.bit_board(piece).squares():
            middle, end = get_piece_value(
                middle_game_tables, end_game_tables, piece.value, square.flip().index
            )
            middle_game_total += middle
            end_game_total += end

    for piece in BLACK_PIECES:
        for square in board.bit_board(piece).squares():
            middle, end = get_piece_value(
                middle_game_tables, end_game_tables, piece.value - 6, square.index
            )
            middle_game_total -= middle
            end_game_total -= end

    return middle_game_total, end_game_total


def evaluate_with_parameters(
    middle_game_tables: Sequence[int],
    end_game_tables: Sequence[int],
    phases: Sequence[int],
    board: Board,
) -> int:
    """Score of the position for the side to move, using the given parameters."""
    total_phase = sum(weight * count for weight, count in zip(phases, _STARTING_COUNTS))
    middle_game_total, end_game_total = raw_evaluate_with_parameters(
        middle_game_tables, end_game_tables, board
    )
    phase = get_phase(board, phases)
    score = calculate_score(phase, total_phase, middle_game_total, end_game_total)
    return score if board.white_to_move else -score


def evaluate(board: Board) -> int:
    """Score of the position for the side to move."""
    return evaluate_with_parameters(
        MIDDLE_GAME_PIECE_SQUARE_TABLES, END_GAME_PIECE_SQUARE_TABLES, PHASES, board
    )


def raw_evaluate(board: Board) -> tuple[int, int]:
    """Middle game and end game totals from white's view with the built-in tables."""
    return raw_evaluate_with_parameters(
        MIDDLE_GAME_PIECE_SQUARE_TABLES, END_GAME_PIECE_SQUARE_TABLES, board
    )