"""Making and taking back moves on a board."""

from __future__ import annotations

from dataclasses import replace

from encrustant.board import Board
from encrustant.game_state import CastlingRights, GameState
from encrustant.move_data import Flag, Move
from encrustant.piece import Piece
from encrustant.square import Square

_WHITE_RIGHTS = CastlingRights.WHITE_KING_SIDE | CastlingRights.WHITE_QUEEN_SIDE
_BLACK_RIGHTS = CastlingRights.BLACK_KING_SIDE | CastlingRights.BLACK_QUEEN_SIDE

# Rook corners and the right that is lost when a piece leaves or lands on them.
_CORNER_RIGHTS = (
    (Square(0), CastlingRights.WHITE_QUEEN_SIDE),
    (Square(7), CastlingRights.WHITE_KING_SIDE),
    (Square(56), CastlingRights.BLACK_QUEEN_SIDE),
    (Square(63), CastlingRights.BLACK_KING_SIDE),
)

_PROMOTIONS = frozenset(
    (
        Flag.QUEEN_PROMOTION,
        Flag.ROOK_PROMOTION,
        Flag.BISHOP_PROMOTION,
        Flag.KNIGHT_PROMOTION,
    )
)


def _without(rights: CastlingRights, removed: CastlingRights) -> CastlingRights:
    return CastlingRights(int(rights) & ~int(removed) & 0xF)


def _rook_squares(king_to: Square) -> tuple[Square, Square]:
    """Where the castling rook starts and ends for a king landing on ``king_to``."""
    if king_to.file() == 6:
        return king_to.offset(1), king_to.offset(-1)
    return king_to.offset(-2), king_to.offset(1)


def make_move(board: Board, move: Move) -> GameState:
    """Play ``move`` on ``board`` and return the state needed to take it back.

    Raises ``ValueError`` if no piece of the side to move stands on the
    move's starting square, or if an en passant move is made without an
    en passant square.
    """
    old_state = replace(board.game_state)
    state = board.game_state
    white = board.white_to_move

    piece = board.friendly_piece_at(move.from_square)
    if piece is None:
        raise ValueError(f"no piece of the side to move on {move.from_square}")

    if piece is Piece.WHITE_KING:
        state.castling_rights = _without(state.castling_rights, _WHITE_RIGHTS)
    elif piece is Piece.BLACK_KING:
        state.castling_rights = _without(state.castling_rights, _BLACK_RIGHTS)
    else:
        for corner, right in _CORNER_RIGHTS:
            if move.from_square == corner or move.to_square == corner:
                state.castling_rights = _without(state.castling_rights, right)

    flag = move.flag
    promotion_piece = flag.promotion_piece(white)
    moving = board.bit_board(piece)
    if promotion_piece is not None:
        moving.toggle(move.from_square)
        board.bit_board(promotion_piece).set(move.to_square)
    else:
        moving.toggle_two(move.from_square, move.to_square)

    en_passant_square = state.en_passant_square
    state.en_passant_square = None
    forward = 1 if white else -1

    if flag is Flag.PAWN_TWO_UP:
        state.en_passant_square = move.from_square.up(forward)
        state.captured = None
    elif flag is Flag.CASTLE:
        rook = Piece.WHITE_ROOK if white else Piece.BLACK_ROOK
        rook_from, rook_to = _rook_squares(move.to_square)
        board.bit_board(rook).toggle_two(rook_from, rook_to)
    elif flag is Flag.EN_PASSANT:
        if en_passant_square is None:
            raise ValueError("en passant move without an en passant square")
        captured = Piece.BLACK_PAWN if white else Piece.WHITE_PAWN
        state.captured = captured
        board.bit_board(captured).toggle(en_passant_square.down(forward))
    else:
        state.captured = board.enemy_piece_at(move.to_square)
        if state.captured is not None:
            board.bit_board(state.captured).toggle(move.to_square)

    board.white_to_move = not white
    return old_state


def unmake_move(board: Board, move: Move, old_state: GameState) -> None:
    """Take back ``move``, restoring the state returned by ``make_move``."""
    capture = board.game_state.captured
    board.game_state = replace(old_state)

    white = not board.white_to_move
    board.white_to_move = white

    flag = move.flag
    pawn = Piece.WHITE_PAWN if white else Piece.BLACK_PAWN

    if flag is Flag.NONE:
        piece = board.friendly_piece_at(move.to_square)
        if piece is None:
            raise ValueError(f"no piece of the moving side on {move.to_square}")
        board.bit_board(piece).toggle_two(move.from_square, move.to_square)
        if capture is not None:
            board.bit_board(capture).set(move.to_square)
    elif flag is Flag.PAWN_TWO_UP:
        board.bit_board(pawn).toggle_two(move.from_square, move.to_square)
    elif flag in _PROMOTIONS:
        board.bit_board(pawn).set(move.from_square)
        promoted = flag.promotion_piece(white)
        assert promoted is not None
        board.bit_board(promoted).toggle(move.to_square)
        if capture is not None:
            board.bit_board(capture).set(move.to_square)
    elif flag is Flag.EN_PASSANT:
        en_passant_square = board.game_state.en_passant_square
        if en_passant_square is None or capture is None:
            raise ValueError("en passant move cannot be taken back from this state")
        capture_position = en_passant_square.down(1 if white else -1)
        board.bit_board(capture).set(capture_position)
        board.bit_board(pawn).toggle_two(move.from_square, move.to_square)
    elif flag is Flag.CASTLE:
        rook = Piece.WHITE_ROOK if white else Piece.BLACK_ROOK
        king = Piece.WHITE_KING if white else Piece.BLACK_KING
        rook_from, rook_to = _rook_squares(move.to_square)
        board.bit_board(rook).toggle_two(rook_from, rook_to)
        board.bit_board(king).toggle_two(move.from_square, move.to_square)