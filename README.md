# encrustant

A legal chess move generator. It reads and writes FEN, makes and takes
back moves, counts perft nodes and gives a tapered piece-square-table
evaluation. It is written in pure Python and has no dependencies.

## Installation

```
pip install .
```

To run the tests, install the test extra and then run `pytest`:

```
pip install ".[test]"
pytest
```

## Usage

### Boards and FEN

```python
from encrustant.board import Board, FenParseError

board = Board.from_fen(Board.START_POSITION_FEN)
print(board.to_fen())
print(board.is_insufficient_material())   # False

try:
    Board.from_fen("not a position")
except FenParseError as error:
    print(error.kind)
```

`FenParseError` is a subclass of `ValueError`. Its `kind` attribute is a
`FenError` member, such as `FenError.INVALID_PIECE` or
`FenError.MISSING_SIDE_TO_MOVE`, that names the faulty part of the string.

A `Board` holds one `BitBoard` for each `Piece`. The method
`board.bit_board(piece)` returns that bit board. `piece_at`,
`white_piece_at`, `black_piece_at`, `friendly_piece_at` and
`enemy_piece_at` find a piece on a square, and `copy()` returns an
independent copy of the board.

### Squares and bit boards

```python
from encrustant.square import Square
from encrustant.bitboard import BitBoard

e4 = Square.from_notation("e4")
print(e4.rank(), e4.file(), e4.flip())    # 3 4 e5

bits = BitBoard(0xFF)
print(bits.count())                       # 8
print([str(square) for square in bits.squares()])
```

`Square.from_notation` raises `ValueError` when the file or the rank is
not valid.

### Generating and playing moves

```python
from encrustant.board import Board
from encrustant.move_generator import MoveGenerator, calculate_is_in_check
from encrustant.maker import make_move, unmake_move

board = Board.from_fen("r3k2r/8/8/8/8/8/8/R3K2R w KQkq - 0 1")
for move in MoveGenerator(board).moves():
    old_state = make_move(board, move)
    print(move, board.to_fen())
    unmake_move(board, move, old_state)

print(calculate_is_in_check(board))       # False
```

`MoveGenerator.generate()` yields the moves lazily and `moves()` returns
them as a list. Either one returns only captures when `captures_only=True`
is passed. A `Move` has `from_square`, `to_square` and a `Flag` that marks
promotions, en passant, double pawn pushes and castling. `make_move`
raises `ValueError` if no piece of the side to move stands on the move's
starting square.

### Perft

```python
from encrustant.board import Board
from encrustant.perft import perft, perft_root

board = Board.from_fen("8/8/8/2k5/2pP4/8/B7/4K3 b - d3 0 3")
print(perft(board, 1))                    # 8
total = perft_root(board, 2, print)       # prints "<move>: <count>" per root move
```

### Evaluation

```python
from encrustant.board import Board
from encrustant.evaluation import evaluate, raw_evaluate

board = Board.from_fen("7k/4P3/8/8/8/8/8/K7 w - - 0 1")
print(evaluate(board))        # score for the side to move
print(raw_evaluate(board))    # (middle game, end game) totals from white's view
```

The function `evaluate_with_parameters` does the same with your own
piece-square tables and phase weights.

## What it does not do

This package is a library only. It installs no command and has no
search, so it cannot choose a best move. It also does not speak any
engine protocol to a chess GUI, and it has no clocks or time control.