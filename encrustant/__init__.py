"""Chess boards and FEN, legal move generation, make/unmake, perft and evaluation."""

__version__ = "0.1.0"