"""Chess position model for variant boards with custom pieces, Zobrist hashing and a transposition table."""

__version__ = "0.1.0"