"""Conversion of board coordinates to rank-file notation."""


def to_rank_file(x: int, y: int) -> str:
    """Return the rank-file name of square (x, y), e.g. (0, 1) -> "A2"."""
    return f"{chr(x + 65)}{y + 1}"