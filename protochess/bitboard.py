"""256-bit bitboards over a 16x16 grid, stored as plain integers."""

from collections.abc import Iterator

Bitboard = int

BOARD_BITS = 256
ROW_WIDTH = 16


def to_index(x: int, y: int) -> int:
    """Return the bit index of square (x, y)."""
    return ROW_WIDTH * y + x


def from_index(index: int) -> tuple[int, int]:
    """Return the (x, y) square of a bit index."""
    index %= BOARD_BITS
    return index % ROW_WIDTH, index // ROW_WIDTH


def _check_index(index: int) -> None:
    if not 0 <= index < BOARD_BITS:
        raise IndexError(f"bit index {index} outside 0..{BOARD_BITS - 1}")


def bit(bitboard: Bitboard, index: int) -> bool:
    """Return whether the bit at index is set."""
    _check_index(index)
    return bool((bitboard >> index) & 1)


def set_bit(bitboard: Bitboard, index: int, value: bool) -> Bitboard:
    """Return a copy of bitboard with the bit at index set to value."""
    _check_index(index)
    if value:
        return bitboard | (1 << index)
    return bitboard & ~(1 << index)


def iter_bits(bitboard: Bitboard) -> Iterator[int]:
    """Yield the indices of set bits, lowest first."""
    while bitboard:
        lowest = bitboard & -bitboard
        yield lowest.bit_length() - 1
        bitboard ^= lowest


def to_string(bitboard: Bitboard) -> str:
    """Render the bitboard as a 16x16 grid, top row first."""
    rows = []
    for y in reversed(range(ROW_WIDTH)):
        cells = "".join(
            ("1" if bit(bitboard, to_index(x, y)) else ".") + " "
            for x in range(ROW_WIDTH)
        )
        rows.append(cells + "\n")
    return "".join(rows)