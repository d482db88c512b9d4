"""Compact move representation."""

import enum

from protochess.bitboard import from_index
from protochess.rankfile import to_rank_file


class MoveType(enum.IntEnum):
    """Move kinds; the value is the 3-bit code stored in bits 24-26."""

    QUIET = 0
    CAPTURE = 1
    KINGSIDE_CASTLE = 2
    QUEENSIDE_CASTLE = 3
    PROMOTION = 4
    PROMOTION_CAPTURE = 5
    NULL = 6


class Move:
    """A move packed into one integer plus an optional promotion character.

    Bits 0-7 hold the from square, 8-15 the to square, 16-23 the target
    square (captured piece or castling rook) and 24-26 the move type.
    """

    __slots__ = ("_bits", "_promotion")

    def __init__(
        self,
        from_square: int,
        to_square: int,
        target: int | None = None,
        move_type: MoveType = MoveType.QUIET,
        promotion: str | None = None,
    ) -> None:
        target_square = 0 if target is None else target
        for name, value in (
            ("from_square", from_square),
            ("to_square", to_square),
            ("target", target_square),
        ):
            if not 0 <= value <= 255:
                raise ValueError(f"{name} {value} outside 0..255")
        self._bits = (
            from_square
            | to_square << 8
            | target_square << 16
            | int(MoveType(move_type)) << 24
        )
        self._promotion = promotion

    @classmethod
    def null(cls) -> "Move":
        """Return the null (passing) move."""
        return cls(0, 0, None, MoveType.NULL, None)

    @property
    def encoded(self) -> int:
        return self._bits

    @property
    def from_square(self) -> int:
        return self._bits & 0xFF

    @property
    def to_square(self) -> int:
        return (self._bits >> 8) & 0xFF

    @property
    def target(self) -> int:
        return (self._bits >> 16) & 0xFF

    @property
    def move_type(self) -> MoveType:
        code = (self._bits >> 24) & 7
        return MoveType(code) if code <= MoveType.NULL else MoveType.QUIET

    @property
    def is_capture(self) -> bool:
        """True when the lowest bit of the type code is set."""
        return bool((self._bits >> 24) & 1)

    @property
    def promotion(self) -> str | None:
        return self._promotion

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Move):
            return NotImplemented
        return self._bits == other._bits and self._promotion == other._promotion

    def __hash__(self) -> int:
        return hash((self._bits, self._promotion))

    def __repr__(self) -> str:
        return (
            f"Move({self.from_square}, {self.to_square}, {self.target}, "
            f"{self.move_type.name}, {self._promotion!r})"
        )

    def __str__(self) -> str:
        x1, y1 = from_index(self.from_square)
        x2, y2 = from_index(self.to_square)
        return f"(from: {to_rank_file(x1, y1)}, to:{to_rank_file(x2, y2)})"