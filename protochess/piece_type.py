"""Piece type identifiers and board dimensions."""

import enum
from dataclasses import dataclass
from typing import ClassVar


class PieceKind(enum.Enum):
    KING = "k"
    QUEEN = "q"
    ROOK = "r"
    BISHOP = "b"
    KNIGHT = "n"
    PAWN = "p"
    CUSTOM = "custom"


@dataclass(frozen=True)
class PieceType:
    """A standard piece kind, or a custom piece identified by its character."""

    kind: PieceKind
    char: str | None = None

    KING: ClassVar["PieceType"]
    QUEEN: ClassVar["PieceType"]
    ROOK: ClassVar["PieceType"]
    BISHOP: ClassVar["PieceType"]
    KNIGHT: ClassVar["PieceType"]
    PAWN: ClassVar["PieceType"]

    @classmethod
    def custom(cls, c: str) -> "PieceType":
        """Return the custom piece type for character c."""
        return cls(PieceKind.CUSTOM, c)

    @classmethod
    def from_char(cls, c: str) -> "PieceType":
        """Map a character (any case) to a standard type, else a custom one."""
        lowered = c.lower()
        for kind in PieceKind:
            if kind is not PieceKind.CUSTOM and kind.value == lowered:
                return cls(kind)
        return cls.custom(c)

    @property
    def is_custom(self) -> bool:
        return self.kind is PieceKind.CUSTOM


PieceType.KING = PieceType(PieceKind.KING)
PieceType.QUEEN = PieceType(PieceKind.QUEEN)
PieceType.ROOK = PieceType(PieceKind.ROOK)
PieceType.BISHOP = PieceType(PieceKind.BISHOP)
PieceType.KNIGHT = PieceType(PieceKind.KNIGHT)
PieceType.PAWN = PieceType(PieceKind.PAWN)


@dataclass
class Dimensions:
    width: int
    height: int