"""A piece kind owned by one player, with the squares it occupies."""

from dataclasses import dataclass

from protochess.bitboard import Bitboard
from protochess.piece_type import PieceType


@dataclass
class Piece:
    char_rep: str
    player_num: int
    piece_type: PieceType
    bitboard: Bitboard = 0

    @classmethod
    def blank_custom(cls, player_num: int, char_rep: str) -> "Piece":
        return cls(char_rep, player_num, PieceType.custom(char_rep))

    @classmethod
    def blank_pawn(cls, player_num: int) -> "Piece":
        return cls("p", player_num, PieceType.PAWN)

    @classmethod
    def blank_knight(cls, player_num: int) -> "Piece":
        return cls("n", player_num, PieceType.KNIGHT)

    @classmethod
    def blank_king(cls, player_num: int) -> "Piece":
        return cls("k", player_num, PieceType.KING)

    @classmethod
    def blank_rook(cls, player_num: int) -> "Piece":
        return cls("r", player_num, PieceType.ROOK)

    @classmethod
    def blank_bishop(cls, player_num: int) -> "Piece":
        return cls("b", player_num, PieceType.BISHOP)

    @classmethod
    def blank_queen(cls, player_num: int) -> "Piece":
        return cls("q", player_num, PieceType.QUEEN)