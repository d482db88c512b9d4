"""The full set of pieces belonging to one player."""

from dataclasses import dataclass, field

from protochess.bitboard import Bitboard, bit
from protochess.piece import Piece


@dataclass
class PieceSet:
    player_num: int
    occupied: Bitboard = field(default=0, init=False)
    king: Piece = field(init=False)
    queen: Piece = field(init=False)
    bishop: Piece = field(init=False)
    knight: Piece = field(init=False)
    rook: Piece = field(init=False)
    pawn: Piece = field(init=False)
    custom: list[Piece] = field(default_factory=list, init=False)

    def __post_init__(self) -> None:
        self.king = Piece.blank_king(self.player_num)
        self.queen = Piece.blank_queen(self.player_num)
        self.bishop = Piece.blank_bishop(self.player_num)
        self.knight = Piece.blank_knight(self.player_num)
        self.rook = Piece.blank_rook(self.player_num)
        self.pawn = Piece.blank_pawn(self.player_num)

    def piece_refs(self) -> list[Piece]:
        """Return every piece: king, queen, bishop, knight, rook, pawn, customs."""
        return [self.king, self.queen, self.bishop, self.knight, self.rook, self.pawn, *self.custom]

    def piece_at(self, index: int) -> Piece | None:
        """Return the piece occupying index, or None."""
        return next((p for p in self.piece_refs() if bit(p.bitboard, index)), None)

    def update_occupied(self) -> None:
        """Recompute the union of all piece bitboards."""
        occupied = 0
        for piece in self.piece_refs():
            occupied |= piece.bitboard
        self.occupied = occupied