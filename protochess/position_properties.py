"""State of a position that cannot be recovered from the last move alone."""

from dataclasses import dataclass, field, replace

from protochess.castle_rights import CastleRights
from protochess.chess_move import Move
from protochess.piece_type import PieceType


@dataclass
class PositionProperties:
    zobrist_key: int = 0
    move_played: Move | None = None
    # Piece type before promotion, when the last move promoted.
    promote_from: PieceType | None = None
    castling_rights: CastleRights = field(default_factory=CastleRights)
    # Square behind a double pawn push.
    ep_square: int | None = None
    # (owner, piece type) of the piece captured by the last move.
    captured_piece: tuple[int, PieceType] | None = None
    prev_properties: "PositionProperties | None" = None

    def copy(self) -> "PositionProperties":
        """Return a copy with its own castling rights; history is shared."""
        return replace(self, castling_rights=self.castling_rights.copy())

    def prev(self) -> "PositionProperties | None":
        """Return the properties of the previous position, if any."""
        return self.prev_properties