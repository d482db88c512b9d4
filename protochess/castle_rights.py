"""Castling rights for up to eight players, one bit per player."""

from dataclasses import dataclass, replace


@dataclass
class CastleRights:
    """Bit i of each mask refers to player i."""

    kingside: int = 0xFF
    queenside: int = 0xFF
    castled: int = 0

    def can_player_castle_kingside(self, playernum: int) -> bool:
        return bool((self.kingside >> playernum) & 1)

    def can_player_castle_queenside(self, playernum: int) -> bool:
        return bool((self.queenside >> playernum) & 1)

    def can_player_castle(self, playernum: int) -> bool:
        return self.can_player_castle_kingside(playernum) or self.can_player_castle_queenside(
            playernum
        )

    def did_player_castle(self, playernum: int) -> bool:
        return bool((self.castled >> playernum) & 1)

    def set_player_castled(self, playernum: int) -> None:
        self.castled = (self.castled | (1 << playernum)) & 0xFF

    def disable_kingside_castle(self, playernum: int) -> None:
        self.kingside &= ~(1 << playernum) & 0xFF

    def disable_queenside_castle(self, playernum: int) -> None:
        self.queenside &= ~(1 << playernum) & 0xFF

    def copy(self) -> "CastleRights":
        return replace(self)