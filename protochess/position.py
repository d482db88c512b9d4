"""A single chess position: pieces, bounds, side to move and history."""

from __future__ import annotations

import copy
import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field

from protochess.bitboard import Bitboard, bit, from_index, iter_bits, set_bit, to_index
from protochess.chess_move import Move, MoveType
from protochess.movement_pattern import (
    MovementPattern,
    MovementPatternExternal,
    external_mp_to_internal,
    internal_mp_to_external,
)
from protochess.piece import Piece
from protochess.piece_set import PieceSet
from protochess.piece_type import Dimensions, PieceKind, PieceType
from protochess.position_properties import PositionProperties
from protochess.zobrist_table import ZobristTable

logger = logging.getLogger(__name__)

DEFAULT_WIDTH = 8
DEFAULT_HEIGHT = 8
STARTING_POS = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"
EMPTY = "8/8/8/8/8/8/8/8 w - - 0 1"

_CUSTOM_CHARS = "acdefghijlmostuvwxyz"

_STANDARD_ATTRS = {
    PieceKind.KING: "king",
    PieceKind.QUEEN: "queen",
    PieceKind.ROOK: "rook",
    PieceKind.BISHOP: "bishop",
    PieceKind.KNIGHT: "knight",
    PieceKind.PAWN: "pawn",
}


def _build_zobrist_table() -> ZobristTable:
    table = ZobristTable()
    for c in _CUSTOM_CHARS:
        table.register_piecetype(0, PieceType.custom(c))
        table.register_piecetype(1, PieceType.custom(c))
    return table


_ZOBRIST_TABLE = _build_zobrist_table()


def _full_bounds(width: int, height: int) -> Bitboard:
    bounds = 0
    for x in range(width):
        for y in range(height):
            bounds = set_bit(bounds, to_index(x, y), True)
    return bounds


@dataclass
class Position:
    """A position; pieces[0] are white's pieces, pieces[1] black's."""

    dimensions: Dimensions
    bounds: Bitboard
    num_players: int
    whos_turn: int
    pieces: list[PieceSet]
    occupied: Bitboard
    properties: PositionProperties
    movement_rules: dict[PieceType, MovementPattern] = field(default_factory=dict)

    @classmethod
    def default(cls) -> Position:
        """Return the standard starting position."""
        return cls.from_fen(STARTING_POS)

    @classmethod
    def from_fen(cls, fen: str) -> Position:
        """Build a position from a FEN string (placement, turn, castling)."""
        white = PieceSet(0)
        black = PieceSet(1)
        whos_turn = 0
        castling = {"K": False, "Q": False, "k": False, "q": False}

        fields = fen.split(" ")
        x, y = 0, DEFAULT_HEIGHT - 1
        for c in fields[0]:
            if c == "/":
                x = 0
                y -= 1
                if y < 0:
                    raise ValueError(f"too many ranks in FEN {fen!r}")
                continue
            if c.isdigit():
                x += int(c)
                continue
            attr = _STANDARD_ATTRS.get(PieceType.from_char(c).kind)
            if attr is None:
                continue
            owner = white if c.isupper() else black
            index = to_index(x, y)
            piece: Piece = getattr(owner, attr)
            piece.bitboard = set_bit(piece.bitboard, index, True)
            owner.occupied = set_bit(owner.occupied, index, True)
            x += 1

        if len(fields) > 1:
            # The separating space itself counts as a non-'w' character.
            whos_turn = 0 if (" " + fields[1])[-1] == "w" else 1
        if len(fields) > 2:
            for c in fields[2]:
                if c in castling:
                    castling[c] = True

        table = _ZOBRIST_TABLE
        properties = PositionProperties()
        key = 0
        for player in (0, 1):
            for kingside in (True, False):
                key ^= table.castling_zobrist(player, kingside)
        rights = properties.castling_rights
        if not castling["K"]:
            rights.disable_kingside_castle(0)
            key ^= table.castling_zobrist(0, True)
        if not castling["k"]:
            rights.disable_kingside_castle(1)
            key ^= table.castling_zobrist(1, True)
        if not castling["Q"]:
            rights.disable_queenside_castle(0)
            key ^= table.castling_zobrist(0, False)
        if not castling["q"]:
            rights.disable_queenside_castle(1)
            key ^= table.castling_zobrist(1, False)

        for piece in [*white.piece_refs(), *black.piece_refs()]:
            for index in iter_bits(piece.bitboard):
                key ^= table.zobrist_sq(piece, index)
        properties.zobrist_key = key

        return cls(
            dimensions=Dimensions(DEFAULT_WIDTH, DEFAULT_HEIGHT),
            bounds=_full_bounds(DEFAULT_WIDTH, DEFAULT_HEIGHT),
            num_players=2,
            whos_turn=whos_turn,
            pieces=[white, black],
            occupied=white.occupied | black.occupied,
            properties=properties,
        )

    @classmethod
    def custom(
        cls,
        dims: Dimensions,
        bounds: Bitboard,
        movement_patterns: Mapping[str, MovementPatternExternal],
        pieces: Iterable[tuple[int, int, PieceType]],
    ) -> Position:
        """Build a position from custom bounds, piece rules and (owner, index, type) pieces."""
        pos = cls.from_fen(EMPTY)
        pos.dimensions = dims
        pos.bounds = bounds
        for char_rep, mpe in movement_patterns.items():
            pos.register_piecetype(char_rep, mpe)
        for owner, index, piece_type in pieces:
            pos.add_piece(owner, piece_type, index)
        return pos

    def register_piecetype(self, char_rep: str, mpe: MovementPatternExternal) -> None:
        """Register a custom piece type and give every player an empty set of it."""
        self.movement_rules[PieceType.custom(char_rep)] = external_mp_to_internal(mpe)
        for player_num, piece_set in enumerate(self.pieces):
            piece_set.custom.append(Piece.blank_custom(player_num, char_rep))

    def char_movement_pattern_map(self) -> dict[str, MovementPatternExternal]:
        """Return the movement rules of custom pieces keyed by character."""
        return {
            piece_type.char: internal_mp_to_external(copy.deepcopy(pattern))
            for piece_type, pattern in self.movement_rules.items()
            if piece_type.is_custom
        }

    def movement_pattern(self, piece_type: PieceType) -> MovementPattern | None:
        return self.movement_rules.get(piece_type)

    def set_bounds(self, dims: Dimensions, bounds: Bitboard) -> None:
        self.dimensions = dims
        self.bounds = bounds

    def zobrist(self) -> int:
        return self.properties.zobrist_key

    def piece_at(self, index: int) -> tuple[int, Piece] | None:
        """Return (player_num, piece) for the piece on index, or None."""
        for player_num, piece_set in enumerate(self.pieces):
            piece = piece_set.piece_at(index)
            if piece is not None:
                return player_num, piece
        return None

    def xy_in_bounds(self, x: int, y: int) -> bool:
        if 0 <= x < self.dimensions.width and 0 <= y < self.dimensions.height:
            return bit(self.bounds, to_index(x, y))
        return False

    def move_piece(self, from_index: int, to_index: int) -> None:
        """Move whatever piece is on from_index to to_index."""
        found = self.piece_at(from_index)
        if found is None:
            logger.warning("nothing to move from %s to %s", from_index, to_index)
            return
        piece = found[1]
        piece.bitboard = set_bit(set_bit(piece.bitboard, from_index, False), to_index, True)

    def _remove_piece(self, index: int) -> None:
        found = self.piece_at(index)
        if found is None:
            raise ValueError(f"no piece at index {index}")
        piece = found[1]
        piece.bitboard = set_bit(piece.bitboard, index, False)

    def _add_piece(self, owner: int, piece_type: PieceType, index: int) -> None:
        piece_set = self.pieces[owner]
        if piece_type.is_custom:
            piece = next((p for p in piece_set.custom if p.char_rep == piece_type.char), None)
            if piece is None:
                return
        else:
            piece = getattr(piece_set, _STANDARD_ATTRS[piece_type.kind])
        piece.bitboard = set_bit(piece.bitboard, index, True)

    def _update_occupied(self) -> None:
        occupied = 0
        for piece_set in self.pieces:
            piece_set.update_occupied()
            occupied |= piece_set.occupied
        self.occupied = occupied

    def add_piece(self, owner: int, piece_type: PieceType, index: int) -> None:
        """Place a piece, updating the hash key and recording new properties."""
        new_props = self.properties.copy()
        new_props.zobrist_key ^= _ZOBRIST_TABLE.zobrist_sq_from_pt(piece_type, owner, index)
        self._add_piece(owner, piece_type, index)
        self._update_occupied()
        new_props.prev_properties = self.properties
        self.properties = new_props

    def remove_piece(self, index: int) -> None:
        """Remove the piece on index; raises ValueError if the square is empty."""
        self._remove_piece(index)
        self._update_occupied()

    def make_move(self, move: Move) -> None:
        """Play move, updating pieces, hash key, castling and en-passant state."""
        table = _ZOBRIST_TABLE
        me = self.whos_turn
        move_type = move.move_type
        if move_type is not MoveType.NULL and self.piece_at(move.from_square) is None:
            raise ValueError(f"no piece at index {move.from_square}")

        self.whos_turn = (self.whos_turn + 1) % self.num_players
        new_props = self.properties.copy()
        new_props.zobrist_key ^= table.to_move_zobrist(self.whos_turn)

        if move_type is MoveType.NULL:
            new_props.ep_square = None
            new_props.move_played = move
            new_props.prev_properties = self.properties
            self.properties = new_props
            return

        if move_type in (MoveType.CAPTURE, MoveType.PROMOTION_CAPTURE):
            capt_index = move.target
            found = self.piece_at(capt_index)
            if found is None:
                raise ValueError(f"no piece to capture at index {capt_index}")
            owner, captured = found
            new_props.zobrist_key ^= table.zobrist_sq_from_pt(
                captured.piece_type, captured.player_num, capt_index
            )
            new_props.captured_piece = (owner, captured.piece_type)
            self._remove_piece(capt_index)
        elif move_type in (MoveType.KINGSIDE_CASTLE, MoveType.QUEENSIDE_CASTLE):
            rook_from = move.target
            x, y = from_index(move.to_square)
            step = -1 if move_type is MoveType.KINGSIDE_CASTLE else 1
            rook_to = to_index(x + step, y)
            new_props.zobrist_key ^= table.zobrist_sq_from_pt(PieceType.ROOK, me, rook_from)
            new_props.zobrist_key ^= table.zobrist_sq_from_pt(PieceType.ROOK, me, rook_to)
            self.move_piece(rook_from, rook_to)
            new_props.castling_rights.set_player_castled(me)

        src, dst = move.from_square, move.to_square
        moved_type = self.piece_at(src)[1].piece_type
        new_props.zobrist_key ^= table.zobrist_sq_from_pt(moved_type, me, src)
        new_props.zobrist_key ^= table.zobrist_sq_from_pt(moved_type, me, dst)
        self.move_piece(src, dst)

        if move_type in (MoveType.PROMOTION, MoveType.PROMOTION_CAPTURE):
            if move.promotion is None:
                raise ValueError("promotion move without a promotion piece")
            new_props.promote_from = moved_type
            new_props.zobrist_key ^= table.zobrist_sq_from_pt(moved_type, me, dst)
            self._remove_piece(dst)
            promote_to = PieceType.from_char(move.promotion)
            new_props.zobrist_key ^= table.zobrist_sq_from_pt(promote_to, me, dst)
            self._add_piece(me, promote_to, dst)

        x1, y1 = from_index(src)
        x2, y2 = from_index(dst)
        if self.properties.ep_square is not None:
            epx, _ = from_index(self.properties.ep_square)
            new_props.zobrist_key ^= table.ep_zobrist_file(epx)

        if moved_type == PieceType.PAWN and abs(y2 - y1) == 2 and x1 == x2:
            new_props.ep_square = to_index(x1, y2 - 1 if y2 > y1 else y2 + 1)
            new_props.zobrist_key ^= table.ep_zobrist_file(x1)
        else:
            new_props.ep_square = None

        rights = new_props.castling_rights
        if rights.can_player_castle(me):
            if moved_type == PieceType.KING:
                new_props.zobrist_key ^= table.castling_zobrist(me, True)
                new_props.zobrist_key ^= table.castling_zobrist(me, False)
                rights.disable_kingside_castle(me)
                rights.disable_queenside_castle(me)
            elif moved_type == PieceType.ROOK:
                kingside = x1 >= self.dimensions.width // 2
                if kingside:
                    rights.disable_kingside_castle(me)
                else:
                    rights.disable_queenside_castle(me)
                new_props.zobrist_key ^= table.castling_zobrist(me, kingside)

        new_props.move_played = move
        new_props.prev_properties = self.properties
        self.properties = new_props
        self._update_occupied()

    def unmake_move(self) -> None:
        """Undo the most recent move; raises IndexError if there is none."""
        move = self.properties.move_played
        previous = self.properties.prev()
        if move is None or previous is None:
            raise IndexError("no move to undo")

        self.whos_turn = (self.whos_turn - 1) % self.num_players
        me = self.whos_turn
        move_type = move.move_type
        if move_type is MoveType.NULL:
            self.properties = previous
            return

        src, dst = move.from_square, move.to_square
        self.move_piece(dst, src)

        if move_type in (MoveType.PROMOTION, MoveType.PROMOTION_CAPTURE):
            self._remove_piece(src)
            self._add_piece(me, self.properties.promote_from, src)

        if move_type in (MoveType.CAPTURE, MoveType.PROMOTION_CAPTURE):
            owner, piece_type = self.properties.captured_piece
            self._add_piece(owner, piece_type, move.target)
        elif move_type in (MoveType.KINGSIDE_CASTLE, MoveType.QUEENSIDE_CASTLE):
            x, y = from_index(dst)
            step = -1 if move_type is MoveType.KINGSIDE_CASTLE else 1
            self.move_piece(to_index(x + step, y), move.target)

        self.properties = previous
        self._update_occupied()