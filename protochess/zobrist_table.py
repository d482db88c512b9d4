"""Random numbers used to build Zobrist hash keys."""

import random

from protochess.piece import Piece
from protochess.piece_type import PieceKind, PieceType

ZOBRIST_SEED = 5435651169991665628
_SQUARES = 256
_EP_FILES = 17
_STANDARD_PLAYERS = 2

_KIND_SLOT = {
    PieceKind.KING: 0,
    PieceKind.QUEEN: 1,
    PieceKind.ROOK: 2,
    PieceKind.BISHOP: 3,
    PieceKind.KNIGHT: 4,
    PieceKind.PAWN: 5,
}


class ZobristTable:
    """Deterministic table of 64-bit random keys.

    Standard pieces have keys for two players; custom piece types get keys
    once registered, drawn from the same seeded generator.
    """

    def __init__(self) -> None:
        self._rng = random.Random(ZOBRIST_SEED)
        self._ep_zobrist = [self._random() for _ in range(_EP_FILES)]
        # _zobrist[player][slot][index]
        self._zobrist = [
            [self._randoms() for _ in _KIND_SLOT] for _ in range(_STANDARD_PLAYERS)
        ]
        self._custom_zobrist: dict[tuple[int, PieceType], list[int]] = {}
        self._white_to_move = self._random()
        self._w_q_castle = self._random()
        self._b_q_castle = self._random()
        self._w_k_castle = self._random()
        self._b_k_castle = self._random()

    def _random(self) -> int:
        return self._rng.getrandbits(64)

    def _randoms(self) -> list[int]:
        return [self._random() for _ in range(_SQUARES)]

    def to_move_zobrist(self, player_num: int) -> int:
        """Key toggled whenever the side to move changes."""
        return self._white_to_move

    def castling_zobrist(self, player_num: int, kingside: bool) -> int:
        """Key for a castling right; 0 for players beyond the first two."""
        return {
            (0, True): self._w_k_castle,
            (0, False): self._w_q_castle,
            (1, True): self._b_k_castle,
            (1, False): self._b_q_castle,
        }.get((player_num, kingside), 0)

    def zobrist_sq_from_pt(self, piece_type: PieceType, owner: int, index: int) -> int:
        """Key for a piece type of owner on square index.

        Unregistered custom piece types give 0.
        """
        if piece_type.is_custom:
            randoms = self._custom_zobrist.get((owner, piece_type))
            return 0 if randoms is None else randoms[index]
        return self._zobrist[owner][_KIND_SLOT[piece_type.kind]][index]

    def zobrist_sq(self, piece: Piece, index: int) -> int:
        """Key for piece on square index."""
        return self.zobrist_sq_from_pt(piece.piece_type, piece.player_num, index)

    def ep_zobrist_file(self, rank: int) -> int:
        """Key for an en-passant square on the given file."""
        return self._ep_zobrist[rank]

    def register_piecetype(self, player_num: int, piece_type: PieceType) -> None:
        """Draw a fresh set of square keys for a custom piece type."""
        self._custom_zobrist[(player_num, piece_type)] = self._randoms()