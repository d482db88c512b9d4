# protochess

protochess is a chess position model for variants. Each square of a board
up to 16×16 is one bit of a 256-bit Python integer. A position can carry
custom piece types, each with its own movement pattern. Positions are
hashed with Zobrist keys, and moves can be made and unmade with full
history.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Modules

- `protochess.bitboard`: square indexing with `to_index(x, y)` and
  `from_index(index)` on a 16-wide grid, and the bit helpers `bit`,
  `set_bit` (returns a new integer), `iter_bits` (lowest index first) and
  `to_string`, which draws a 16×16 grid. An index outside 0..255 raises
  `IndexError`.
- `protochess.rankfile`: `to_rank_file(x, y)` turns coordinates into
  rank-file notation. For example, `(0, 1)` gives `"A2"`.
- `protochess.piece_type`: `PieceKind`, the frozen `PieceType` and the
  `Dimensions` dataclass. `PieceType` has `from_char` and `custom`, plus
  the constants `PieceType.KING`, `QUEEN`, `ROOK`, `BISHOP`, `KNIGHT` and
  `PAWN`. `from_char` maps `k q r b n p` in either case to the standard
  types and any other character to a custom type.
- `protochess.chess_move`: `MoveType` and `Move`. A `Move` packs its from,
  to and target squares and its move type into one integer (`encoded`),
  and can also hold a promotion character. `Move.null()` is the passing
  move. `str(move)` gives text such as `(from: A1, to:A2)`.
- `protochess.castle_rights`: `CastleRights`, with kingside, queenside
  and "has castled" bits for up to 8 players.
- `protochess.piece` and `protochess.piece_set`: `Piece` (a piece type
  owned by one player, with its bitboard) and `PieceSet` (a player's king,
  queen, bishop, knight, rook, pawn and custom pieces, with an occupancy
  bitboard).
- `protochess.position_properties`: `PositionProperties`, the state that
  a move cannot recover on its own. This covers the Zobrist key, the move
  played, castling rights, the en-passant square, the captured piece, the
  piece a pawn promoted from, and a link to the previous properties.
- `protochess.movement_pattern`: `MovementPatternExternal`, which lists
  promotion squares as `(x, y)` pairs, and `MovementPattern`, which holds
  them as a bitboard and has `promotion_at`. `external_mp_to_internal` and
  `internal_mp_to_external` convert between the two.
- `protochess.zobrist_table`: `ZobristTable`, a seeded and deterministic
  table of 64-bit keys. Standard pieces have keys for two players. Custom
  piece types get keys through `register_piecetype`; a type that has not
  been registered gives 0.
- `protochess.transposition_table`: `EntryFlag`, `Entry` and
  `TranspositionTable`, which stores clusters of four entries indexed by
  key modulo table size. `set_ancient` marks entries as ancient so that
  they are replaced before newer ones.
- `protochess.position`: `Position`. It is built with `default()` (the
  standard start), `from_fen(fen)` (piece placement, side to move and
  castling rights on an 8×8 board for two players) or `custom(dims,
  bounds, movement_patterns, pieces)`. Its methods are `make_move`,
  `unmake_move`, `add_piece`, `remove_piece`, `move_piece`, `piece_at`,
  `xy_in_bounds`, `register_piecetype`, `movement_pattern`,
  `char_movement_pattern_map`, `set_bounds` and `zobrist`.
- `protochess.board_view`: `render(position)` for a text diagram,
  `pieces_as_tuples(position)` giving `(owner, x, y, char)`, and
  `tiles_as_tuples(position)` giving `(x, y, char)`, where the char is
  `'b'`, `'w'` or `'x'` for an out-of-bounds square.

## Errors

- `Position.make_move` raises `ValueError` in three cases: the from
  square is empty, a capture has nothing on its target square, or a
  promotion move has no promotion character.
- `Position.remove_piece` raises `ValueError` on an empty square.
- `Position.unmake_move` raises `IndexError` when there is no move to
  undo.
- `Move` raises `ValueError` for a square outside 0..255.

## Example

```python
from protochess.position import Position
from protochess.chess_move import Move, MoveType
from protochess.bitboard import to_index
from protochess.board_view import render

pos = Position.default()
key = pos.zobrist()

# e2-e4 as a quiet pawn double push
pos.make_move(Move(to_index(4, 1), to_index(4, 3), None, MoveType.QUIET))
pos.unmake_move()
assert pos.zobrist() == key

pos.make_move(Move.null())
pos.unmake_move()
assert pos.zobrist() == key

print(render(pos))
```

## What it does not do

The package models positions and plays the moves it is given. It does not
generate moves, check whether a move is legal, detect check or mate,
evaluate positions or search for a best move. The transposition table is
only a storage structure, and nothing in the package fills it. There is
no command-line program and no network server.