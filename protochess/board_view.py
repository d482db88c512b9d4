"""Read-only views of a position: text rendering and tuple listings."""

from protochess.bitboard import from_index, iter_bits, to_index
from protochess.position import Position


def render(position: Position) -> str:
    """Render the board as text, top rank first, followed by the Zobrist key.

    Player 0's pieces are upper case and the other players' lower case;
    empty squares are shown as '.'.
    """
    text = ""
    for y in reversed(range(position.dimensions.height)):
        text += f" {y} "
        for x in range(position.dimensions.width):
            found = position.piece_at(to_index(x, y))
            if found is None:
                text += "."
            else:
                player_num, piece = found
                char = piece.char_rep
                text += char.upper() if player_num == 0 else char.lower()
            text += " "
        text += "\n"
    text += "  "
    text += "".join(f" {x}" for x in range(position.dimensions.width))
    return f"{text} \nZobrist Key: {position.zobrist()}"


def pieces_as_tuples(position: Position) -> list[tuple[int, int, int, str]]:
    """Return (owner, x, y, char) for every piece on the board.

    Players are listed in order; within a player, pieces follow the piece
    set order and squares go from the lowest index up.
    """
    return [
        (player_num, *from_index(index), piece.char_rep)
        for player_num, piece_set in enumerate(position.pieces)
        for piece in piece_set.piece_refs()
        for index in iter_bits(piece.bitboard)
    ]


def tiles_as_tuples(position: Position) -> list[tuple[int, int, str]]:
    """Return (x, y, char) for every square, column by column.

    In-bounds squares are 'b' when x + y is even and 'w' otherwise;
    out-of-bounds squares are 'x'.
    """
    tiles = []
    for x in range(position.dimensions.width):
        for y in range(position.dimensions.height):
            if position.xy_in_bounds(x, y):
                tiles.append((x, y, "b" if (x + y) % 2 == 0 else "w"))
            else:
                tiles.append((x, y, "x"))
    return tiles