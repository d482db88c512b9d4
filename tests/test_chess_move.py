import pytest

from protochess.bitboard import to_index
from protochess.chess_move import Move, MoveType
from protochess.rankfile import to_rank_file


@pytest.mark.parametrize("move_type", list(MoveType))
def test_fields_round_trip(move_type):
    move = Move(17, 250, 99, move_type, "q")
    assert move.from_square == 17
    assert move.to_square == 250
    assert move.target == 99
    assert move.move_type is move_type
    assert move.promotion == "q"


def test_missing_target_is_zero():
    assert Move(1, 2).target == 0
    assert Move(1, 2).move_type is MoveType.QUIET


def test_null_move():
    move = Move.null()
    assert move.move_type is MoveType.NULL
    assert (move.from_square, move.to_square, move.promotion) == (0, 0, None)
    assert move == Move.null()


def test_encoding_layout():
    move = Move(3, 4, 5, MoveType.CAPTURE)
    assert move.encoded == 3 | 4 << 8 | 5 << 16 | 1 << 24


@pytest.mark.parametrize(
    "move_type, capture",
    [
        (MoveType.QUIET, False),
        (MoveType.CAPTURE, True),
        (MoveType.KINGSIDE_CASTLE, False),
        (MoveType.QUEENSIDE_CASTLE, True),
        (MoveType.PROMOTION, False),
        (MoveType.PROMOTION_CAPTURE, True),
        (MoveType.NULL, False),
    ],
)
def test_is_capture_follows_low_type_bit(move_type, capture):
    assert Move(0, 1, 2, move_type).is_capture is capture


def test_equality_includes_promotion():
    assert Move(8, 16, None, MoveType.PROMOTION, "q") != Move(8, 16, None, MoveType.PROMOTION, "r")
    assert Move(8, 16, None, MoveType.PROMOTION, "q") == Move(8, 16, None, MoveType.PROMOTION, "q")
    assert len({Move(1, 2), Move(1, 2), Move(2, 1)}) == 2


def test_display():
    move = Move(to_index(0, 0), to_index(0, 1))
    assert str(move) == "(from: A1, to:A2)"


def test_display_uses_rank_file():
    move = Move(to_index(4, 1), to_index(4, 3))
    assert str(move) == f"(from: {to_rank_file(4, 1)}, to:{to_rank_file(4, 3)})"


def test_out_of_range_square():
    with pytest.raises(ValueError):
        Move(256, 0)
    with pytest.raises(ValueError):
        Move(0, 0, -1)