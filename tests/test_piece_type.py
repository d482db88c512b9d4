import pytest

from protochess.piece_type import Dimensions, PieceKind, PieceType


@pytest.mark.parametrize(
    "char, expected",
    [
        ("k", PieceType.KING),
        ("q", PieceType.QUEEN),
        ("r", PieceType.ROOK),
        ("b", PieceType.BISHOP),
        ("n", PieceType.KNIGHT),
        ("p", PieceType.PAWN),
    ],
)
def test_standard_chars(char, expected):
    assert PieceType.from_char(char) == expected
    assert PieceType.from_char(char.upper()) == expected


def test_unknown_char_is_custom():
    piece_type = PieceType.from_char("z")
    assert piece_type == PieceType.custom("z")
    assert piece_type.kind is PieceKind.CUSTOM
    assert piece_type.is_custom


def test_custom_keeps_case():
    assert PieceType.from_char("Z") == PieceType.custom("Z")
    assert PieceType.from_char("Z") != PieceType.from_char("z")


def test_standard_is_not_custom():
    king = PieceType.from_char("K")
    assert king == PieceType.KING
    assert not king.is_custom
    assert king.char is None


def test_hashable_as_key():
    table = {PieceType.custom("a"): 1, PieceType.ROOK: 2}
    assert table[PieceType.from_char("a")] == 1
    assert table[PieceType.from_char("R")] == 2


def test_dimensions_fields():
    dims = Dimensions(width=8, height=10)
    assert (dims.width, dims.height) == (8, 10)