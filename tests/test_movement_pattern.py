from protochess.bitboard import to_index
from protochess.movement_pattern import (
    MovementPattern,
    MovementPatternExternal,
    external_mp_to_internal,
    internal_mp_to_external,
)


def _sample_external():
    return MovementPatternExternal(
        promotion_squares=[(0, 7), (3, 7), (7, 7)],
        promo_vals=["q", "r"],
        attack_sliding_deltas=[[(1, 1), (2, 2)]],
        attack_jump_deltas=[(1, 2), (2, 1)],
        attack_north=True,
        translate_jump_deltas=[(0, 1)],
        translate_sliding_deltas=[[(0, 1), (0, 2)]],
        translate_southwest=True,
    )


def test_defaults_are_empty():
    pattern = MovementPattern()
    assert pattern.promotion_squares is None
    assert pattern.attack_jump_deltas == []
    assert not pattern.translate_north
    assert not pattern.promotion_at(0)


def test_defaults_not_shared():
    first = MovementPattern()
    second = MovementPattern()
    first.attack_jump_deltas.append((1, 1))
    assert second.attack_jump_deltas == []


def test_external_to_internal_promotion_bits():
    internal = external_mp_to_internal(_sample_external())
    for x, y in [(0, 7), (3, 7), (7, 7)]:
        assert internal.promotion_at(to_index(x, y))
    assert not internal.promotion_at(to_index(1, 7))
    assert not internal.promotion_at(to_index(0, 0))


def test_external_to_internal_keeps_rules():
    external = _sample_external()
    internal = external_mp_to_internal(external)
    assert internal.attack_sliding_deltas == external.attack_sliding_deltas
    assert internal.attack_jump_deltas == external.attack_jump_deltas
    assert internal.attack_north and not internal.attack_south
    assert internal.translate_southwest and not internal.translate_north
    assert internal.promo_vals == ["q", "r"]


def test_round_trip():
    external = _sample_external()
    back = internal_mp_to_external(external_mp_to_internal(external))
    assert back == external


def test_round_trip_without_promotion():
    external = MovementPatternExternal(translate_north=True)
    internal = external_mp_to_internal(external)
    assert internal.promotion_squares is None
    assert not internal.promotion_at(5)
    assert internal_mp_to_external(internal) == external


def test_empty_promotion_list_maps_to_none():
    internal = external_mp_to_internal(MovementPatternExternal(promotion_squares=[]))
    assert internal.promotion_squares == 0
    assert internal_mp_to_external(internal).promotion_squares is None


def test_internal_to_external_orders_squares_by_index():
    internal = external_mp_to_internal(
        MovementPatternExternal(promotion_squares=[(5, 2), (1, 0), (0, 2)])
    )
    squares = internal_mp_to_external(internal).promotion_squares
    assert squares == sorted([(5, 2), (1, 0), (0, 2)], key=lambda s: to_index(*s))