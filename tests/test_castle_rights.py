from protochess.castle_rights import CastleRights


def test_disable_sequence():
    rights = CastleRights()
    assert rights.can_player_castle_queenside(0)
    rights.disable_queenside_castle(0)
    assert not rights.can_player_castle_queenside(0)
    assert rights.can_player_castle_kingside(0)
    rights.disable_kingside_castle(0)
    assert not rights.can_player_castle_kingside(0)


def test_all_players_start_with_rights():
    rights = CastleRights()
    for player in range(8):
        assert rights.can_player_castle(player)
        assert not rights.did_player_castle(player)


def test_disabling_one_player_leaves_others():
    rights = CastleRights()
    rights.disable_kingside_castle(1)
    rights.disable_queenside_castle(1)
    assert not rights.can_player_castle(1)
    assert rights.can_player_castle(0)
    assert rights.can_player_castle(2)


def test_can_castle_with_one_side():
    rights = CastleRights()
    rights.disable_kingside_castle(0)
    assert rights.can_player_castle(0)


def test_set_castled():
    rights = CastleRights()
    rights.set_player_castled(3)
    assert rights.did_player_castle(3)
    assert not rights.did_player_castle(2)


def test_copy_is_independent():
    rights = CastleRights()
    clone = rights.copy()
    clone.disable_kingside_castle(0)
    clone.set_player_castled(0)
    assert rights.can_player_castle_kingside(0)
    assert not rights.did_player_castle(0)
    assert not clone.can_player_castle_kingside(0)