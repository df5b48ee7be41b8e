"""
Unit tests for the constraint index and canonical pair keys
"""
from rotapair.matchup import MatchupRecord, pair_key
from rotapair.pairing import ConstraintIndex


def test_pair_key_is_order_independent():
    """Test that (a, b) and (b, a) share one key, smaller id first"""
    assert pair_key(1, 2) == "1-2"
    assert pair_key(2, 1) == "1-2"
    assert pair_key(10, 9) == "9-10"


def test_record_stores_smaller_id_first():
    record = MatchupRecord(3, 7, 2)

    assert record.ids == (2, 7)
    assert record.key == "2-7"
    assert record.to_dict() == {"round": 3, "player1_id": 2, "player2_id": 7}


def test_build_from_records():
    """Test that every recorded pair ends up in the index"""
    records = [
        MatchupRecord(1, 1, 2),
        MatchupRecord(1, 4, 3),
        MatchupRecord(2, 1, 3),
    ]

    index = ConstraintIndex.build(records)

    assert len(index) == 3
    assert index.contains(2, 1)
    assert index.contains(3, 4)
    assert index.contains(1, 3)
    assert not index.contains(2, 4)


def test_build_ignores_repeated_pairs():
    records = [MatchupRecord(1, 1, 2), MatchupRecord(4, 2, 1)]

    assert len(ConstraintIndex.build(records)) == 1


def test_empty_index_contains_nothing():
    index = ConstraintIndex.build([])

    assert len(index) == 0
    assert not index.contains(1, 2)


def test_extend_returns_new_index():
    """Test that extend leaves the receiver untouched"""
    base = ConstraintIndex(["1-2"])

    extended = base.extend([(4, 3), (5, 1)])

    assert extended.contains(3, 4)
    assert extended.contains(1, 5)
    assert extended.contains(1, 2)
    assert not base.contains(3, 4)
    assert len(base) == 1


def test_membership_by_key():
    index = ConstraintIndex(["1-2", "3-4"])

    assert "1-2" in index
    assert "2-1" not in index
    assert list(index) == ["1-2", "3-4"]
    assert index == ConstraintIndex.build([MatchupRecord(1, 2, 1), MatchupRecord(1, 3, 4)])
