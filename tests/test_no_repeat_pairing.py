"""
Unit tests for the no-repeat backtracking pairing system
"""
import itertools
import random

import pytest

from rotapair.exceptions import PreconditionError
from rotapair.pairing import ConstraintIndex, draw_pairings
from rotapair.pairing import no_repeat
from rotapair.participant import Participant


def _players(count):
    return [Participant(i, f"P{i}") for i in range(1, count + 1)]


def _keys(pairs):
    return {frozenset((a.id, b.id)) for a, b in pairs}


def _assert_valid(pairs, participants, index):
    covered = [p.id for pair in pairs for p in pair]
    assert sorted(covered) == sorted(p.id for p in participants)
    assert len(pairs) == len(participants) // 2
    for a, b in pairs:
        assert not index.contains(a.id, b.id)


@pytest.mark.parametrize("count", [2, 4, 6, 8, 12, 16])
def test_empty_index_always_succeeds(count):
    """Test that without history every even selection gets paired"""
    participants = _players(count)
    for seed in range(25):
        pairs = draw_pairings(participants, ConstraintIndex(), random.Random(seed))
        assert pairs is not None
        _assert_valid(pairs, participants, ConstraintIndex())


def test_draws_respect_random_history():
    """Test coverage and constraints over many random histories"""
    participants = _players(10)
    all_pairs = list(itertools.combinations(range(1, 11), 2))
    for seed in range(50):
        rng = random.Random(seed)
        index = ConstraintIndex().extend(rng.sample(all_pairs, 15))
        pairs = draw_pairings(participants, index, rng)
        if pairs is not None:
            _assert_valid(pairs, participants, index)


def test_four_players_empty_history(four_players):
    """Test that any of the three matchings of four players is returned"""
    possible = [
        {frozenset((1, 2)), frozenset((3, 4))},
        {frozenset((1, 3)), frozenset((2, 4))},
        {frozenset((1, 4)), frozenset((2, 3))},
    ]
    seen = []
    for seed in range(200):
        pairs = draw_pairings(four_players, ConstraintIndex(), random.Random(seed))
        assert _keys(pairs) in possible
        seen.append(_keys(pairs))

    for matching in possible:
        assert matching in seen


def test_four_players_never_repeat(four_players):
    """Test that Alice-Bob and Carol-Dave are never drawn again"""
    index = ConstraintIndex(["1-2", "3-4"])
    allowed = [
        {frozenset((1, 3)), frozenset((2, 4))},
        {frozenset((1, 4)), frozenset((2, 3))},
    ]
    for seed in range(100):
        pairs = draw_pairings(four_players, index, random.Random(seed))
        assert _keys(pairs) in allowed


def test_two_players_already_played():
    """Test that a pair that already played gives no solution"""
    pairs = draw_pairings(
        [Participant(1, "Alice"), Participant(2, "Bob")], ConstraintIndex(["1-2"])
    )

    assert pairs is None


def test_no_solution_when_one_player_played_everyone(four_players):
    index = ConstraintIndex(["1-2", "1-3", "1-4"])

    assert draw_pairings(four_players, index, random.Random(3)) is None


def test_search_backtracks_to_the_only_matching():
    """Test completeness: a dead-end branch is undone until the unique matching is found"""
    participants = _players(6)
    allowed = {frozenset(p) for p in [(1, 4), (2, 5), (3, 6), (1, 2)]}
    forbidden = [
        pair
        for pair in itertools.combinations(range(1, 7), 2)
        if frozenset(pair) not in allowed
    ]
    index = ConstraintIndex().extend(forbidden)

    for seed in range(60):
        pairs = draw_pairings(participants, index, random.Random(seed))
        assert _keys(pairs) == {frozenset((1, 4)), frozenset((2, 5)), frozenset((3, 6))}


@pytest.mark.parametrize("count", [0, 1, 3, 5])
def test_bad_count_is_precondition_error(count, monkeypatch):
    """Test that odd or tiny selections fail before any search"""

    def no_search(*args):
        raise AssertionError("search must not run")

    monkeypatch.setattr(no_repeat, "_find_valid_pairs", no_search)

    with pytest.raises(PreconditionError, match="even and at least 2"):
        draw_pairings(_players(count), ConstraintIndex())


def test_duplicate_participant_is_precondition_error(alice):
    with pytest.raises(PreconditionError, match="Alice"):
        draw_pairings([alice, Participant(2, "Bob"), alice, Participant(3, "Carol")], ConstraintIndex())


def test_input_is_not_modified(four_players):
    before = list(four_players)

    draw_pairings(four_players, ConstraintIndex(), random.Random(1))

    assert four_players == before
    assert [p.name for p in four_players] == ["Alice", "Bob", "Carol", "Dave"]


def test_same_seed_same_draw(four_players):
    first = draw_pairings(four_players, ConstraintIndex(), random.Random(42))
    second = draw_pairings(four_players, ConstraintIndex(), random.Random(42))

    assert first == second


def test_pair_order_is_shuffled(four_players, monkeypatch):
    """Test that the returned pairs come in varying order for a fixed matching"""
    alice, bob, carol, dave = four_players

    def fixed_matching(remaining, index, pairs):
        return [(alice, bob), (carol, dave)]

    monkeypatch.setattr(no_repeat, "_find_valid_pairs", fixed_matching)

    first_pairs = set()
    for seed in range(30):
        pairs = draw_pairings(four_players, ConstraintIndex(), random.Random(seed))
        assert _keys(pairs) == {frozenset((1, 2)), frozenset((3, 4))}
        first_pairs.add(frozenset((pairs[0][0].id, pairs[0][1].id)))

    assert len(first_pairs) == 2
