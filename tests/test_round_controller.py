"""
Unit tests for round numbering, commits, history reset and the session controller
"""
import random

import pytest

from rotapair.exceptions import PreconditionError, StoreFailure
from rotapair.matchup import MatchupRecord
from rotapair.pairing import ConstraintIndex
from rotapair.participant import Participant
from rotapair.round_controller import (
    RoundController,
    commit_round,
    current_round,
    reset_history,
)
from rotapair.store.memory import MemoryStore


def test_current_round_without_history():
    assert current_round([]) == 1


def test_current_round_is_one_past_highest():
    """Test that gaps in the history do not matter, only the maximum"""
    records = [MatchupRecord(1, 1, 2), MatchupRecord(3, 3, 4)]

    assert current_round(records) == 4


def test_current_round_is_idempotent(store):
    store.append([MatchupRecord(2, 1, 2)])

    assert current_round(store.read_all()) == current_round(store.read_all()) == 3


def test_commit_extends_index_and_round(four_players):
    """Test commit(3, [(A,B),(C,D)]) then a new round number of 4"""
    alice, bob, carol, dave = four_players
    store = MemoryStore()

    result = commit_round(3, [(alice, bob), (carol, dave)], store, ConstraintIndex())

    assert result.next_round == 4
    assert result.index.contains(alice.id, bob.id)
    assert result.index.contains(carol.id, dave.id)
    assert store.read_all() == [MatchupRecord(3, 1, 2), MatchupRecord(3, 3, 4)]
    assert current_round(store.read_all()) == 4


def test_commit_failure_leaves_index_untouched(four_players, failing_store):
    alice, bob, carol, dave = four_players
    index = ConstraintIndex(["1-3"])

    with pytest.raises(StoreFailure, match="connection refused"):
        commit_round(2, [(alice, bob), (carol, dave)], failing_store, index)

    assert index == ConstraintIndex(["1-3"])


def test_commit_empty_pairing_is_rejected():
    with pytest.raises(PreconditionError):
        commit_round(1, [], MemoryStore(), ConstraintIndex())


def test_commit_rejects_round_zero(four_players):
    alice, bob = four_players[:2]

    with pytest.raises(PreconditionError):
        commit_round(0, [(alice, bob)], MemoryStore(), ConstraintIndex())


def test_reset_history_clears_store():
    store = MemoryStore(records=[MatchupRecord(1, 1, 2)])

    reset_history(store)

    assert store.read_all() == []


# --- RoundController ---


def test_controller_loads_history(four_players):
    store = MemoryStore(four_players, [MatchupRecord(1, 1, 2), MatchupRecord(2, 3, 4)])
    ctrl = RoundController(store, store)

    ctrl.load()

    assert ctrl.round == 3
    assert ctrl.index == ConstraintIndex(["1-2", "3-4"])
    assert [p.name for p in ctrl.participants] == ["Alice", "Bob", "Carol", "Dave"]


def test_select_ignores_duplicates(controller, alice):
    assert controller.select(alice) is True
    assert controller.select(Participant(1, "Alice")) is False
    assert controller.selection == [alice]


def test_deselect(controller, four_players):
    for participant in four_players:
        controller.select(participant)

    controller.deselect(four_players[1])

    assert [p.id for p in controller.selection] == [1, 3, 4]


def test_full_round_cycle(controller, four_players, store):
    """Test select, draw, commit, then the next draw avoids the recorded pairs"""
    for participant in four_players:
        controller.select(participant)

    first = controller.draw()
    assert first is not None
    assert controller.commit() == 2

    assert controller.selection == []
    assert controller.drawn is None
    assert len(store.read_all()) == 2
    assert controller.index == ConstraintIndex.build(store.read_all())

    for participant in four_players:
        controller.select(participant)
    second = controller.draw()
    first_keys = {frozenset((a.id, b.id)) for a, b in first}
    second_keys = {frozenset((a.id, b.id)) for a, b in second}
    assert not first_keys & second_keys


def test_draw_with_odd_selection(controller, four_players):
    for participant in four_players[:3]:
        controller.select(participant)

    with pytest.raises(PreconditionError):
        controller.draw()
    assert controller.drawn is None


def test_draw_no_solution_is_not_an_error(four_players):
    store = MemoryStore(four_players, [MatchupRecord(1, 1, 2)])
    ctrl = RoundController(store, store, rng=random.Random(0))
    ctrl.load()
    ctrl.select(four_players[0])
    ctrl.select(four_players[1])

    assert ctrl.draw() is None
    assert ctrl.drawn is None


def test_commit_without_draw(controller):
    with pytest.raises(PreconditionError):
        controller.commit()
    assert controller.round == 1


def test_failed_commit_keeps_session_state(four_players, failing_store):
    """Test that a store failure changes neither index, round nor the drawn pairs"""
    ctrl = RoundController(failing_store, failing_store, rng=random.Random(5))
    ctrl.load()
    for participant in four_players:
        ctrl.select(participant)
    drawn = ctrl.draw()

    with pytest.raises(StoreFailure):
        ctrl.commit()

    assert ctrl.round == 1
    assert len(ctrl.index) == 0
    assert ctrl.drawn == drawn
    assert len(ctrl.selection) == 4


def test_discard_has_no_side_effects(controller, four_players, store):
    for participant in four_players:
        controller.select(participant)
    controller.draw()

    controller.discard()

    assert controller.drawn is None
    assert store.read_all() == []
    assert controller.round == 1


def test_reset_history_resets_everything(controller, four_players, store):
    for participant in four_players:
        controller.select(participant)
    controller.draw()
    controller.commit()
    controller.select(four_players[0])

    controller.reset_history()

    assert store.read_all() == []
    assert controller.round == 1
    assert len(controller.index) == 0
    assert controller.selection == []
    assert controller.records == []


def test_failed_reset_changes_nothing(four_players, failing_store):
    failing_store._records.append(MatchupRecord(1, 1, 2))
    ctrl = RoundController(failing_store, failing_store)
    ctrl.load()

    with pytest.raises(StoreFailure):
        ctrl.reset_history()

    assert ctrl.round == 2
    assert ctrl.index.contains(1, 2)


def test_delete_participant_in_history_is_refused(four_players):
    store = MemoryStore(four_players, [MatchupRecord(1, 1, 2)])
    ctrl = RoundController(store, store)
    ctrl.load()

    with pytest.raises(PreconditionError, match="Alice"):
        ctrl.delete_participant(four_players[0])
    assert len(store.list_all()) == 4


def test_delete_participant_without_history(controller, four_players, store):
    controller.select(four_players[3])

    controller.delete_participant(four_players[3])

    assert [p.name for p in store.list_all()] == ["Alice", "Bob", "Carol"]
    assert controller.selection == []


def test_add_and_rename_participant(controller):
    erin = controller.add_participant("  Erin ")

    assert erin.id == 5
    assert erin.name == "Erin"
    assert erin in controller.participants

    controller.rename_participant(erin, "Erin B")
    assert [p.name for p in controller.participants if p.id == 5] == ["Erin B"]


def test_add_empty_name_is_refused(controller):
    with pytest.raises(PreconditionError, match="empty"):
        controller.add_participant("   ")


def test_registry_calls_without_registry():
    ctrl = RoundController(MemoryStore())

    with pytest.raises(PreconditionError):
        ctrl.add_participant("Erin")
    assert ctrl.load_participants() == []


def test_deleting_a_drawn_participant_discards_the_draw(controller, four_players, store):
    """Test that a removed participant can never be recorded"""
    for participant in four_players:
        controller.select(participant)
    controller.draw()

    controller.delete_participant(four_players[3])

    assert controller.drawn is None
    assert [p.id for p in controller.selection] == [1, 2, 3]
    with pytest.raises(PreconditionError):
        controller.commit()
    assert store.read_all() == []
    assert controller.round == 1


def test_rename_refreshes_selection_and_draw(controller, four_players):
    """Test that the selection shows new names, even when holding stale objects"""
    for participant in four_players:
        controller.select(Participant(participant.id, participant.name))
    controller.draw()

    controller.rename_participant(four_players[0], "Alicia")

    names = {p.name for p in controller.selection}
    drawn_names = {p.name for pair in controller.drawn for p in pair}
    assert "Alicia" in names and "Alice" not in names
    assert "Alicia" in drawn_names and "Alice" not in drawn_names
