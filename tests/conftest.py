"""
Shared fixtures for the Rota Pair tests
"""
import random

import pytest

from rotapair.exceptions import StoreFailure
from rotapair.participant import Participant
from rotapair.round_controller import RoundController
from rotapair.store.memory import MemoryStore


class FailingStore(MemoryStore):
    """Memory store whose writes fail like an unreachable database"""

    reason = "connection refused"

    def append(self, records):
        raise StoreFailure(self.reason)

    def clear(self):
        raise StoreFailure(self.reason)


@pytest.fixture
def alice():
    return Participant(1, "Alice")


@pytest.fixture
def four_players():
    return [
        Participant(1, "Alice"),
        Participant(2, "Bob"),
        Participant(3, "Carol"),
        Participant(4, "Dave"),
    ]


@pytest.fixture
def store(four_players):
    return MemoryStore(participants=four_players)


@pytest.fixture
def controller(store):
    ctrl = RoundController(store, store, rng=random.Random(7))
    ctrl.load()
    return ctrl


@pytest.fixture
def failing_store(four_players):
    return FailingStore(participants=four_players)
