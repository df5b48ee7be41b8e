"""Relating to the rounds of a rotating pairs event managed by Rota Pair."""

# Rota Pair
# Copyright (C) 2025  Rota Pair developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.


import random
from typing import Iterable, List, Optional

from rotapair.constants import (
    FIRST_ROUND,
    MSG_INVALID_ROUND,
    MSG_NOTHING_TO_RECORD,
    MSG_PARTICIPANT_IN_HISTORY,
)
from rotapair.exceptions import PreconditionError
from rotapair.matchup import MatchupRecord, records_for_round
from rotapair.pairing import ConstraintIndex, draw_pairings
from rotapair.participant import Participant
from rotapair.store.base import HistoryStore, ParticipantRegistry
from rotapair.type_hints import MaybePairing, Pairing
from rotapair.utils import setup_logger

logger = setup_logger(__name__)


def current_round(records: Iterable[MatchupRecord]) -> int:
    """Number of the round to draw next.

    Parameters
    ----------
    records : Iterable[MatchupRecord]
        every stored matchup record

    Returns
    -------
    int
        one more than the highest recorded round, or 1 without history
    """
    return max((record.round for record in records), default=FIRST_ROUND - 1) + 1


class CommitResult:
    """Outcome of a successful commit.

    Attributes:
        next_round: the round number to draw next
        index: the constraint index including the committed pairs
        records: the records that were stored
    """

    def __init__(
        self, next_round: int, index: ConstraintIndex, records: List[MatchupRecord]
    ) -> None:
        self.next_round = next_round
        self.index = index
        self.records = records

    def __repr__(self) -> str:
        return f"CommitResult(next_round={self.next_round}, pairs={len(self.records)})"


def commit_round(
    round_number: int,
    pairing: Pairing,
    history_store: HistoryStore,
    index: ConstraintIndex,
) -> CommitResult:
    """Record a confirmed pairing, then extend the constraint index.

    The index is only extended once the store accepted the records, so a
    failed append leaves the caller's index and round counter untouched.

    Raises
    ------
    PreconditionError
        If the pairing is empty or the round number is not positive
    StoreFailure
        If the history store rejects the records
    """
    if not pairing:
        raise PreconditionError(MSG_NOTHING_TO_RECORD)
    if round_number < FIRST_ROUND:
        raise PreconditionError(MSG_INVALID_ROUND.format(round=round_number))

    records = records_for_round(round_number, pairing)
    history_store.append(records)
    logger.info("Recorded %d pairs for round %d", len(records), round_number)

    new_index = index.extend(record.ids for record in records)
    return CommitResult(round_number + 1, new_index, records)


def reset_history(history_store: HistoryStore) -> None:
    """Delete every matchup record.

    The caller resets its round counter and constraint index afterwards.
    """
    history_store.clear()
    logger.info("Matchup history cleared")


class RoundController:
    """Manages the session state: selection, drawn pairing, round and index.

    Parameters
    ----------
    history_store : HistoryStore
        where matchup records are persisted
    registry : ParticipantRegistry, optional
        where participants are registered
    rng : random.Random, optional
        randomness used for the draws
    """

    def __init__(
        self,
        history_store: HistoryStore,
        registry: Optional[ParticipantRegistry] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.history_store = history_store
        self.registry = registry
        self.rng = rng or random.Random()

        self.records: List[MatchupRecord] = []
        self.index: ConstraintIndex = ConstraintIndex()
        self.round: int = FIRST_ROUND
        self.participants: List[Participant] = []
        self.selection: List[Participant] = []
        self.drawn: MaybePairing = None

    # --- loading ---
    def load_history(self) -> None:
        """Reload matchup history, rebuilding the index and round counter."""
        records = self.history_store.read_all()
        self.records = records
        self.index = ConstraintIndex.build(records)
        self.round = current_round(records)
        logger.info(
            "Loaded %d matchup records, next round is %d", len(records), self.round
        )

    def load_participants(self) -> List[Participant]:
        """Reload the registered pool.

        The selection and the drawn pairs are rebuilt from the fresh
        participants so renames show up. Vanished participants are dropped
        from the selection, and the drawn pairs are discarded when they
        involve one.
        """
        if self.registry is None:
            return self.participants
        self.participants = self.registry.list_all()
        by_id = {p.id: p for p in self.participants}
        self.selection = [by_id[p.id] for p in self.selection if p.id in by_id]
        if self.drawn is not None:
            if all(a.id in by_id and b.id in by_id for a, b in self.drawn):
                self.drawn = [(by_id[a.id], by_id[b.id]) for a, b in self.drawn]
            else:
                logger.info("Discarding drawn pairs, a participant was removed")
                self.drawn = None
        return self.participants

    def load(self) -> None:
        self.load_participants()
        self.load_history()

    # --- selection ---
    def select(self, participant: Participant) -> bool:
        """Add a participant to the selection.

        Returns
        -------
        bool
            False when the participant was already selected
        """
        if participant in self.selection:
            return False
        self.selection.append(participant)
        return True

    def deselect(self, participant: Participant) -> None:
        self.selection = [p for p in self.selection if p != participant]

    def clear_selection(self) -> None:
        self.selection = []
        self.drawn = None

    # --- drawing ---
    def draw(self) -> MaybePairing:
        """Draw pairs for the current selection.

        Returns
        -------
        List[Pair] or None
            the drawn pairs, held until committed or discarded, or None
            when no pairing avoids the recorded matchups

        Raises
        ------
        PreconditionError
            If the selection is odd, too small or has duplicates
        """
        self.drawn = None
        self.drawn = draw_pairings(self.selection, self.index, self.rng)
        return self.drawn

    def discard(self) -> None:
        self.drawn = None

    def commit(self) -> int:
        """Record the drawn pairing for the current round.

        Returns
        -------
        int
            the new current round

        Raises
        ------
        PreconditionError
            If nothing was drawn
        StoreFailure
            If the history store rejects the records; no state changes
        """
        result = commit_round(
            self.round, self.drawn or [], self.history_store, self.index
        )
        self.records = self.records + result.records
        self.index = result.index
        self.round = result.next_round
        self.selection = []
        self.drawn = None
        return self.round

    def reset_history(self) -> None:
        """Clear the history store and every piece of derived session state.

        Raises
        ------
        StoreFailure
            If the store could not be cleared; no state changes
        """
        reset_history(self.history_store)
        self.records = []
        self.index = ConstraintIndex()
        self.round = FIRST_ROUND
        self.selection = []
        self.drawn = None

    # --- registry ---
    def add_participant(self, name: str) -> Participant:
        participant = self._registry().add(name)
        logger.info("Registered %s", participant)
        self.load_participants()
        return participant

    def rename_participant(self, participant: Participant, name: str) -> None:
        self._registry().rename(participant.id, name)
        self.load_participants()

    def delete_participant(self, participant: Participant) -> None:
        """Delete a participant who never appeared in the history.

        Raises
        ------
        PreconditionError
            If any stored matchup record references the participant
        StoreFailure
            If the history or the registry cannot be reached
        """
        referenced = any(
            participant.id in record.ids for record in self.history_store.read_all()
        )
        if referenced:
            raise PreconditionError(
                MSG_PARTICIPANT_IN_HISTORY.format(name=participant.name)
            )
        self._registry().delete(participant.id)
        logger.info("Deleted %s", participant)
        self.load_participants()

    def _registry(self) -> ParticipantRegistry:
        if self.registry is None:
            raise PreconditionError("No participant registry configured.")
        return self.registry
