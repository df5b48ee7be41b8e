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

"""In-process store, used for throwaway sessions and tests."""

from typing import Dict, Iterable, List, Optional, Sequence

from rotapair.exceptions import StoreFailure
from rotapair.matchup import MatchupRecord
from rotapair.participant import Participant, clean_name
from rotapair.store.base import HistoryStore, ParticipantRegistry, sort_by_name


class MemoryStore(HistoryStore, ParticipantRegistry):
    """Keeps participants and matchup history in plain lists.

    Parameters
    ----------
    participants : Iterable[Participant], optional
        initial registry content
    records : Iterable[MatchupRecord], optional
        initial history
    """

    def __init__(
        self,
        participants: Optional[Iterable[Participant]] = None,
        records: Optional[Iterable[MatchupRecord]] = None,
    ) -> None:
        self._participants: Dict[int, Participant] = {
            p.id: p for p in participants or []
        }
        self._records: List[MatchupRecord] = list(records or [])

    # --- history ---
    def read_all(self) -> List[MatchupRecord]:
        return list(self._records)

    def append(self, records: Sequence[MatchupRecord]) -> None:
        self._records.extend(records)

    def clear(self) -> None:
        self._records.clear()

    # --- registry ---
    def list_all(self) -> List[Participant]:
        return sort_by_name(self._participants.values())

    def add(self, name: str) -> Participant:
        new_id = max(self._participants, default=0) + 1
        participant = Participant(new_id, clean_name(name))
        self._participants[new_id] = participant
        return participant

    def rename(self, participant_id: int, name: str) -> None:
        participant = self._get(participant_id)
        participant.name = clean_name(name)

    def delete(self, participant_id: int) -> None:
        self._get(participant_id)
        del self._participants[participant_id]

    def _get(self, participant_id: int) -> Participant:
        try:
            return self._participants[participant_id]
        except KeyError:
            raise StoreFailure(f"No participant with id {participant_id}") from None
