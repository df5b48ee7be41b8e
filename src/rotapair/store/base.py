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

"""Interfaces of the persistence collaborators."""

from abc import ABC, abstractmethod
from typing import Any, Callable, Iterable, List, Sequence, TypeVar

from rotapair.exceptions import StoreFailure
from rotapair.matchup import MatchupRecord
from rotapair.participant import Participant

T = TypeVar("T")


class HistoryStore(ABC):
    """Durable list of matchup records.

    Every method raises StoreFailure, carrying the store's own
    diagnostic text, when the underlying storage fails.
    """

    @abstractmethod
    def read_all(self) -> List[MatchupRecord]:
        """Return every stored record"""

    @abstractmethod
    def append(self, records: Sequence[MatchupRecord]) -> None:
        """Store all records, or none of them"""

    @abstractmethod
    def clear(self) -> None:
        """Delete every record"""


class ParticipantRegistry(ABC):
    """Registered participants, the pool a selection is drawn from."""

    @abstractmethod
    def list_all(self) -> List[Participant]:
        """Return all participants sorted by name"""

    @abstractmethod
    def add(self, name: str) -> Participant:
        """Register a participant, the registry assigns the id"""

    @abstractmethod
    def rename(self, participant_id: int, name: str) -> None:
        pass

    @abstractmethod
    def delete(self, participant_id: int) -> None:
        pass


def sort_by_name(participants: Sequence[Participant]) -> List[Participant]:
    return sorted(participants, key=lambda p: (p.name.casefold(), p.id))


def from_rows(factory: Callable[[Any], T], rows: Iterable[Any], source: str) -> List[T]:
    """Convert stored rows, turning malformed content into StoreFailure.

    Raises
    ------
    StoreFailure
        If a row is not a mapping or lacks a field
    """
    try:
        return [factory(row) for row in rows]
    except (KeyError, TypeError, ValueError) as e:
        raise StoreFailure(f"Malformed row in {source}: {e!r}") from e
