"""Matchup records and the canonical key of a pair."""

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

from typing import Any, Dict, List, Tuple

from rotapair.type_hints import PairKey, Pairing


def pair_key(a_id: int, b_id: int) -> PairKey:
    """Canonical key of an unordered pair of participant ids.

    Parameters
    ----------
    a_id : int
        id of one participant
    b_id : int
        id of the other participant

    Returns
    -------
    str
        ``"<min>-<max>"``, so that ``pair_key(a, b) == pair_key(b, a)``
    """
    low, high = sorted((int(a_id), int(b_id)))
    return f"{low}-{high}"


class MatchupRecord:
    """One pair that played together in a given round.

    Records are immutable once written. The smaller id is always kept
    as ``player1_id``.
    """

    __slots__ = ("round", "player1_id", "player2_id")

    def __init__(self, round_number: int, a_id: int, b_id: int) -> None:
        low, high = sorted((int(a_id), int(b_id)))
        object.__setattr__(self, "round", int(round_number))
        object.__setattr__(self, "player1_id", low)
        object.__setattr__(self, "player2_id", high)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError("MatchupRecord is immutable")

    @property
    def key(self) -> PairKey:
        return pair_key(self.player1_id, self.player2_id)

    @property
    def ids(self) -> Tuple[int, int]:
        return self.player1_id, self.player2_id

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MatchupRecord):
            return NotImplemented
        return (self.round, self.ids) == (other.round, other.ids)

    def __hash__(self) -> int:
        return hash((self.round, self.ids))

    def __repr__(self) -> str:
        return f"MatchupRecord(round={self.round}, {self.key})"

    def to_dict(self) -> Dict[str, int]:
        """Serialize the record in the stored row shape"""
        return {
            "round": self.round,
            "player1_id": self.player1_id,
            "player2_id": self.player2_id,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "MatchupRecord":
        return cls(data["round"], data["player1_id"], data["player2_id"])


def records_for_round(round_number: int, pairing: Pairing) -> List[MatchupRecord]:
    """Build one record per pair of a drawn pairing."""
    return [MatchupRecord(round_number, a.id, b.id) for a, b in pairing]
