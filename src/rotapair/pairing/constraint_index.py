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

"""
Constraint Index

The set of canonical pair keys of every matchup already recorded. It is
derived from the history store and never authoritative: it is rebuilt on
every history load and extended only after a successful commit.

Example:
    >>> index = ConstraintIndex.build([MatchupRecord(1, 2, 1)])
    >>> index.contains(1, 2)
    True
    >>> index.contains(2, 1)
    True
"""

from typing import FrozenSet, Iterable, Iterator, Tuple

from rotapair.matchup import MatchupRecord, pair_key
from rotapair.type_hints import PairKey


class ConstraintIndex:
    """Immutable set of pairs that must not be drawn again.

    Attributes:
        keys: frozen set of canonical ``"<min>-<max>"`` keys
    """

    def __init__(self, keys: Iterable[PairKey] = ()) -> None:
        self.keys: FrozenSet[PairKey] = frozenset(keys)

    @classmethod
    def build(cls, records: Iterable[MatchupRecord]) -> "ConstraintIndex":
        """Build the index from a snapshot of matchup records in O(n)."""
        return cls(record.key for record in records)

    def contains(self, a_id: int, b_id: int) -> bool:
        """True when the two participants already played together."""
        return pair_key(a_id, b_id) in self.keys

    def extend(self, id_pairs: Iterable[Tuple[int, int]]) -> "ConstraintIndex":
        """Return a new index with the given id pairs added.

        The receiver is left untouched, so a caller can prepare the
        extended index and only swap it in once the matching records are
        durably stored.
        """
        return ConstraintIndex(self.keys.union(pair_key(a, b) for a, b in id_pairs))

    def __contains__(self, key: object) -> bool:
        return key in self.keys

    def __iter__(self) -> Iterator[PairKey]:
        return iter(sorted(self.keys))

    def __len__(self) -> int:
        return len(self.keys)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ConstraintIndex):
            return NotImplemented
        return self.keys == other.keys

    def __repr__(self) -> str:
        return f"ConstraintIndex({sorted(self.keys)})"
