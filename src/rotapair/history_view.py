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

"""Round by round view of the matchup history."""

from typing import Dict, Iterable, List, Tuple

from rotapair.constants import UNKNOWN_PARTICIPANT_NAME
from rotapair.matchup import MatchupRecord
from rotapair.participant import Participant


class RoundSummary:
    """The named pairs of one recorded round."""

    def __init__(self, round_number: int, pairs: List[Tuple[str, str]]) -> None:
        self.round = round_number
        self.pairs = pairs

    def __repr__(self) -> str:
        return f"RoundSummary({self.round}, {self.pairs})"


def group_by_round(
    records: Iterable[MatchupRecord], participants: Iterable[Participant]
) -> List[RoundSummary]:
    """Group records by round, resolving participant names.

    Parameters
    ----------
    records : Iterable[MatchupRecord]
        stored matchup history
    participants : Iterable[Participant]
        registered participants

    Returns
    -------
    List[RoundSummary]
        one summary per round, ascending. Ids no longer registered show
        as ``"Unknown"``.
    """
    names: Dict[int, str] = {p.id: p.name for p in participants}
    rounds: Dict[int, List[Tuple[str, str]]] = {}
    for record in records:
        rounds.setdefault(record.round, []).append(
            (
                names.get(record.player1_id, UNKNOWN_PARTICIPANT_NAME),
                names.get(record.player2_id, UNKNOWN_PARTICIPANT_NAME),
            )
        )
    return [RoundSummary(number, rounds[number]) for number in sorted(rounds)]
