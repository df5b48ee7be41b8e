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
No-Repeat Pairing System

Partitions the selected participants into pairs so that no pair has
already played together, using a randomized backtracking search.

The search:
- shuffles the participants once (uniform Fisher-Yates shuffle)
- pairs the first remaining participant with the first compatible
  partner in shuffled order, then recurses on the rest
- undoes the last pair and tries the next partner when a branch fails
- shuffles the order of the pairs of a successful result

The search is complete: if a valid perfect matching exists it is found.
Participant counts are tournament rosters, so the exponential worst case
is acceptable.

Example:
    >>> people = [Participant(1, "Alice"), Participant(2, "Bob")]
    >>> len(draw_pairings(people, ConstraintIndex()))
    1
    >>> draw_pairings(people, ConstraintIndex(["1-2"])) is None
    True
"""

import random
from typing import Optional, Sequence

from rotapair.constants import (
    MIN_PARTICIPANTS,
    MSG_COUNT_PRECONDITION,
    MSG_DUPLICATE_PARTICIPANT,
)
from rotapair.exceptions import PreconditionError
from rotapair.pairing.constraint_index import ConstraintIndex
from rotapair.participant import Participant
from rotapair.type_hints import MaybePairing, Pairing, Participants
from rotapair.utils import setup_logger

logger = setup_logger(__name__)


def check_participants(participants: Sequence[Participant]) -> None:
    """Validate a selection before any search work is done.

    Raises
    ------
    PreconditionError
        If the count is odd or below 2, or a participant id repeats
    """
    count = len(participants)
    if count < MIN_PARTICIPANTS or count % 2 != 0:
        raise PreconditionError(MSG_COUNT_PRECONDITION)

    seen = set()
    for participant in participants:
        if participant.id in seen:
            raise PreconditionError(
                MSG_DUPLICATE_PARTICIPANT.format(name=participant.name)
            )
        seen.add(participant.id)


def _find_valid_pairs(
    remaining: Participants, index: ConstraintIndex, pairs: Pairing
) -> MaybePairing:
    """Backtracking step.

    Parameters
    ----------
    remaining : List[Participant]
        participants not paired yet, in shuffled order
    index : ConstraintIndex
        pairs that must not be repeated
    pairs : List[Pair]
        pairs accumulated so far, not modified

    Returns
    -------
    List[Pair] or None
        the completed pairing, or None when this branch has no solution
    """
    if not remaining:
        return pairs

    first, rest = remaining[0], remaining[1:]
    for i, partner in enumerate(rest):
        if index.contains(first.id, partner.id):
            continue
        result = _find_valid_pairs(
            rest[:i] + rest[i + 1 :], index, pairs + [(first, partner)]
        )
        if result is not None:
            return result

    return None


def draw_pairings(
    participants: Sequence[Participant],
    index: ConstraintIndex,
    rng: Optional[random.Random] = None,
) -> MaybePairing:
    """Draw pairs for one round without repeating an indexed pair.

    Parameters
    ----------
    participants : Sequence[Participant]
        the selection, even sized, at least 2, no duplicates
    index : ConstraintIndex
        pairs that already played together
    rng : random.Random, optional
        source of randomness, the module level generator when omitted

    Returns
    -------
    List[Pair] or None
        the drawn pairs in random order, or None when no valid pairing
        exists. None is a normal outcome, not an error.

    Raises
    ------
    PreconditionError
        If the selection breaks a precondition; no search is attempted
    """
    check_participants(participants)
    rng = rng or random.Random()

    shuffled = list(participants)
    rng.shuffle(shuffled)

    pairs = _find_valid_pairs(shuffled, index, [])
    if pairs is None:
        logger.info(
            "No valid pairing for %d participants against %d recorded pairs",
            len(participants),
            len(index),
        )
        return None

    # pair order is cosmetic
    rng.shuffle(pairs)
    logger.info("Drew %d pairs for %d participants", len(pairs), len(participants))
    return pairs
