"""Pairing systems of Rota Pair."""

from rotapair.pairing.constraint_index import ConstraintIndex
from rotapair.pairing.no_repeat import check_participants, draw_pairings

__all__ = ["ConstraintIndex", "check_participants", "draw_pairings"]
