"""Types used in Rota Pair."""

from typing import TYPE_CHECKING, List, Optional, Tuple

if TYPE_CHECKING:
    from rotapair.participant import Participant

PairKey = str  # "<min id>-<max id>"
Pair = Tuple["Participant", "Participant"]
Pairing = List[Pair]  # All pairs drawn for one round
MaybePairing = Optional[Pairing]  # None when no valid pairing exists
Participants = List["Participant"]
#  LocalWords:  MaybePairing PairKey
