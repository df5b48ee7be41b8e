"""A participant registered for the rotating event."""

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

from typing import Any, Dict

from rotapair.constants import MSG_EMPTY_NAME
from rotapair.exceptions import PreconditionError


def clean_name(name: str) -> str:
    """Strip a participant name, refusing empty ones.

    Raises
    ------
    PreconditionError
        When nothing is left after stripping
    """
    cleaned = (name or "").strip()
    if not cleaned:
        raise PreconditionError(MSG_EMPTY_NAME)
    return cleaned


class Participant:
    """Represents a registered participant.

    The id is assigned by the participant registry, never by the app.
    Two participants are equal when their ids are equal.
    """

    def __init__(self, participant_id: int, name: str) -> None:
        self.id: int = int(participant_id)
        self.name: str = name

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Participant):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self) -> str:
        return f"Participant({self.id}, {self.name!r})"

    def __str__(self) -> str:
        return self.name

    def to_dict(self) -> Dict[str, Any]:
        """Serialize participant data"""
        return {"id": self.id, "name": self.name}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Participant":
        return cls(data["id"], data["name"])
