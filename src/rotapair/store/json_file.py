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

"""Local JSON file store, used when no remote store is configured.

The file holds one object::

    {"players": [{"id": 1, "name": "Alice"}, ...],
     "history": [{"round": 1, "player1_id": 1, "player2_id": 2}, ...]}
"""

import json
import os
from pathlib import Path
from typing import Any, Dict, List, Sequence, Union

from rotapair.exceptions import StoreFailure
from rotapair.matchup import MatchupRecord
from rotapair.participant import Participant, clean_name
from rotapair.store.base import (
    HistoryStore,
    ParticipantRegistry,
    from_rows,
    sort_by_name,
)
from rotapair.utils import setup_logger

logger = setup_logger(__name__)


class JsonFileStore(HistoryStore, ParticipantRegistry):
    """Participants and history persisted in a single JSON file.

    Every write replaces the whole file through a temporary sibling, so
    an interrupted write leaves the previous content intact.
    """

    def __init__(self, path: Union[str, Path]) -> None:
        self.path = Path(path)

    def _load(self) -> Dict[str, List[Dict[str, Any]]]:
        if not self.path.exists():
            return {"players": [], "history": []}
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.error("Could not read %s: %s", self.path, e)
            raise StoreFailure(f"Could not read {self.path}: {e}") from e
        if not isinstance(data, dict):
            raise StoreFailure(f"Could not read {self.path}: expected a JSON object")
        data.setdefault("players", [])
        data.setdefault("history", [])
        for section in ("players", "history"):
            if not isinstance(data[section], list):
                raise StoreFailure(
                    f"Could not read {self.path}: \"{section}\" is not a list"
                )
        return data

    def _save(self, data: Dict[str, List[Dict[str, Any]]]) -> None:
        tmp_path = self.path.with_name(self.path.name + ".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(tmp_path, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=4)
            os.replace(tmp_path, self.path)
        except OSError as e:
            logger.error("Could not write %s: %s", self.path, e)
            raise StoreFailure(f"Could not write {self.path}: {e}") from e

    # --- history ---
    def read_all(self) -> List[MatchupRecord]:
        return from_rows(MatchupRecord.from_dict, self._load()["history"], str(self.path))

    def append(self, records: Sequence[MatchupRecord]) -> None:
        data = self._load()
        data["history"].extend(record.to_dict() for record in records)
        self._save(data)

    def clear(self) -> None:
        data = self._load()
        data["history"] = []
        self._save(data)

    # --- registry ---
    def list_all(self) -> List[Participant]:
        return sort_by_name(
            from_rows(Participant.from_dict, self._load()["players"], str(self.path))
        )

    def add(self, name: str) -> Participant:
        name = clean_name(name)
        data = self._load()
        registered = from_rows(Participant.from_dict, data["players"], str(self.path))
        new_id = max((p.id for p in registered), default=0) + 1
        participant = Participant(new_id, name)
        data["players"].append(participant.to_dict())
        self._save(data)
        return participant

    def rename(self, participant_id: int, name: str) -> None:
        name = clean_name(name)
        data = self._load()
        self._row(data, participant_id)["name"] = name
        self._save(data)

    def delete(self, participant_id: int) -> None:
        data = self._load()
        row = self._row(data, participant_id)
        data["players"].remove(row)
        self._save(data)

    @staticmethod
    def _row(data: Dict[str, List[Dict[str, Any]]], participant_id: int) -> Dict[str, Any]:
        for row in data["players"]:
            if isinstance(row, dict) and row.get("id") == participant_id:
                return row
        raise StoreFailure(f"No participant with id {participant_id}")
