"""Remote store over a PostgREST endpoint (Supabase style).

Each table is reached at ``<store url>/rest/v1/<table>``. The project key
is sent both as ``apikey`` and as a bearer token.
"""

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

from typing import Any, Dict, List, Optional, Sequence

import httpx

from rotapair.constants import (
    DEFAULT_HISTORY_TABLE,
    DEFAULT_PLAYERS_TABLE,
    DEFAULT_TIMEOUT,
    REST_PATH,
)
from rotapair.exceptions import StoreFailure
from rotapair.matchup import MatchupRecord
from rotapair.participant import Participant, clean_name
from rotapair.store.base import HistoryStore, ParticipantRegistry, from_rows
from rotapair.utils import setup_logger

logger = setup_logger(__name__)

HISTORY_COLUMNS = "round,player1_id,player2_id"
PLAYER_COLUMNS = "id,name"


def _error_text(response: httpx.Response) -> str:
    """Diagnostic text of a failed response, the ``message`` field when present."""
    try:
        body = response.json()
    except ValueError:
        body = None
    if isinstance(body, dict) and body.get("message"):
        return str(body["message"])
    return response.text or f"HTTP {response.status_code}"


class RestClient:
    """Thin httpx wrapper that turns every failure into StoreFailure.

    Parameters
    ----------
    store_url : str
        project url, e.g. ``https://abc.supabase.co``
    api_key : str
        project key
    timeout : float
        seconds before a request is abandoned
    transport : httpx.BaseTransport, optional
        custom transport, used by the tests
    """

    def __init__(
        self,
        store_url: str,
        api_key: str,
        timeout: float = DEFAULT_TIMEOUT,
        history_table: str = DEFAULT_HISTORY_TABLE,
        players_table: str = DEFAULT_PLAYERS_TABLE,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        self.history_table = history_table
        self.players_table = players_table
        self._client = httpx.Client(
            base_url=store_url.rstrip("/") + REST_PATH,
            headers={
                "apikey": api_key,
                "Authorization": f"Bearer {api_key}",
                "Content-Type": "application/json",
            },
            timeout=timeout,
            transport=transport,
        )

    @classmethod
    def from_settings(cls, settings, transport=None) -> "RestClient":
        return cls(
            settings.store_url,
            settings.store_key,
            timeout=settings.timeout,
            history_table=settings.history_table,
            players_table=settings.players_table,
            transport=transport,
        )

    def request(self, method: str, table: str, **kwargs: Any) -> httpx.Response:
        """Send one request.

        Raises
        ------
        StoreFailure
            On a network error or a non 2xx response, with the server's
            own message
        """
        try:
            response = self._client.request(method, table, **kwargs)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            reason = _error_text(e.response)
            logger.error("%s %s failed: %s", method, table, reason)
            raise StoreFailure(reason) from e
        except httpx.RequestError as e:
            logger.error("%s %s failed: %s", method, table, e)
            raise StoreFailure(str(e)) from e
        return response

    def json(self, method: str, table: str, **kwargs: Any) -> List[Dict[str, Any]]:
        response = self.request(method, table, **kwargs)
        try:
            return response.json()
        except ValueError as e:
            raise StoreFailure(f"Invalid JSON from {table}: {e}") from e

    def history_store(self) -> "RestHistoryStore":
        return RestHistoryStore(self, self.history_table)

    def participant_registry(self) -> "RestParticipantRegistry":
        return RestParticipantRegistry(self, self.players_table)

    def close(self) -> None:
        self._client.close()


class RestHistoryStore(HistoryStore):
    def __init__(self, client: RestClient, table: str) -> None:
        self.client = client
        self.table = table

    def read_all(self) -> List[MatchupRecord]:
        rows = self.client.json(
            "GET",
            self.table,
            params={"select": HISTORY_COLUMNS, "order": "round.asc"},
        )
        records = from_rows(MatchupRecord.from_dict, rows, self.table)
        logger.debug("Read %d matchup records", len(records))
        return records

    def append(self, records: Sequence[MatchupRecord]) -> None:
        if not records:
            return
        # a bulk insert is a single statement, so it is all-or-nothing
        self.client.request(
            "POST",
            self.table,
            json=[record.to_dict() for record in records],
            headers={"Prefer": "return=minimal"},
        )

    def clear(self) -> None:
        # PostgREST refuses an unfiltered DELETE; every round is positive
        self.client.request("DELETE", self.table, params={"round": "gt.0"})


class RestParticipantRegistry(ParticipantRegistry):
    def __init__(self, client: RestClient, table: str) -> None:
        self.client = client
        self.table = table

    def list_all(self) -> List[Participant]:
        rows = self.client.json(
            "GET",
            self.table,
            params={"select": PLAYER_COLUMNS, "order": "name.asc"},
        )
        return from_rows(Participant.from_dict, rows, self.table)

    def add(self, name: str) -> Participant:
        rows = self.client.json(
            "POST",
            self.table,
            json=[{"name": clean_name(name)}],
            headers={"Prefer": "return=representation"},
        )
        if not rows:
            raise StoreFailure(f"{self.table} did not return the new participant")
        return from_rows(Participant.from_dict, rows, self.table)[0]

    def rename(self, participant_id: int, name: str) -> None:
        rows = self.client.json(
            "PATCH",
            self.table,
            params={"id": f"eq.{participant_id}"},
            json={"name": clean_name(name)},
            headers={"Prefer": "return=representation"},
        )
        if not rows:
            raise StoreFailure(f"No participant with id {participant_id}")

    def delete(self, participant_id: int) -> None:
        rows = self.client.json(
            "DELETE",
            self.table,
            params={"id": f"eq.{participant_id}"},
            headers={"Prefer": "return=representation"},
        )
        if not rows:
            raise StoreFailure(f"No participant with id {participant_id}")
