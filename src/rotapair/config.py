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

"""Runtime settings read from the environment."""

import os
from pathlib import Path
from typing import Mapping, Optional, Tuple

from dotenv import find_dotenv, load_dotenv
from PyQt6 import QtCore

from rotapair.constants import (
    DATA_FILE_ENV,
    DATA_FILE_NAME,
    DEFAULT_HISTORY_TABLE,
    DEFAULT_PLAYERS_TABLE,
    DEFAULT_TIMEOUT,
    HISTORY_TABLE_ENV,
    PLAYERS_TABLE_ENV,
    STORE_KEY_ENV,
    STORE_URL_ENV,
    TIMEOUT_ENV,
)
from rotapair.store.base import HistoryStore, ParticipantRegistry
from rotapair.utils import setup_logger

logger = setup_logger(__name__)


def default_data_file() -> Path:
    """Local store location under the Qt AppData folder."""
    folder = QtCore.QStandardPaths.writableLocation(
        QtCore.QStandardPaths.StandardLocation.AppDataLocation
    )
    if not folder:
        folder = str(Path.home())
    return Path(folder) / DATA_FILE_NAME


class Settings:
    """Settings for the persistence collaborators.

    Parameters
    ----------
    environ : Mapping[str, str], optional
        where to read the variables from. By default ``os.environ``, after
        loading a ``.env`` file from the working directory or its parents
    """

    def __init__(self, environ: Optional[Mapping[str, str]] = None) -> None:
        if environ is None:
            # variables already set in the environment take precedence
            load_dotenv(find_dotenv(usecwd=True))
        env = os.environ if environ is None else environ
        self.store_url: str = env.get(STORE_URL_ENV, "").rstrip("/")
        self.store_key: str = env.get(STORE_KEY_ENV, "")
        self.history_table: str = env.get(HISTORY_TABLE_ENV) or DEFAULT_HISTORY_TABLE
        self.players_table: str = env.get(PLAYERS_TABLE_ENV) or DEFAULT_PLAYERS_TABLE

        raw_timeout = env.get(TIMEOUT_ENV, "")
        try:
            self.timeout: float = float(raw_timeout) if raw_timeout else DEFAULT_TIMEOUT
        except ValueError:
            logger.warning(
                "Ignoring %s=%r, using %s seconds", TIMEOUT_ENV, raw_timeout, DEFAULT_TIMEOUT
            )
            self.timeout = DEFAULT_TIMEOUT

        data_file = env.get(DATA_FILE_ENV)
        self.data_file: Optional[Path] = Path(data_file) if data_file else None

    @property
    def uses_remote_store(self) -> bool:
        return bool(self.store_url)

    def open_stores(self) -> Tuple[HistoryStore, ParticipantRegistry]:
        """Create the history store and participant registry to use.

        Returns
        -------
        Tuple[HistoryStore, ParticipantRegistry]
            remote PostgREST adapters when a store URL is set, otherwise
            one local JSON file store playing both roles
        """
        if self.uses_remote_store:
            from rotapair.store.rest import RestClient

            client = RestClient.from_settings(self)
            logger.info("Using remote store at %s", self.store_url)
            return client.history_store(), client.participant_registry()

        from rotapair.store.json_file import JsonFileStore

        store = JsonFileStore(self.data_file or default_data_file())
        logger.info("Using local store at %s", store.path)
        return store, store
