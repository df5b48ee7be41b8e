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

# --- Constants ---
APP_NAME = "Rota Pair"
APP_VERSION = "0.1.0"
LOG_FILE_NAME = "rotapair.log"
DATA_FILE_NAME = "rotapair.json"

FIRST_ROUND = 1
MIN_PARTICIPANTS = 2
# shown in the history browser for records whose participant was deleted elsewhere
UNKNOWN_PARTICIPANT_NAME = "Unknown"

# Environment variables read by rotapair.config
STORE_URL_ENV = "ROTAPAIR_STORE_URL"
STORE_KEY_ENV = "ROTAPAIR_STORE_KEY"
HISTORY_TABLE_ENV = "ROTAPAIR_HISTORY_TABLE"
PLAYERS_TABLE_ENV = "ROTAPAIR_PLAYERS_TABLE"
TIMEOUT_ENV = "ROTAPAIR_TIMEOUT"
DATA_FILE_ENV = "ROTAPAIR_DATA_FILE"
LOG_LEVEL_ENV = "ROTAPAIR_LOG_LEVEL"

DEFAULT_HISTORY_TABLE = "history"
DEFAULT_PLAYERS_TABLE = "players"
DEFAULT_TIMEOUT = 10.0
REST_PATH = "/rest/v1/"

# User messages
MSG_COUNT_PRECONDITION = "Number of participants must be even and at least 2."
MSG_DUPLICATE_PARTICIPANT = "Participants must be unique, {name} was selected twice."
MSG_NO_SOLUTION = (
    "No valid pairing exists without repeating a previous matchup. "
    "Change the selection and draw again."
)
MSG_NOTHING_TO_RECORD = "There are no pairs to record."
MSG_INVALID_ROUND = "Round number must be a positive integer, got {round}."
MSG_EMPTY_NAME = "Name cannot be empty."
MSG_PARTICIPANT_IN_HISTORY = (
    "{name} appears in the matchup history and cannot be deleted. "
    "Clear the history first."
)
MSG_RECORDED = "History recorded successfully! Round {round}"
MSG_HISTORY_CLEARED = "History cleared. Next round is {round}."
