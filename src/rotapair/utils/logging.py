"""Logging utilities."""

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


import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from typing import Optional

from PyQt6 import QtCore

from rotapair.constants import APP_NAME, LOG_FILE_NAME, LOG_LEVEL_ENV

# the logger format used
LOG_FMT = "LVL: %(levelname)s | FILE PATH: %(pathname)s | FUN: %(funcName)s | msg: %(message)s | ln#:%(lineno)d"


def _log_level() -> int:
    """Level requested through the environment, INFO when unset or unknown."""
    name = os.environ.get(LOG_LEVEL_ENV, "INFO").upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.INFO


def _log_folder() -> Optional[str]:
    """Find a writable folder for the log file.

    Returns
    -------
    str or None
        the folder, or None when no writable location is known
    """
    # Preferred Windows location: %APPDATA%\Rota Pair
    if sys.platform == "win32" and os.environ.get("APPDATA"):
        return os.path.join(os.environ["APPDATA"], APP_NAME)

    folder = QtCore.QStandardPaths.writableLocation(
        QtCore.QStandardPaths.StandardLocation.AppDataLocation
    )
    if not folder:
        folder = QtCore.QStandardPaths.writableLocation(
            QtCore.QStandardPaths.StandardLocation.TempLocation
        )
    return folder or None


def _file_handler(formatter: logging.Formatter) -> Optional[RotatingFileHandler]:
    log_folder = _log_folder()
    if not log_folder:
        print("Warning: Could not determine writable location for log file.")
        return None

    log_folder = os.path.join(log_folder, "logs")
    try:
        os.makedirs(log_folder, exist_ok=True)
        # Use RotatingFileHandler to prevent unbounded log growth
        handler = RotatingFileHandler(
            os.path.join(log_folder, LOG_FILE_NAME),
            maxBytes=5 * 1024 * 1024,
            backupCount=5,
            encoding="utf-8",
        )
    except OSError as e:
        print(f"Warning: Could not create log file handler: {e}")
        return None
    handler.setFormatter(formatter)
    return handler


# --- Logging Setup ---
def setup_logger(logger_name: str) -> logging.Logger:
    """Set up logger for a python module.

    Sets up file handler and console handler

    Parameters
    ----------
    logger_name : str
        The name for the logger, __name__ is idiomatic

    Returns
    -------
    logging.Logger
        the created logger
    """
    lgr = logging.getLogger(name=logger_name)
    level = _log_level()
    lgr.setLevel(level)
    # Remove any existing handlers on this logger to avoid duplicates
    for _h in list(lgr.handlers):
        lgr.removeHandler(_h)
    log_formatter = logging.Formatter(LOG_FMT)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(log_formatter)
    console_handler.setLevel(level)
    lgr.addHandler(console_handler)

    file_handler = _file_handler(log_formatter)
    if file_handler:
        lgr.addHandler(file_handler)
    lgr.debug("logger %s initialized", logger_name)
    return lgr
