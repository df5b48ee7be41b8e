"""Rota Pair entry point."""

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

import platform
import sys

from PyQt6 import QtWidgets

from rotapair.config import Settings
from rotapair.constants import APP_NAME
from rotapair.exceptions import StyleException
from rotapair.gui.mainwindow import RotaPairMainWindow
from rotapair.resources.resource_utils import get_style_sheet
from rotapair.round_controller import RoundController
from rotapair.utils import setup_logger

logger = setup_logger(__name__)


def main():
    """Entry point."""
    exit_code = run_app()
    logger.info("run_app() exited with code: %s", exit_code)
    sys.exit(exit_code)


def set_application_style(app: QtWidgets.QApplication) -> None:
    """Set application style.

    Parameters
    ----------
    app : QtWidgets.QApplication
       The app to set the style for

    Raises
    ------
    StyleException
        When the style sheet cannot be read
    """
    try:
        style_text = get_style_sheet()
    except (FileNotFoundError, OSError) as e:
        raise StyleException(f"Could not read the style sheet: {e}") from e

    logger.debug("style_text: (%s)\n", style_text)
    app.setStyleSheet(style_text)


def run_app() -> int:
    """Run the gui application.

    Returns
    -------
    int
        the exit code from app.exec()
    """
    app = QtWidgets.QApplication(sys.argv)
    app.setApplicationName(APP_NAME)

    system = platform.system()
    if system == "Windows":
        app.setStyle("WindowsVista")
    elif system == "Darwin":  # macOS
        app.setStyle("macos")
    else:
        app.setStyle("fusion")  # Best cross-platform option

    try:
        set_application_style(app)
    except StyleException as e:
        logger.warning("%s, using the default style", e)

    history_store, registry = Settings().open_stores()
    controller = RoundController(history_store, registry)

    window = RotaPairMainWindow(controller)
    window.set_app_instance(app)
    window.show()

    exit_code = app.exec()
    return exit_code


if __name__ == "__main__":
    main()

#  LocalWords:  StyleException WindowsVista macos
