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


from PyQt6 import QtWidgets
from PyQt6.QtGui import QAction, QCloseEvent

from rotapair.constants import APP_NAME, APP_VERSION
from rotapair.exceptions import StoreFailure
from rotapair.round_controller import RoundController
from rotapair.utils import setup_logger

from .tabs import DrawTab, HistoryTab, PlayersTab

logger = setup_logger(__name__)


# --- Main Application Window ---
class RotaPairMainWindow(QtWidgets.QMainWindow):
    """Main application window for Rota Pair."""

    def __init__(self, controller: RoundController) -> None:
        super().__init__()
        self.controller = controller
        self.app = None

        self._setup_ui()
        self.reload()

    def _setup_ui(self):
        self.setWindowTitle(APP_NAME)
        self.setGeometry(100, 100, 1100, 700)
        self.central_widget = QtWidgets.QWidget()
        self.setCentralWidget(self.central_widget)
        self.main_layout = QtWidgets.QVBoxLayout(self.central_widget)
        self._setup_main_panel()
        self._setup_menu()
        self.statusBar().showMessage("Ready.")
        logger.info("%s v%s started.", APP_NAME, APP_VERSION)

    def _setup_main_panel(self):
        """Creates the tab widget and populates it with the tab classes."""
        self.tabs = QtWidgets.QTabWidget()
        self.main_layout.addWidget(self.tabs)

        self.draw_tab = DrawTab(self)
        self.players_tab = PlayersTab(self)
        self.history_tab = HistoryTab(self)

        for tab in (self.draw_tab, self.players_tab, self.history_tab):
            tab.status_message.connect(self.statusBar().showMessage)
        self.players_tab.participants_changed.connect(
            self.players_tab.refresh_player_list
        )
        self.players_tab.participants_changed.connect(self.draw_tab.refresh)
        self.players_tab.participants_changed.connect(self.history_tab.refresh)
        self.draw_tab.history_changed.connect(self.history_tab.refresh)
        self.history_tab.history_changed.connect(self.draw_tab.refresh)

        self.tabs.addTab(self.draw_tab, "Draw")
        self.tabs.addTab(self.players_tab, "Players")
        self.tabs.addTab(self.history_tab, "History")

    def _setup_menu(self):
        menu_bar = self.menuBar()

        file_menu = menu_bar.addMenu("&File")
        self.reload_action = self._create_action(
            "&Reload", self.reload, "F5", "Reload players and history from the store."
        )
        self.exit_action = self._create_action("E&xit", self.close, "Ctrl+Q")
        file_menu.addAction(self.reload_action)
        file_menu.addSeparator()
        file_menu.addAction(self.exit_action)

        help_menu = menu_bar.addMenu("&Help")
        self.about_action = self._create_action("&About", self.show_about_dialog)
        help_menu.addAction(self.about_action)

    def _create_action(
        self, text: str, slot: callable, shortcut: str = "", tooltip: str = ""
    ) -> QAction:
        """Helper function to create and configure a QAction.

        Args:
            text: The text to display for the action.
            slot: The function to call when the action is triggered.
            shortcut: Optional keyboard shortcut (e.g., "F5").
            tooltip: Optional tooltip to show on hover.

        Returns:
            The configured QAction.
        """
        action = QAction(text, self)
        action.triggered.connect(slot)
        if shortcut:
            action.setShortcut(shortcut)
        if tooltip:
            action.setStatusTip(tooltip)
        return action

    def set_app_instance(self, app: QtWidgets.QApplication) -> None:
        self.app = app

    def reload(self) -> None:
        """Load participants and history, rebuilding the session state."""
        try:
            self.controller.load()
        except StoreFailure as e:
            logger.error("Could not load from the store: %s", e)
            QtWidgets.QMessageBox.critical(
                self, "Load Error", f"Could not load players and history:\n{e}"
            )
        self.draw_tab.set_controller(self.controller)
        self.players_tab.set_controller(self.controller)
        self.history_tab.set_controller(self.controller)
        self.statusBar().showMessage(f"Current round: {self.controller.round}")

    def show_about_dialog(self) -> None:
        QtWidgets.QMessageBox.about(
            self,
            f"About {APP_NAME}",
            f"{APP_NAME} v{APP_VERSION}\n\n"
            "Draws pairs for a rotating doubles event without repeating "
            "a pair that already played together.",
        )

    def closeEvent(self, event: QCloseEvent):
        logger.info("%s closing.", APP_NAME)
        event.accept()
