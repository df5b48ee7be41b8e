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

from typing import List, Optional

from PyQt6 import QtWidgets
from PyQt6.QtCore import pyqtSignal

from rotapair.constants import MSG_HISTORY_CLEARED
from rotapair.exceptions import StoreFailure
from rotapair.history_view import RoundSummary, group_by_round
from rotapair.round_controller import RoundController
from rotapair.utils import setup_logger

logger = setup_logger(__name__)


class HistoryTab(QtWidgets.QWidget):
    """Browse recorded rounds one at a time, and clear the history."""

    status_message = pyqtSignal(str)
    history_changed = pyqtSignal()

    def __init__(self, parent=None):
        super().__init__(parent)
        self.controller: Optional[RoundController] = None
        self.rounds: List[RoundSummary] = []
        self.round_position: int = 0
        self.main_layout = QtWidgets.QVBoxLayout(self)

        self.history_group = QtWidgets.QGroupBox("Matchup History")
        history_layout = QtWidgets.QVBoxLayout(self.history_group)

        nav_layout = QtWidgets.QHBoxLayout()
        self.btn_previous = QtWidgets.QPushButton("< Previous")
        self.btn_previous.clicked.connect(self.show_previous_round)
        self.lbl_round = QtWidgets.QLabel()
        self.btn_next = QtWidgets.QPushButton("Next >")
        self.btn_next.clicked.connect(self.show_next_round)
        nav_layout.addWidget(self.btn_previous)
        nav_layout.addStretch()
        nav_layout.addWidget(self.lbl_round)
        nav_layout.addStretch()
        nav_layout.addWidget(self.btn_next)
        history_layout.addLayout(nav_layout)

        self.list_pairs = QtWidgets.QListWidget()
        history_layout.addWidget(self.list_pairs)

        self.btn_clear = QtWidgets.QPushButton("Clear History")
        self.btn_clear.setProperty("class", "DangerButton")
        self.btn_clear.clicked.connect(self.clear_history)
        history_layout.addWidget(self.btn_clear)
        self.main_layout.addWidget(self.history_group)

    def set_controller(self, controller: RoundController) -> None:
        self.controller = controller
        self.refresh()

    def refresh(self) -> None:
        if self.controller:
            self.rounds = group_by_round(
                self.controller.records, self.controller.participants
            )
        else:
            self.rounds = []
        self.round_position = min(self.round_position, max(len(self.rounds) - 1, 0))
        self._show_round()

    def _show_round(self) -> None:
        self.list_pairs.clear()
        if not self.rounds:
            self.lbl_round.setText("No rounds recorded.")
        else:
            summary = self.rounds[self.round_position]
            self.lbl_round.setText(
                f"Round {summary.round} ({self.round_position + 1} of {len(self.rounds)})"
            )
            for first, second in summary.pairs:
                self.list_pairs.addItem(f"{first} & {second}")
        self.btn_previous.setEnabled(self.round_position > 0)
        self.btn_next.setEnabled(self.round_position < len(self.rounds) - 1)
        self.btn_clear.setEnabled(bool(self.rounds))

    def show_previous_round(self) -> None:
        if self.round_position > 0:
            self.round_position -= 1
            self._show_round()

    def show_next_round(self) -> None:
        if self.round_position < len(self.rounds) - 1:
            self.round_position += 1
            self._show_round()

    def clear_history(self) -> None:
        if not self.controller:
            return
        reply = QtWidgets.QMessageBox.warning(
            self,
            "Clear History?",
            "Are you sure you want to delete the whole matchup history?\n"
            "Every pair will be allowed again and the next round will be 1.",
            QtWidgets.QMessageBox.StandardButton.Yes
            | QtWidgets.QMessageBox.StandardButton.No,
            QtWidgets.QMessageBox.StandardButton.No,
        )
        if reply != QtWidgets.QMessageBox.StandardButton.Yes:
            return
        try:
            self.controller.reset_history()
        except StoreFailure as e:
            logger.error("Could not clear history: %s", e)
            QtWidgets.QMessageBox.critical(
                self, "Clear Error", f"Could not clear the history:\n{e}"
            )
            return
        self.round_position = 0
        self.status_message.emit(MSG_HISTORY_CLEARED.format(round=self.controller.round))
        self.refresh()
        self.history_changed.emit()
