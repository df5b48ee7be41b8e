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

from typing import Optional

from PyQt6 import QtCore, QtWidgets
from PyQt6.QtCore import Qt, pyqtSignal

from rotapair.exceptions import RotaPairException
from rotapair.participant import Participant
from rotapair.round_controller import RoundController
from rotapair.utils import setup_logger

logger = setup_logger(__name__)


class PlayersTab(QtWidgets.QWidget):
    """Register, rename and delete participants."""

    status_message = pyqtSignal(str)
    participants_changed = pyqtSignal()

    def __init__(self, parent=None):
        super().__init__(parent)
        self.controller: Optional[RoundController] = None
        self.main_layout = QtWidgets.QVBoxLayout(self)

        self.player_group = QtWidgets.QGroupBox("Registered Players")
        self.player_group.setToolTip("Right-click a player to rename or delete.")
        player_layout = QtWidgets.QVBoxLayout(self.player_group)

        self.list_players = QtWidgets.QListWidget()
        self.list_players.setAlternatingRowColors(True)
        self.list_players.setContextMenuPolicy(
            QtCore.Qt.ContextMenuPolicy.CustomContextMenu
        )
        self.list_players.customContextMenuRequested.connect(
            self.on_player_context_menu
        )
        player_layout.addWidget(self.list_players)
        self.main_layout.addWidget(self.player_group)

        # --- Registration form ---
        self.form_group = QtWidgets.QGroupBox("Register New Player")
        form_layout = QtWidgets.QHBoxLayout(self.form_group)
        self.input_name = QtWidgets.QLineEdit()
        self.input_name.setPlaceholderText("Player name")
        self.input_name.returnPressed.connect(self.add_player)
        self.btn_add_player = QtWidgets.QPushButton("Register")
        self.btn_add_player.clicked.connect(self.add_player)
        form_layout.addWidget(self.input_name)
        form_layout.addWidget(self.btn_add_player)
        self.main_layout.addWidget(self.form_group)

    def set_controller(self, controller: RoundController) -> None:
        self.controller = controller
        self.refresh_player_list()

    def refresh_player_list(self) -> None:
        self.list_players.clear()
        if not self.controller:
            return
        for i, participant in enumerate(self.controller.participants, start=1):
            item = QtWidgets.QListWidgetItem(f"{i}. {participant.name}")
            item.setData(Qt.ItemDataRole.UserRole, participant)
            self.list_players.addItem(item)

    def add_player(self) -> None:
        if not self.controller:
            return
        try:
            participant = self.controller.add_participant(self.input_name.text())
        except RotaPairException as e:
            QtWidgets.QMessageBox.warning(self, "Registration Error", str(e))
            return
        self.input_name.clear()
        self.status_message.emit(f"Player {participant.name} registered.")
        self.participants_changed.emit()

    def on_player_context_menu(self, point: QtCore.QPoint) -> None:
        item = self.list_players.itemAt(point)
        if item is None or not self.controller:
            return
        participant: Participant = item.data(Qt.ItemDataRole.UserRole)

        menu = QtWidgets.QMenu(self)
        rename_action = menu.addAction("Rename Player...")
        delete_action = menu.addAction("Delete Player")
        action = menu.exec(self.list_players.mapToGlobal(point))

        if action == rename_action:
            self.rename_player(participant)
        elif action == delete_action:
            self.delete_player(participant)

    def rename_player(self, participant: Participant) -> None:
        name, ok = QtWidgets.QInputDialog.getText(
            self, "Rename Player", "New name:", text=participant.name
        )
        if not ok:
            return
        try:
            self.controller.rename_participant(participant, name)
        except RotaPairException as e:
            QtWidgets.QMessageBox.warning(self, "Rename Error", str(e))
            return
        self.status_message.emit("Player renamed.")
        self.participants_changed.emit()

    def delete_player(self, participant: Participant) -> None:
        reply = QtWidgets.QMessageBox.question(
            self,
            "Delete Player?",
            f"Are you sure you want to delete {participant.name}?",
            QtWidgets.QMessageBox.StandardButton.Yes
            | QtWidgets.QMessageBox.StandardButton.No,
            QtWidgets.QMessageBox.StandardButton.No,
        )
        if reply != QtWidgets.QMessageBox.StandardButton.Yes:
            return
        try:
            self.controller.delete_participant(participant)
        except RotaPairException as e:
            QtWidgets.QMessageBox.warning(self, "Delete Error", str(e))
            return
        self.status_message.emit(f"Player {participant.name} deleted.")
        self.participants_changed.emit()
