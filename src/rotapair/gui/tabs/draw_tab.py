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

from PyQt6 import QtWidgets
from PyQt6.QtCore import Qt, pyqtSignal

from rotapair.constants import MSG_NO_SOLUTION, MSG_RECORDED
from rotapair.exceptions import PreconditionError, StoreFailure
from rotapair.round_controller import RoundController
from rotapair.utils import setup_logger

logger = setup_logger(__name__)


def set_message(label: QtWidgets.QLabel, text: str, error: bool = False) -> None:
    """Show a message, red for errors and green otherwise."""
    label.setProperty("class", "ErrorMessage" if error else "InfoMessage")
    # re-polish so the style sheet picks the new class up
    label.style().unpolish(label)
    label.style().polish(label)
    label.setText(text)


class DrawTab(QtWidgets.QWidget):
    """Select participants, draw the round's pairs and record them."""

    status_message = pyqtSignal(str)
    history_changed = pyqtSignal()

    def __init__(self, parent=None):
        super().__init__(parent)
        self.controller: Optional[RoundController] = None
        self.main_layout = QtWidgets.QHBoxLayout(self)

        # --- Registered pool ---
        self.registered_group = QtWidgets.QGroupBox("Registered")
        registered_layout = QtWidgets.QVBoxLayout(self.registered_group)
        self.list_registered = QtWidgets.QListWidget()
        self.list_registered.setToolTip("Double-click to add to the selection.")
        self.list_registered.itemDoubleClicked.connect(self._select_item)
        self.btn_select = QtWidgets.QPushButton("Add")
        self.btn_select.clicked.connect(self.select_current)
        registered_layout.addWidget(self.list_registered)
        registered_layout.addWidget(self.btn_select)

        # --- Selection ---
        self.selected_group = QtWidgets.QGroupBox("Selected")
        selected_layout = QtWidgets.QVBoxLayout(self.selected_group)
        self.list_selected = QtWidgets.QListWidget()
        self.list_selected.setToolTip("Double-click to remove from the selection.")
        self.list_selected.itemDoubleClicked.connect(self._deselect_item)
        self.btn_deselect = QtWidgets.QPushButton("Remove")
        self.btn_deselect.setProperty("class", "DangerButton")
        self.btn_deselect.clicked.connect(self.deselect_current)
        selected_layout.addWidget(self.list_selected)
        selected_layout.addWidget(self.btn_deselect)

        # --- Drawn pairs ---
        self.pairs_group = QtWidgets.QGroupBox("Drawn Pairs")
        pairs_layout = QtWidgets.QVBoxLayout(self.pairs_group)
        self.list_pairs = QtWidgets.QListWidget()
        pairs_layout.addWidget(self.list_pairs)

        # --- Actions ---
        self.action_group = QtWidgets.QGroupBox("Action")
        action_layout = QtWidgets.QVBoxLayout(self.action_group)
        self.lbl_round = QtWidgets.QLabel()
        self.btn_draw = QtWidgets.QPushButton("Draw Pairs")
        self.btn_draw.clicked.connect(self.draw_pairs)
        self.btn_record = QtWidgets.QPushButton("Record History")
        self.btn_record.clicked.connect(self.record_history)
        self.lbl_message = QtWidgets.QLabel()
        self.lbl_message.setWordWrap(True)
        self.lbl_message.setAlignment(Qt.AlignmentFlag.AlignCenter)
        action_layout.addWidget(self.lbl_round)
        action_layout.addWidget(self.btn_draw)
        action_layout.addWidget(self.btn_record)
        action_layout.addStretch()
        action_layout.addWidget(self.lbl_message)

        for group in (
            self.registered_group,
            self.selected_group,
            self.pairs_group,
            self.action_group,
        ):
            self.main_layout.addWidget(group)

        self.update_ui_state()

    def set_controller(self, controller: RoundController) -> None:
        self.controller = controller
        self.refresh()

    def refresh(self) -> None:
        """Redraw every list from the controller state."""
        self.list_registered.clear()
        self.list_selected.clear()
        self.list_pairs.clear()
        if not self.controller:
            self.update_ui_state()
            return

        selected = set(self.controller.selection)
        for participant in self.controller.participants:
            item = QtWidgets.QListWidgetItem(participant.name)
            item.setData(Qt.ItemDataRole.UserRole, participant)
            if participant in selected:
                item.setFlags(item.flags() & ~Qt.ItemFlag.ItemIsEnabled)
            self.list_registered.addItem(item)

        for i, participant in enumerate(self.controller.selection, start=1):
            item = QtWidgets.QListWidgetItem(f"{i}. {participant.name}")
            item.setData(Qt.ItemDataRole.UserRole, participant)
            self.list_selected.addItem(item)

        for i, (first, second) in enumerate(self.controller.drawn or [], start=1):
            self.list_pairs.addItem(f"{i}. {first.name} & {second.name}")

        self.update_ui_state()

    def update_ui_state(self) -> None:
        has_controller = self.controller is not None
        self.lbl_round.setText(
            f"Current round: {self.controller.round}" if has_controller else ""
        )
        self.btn_draw.setEnabled(has_controller)
        self.btn_record.setEnabled(has_controller and bool(self.controller.drawn))

    def _select_item(self, item: QtWidgets.QListWidgetItem) -> None:
        if not self.controller or not item.flags() & Qt.ItemFlag.ItemIsEnabled:
            return
        self.controller.select(item.data(Qt.ItemDataRole.UserRole))
        self.controller.discard()
        self.refresh()

    def _deselect_item(self, item: QtWidgets.QListWidgetItem) -> None:
        if not self.controller:
            return
        self.controller.deselect(item.data(Qt.ItemDataRole.UserRole))
        self.controller.discard()
        self.refresh()

    def select_current(self) -> None:
        item = self.list_registered.currentItem()
        if item is not None:
            self._select_item(item)

    def deselect_current(self) -> None:
        item = self.list_selected.currentItem()
        if item is not None:
            self._deselect_item(item)

    def draw_pairs(self) -> None:
        if not self.controller:
            return
        self.lbl_message.clear()
        try:
            pairs = self.controller.draw()
        except PreconditionError as e:
            set_message(self.lbl_message, str(e), error=True)
            self.refresh()
            return

        if pairs is None:
            # not an error, the user picks another selection
            set_message(self.lbl_message, MSG_NO_SOLUTION)
            self.status_message.emit("No valid pairing found.")
        else:
            self.status_message.emit(
                f"Drew {len(pairs)} pairs for round {self.controller.round}."
            )
        self.refresh()

    def record_history(self) -> None:
        if not self.controller:
            return
        recorded_round = self.controller.round
        try:
            self.controller.commit()
        except (PreconditionError, StoreFailure) as e:
            logger.error("Could not record round %d: %s", recorded_round, e)
            set_message(self.lbl_message, f"Error recording history: {e}", error=True)
            return
        set_message(self.lbl_message, MSG_RECORDED.format(round=recorded_round))
        self.status_message.emit(f"Round {recorded_round} recorded.")
        self.refresh()
        self.history_changed.emit()
