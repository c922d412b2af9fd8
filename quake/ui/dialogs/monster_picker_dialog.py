# quake/ui/dialogs/monster_picker_dialog.py
# Dialog for choosing a catalog monster to add to the roster

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QDialog, QDialogButtonBox, QLineEdit, QListWidget, QListWidgetItem, QVBoxLayout
)

from quake.utils.stat_block import display_text


class MonsterPickerDialog(QDialog):
    """Searchable list of monsters; Add accepts the selected one."""

    def __init__(self, monsters, parent=None):
        super().__init__(parent)
        self.setWindowTitle("Choose a Monster")
        self.resize(400, 500)
        self.monsters = list(monsters)
        self.selected_monster = None
        self._setup_ui()
        self._populate()

    def _setup_ui(self):
        layout = QVBoxLayout(self)

        self.search_input = QLineEdit()
        self.search_input.setPlaceholderText("Search monsters...")
        self.search_input.textChanged.connect(self._populate)
        layout.addWidget(self.search_input)

        self.monster_list = QListWidget()
        self.monster_list.itemDoubleClicked.connect(lambda _item: self._accept_selection())
        self.monster_list.currentItemChanged.connect(self._update_buttons)
        layout.addWidget(self.monster_list)

        self.button_box = QDialogButtonBox(QDialogButtonBox.Cancel)
        self.add_button = self.button_box.addButton("Add", QDialogButtonBox.AcceptRole)
        self.add_button.setEnabled(False)
        self.button_box.accepted.connect(self._accept_selection)
        self.button_box.rejected.connect(self.reject)
        layout.addWidget(self.button_box)

    def _populate(self, *_args):
        needle = self.search_input.text().strip().lower()
        self.monster_list.clear()
        for monster in self.monsters:
            name = display_text(monster.name)
            if needle and needle not in name.lower():
                continue
            item = QListWidgetItem(f"{name} (CR {monster.challenge_rating}, HP {monster.hit_points})")
            item.setData(Qt.UserRole, monster.id)
            self.monster_list.addItem(item)
        self._update_buttons()

    def _update_buttons(self, *_args):
        self.add_button.setEnabled(self.monster_list.currentItem() is not None)

    def _accept_selection(self):
        item = self.monster_list.currentItem()
        if item is None:
            return
        monster_id = item.data(Qt.UserRole)
        self.selected_monster = next((m for m in self.monsters if m.id == monster_id), None)
        if self.selected_monster is not None:
            self.accept()
