# quake/ui/panels/character_panel.py
"""
Character editing tab

Shows the roster of the open file with per-character controls for turn
roll, hit points and reaction, plus the turn and sorting controls.
"""

import logging

from PySide6.QtCore import Qt
from PySide6.QtGui import QFont
from PySide6.QtWidgets import (
    QHBoxLayout, QLabel, QLineEdit, QPushButton, QScrollArea,
    QStackedWidget, QVBoxLayout, QWidget
)

from quake.core.roster import SortType
from quake.ui.dialogs.monster_picker_dialog import MonsterPickerDialog
from quake.ui.panels.base_panel import BasePanel
from quake.ui.widgets.character_row_widget import CharacterRowWidget

logger = logging.getLogger(__name__)

DEFAULT_TITLE = "Edit Characters"
EMPTY_MESSAGE = "No characters loaded. Open a save file to edit characters."


class CharacterPanel(BasePanel):
    """Panel for editing the characters of the open save file"""

    def __init__(self, app_state):
        self.rows = []
        super().__init__(app_state, DEFAULT_TITLE)
        self.refresh()

    def _setup_ui(self):
        main_layout = QVBoxLayout(self)
        self.stack = QStackedWidget()
        main_layout.addWidget(self.stack)

        # --- Empty state ---
        self.empty_label = QLabel(EMPTY_MESSAGE)
        self.empty_label.setStyleSheet("color: gray;")
        self.empty_label.setAlignment(Qt.AlignCenter)
        self.stack.addWidget(self.empty_label)

        # --- Editor ---
        editor = QWidget()
        editor_layout = QVBoxLayout(editor)

        self.title_label = QLabel(DEFAULT_TITLE)
        self.title_label.setFont(QFont("Arial", 16, QFont.Bold))
        self.title_label.setAlignment(Qt.AlignCenter)
        editor_layout.addWidget(self.title_label)

        sort_layout = QHBoxLayout()
        self.sort_name_button = QPushButton("Sort by Name")
        self.sort_name_button.clicked.connect(lambda: self.tracker.sort_characters(SortType.NAME))
        sort_layout.addWidget(self.sort_name_button)
        self.sort_hp_button = QPushButton("Sort by HP")
        self.sort_hp_button.clicked.connect(lambda: self.tracker.sort_characters(SortType.HP))
        sort_layout.addWidget(self.sort_hp_button)
        self.sort_turn_button = QPushButton("Sort by Turn Roll")
        self.sort_turn_button.clicked.connect(lambda: self.tracker.sort_characters(SortType.TURN_ROLL))
        sort_layout.addWidget(self.sort_turn_button)
        self.randomize_button = QPushButton("Randomize Turn Rolls")
        self.randomize_button.clicked.connect(self.tracker.randomize_turn_rolls)
        sort_layout.addWidget(self.randomize_button)
        editor_layout.addLayout(sort_layout)

        # Rows live in a scroll area
        scroll_area = QScrollArea()
        scroll_area.setWidgetResizable(True)
        self.rows_container = QWidget()
        self.rows_layout = QVBoxLayout(self.rows_container)
        self.rows_layout.setAlignment(Qt.AlignTop)
        scroll_area.setWidget(self.rows_container)
        editor_layout.addWidget(scroll_area, stretch=1)

        bottom_layout = QHBoxLayout()
        self.end_turn_button = QPushButton("End Turn")
        self.end_turn_button.clicked.connect(self.tracker.advance_turn)
        bottom_layout.addWidget(self.end_turn_button)
        self.add_monster_button = QPushButton("Add Monster")
        self.add_monster_button.clicked.connect(self._show_monster_picker)
        bottom_layout.addWidget(self.add_monster_button)
        self.name_input = QLineEdit()
        self.name_input.setPlaceholderText("New Character Name")
        self.name_input.setFixedWidth(200)
        self.name_input.returnPressed.connect(self._add_character)
        bottom_layout.addWidget(self.name_input)
        self.add_character_button = QPushButton("Add New Character")
        self.add_character_button.clicked.connect(self._add_character)
        bottom_layout.addWidget(self.add_character_button)
        editor_layout.addLayout(bottom_layout)

        self.stack.addWidget(editor)

    def _connect_signals(self):
        self.tracker.roster_changed.connect(self.refresh)
        self.tracker.turn_changed.connect(self._update_highlight)
        self.tracker.file_selected.connect(self._update_title)

    def _update_title(self, file_name):
        self.title_label.setText(file_name or DEFAULT_TITLE)

    def refresh(self):
        """Rebuild the character rows from the controller"""
        for row in self.rows:
            self.rows_layout.removeWidget(row)
            row.deleteLater()
        self.rows = []

        characters = self.tracker.characters
        self.stack.setCurrentIndex(1 if characters else 0)
        for index, character in enumerate(characters):
            row = CharacterRowWidget(
                self.tracker, character, index,
                is_current=(index == self.tracker.current_index)
            )
            self.rows_layout.addWidget(row)
            self.rows.append(row)

    def _update_highlight(self, current_index):
        for row in self.rows:
            row.set_current(row.index == current_index)

    def _add_character(self):
        if self.tracker.add_character(self.name_input.text()) is not None:
            self.name_input.clear()

    def _show_monster_picker(self):
        dialog = MonsterPickerDialog(self.tracker.monsters, self)
        if dialog.exec() and dialog.selected_monster is not None:
            self.tracker.add_monster(dialog.selected_monster)
