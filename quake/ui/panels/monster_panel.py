"""
Monster gallery panel

Features:
- Card grid of the monster catalog
- Search by name
- Quick-add to the roster
- Stat block details
"""

import logging

from PySide6.QtCore import Qt
from PySide6.QtGui import QFont
from PySide6.QtWidgets import (
    QFrame, QGridLayout, QLabel, QLineEdit, QPushButton, QScrollArea,
    QVBoxLayout, QWidget
)

from quake.ui.dialogs.detail_dialog import DetailDialog
from quake.ui.panels.base_panel import BasePanel
from quake.utils.stat_block import display_text

# Setup logger for this module
logger = logging.getLogger(__name__)

CARD_MIN_WIDTH = 150
GRID_COLUMNS = 4


class MonsterCard(QFrame):
    """A single monster in the gallery"""

    def __init__(self, monster, on_add, on_details, parent=None):
        super().__init__(parent)
        self.monster = monster
        self.setFrameShape(QFrame.StyledPanel)
        self.setMinimumWidth(CARD_MIN_WIDTH)
        self.setStyleSheet("MonsterCard { background-color: rgba(0, 0, 255, 50); border-radius: 8px; }")

        layout = QVBoxLayout(self)
        self.name_label = QLabel(display_text(monster.name))
        self.name_label.setFont(QFont("Arial", 12, QFont.Bold))
        self.name_label.setAlignment(Qt.AlignCenter)
        self.name_label.setWordWrap(True)
        layout.addWidget(self.name_label)

        self.ac_label = QLabel(f"AC: {monster.armor_class}")
        layout.addWidget(self.ac_label)
        self.type_label = QLabel(f"Type: {display_text(monster.type)}")
        self.type_label.setStyleSheet("color: gray;")
        layout.addWidget(self.type_label)
        self.hp_label = QLabel(f"HP: {monster.hit_points}")
        layout.addWidget(self.hp_label)
        self.cr_label = QLabel(f"CR: {monster.challenge_rating}")
        self.cr_label.setStyleSheet("color: gray;")
        layout.addWidget(self.cr_label)

        self.add_button = QPushButton("Add to Characters")
        self.add_button.clicked.connect(lambda: on_add(self.monster))
        layout.addWidget(self.add_button)
        self.details_button = QPushButton("Details")
        self.details_button.clicked.connect(lambda: on_details(self.monster))
        layout.addWidget(self.details_button)


class MonsterPanel(BasePanel):
    """Panel for browsing the catalog and spawning combatants"""

    def __init__(self, app_state):
        self.cards = []
        super().__init__(app_state, "Monsters")
        self._populate(self.tracker.monsters)

    def _setup_ui(self):
        main_layout = QVBoxLayout(self)

        title = QLabel("Monsters")
        title.setFont(QFont("Arial", 16, QFont.Bold))
        title.setAlignment(Qt.AlignCenter)
        main_layout.addWidget(title)

        self.search_input = QLineEdit()
        self.search_input.setPlaceholderText("Search monsters...")
        self.search_input.textChanged.connect(self._filter_monsters)
        main_layout.addWidget(self.search_input)

        self.count_label = QLabel("")
        self.count_label.setStyleSheet("color: gray;")
        main_layout.addWidget(self.count_label)

        scroll_area = QScrollArea()
        scroll_area.setWidgetResizable(True)
        self.grid_container = QWidget()
        self.grid_layout = QGridLayout(self.grid_container)
        self.grid_layout.setSpacing(15)
        self.grid_layout.setAlignment(Qt.AlignTop)
        scroll_area.setWidget(self.grid_container)
        main_layout.addWidget(scroll_area, stretch=1)

    def _connect_signals(self):
        self.tracker.monsters_changed.connect(self._populate)

    def _populate(self, monsters):
        """Rebuild the card grid"""
        for card in self.cards:
            self.grid_layout.removeWidget(card)
            card.deleteLater()
        self.cards = []

        for index, monster in enumerate(monsters):
            card = MonsterCard(monster, self._add_to_characters, self._show_details)
            self.grid_layout.addWidget(card, index // GRID_COLUMNS, index % GRID_COLUMNS)
            self.cards.append(card)
        logger.debug(f"Monster gallery showing {len(self.cards)} monsters")
        self._filter_monsters(self.search_input.text())

    def _filter_monsters(self, text):
        """Hide cards whose name doesn't contain the search text"""
        needle = text.strip().lower()
        visible = 0
        for card in self.cards:
            matches = not needle or needle in display_text(card.monster.name).lower()
            card.setVisible(matches)
            visible += matches
        self.count_label.setText(f"{visible} of {len(self.cards)} monsters")

    def _add_to_characters(self, monster):
        self.tracker.add_monster(monster)

    def _show_details(self, monster):
        DetailDialog(self, monster).exec()
