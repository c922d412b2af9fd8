"""
One roster entry in the character editor.
"""

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QCheckBox, QFrame, QHBoxLayout, QLabel, QPushButton, QSpinBox,
    QToolButton, QVBoxLayout, QWidget
)
from PySide6.QtGui import QFont

from quake.utils.stat_block import monster_summary_lines

CURRENT_TURN_STYLE = "CharacterRowWidget { background-color: rgba(0, 120, 215, 60); }"


class CharacterRowWidget(QFrame):
    """Shows a character and forwards its buttons to the controller"""

    def __init__(self, tracker, character, index, is_current=False, parent=None):
        super().__init__(parent)
        self.tracker = tracker
        self.character = character
        self.index = index
        self.setFrameShape(QFrame.StyledPanel)
        self._setup_ui()
        self.set_current(is_current)

    def _setup_ui(self):
        character = self.character
        layout = QVBoxLayout(self)

        # Name and remove
        header = QHBoxLayout()
        self.name_label = QLabel(f"Name: {character.name}")
        self.name_label.setFont(QFont("Arial", 12, QFont.Bold))
        header.addWidget(self.name_label)
        header.addStretch(1)
        self.remove_button = QPushButton("Remove")
        self.remove_button.setStyleSheet("color: red;")
        self.remove_button.clicked.connect(lambda: self.tracker.remove_character(self.index))
        header.addWidget(self.remove_button)
        layout.addLayout(header)

        # Turn roll
        turn_layout = QHBoxLayout()
        self.turn_roll_label = QLabel(f"Turn Roll: {character.turn_roll}")
        turn_layout.addWidget(self.turn_roll_label)
        self.increment_button = QPushButton("+")
        self.increment_button.setMaximumWidth(30)
        self.increment_button.clicked.connect(lambda: self.tracker.adjust_turn_roll(character.id, 1))
        turn_layout.addWidget(self.increment_button)
        self.decrement_button = QPushButton("-")
        self.decrement_button.setMaximumWidth(30)
        self.decrement_button.clicked.connect(lambda: self.tracker.adjust_turn_roll(character.id, -1))
        turn_layout.addWidget(self.decrement_button)
        turn_layout.addStretch(1)
        layout.addLayout(turn_layout)

        # Hit points
        hp_layout = QHBoxLayout()
        self.hp_label = QLabel(f"HP: {character.hp}")
        hp_layout.addWidget(self.hp_label)
        self.damage_input = QSpinBox()
        self.damage_input.setRange(0, 9999)
        self.damage_input.setPrefix("HP to Subtract: ")
        self.damage_input.setValue(self.tracker.pending_damage(character.id))
        self.damage_input.valueChanged.connect(
            lambda value: self.tracker.set_pending_damage(character.id, value)
        )
        hp_layout.addWidget(self.damage_input)
        self.subtract_button = QPushButton("Subtract HP")
        self.subtract_button.clicked.connect(lambda: self.tracker.apply_pending_damage(character.id))
        hp_layout.addWidget(self.subtract_button)
        hp_layout.addStretch(1)
        layout.addLayout(hp_layout)

        # Reaction
        self.reaction_checkbox = QCheckBox("Reaction")
        self.reaction_checkbox.setChecked(character.reaction_used)
        self.reaction_checkbox.toggled.connect(
            lambda checked: self.tracker.toggle_reaction(character.id, checked)
        )
        layout.addWidget(self.reaction_checkbox)

        # Collapsible monster stats
        self.stats_toggle = None
        self.stats_widget = None
        if character.monster_details is not None:
            self.stats_toggle = QToolButton()
            self.stats_toggle.setText("Monster Stats")
            self.stats_toggle.setCheckable(True)
            self.stats_toggle.setToolButtonStyle(Qt.ToolButtonTextBesideIcon)
            self.stats_toggle.setArrowType(Qt.RightArrow)
            self.stats_toggle.toggled.connect(self._toggle_stats)
            layout.addWidget(self.stats_toggle)

            self.stats_widget = QWidget()
            stats_layout = QVBoxLayout(self.stats_widget)
            stats_layout.setContentsMargins(20, 0, 0, 0)
            for line in monster_summary_lines(character.monster_details):
                stats_layout.addWidget(QLabel(line))
            self.stats_widget.setVisible(False)
            layout.addWidget(self.stats_widget)

    def _toggle_stats(self, expanded):
        self.stats_toggle.setArrowType(Qt.DownArrow if expanded else Qt.RightArrow)
        self.stats_widget.setVisible(expanded)

    def set_current(self, is_current):
        """Highlight the row whose turn it is"""
        self.setStyleSheet(CURRENT_TURN_STYLE if is_current else "")
