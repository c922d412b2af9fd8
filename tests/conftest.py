"""
Shared pytest fixtures for the combat tracker tests.
"""

import os

# Widgets must be creatable without a display
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import json
import random

import pytest
from PySide6.QtWidgets import QApplication

from quake.core.combat_tracker import CombatTracker
from quake.data.save_file_manager import SaveFileManager


@pytest.fixture(scope="session")
def qapp():
    """A QApplication shared by every widget test"""
    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture
def documents_dir(tmp_path):
    """An empty documents directory"""
    path = tmp_path / "Documents"
    path.mkdir()
    return path


@pytest.fixture
def goblin_data():
    """A catalog record in the usual monsters.json shape"""
    return {
        "name": "Goblin",
        "size": "Small",
        "type": "humanoid",
        "subtype": "goblinoid",
        "alignment": "neutral evil",
        "armor_class": 15,
        "hit_points": 7,
        "hit_dice": "2d6",
        "speed": "30 ft.",
        "strength": 8,
        "dexterity": 14,
        "constitution": 10,
        "intelligence": 10,
        "wisdom": 8,
        "charisma": 8,
        "perception": None,
        "senses": "darkvision 60 ft., passive Perception 9",
        "languages": "Common, Goblin",
        "challenge_rating": "1/4",
        "special_abilities": [
            {"name": "Nimble Escape", "desc": "The goblin can take the Disengage or Hide action as a bonus action."}
        ],
        "actions": [
            {"name": "Scimitar", "desc": "Melee Weapon Attack.", "attack_bonus": 4,
             "damage_dice": "1d6", "damage_bonus": 2}
        ],
        "speed_json": {"walk": 30},
        "armor_desc": "leather armor, shield",
    }


@pytest.fixture
def catalog_path(documents_dir, goblin_data):
    """A monsters.json holding a goblin and a mostly empty record"""
    path = documents_dir / "monsters.json"
    path.write_text(json.dumps([goblin_data, {"name": None, "hit_points": None}]))
    return path


@pytest.fixture
def tracker(qapp, documents_dir):
    """A controller over an empty documents directory with a seeded rng"""
    return CombatTracker(
        SaveFileManager(documents_dir),
        documents_dir / "monsters.json",
        rng=random.Random(1234),
    )
