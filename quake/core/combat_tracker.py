# quake/core/combat_tracker.py - Combat tracker controller
"""
Controller for the combat tracker

Owns the roster, turn pointer, pending damage, open file and monster catalog.
All user actions go through this class; views only render its state and
listen to its signals.
"""

import logging
import random
from pathlib import Path

from PySide6.QtCore import QObject, QThreadPool, Signal, Slot

from quake.core.combat_rules import CombatRules
from quake.core.config import MONSTER_CATALOG_FILENAME
from quake.core.roster import Roster, SortType
from quake.core.spawning import (
    default_character, new_character_from_monster, new_character_from_name
)
from quake.data.monster_catalog import MonsterCatalogWorker

logger = logging.getLogger(__name__)

NO_FILE_SELECTED = "No file selected to save."


class CombatTracker(QObject):
    """
    Single-writer application state for the tracker

    Every roster mutation except sorting is saved to the open file straight
    away.
    """

    # Signals
    roster_changed = Signal()
    turn_changed = Signal(int)  # current index
    files_changed = Signal(list)  # list of Paths
    monsters_changed = Signal(list)  # list of Monster objects
    status_changed = Signal(str)
    file_selected = Signal(str)  # file name, "" when none

    def __init__(self, save_file_manager, monster_catalog_path, rng=None, thread_pool=None):
        """Initialize the controller

        Args:
            save_file_manager: SaveFileManager for the documents directory
            monster_catalog_path: Path of monsters.json
            rng: Optional random.Random used for every roll
            thread_pool: Optional QThreadPool for the catalog load
        """
        super().__init__()
        self.save_file_manager = save_file_manager
        self.monster_catalog_path = Path(monster_catalog_path)
        self.rng = rng or random.Random()
        self.thread_pool = thread_pool

        self.roster = Roster()
        self.current_index = 0
        self.pending_hp = {}  # character id -> damage waiting to be applied
        self.selected_file = None
        self.save_files = []
        self.monsters = []
        self.status = ""
        self._catalog_worker = None

    # --- Status / persistence helpers ---

    def _set_status(self, message):
        self.status = message
        self.status_changed.emit(message)

    def _save(self):
        """Write the roster to the open file"""
        if self.selected_file is None:
            self._set_status(NO_FILE_SELECTED)
            return False
        success, message = self.save_file_manager.save(self.selected_file, self.roster)
        self._set_status(message)
        return success

    def _roster_mutated(self):
        self.roster_changed.emit()
        self._save()

    @property
    def characters(self):
        return self.roster.characters

    @property
    def selected_file_name(self):
        return self.selected_file.name if self.selected_file else ""

    def current_character(self):
        """The character whose turn it is, or None"""
        if not 0 <= self.current_index < len(self.roster):
            return None
        return self.roster[self.current_index]

    # --- File management ---

    def list_save_files(self):
        """Refresh the list of save files, leaving out the monster catalog"""
        files, error = self.save_file_manager.list_save_files(exclude=(MONSTER_CATALOG_FILENAME,))
        self.save_files = files
        if error:
            self._set_status(error)
        self.files_changed.emit(files)
        return files

    def open_file(self, path):
        """Load a save file and make it the open file

        On failure the previous roster and open file stay as they were.
        """
        path = Path(path)
        success, characters, message = self.save_file_manager.load(path)
        self._set_status(message)
        if not success:
            return False

        self.roster.replace(characters)
        self.selected_file = path
        self.current_index = 0
        self.pending_hp.clear()
        self.file_selected.emit(path.name)
        self.roster_changed.emit()
        self.turn_changed.emit(self.current_index)
        return True

    def create_new_file(self):
        """Start a new save file holding one default character"""
        path = self.save_file_manager.new_file_path()
        self.roster.replace([default_character()])
        self.selected_file = path
        self.current_index = 0
        self.pending_hp.clear()
        logger.info(f"Creating new save file {path}")
        self.file_selected.emit(path.name)
        self.roster_changed.emit()
        self.turn_changed.emit(self.current_index)
        self._save()
        self.list_save_files()
        return path

    # --- Roster editing ---

    def add_character(self, name):
        """Add a character by name; empty names are ignored

        Returns:
            The new Character, or None
        """
        character = new_character_from_name(name, self.rng)
        if character is None:
            return None
        self.roster.append(character)
        self._roster_mutated()
        return character

    def add_monster(self, monster):
        """Add a character spawned from a catalog monster"""
        character = new_character_from_monster(monster, self.rng)
        self.roster.append(character)
        logger.debug(f"Added monster {character.name} with {character.hp} HP")
        self._roster_mutated()
        return character

    def remove_character(self, index):
        """Remove the character at index; out-of-range indices are ignored"""
        if not 0 <= index < len(self.roster):
            logger.warning(f"Ignoring removal of roster index {index}")
            return None
        character = self.roster.remove_at(index)
        self.pending_hp.pop(character.id, None)
        if self.current_index >= len(self.roster):
            self.current_index = 0
            self.turn_changed.emit(self.current_index)
        self._roster_mutated()
        return character

    def _lookup(self, character_id):
        character = self.roster.get_by_id(character_id)
        if character is None:
            logger.debug(f"No character with id {character_id}")
        return character

    def adjust_turn_roll(self, character_id, delta):
        """Add delta to a character's turn roll"""
        character = self._lookup(character_id)
        if character is None:
            return
        character.turn_roll += delta
        self._roster_mutated()

    def set_pending_damage(self, character_id, amount):
        """Remember the HP to subtract for a character"""
        self.pending_hp[character_id] = amount

    def pending_damage(self, character_id):
        return self.pending_hp.get(character_id, 0)

    def apply_pending_damage(self, character_id):
        """Subtract the remembered HP amount from a character"""
        self.subtract_hp(character_id, self.pending_damage(character_id))

    def subtract_hp(self, character_id, amount):
        """Damage a character; hit points never drop below 0

        Amounts <= 0 do nothing.
        """
        character = self._lookup(character_id)
        if character is None or amount <= 0:
            return
        character.hp = CombatRules.subtract_hp(character.hp, amount)
        self.pending_hp[character_id] = 0
        self._roster_mutated()

    def toggle_reaction(self, character_id, value):
        """Set whether a character has used its reaction"""
        character = self._lookup(character_id)
        if character is None:
            return
        character.reaction_used = bool(value)
        self._roster_mutated()

    # --- Turn order ---

    def advance_turn(self):
        """End the current turn; the pointer wraps around the roster"""
        if len(self.roster) == 0:
            return self.current_index
        self.current_index = CombatRules.next_turn_index(self.current_index, len(self.roster))
        self.turn_changed.emit(self.current_index)
        return self.current_index

    def sort_characters(self, by):
        """Reorder the roster; the order is not saved"""
        self.roster.sort(SortType(by))
        self.roster_changed.emit()

    def randomize_turn_rolls(self):
        """Roll 1d20 turn rolls for everyone and order by them"""
        CombatRules.randomize_turn_rolls(self.roster, self.rng)
        self._roster_mutated()

    # --- Monster catalog ---

    def load_monsters_async(self):
        """Read the monster catalog on a worker thread"""
        if self._catalog_worker is not None:
            logger.debug("Monster catalog load already in progress")
            return
        if self.thread_pool is None:
            self.thread_pool = QThreadPool.globalInstance()

        worker = MonsterCatalogWorker(self.monster_catalog_path)
        worker.signals.result.connect(self._on_monsters_loaded)
        worker.signals.finished.connect(self._on_catalog_worker_finished)
        self._catalog_worker = worker
        self.thread_pool.start(worker)

    @Slot(object)
    def _on_monsters_loaded(self, monsters):
        """Replace the catalog with a freshly loaded one (GUI thread)"""
        self.monsters = list(monsters)
        self.monsters_changed.emit(self.monsters)

    @Slot()
    def _on_catalog_worker_finished(self):
        self._catalog_worker = None
