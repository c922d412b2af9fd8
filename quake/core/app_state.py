# quake/core/app_state.py - Application state management
"""
Application state management for the Quake combat tracker

Handles settings, directories and the combat tracker controller.
"""

import json
import logging
from pathlib import Path

from quake.core.combat_tracker import CombatTracker
from quake.core.config import (
    get_app_dir, get_documents_dir, get_monster_catalog_path, get_settings_path
)
from quake.data.save_file_manager import SaveFileManager

logger = logging.getLogger(__name__)

# Default application settings
DEFAULT_SETTINGS = {
    "reopen_last_file": True,
    "last_opened_file": None,
    "window_size": [1000, 750],
}


class AppState:
    """
    Manages user preferences and the controller for the session
    """

    def __init__(self, app_dir=None, documents_dir=None, monster_catalog_path=None, rng=None):
        """Initialize application state and load user preferences"""
        self.settings = dict(DEFAULT_SETTINGS)

        self.app_dir = Path(app_dir) if app_dir else get_app_dir()
        self.documents_dir = Path(documents_dir) if documents_dir else get_documents_dir()
        self.settings_file = get_settings_path(self.app_dir)
        if monster_catalog_path is None:
            monster_catalog_path = get_monster_catalog_path(self.documents_dir)

        self._ensure_directories()
        self._load_settings()

        self.save_file_manager = SaveFileManager(self.documents_dir)
        self.combat_tracker = CombatTracker(self.save_file_manager, monster_catalog_path, rng=rng)
        self.combat_tracker.file_selected.connect(self._remember_open_file)

    def _ensure_directories(self):
        """Create application directories if they don't exist"""
        for directory in [self.app_dir, self.documents_dir]:
            directory.mkdir(exist_ok=True, parents=True)

    def _load_settings(self):
        """Load user settings from configuration file"""
        if self.settings_file.exists():
            try:
                with open(self.settings_file, 'r', encoding='utf-8') as f:
                    loaded_settings = json.load(f)
                if isinstance(loaded_settings, dict):
                    self.settings.update(loaded_settings)
                else:
                    logger.warning(f"Ignoring settings file {self.settings_file}: not an object")
            except (OSError, ValueError) as e:
                logger.error(f"Error loading settings: {e}")

    def save_settings(self):
        """Save current settings to configuration file"""
        try:
            with open(self.settings_file, 'w', encoding='utf-8') as f:
                json.dump(self.settings, f, indent=2)
        except OSError as e:
            logger.error(f"Error saving settings: {e}")

    def get_setting(self, key, default=None):
        """Get a setting value with an optional default"""
        return self.settings.get(key, default)

    def set_setting(self, key, value):
        """Update a setting value"""
        self.settings[key] = value
        # Save settings immediately for persistence
        self.save_settings()

    def get_window_size(self):
        """Get the saved window size, or the default when the setting is malformed"""
        size = self.get_setting("window_size")
        if (isinstance(size, (list, tuple)) and len(size) == 2
                and all(isinstance(v, int) and not isinstance(v, bool) and v > 0 for v in size)):
            return list(size)
        logger.warning(f"Ignoring malformed window_size setting: {size!r}")
        return list(DEFAULT_SETTINGS["window_size"])

    def _remember_open_file(self, file_name):
        if file_name and self.combat_tracker.selected_file is not None:
            self.set_setting("last_opened_file", str(self.combat_tracker.selected_file))

    def restore_last_file(self):
        """Re-open the file from the previous session, if wanted and present

        Returns:
            bool: True if a file was opened
        """
        if not self.get_setting("reopen_last_file", True):
            return False
        last_file = self.get_setting("last_opened_file")
        if not last_file or not Path(last_file).is_file():
            return False
        logger.info(f"Re-opening last file {last_file}")
        return self.combat_tracker.open_file(last_file)

    def close(self):
        """Perform cleanup"""
        self.save_settings()
