# quake/data/save_file_manager.py - Save file persistence
"""
Save file management for the combat tracker

Reads and writes rosters as JSON arrays of character records in the
documents directory.
"""

import json
import logging
import os
import uuid
from pathlib import Path

from quake.core.config import SAVE_FILE_EXTENSION
from quake.core.models.character import Character

logger = logging.getLogger(__name__)

# Status strings shown to the user
LOAD_OK = "File loaded successfully!"
LOAD_FAILED = "Failed to load file."
SAVE_OK = "File saved successfully!"
SAVE_FAILED = "Failed to save file. Please check file permissions or location."
LIST_FAILED = "Failed to list save files."


class SaveFileManager:
    """
    Lists, loads and saves roster files in a single directory

    None of the methods raise; failures come back as status strings.
    """

    def __init__(self, documents_dir):
        """Initialize with the directory holding the save files"""
        self.documents_dir = Path(documents_dir)

    def list_save_files(self, exclude=()):
        """List the save files in the documents directory

        Args:
            exclude: File names to leave out of the listing

        Returns:
            tuple: (files, error) where files is a sorted list of Paths and
                error is None or a status string
        """
        try:
            files = [
                entry for entry in self.documents_dir.iterdir()
                if entry.suffix == SAVE_FILE_EXTENSION
                and not entry.name.startswith(".")
                and entry.name not in exclude
                and entry.is_file()
            ]
        except OSError as e:
            logger.error(f"Error listing files in {self.documents_dir}: {e}")
            return [], LIST_FAILED

        return sorted(files, key=lambda p: p.name.lower()), None

    def load(self, path):
        """Load a roster from a save file

        Args:
            path: Path of the save file

        Returns:
            tuple: (success, characters, message); characters is None on failure
        """
        path = Path(path)
        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = json.load(f)
            if not isinstance(data, list):
                raise ValueError(f"Save file must contain a JSON array, got {type(data).__name__}")
            characters = [Character.from_dict(item) for item in data]
        except (OSError, ValueError, TypeError, RecursionError) as e:
            # json.JSONDecodeError is a ValueError
            logger.error(f"Error loading file {path}: {e}")
            return False, None, LOAD_FAILED

        logger.info(f"Loaded {len(characters)} characters from {path}")
        return True, characters, LOAD_OK

    def save(self, path, characters):
        """Write a roster to a save file atomically

        The data goes to a temporary file in the same directory which then
        replaces the target.

        Args:
            path: Path of the save file
            characters: Iterable of Character objects

        Returns:
            tuple: (success, message)
        """
        path = Path(path)
        temp_path = path.with_name(path.name + ".tmp")
        try:
            data = [character.to_dict() for character in characters]
            with open(temp_path, 'w', encoding='utf-8') as f:
                json.dump(data, f, indent=2)
            os.replace(temp_path, path)
        except (OSError, TypeError, ValueError) as e:
            logger.error(f"Error writing file {path}: {e}")
            try:
                if temp_path.exists():
                    temp_path.unlink()
            except OSError as cleanup_error:
                logger.warning(f"Could not remove temporary file {temp_path}: {cleanup_error}")
            return False, SAVE_FAILED

        logger.debug(f"Saved {len(data)} characters to {path}")
        return True, SAVE_OK

    def new_file_path(self):
        """Get a fresh, unique save file path

        Returns:
            Path: NewCampaignFile-<UUID>.json inside the documents directory
        """
        file_name = f"NewCampaignFile-{str(uuid.uuid4()).upper()}{SAVE_FILE_EXTENSION}"
        return self.documents_dir / file_name
