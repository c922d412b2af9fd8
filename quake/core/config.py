"""
Configuration settings for the Quake combat tracker

Provides centralized configuration and path management.
"""

import os
from pathlib import Path


# Fixed file names
MONSTER_CATALOG_FILENAME = "monsters.json"
SAVE_FILE_EXTENSION = ".json"
SETTINGS_FILENAME = "settings.json"
LOG_FILENAME = "debug.log"


def get_app_dir():
    """
    Get the application directory based on platform

    Holds settings and logs, never save files.

    Returns:
        Path: Path to the application data directory
    """
    # Check for environment variable first (for development/testing)
    if "QUAKE_DATA_DIR" in os.environ:
        app_dir = Path(os.environ["QUAKE_DATA_DIR"])
        os.makedirs(app_dir, exist_ok=True)
        return app_dir

    # Default platform-specific locations
    home = Path.home()

    if os.name == "nt":  # Windows
        app_dir = home / "AppData" / "Local" / "Quake"
    elif os.name == "posix":  # Linux/Mac
        # Check if we're on macOS
        if os.path.exists(home / "Library"):
            app_dir = home / "Library" / "Application Support" / "Quake"
        else:  # Linux
            app_dir = home / ".local" / "share" / "quake"
    else:
        # Fallback
        app_dir = home / ".quake"

    # Ensure directory exists
    os.makedirs(app_dir, exist_ok=True)

    return app_dir


def get_documents_dir():
    """
    Get the user's documents directory

    Save files and the monster catalog live here.

    Returns:
        Path: Path to the documents directory
    """
    if "QUAKE_DOCUMENTS_DIR" in os.environ:
        documents_dir = Path(os.environ["QUAKE_DOCUMENTS_DIR"])
    elif os.name == "posix" and "XDG_DOCUMENTS_DIR" in os.environ:
        documents_dir = Path(os.environ["XDG_DOCUMENTS_DIR"])
    else:
        documents_dir = Path.home() / "Documents"

    os.makedirs(documents_dir, exist_ok=True)

    return documents_dir


def get_monster_catalog_path(documents_dir=None):
    """
    Get the path to the static monster catalog

    Args:
        documents_dir: Directory to use instead of get_documents_dir()

    Returns:
        Path: Path to monsters.json
    """
    return Path(documents_dir or get_documents_dir()) / MONSTER_CATALOG_FILENAME


def get_settings_path(app_dir=None):
    """
    Get the path to the user settings file

    Args:
        app_dir: Directory to use instead of get_app_dir()

    Returns:
        Path: Path to the settings file
    """
    return Path(app_dir or get_app_dir()) / SETTINGS_FILENAME


def get_log_path():
    """
    Get the path to the debug log

    Returns:
        Path: Path to the log file
    """
    return get_app_dir() / LOG_FILENAME
