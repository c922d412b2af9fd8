# quake/data/monster_catalog.py
# Loads the static monster reference list

import json
import logging
from pathlib import Path

from PySide6.QtCore import QObject, QRunnable, Signal, Slot

from quake.core.models.monster import Monster

logger = logging.getLogger(__name__)


def load_monsters(path):
    """
    Read the monster catalog.

    Any problem (missing file, unreadable file, bad JSON, wrong shape)
    is logged and yields an empty list.

    Args:
        path: Path to monsters.json

    Returns:
        list[Monster]
    """
    path = Path(path)
    if not path.exists():
        logger.info(f"Monsters file not found at {path}.")
        return []

    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
        if not isinstance(data, list):
            raise ValueError(f"expected a JSON array, got {type(data).__name__}")
        monsters = [Monster.from_dict(item) for item in data]
    except (OSError, ValueError, TypeError, RecursionError) as e:
        logger.error(f"Failed to parse {path}: {e}")
        return []

    logger.info(f"Loaded {len(monsters)} monsters from {path}")
    return monsters


# --- Background Worker ---

class WorkerSignals(QObject):
    """Defines signals available from a running catalog worker."""
    finished = Signal()
    result = Signal(object)  # Emits the list of Monster objects


class MonsterCatalogWorker(QRunnable):
    """Worker for reading the catalog off the GUI thread."""

    def __init__(self, path):
        super().__init__()
        self.path = path
        self.signals = WorkerSignals()

    @Slot()
    def run(self):
        """Load the catalog and emit the result."""
        try:
            monsters = load_monsters(self.path)
        except Exception as e:
            logger.error(f"Unexpected error loading monsters: {e}", exc_info=True)
            monsters = []
        try:
            self.signals.result.emit(monsters)
        finally:
            self.signals.finished.emit()
