# quake/core/models/character.py

import uuid
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from quake.core.models.monster import Monster


def new_character_id() -> str:
    """Generate a character id in the upper-case UUID form used by save files."""
    return str(uuid.uuid4()).upper()


def _require_int(data: Dict[str, Any], key: str) -> int:
    value = data.get(key)
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"Character field '{key}' must be an integer, got {value!r}")
    return value


@dataclass
class Character:
    """
    A combatant in the roster.

    JSON keys follow the save-file format (turnRoll, reactionUsed,
    monsterDetails); attribute names are snake_case.
    """
    name: str
    turn_roll: int
    hp: int
    reaction_used: bool = False
    monster_details: Optional[Monster] = None
    id: str = field(default_factory=new_character_id)

    def to_dict(self) -> Dict[str, Any]:
        """Converts the Character to a save-file dictionary."""
        return {
            "id": self.id,
            "name": self.name,
            "turnRoll": self.turn_roll,
            "hp": self.hp,
            "reactionUsed": self.reaction_used,
            "monsterDetails": self.monster_details.to_dict() if self.monster_details else None,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Character':
        """
        Creates a Character from a save-file dictionary.

        Raises:
            TypeError: if data is not a dictionary
            ValueError: if a required field is missing or has the wrong type
        """
        if not isinstance(data, dict):
            raise TypeError(f"Character record must be an object, got {type(data).__name__}")

        character_id = data.get("id")
        if not isinstance(character_id, str):
            raise ValueError(f"Character id must be a string, got {character_id!r}")
        # Must parse as a UUID, but keep the original spelling
        uuid.UUID(character_id)

        name = data.get("name")
        if not isinstance(name, str):
            raise ValueError(f"Character name must be a string, got {name!r}")

        reaction_used = data.get("reactionUsed", False)
        if not isinstance(reaction_used, bool):
            raise ValueError(f"Character reactionUsed must be a boolean, got {reaction_used!r}")

        hp = _require_int(data, "hp")
        if hp < 0:
            raise ValueError(f"Character hp must not be negative, got {hp}")

        monster_data = data.get("monsterDetails")
        monster_details = Monster.from_dict(monster_data) if monster_data is not None else None

        return cls(
            id=character_id,
            name=name,
            turn_roll=_require_int(data, "turnRoll"),
            hp=hp,
            reaction_used=reaction_used,
            monster_details=monster_details,
        )
