# quake/core/models/monster.py

import uuid
from dataclasses import dataclass, field
from typing import Any, Dict, List, Tuple


# Hit points assumed when the catalog entry has none
DEFAULT_HIT_POINTS = 100
DEFAULT_CHALLENGE_RATING = "0"


def _as_int(value: Any, default: int = 0) -> int:
    """Coerce a catalog value to int, falling back to the default."""
    if isinstance(value, bool) or value is None:
        return default
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            return default
    return default


def _as_str(value: Any, default: str = "") -> str:
    """Coerce a catalog value to str, falling back to the default."""
    if value is None:
        return default
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return default


def _as_list(value: Any) -> List[Dict[str, Any]]:
    """Keep only the dict entries of a list value."""
    if not isinstance(value, list):
        return []
    return [item for item in value if isinstance(item, dict)]


@dataclass(frozen=True)
class SpecialAbility:
    """Represents a special trait."""
    name: str = ""
    desc: str = ""
    attack_bonus: int = 0

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'SpecialAbility':
        return cls(
            name=_as_str(data.get("name")),
            desc=_as_str(data.get("desc")),
            attack_bonus=_as_int(data.get("attack_bonus")),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "desc": self.desc, "attack_bonus": self.attack_bonus}


@dataclass(frozen=True)
class MonsterAction:
    """Represents an action."""
    name: str = ""
    desc: str = ""
    attack_bonus: int = 0
    damage_dice: str = ""
    damage_bonus: int = 0

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'MonsterAction':
        return cls(
            name=_as_str(data.get("name")),
            desc=_as_str(data.get("desc")),
            attack_bonus=_as_int(data.get("attack_bonus")),
            damage_dice=_as_str(data.get("damage_dice")),
            damage_bonus=_as_int(data.get("damage_bonus")),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "desc": self.desc,
            "attack_bonus": self.attack_bonus,
            "damage_dice": self.damage_dice,
            "damage_bonus": self.damage_bonus,
        }


@dataclass(frozen=True)
class LegendaryAction:
    """Represents a legendary action."""
    name: str = ""
    desc: str = ""
    attack_bonus: int = 0

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'LegendaryAction':
        return cls(
            name=_as_str(data.get("name")),
            desc=_as_str(data.get("desc")),
            attack_bonus=_as_int(data.get("attack_bonus")),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "desc": self.desc, "attack_bonus": self.attack_bonus}


@dataclass(frozen=True)
class MonsterSpeed:
    """Structured movement speeds in feet."""
    walk: int = 0
    swim: int = 0

    @classmethod
    def from_dict(cls, data: Any) -> 'MonsterSpeed':
        if not isinstance(data, dict):
            return cls()
        return cls(walk=_as_int(data.get("walk")), swim=_as_int(data.get("swim")))

    def to_dict(self) -> Dict[str, Any]:
        return {"walk": self.walk, "swim": self.swim}


# Plain string fields, defaulting to ""
_STR_FIELDS = (
    "name", "size", "type", "subtype", "alignment", "hit_dice", "speed",
    "damage_vulnerabilities", "damage_resistances", "damage_immunities",
    "condition_immunities", "senses", "languages", "legendary_desc", "armor_desc",
)

# Plain integer fields, defaulting to 0
_INT_FIELDS = (
    "armor_class", "strength", "dexterity", "constitution", "intelligence",
    "wisdom", "charisma", "constitution_save", "intelligence_save",
    "wisdom_save", "history", "perception",
)

ABILITY_SCORES = ("strength", "dexterity", "constitution", "intelligence", "wisdom", "charisma")


@dataclass(frozen=True)
class Monster:
    """
    Represents a monster from the reference catalog.

    Every field except the runtime id is optional in the source JSON; absent
    or null values are replaced with defaults in from_dict so the rest of the
    application never deals with missing data. Instances are immutable.
    """
    # Runtime identity only, never serialized and not part of equality
    id: str = field(default_factory=lambda: str(uuid.uuid4()), compare=False)

    # Core Identification
    name: str = ""
    size: str = ""
    type: str = ""
    subtype: str = ""
    alignment: str = ""

    # Basic Stats
    armor_class: int = 0
    hit_points: int = DEFAULT_HIT_POINTS
    hit_dice: str = ""
    speed: str = ""

    # Ability Scores
    strength: int = 0
    dexterity: int = 0
    constitution: int = 0
    intelligence: int = 0
    wisdom: int = 0
    charisma: int = 0

    # Saves and skills
    constitution_save: int = 0
    intelligence_save: int = 0
    wisdom_save: int = 0
    history: int = 0
    perception: int = 0

    # Resistances and senses
    damage_vulnerabilities: str = ""
    damage_resistances: str = ""
    damage_immunities: str = ""
    condition_immunities: str = ""
    senses: str = ""
    languages: str = ""
    challenge_rating: str = DEFAULT_CHALLENGE_RATING

    # Features & Actions
    special_abilities: Tuple[SpecialAbility, ...] = ()
    actions: Tuple[MonsterAction, ...] = ()
    legendary_desc: str = ""
    legendary_actions: Tuple[LegendaryAction, ...] = ()
    speed_json: MonsterSpeed = field(default_factory=MonsterSpeed)
    armor_desc: str = ""

    def to_dict(self) -> Dict[str, Any]:
        """Converts the Monster to a dictionary suitable for JSON storage."""
        data: Dict[str, Any] = {}
        for name in _STR_FIELDS + _INT_FIELDS:
            data[name] = getattr(self, name)
        data["hit_points"] = self.hit_points
        data["challenge_rating"] = self.challenge_rating
        data["special_abilities"] = [a.to_dict() for a in self.special_abilities]
        data["actions"] = [a.to_dict() for a in self.actions]
        data["legendary_actions"] = [a.to_dict() for a in self.legendary_actions]
        data["speed_json"] = self.speed_json.to_dict()
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Monster':
        """
        Creates a Monster from a catalog or save-file dictionary.

        Raises:
            TypeError: if data is not a dictionary
        """
        if not isinstance(data, dict):
            raise TypeError(f"Monster record must be an object, got {type(data).__name__}")

        kwargs: Dict[str, Any] = {}
        for name in _STR_FIELDS:
            kwargs[name] = _as_str(data.get(name))
        for name in _INT_FIELDS:
            kwargs[name] = _as_int(data.get(name))

        kwargs["hit_points"] = _as_int(data.get("hit_points"), DEFAULT_HIT_POINTS)
        kwargs["challenge_rating"] = _as_str(data.get("challenge_rating"), DEFAULT_CHALLENGE_RATING)
        kwargs["special_abilities"] = tuple(
            SpecialAbility.from_dict(item) for item in _as_list(data.get("special_abilities"))
        )
        kwargs["actions"] = tuple(
            MonsterAction.from_dict(item) for item in _as_list(data.get("actions"))
        )
        kwargs["legendary_actions"] = tuple(
            LegendaryAction.from_dict(item) for item in _as_list(data.get("legendary_actions"))
        )
        kwargs["speed_json"] = MonsterSpeed.from_dict(data.get("speed_json"))

        return cls(**kwargs)
